# src/rebrand/config.py

IGNORE_FILE_NAME = ".renameignore"

# Number of leading bytes inspected for a NUL byte when sniffing text files.
TEXT_SNIFF_BYTES = 24

DEFAULT_IGNORE_PATTERNS = [
    "# Default ignore patterns",
    ".git/",
    ".turbo/",
    ".expo/",
    ".husky/",
    ".idea/",
    ".next/",
    ".vscode/",
    "node_modules/",
    "android/",
    "ios/",
    "dist/",
    "build/",
    "coverage/",
    "# Lock files",
    "package-lock.json",
    "pnpm-lock.yaml",
    "yarn.lock",
    "Podfile.lock",
    "Gemfile.lock",
]

BINARY_EXTENSIONS = {
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".webp",
    ".ico",
    ".ttf",
    ".otf",
    ".woff",
    ".woff2",
    ".zip",
    ".gz",
    ".jar",
    ".keystore",
    ".db",
    ".sqlite",
    ".mp3",
    ".mp4",
}
