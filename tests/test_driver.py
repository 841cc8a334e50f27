# tests/test_driver.py
from pathlib import Path

import pytest

from rebrand.core.driver import RenameDriver
from rebrand.core.ignore import is_ignored, load_ignore_spec
from rebrand.core.planner import build_plan
from rebrand.core.scanner import ProjectScanner, is_probably_text, read_text_file
from rebrand.core.variants import build_variants
from rebrand.models import ReplacementPair, ReplacementPlan

# --- Fixtures: a small project tree to rename ---

@pytest.fixture
def beaker_project(tmp_path):
    """
    Builds a tree with:
    1. text files mentioning the old name in several casings
    2. ignored directories (node_modules/, .git/) and a lock file
    3. a binary-extension file and a NUL-prefixed file without extension
    4. a file that never mentions the old name
    """
    src = tmp_path / "src"
    src.mkdir()
    (src / "app.ts").write_text("export const beakerStack = 'Beaker Stack';\n", encoding="utf-8")
    (src / "config.py").write_text("BEAKER_STACK_ENV = 'beaker_stack'\n", encoding="utf-8")
    (tmp_path / "README.md").write_text("# Beaker Stack\n\nbeaker-stack docs\n", encoding="utf-8")
    (tmp_path / "LICENSE").write_text("MIT\n", encoding="utf-8")

    modules = tmp_path / "node_modules" / "beaker-stack"
    modules.mkdir(parents=True)
    (modules / "index.js").write_text("module.exports = 'BeakerStack';\n", encoding="utf-8")
    git = tmp_path / ".git"
    git.mkdir()
    (git / "config").write_text("[remote] url = beaker-stack.git\n", encoding="utf-8")
    (tmp_path / "package-lock.json").write_text('{"name": "beaker-stack"}\n', encoding="utf-8")

    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "logo.PNG").write_bytes(b"BeakerStack\x89PNG")
    (assets / "blob").write_bytes(b"\x00\x01BeakerStack")

    return tmp_path


@pytest.fixture
def plan():
    return build_plan("Beaker Stack", "Acme App")


# --- Test 1: Ignore rules ---

def test_default_ignore_rules(tmp_path):
    spec = load_ignore_spec(tmp_path)

    assert is_ignored(Path("node_modules"), spec, is_directory=True)
    assert is_ignored(Path("apps/mobile/ios"), spec, is_directory=True)
    assert is_ignored(Path("yarn.lock"), spec)
    assert is_ignored(Path("apps/web/package-lock.json"), spec)
    assert not is_ignored(Path("src"), spec, is_directory=True)
    assert not is_ignored(Path("src/build.py"), spec)


def test_renameignore_file_and_extra_patterns(tmp_path):
    (tmp_path / ".renameignore").write_text("docs/\n*.snap\n!keep.snap\n", encoding="utf-8")
    spec = load_ignore_spec(tmp_path, extra_patterns=["CHANGELOG.md"])

    assert is_ignored(Path("docs"), spec, is_directory=True)
    assert is_ignored(Path("tests/__snapshots__/a.snap"), spec)
    assert not is_ignored(Path("keep.snap"), spec)
    assert is_ignored(Path("CHANGELOG.md"), spec)


# --- Test 2: Scanner ---

def test_is_probably_text_checks_prefix_only():
    assert is_probably_text(b"hello")
    assert not is_probably_text(b"\x00hello")
    # A NUL past the sniffed prefix is not seen.
    assert is_probably_text(b"a" * 30 + b"\x00")


def test_read_text_file_preserves_line_endings_and_bad_bytes(tmp_path):
    path = tmp_path / "win.txt"
    path.write_bytes(b"line1\r\nline2 \xff\r\n")
    content = read_text_file(path)
    assert content.startswith("line1\r\nline2 ")
    assert content.encode("utf-8", errors="surrogateescape") == b"line1\r\nline2 \xff\r\n"


def test_scanner_skips_ignored_and_binary_extension_files(beaker_project):
    scanner = ProjectScanner(beaker_project, load_ignore_spec(beaker_project))
    paths = [p.relative_to(beaker_project).as_posix() for p in scanner.scan()]

    assert paths == ["LICENSE", "README.md", "assets/blob", "src/app.ts", "src/config.py"]


def test_scanner_skips_symlinks(tmp_path):
    project = tmp_path / "proj"
    project.mkdir()
    (tmp_path / "outside.txt").write_text("BeakerStack\n", encoding="utf-8")
    (project / "a.txt").write_text("BeakerStack\n", encoding="utf-8")
    (project / "outside_link.txt").symlink_to(tmp_path / "outside.txt")
    (project / "inside_link.txt").symlink_to(project / "a.txt")

    scanner = ProjectScanner(project, load_ignore_spec(project))
    assert [p.name for p in scanner.scan()] == ["a.txt"]


# --- Test 3: Driver ---

def test_driver_rewrites_tree(beaker_project, plan):
    report = RenameDriver(beaker_project, plan).run()

    assert report.files_scanned == 5
    assert report.files_changed == 3
    assert report.total_replacements == 6
    assert report.remaining == []
    assert {r.rel_path for r in report.changed} == {"README.md", "src/app.ts", "src/config.py"}

    assert (beaker_project / "src" / "app.ts").read_text(encoding="utf-8") == \
        "export const acmeApp = 'Acme App';\n"
    assert (beaker_project / "src" / "config.py").read_text(encoding="utf-8") == \
        "ACME_APP_ENV = 'acme_app'\n"
    assert (beaker_project / "README.md").read_text(encoding="utf-8") == "# Acme App\n\nacme-app docs\n"


def test_driver_leaves_ignored_and_binary_files_alone(beaker_project, plan):
    RenameDriver(beaker_project, plan).run()

    assert (beaker_project / "node_modules" / "beaker-stack" / "index.js").read_text(encoding="utf-8") == \
        "module.exports = 'BeakerStack';\n"
    assert (beaker_project / "package-lock.json").read_text(encoding="utf-8") == '{"name": "beaker-stack"}\n'
    assert (beaker_project / "assets" / "logo.PNG").read_bytes() == b"BeakerStack\x89PNG"
    assert (beaker_project / "assets" / "blob").read_bytes() == b"\x00\x01BeakerStack"


def test_driver_does_not_write_through_symlinks(tmp_path, plan):
    project = tmp_path / "proj"
    project.mkdir()
    outside = tmp_path / "outside.txt"
    outside.write_text("BeakerStack\n", encoding="utf-8")
    (project / "link.txt").symlink_to(outside)

    report = RenameDriver(project, plan).run()

    assert report.files_scanned == 0
    assert outside.read_text(encoding="utf-8") == "BeakerStack\n"
    assert (project / "link.txt").is_symlink()


def test_driver_counts_linked_file_once(tmp_path, plan):
    (tmp_path / "a.txt").write_text("BeakerStack\n", encoding="utf-8")
    (tmp_path / "b.txt").symlink_to(tmp_path / "a.txt")

    report = RenameDriver(tmp_path, plan, dry_run=True).run()

    assert report.files_changed == 1
    assert report.total_replacements == 1
    assert [m.rel_path for m in report.remaining] == ["a.txt"]


def test_driver_sequential_round_trip_is_not_a_change(tmp_path):
    swap = ReplacementPlan(
        pairs=(ReplacementPair("cat", "dog"), ReplacementPair("dog", "cat")),
        source_variants=build_variants("cat"),
        target_variants=build_variants("dog"),
    )
    path = tmp_path / "pets.txt"
    path.write_text("cat\n", encoding="utf-8")

    result = RenameDriver(tmp_path, swap, sequential=True).process_file(path)

    assert result.changed is False
    assert result.replacements == 0
    assert path.read_text(encoding="utf-8") == "cat\n"


def test_driver_dry_run_writes_nothing(beaker_project, plan):
    before = (beaker_project / "README.md").read_text(encoding="utf-8")
    report = RenameDriver(beaker_project, plan, dry_run=True).run()

    assert report.dry_run is True
    assert report.files_changed == 3
    assert (beaker_project / "README.md").read_text(encoding="utf-8") == before
    # The audit runs on untouched files, so it doubles as a pre-flight report.
    assert {m.rel_path for m in report.remaining} == {"README.md", "src/app.ts", "src/config.py"}


def test_driver_reports_residual_matches(tmp_path):
    # The new name contains the old one, so the audit still finds it.
    (tmp_path / "a.txt").write_text("Beaker\n", encoding="utf-8")
    report = RenameDriver(tmp_path, build_plan("Beaker", "Beaker Labs")).run()

    assert (tmp_path / "a.txt").read_text(encoding="utf-8") == "Beaker Labs\n"
    assert len(report.remaining) == 1
    assert report.remaining[0].rel_path == "a.txt"
    assert report.remaining[0].matches == ("Beaker",)


def test_driver_verbose_uses_reporter(beaker_project, plan):
    messages = []
    RenameDriver(beaker_project, plan, dry_run=True, verbose=True, reporter=messages.append).run()

    assert "[dry-run] src/app.ts (2 replacements)" in messages
    assert len(messages) == 3


def test_driver_propagates_write_errors(beaker_project, plan, monkeypatch):
    def fail(path, content):
        raise PermissionError(f"read-only: {path}")

    monkeypatch.setattr("rebrand.core.driver.write_text_file", fail)
    with pytest.raises(PermissionError):
        RenameDriver(beaker_project, plan).run()
