# src/rebrand/core/guard.py
import json
import re
import subprocess
from typing import Callable, List, Optional

from rebrand.errors import EnvironmentGuardError
from rebrand.models import SupabaseStatus

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")
CONTAINER_PROJECT_ID = re.compile(r"supabase_[a-z]+_([A-Za-z0-9_-]+)")
LABELLED_PROJECT_ID = re.compile(r"Project ID:\s*([A-Za-z0-9_-]+)", re.IGNORECASE)
IS_RUNNING = re.compile(r"\bis running\b")
RUNNING_LINE = re.compile(r"\bRUNNING\b", re.IGNORECASE)


def strip_ansi(value: Optional[str]) -> str:
    if not value:
        return ""
    return ANSI_PATTERN.sub("", value)


def _run_status(args: List[str]) -> subprocess.CompletedProcess:
    return subprocess.run(
        ["supabase", "status", *args],
        stdin=subprocess.DEVNULL,
        capture_output=True,
        text=True,
    )


def parse_status_json(raw: str) -> Optional[SupabaseStatus]:
    """Parses `supabase status --output json`; None if no service is RUNNING."""
    data = json.loads(raw)
    services = data.get("services") or {}
    if isinstance(services, dict):
        services = list(services.values())

    running = tuple(
        str(service.get("name", "service"))
        for service in services
        if isinstance(service, dict) and str(service.get("state") or "").upper() == "RUNNING"
    )
    if not running:
        return None

    project_id = data.get("project_id") or data.get("projectId") or data.get("projectRef")
    return SupabaseStatus(project_id=project_id, running=running)


def parse_status_text(raw: str) -> SupabaseStatus:
    """Parses the human-readable `supabase status` output."""
    text = strip_ansi(raw)

    if IS_RUNNING.search(text.lower()):
        match = CONTAINER_PROJECT_ID.search(text) or LABELLED_PROJECT_ID.search(text)
        return SupabaseStatus(
            project_id=match.group(1) if match else None,
            running=("Supabase local development stack",),
        )

    running = tuple(line.strip() for line in text.splitlines() if RUNNING_LINE.search(line))
    return SupabaseStatus(project_id=None, running=running)


def check_supabase_status(
    verbose: bool = False,
    reporter: Optional[Callable[[str], None]] = None,
) -> Optional[SupabaseStatus]:
    """
    Asks the Supabase CLI whether a local stack is running.

    Returns None when the CLI is unavailable or its answer cannot be read,
    which callers treat as "nothing running".
    """
    def log_verbose(message: str) -> None:
        if verbose and reporter is not None:
            reporter(f"[supabase-check] {message}")

    try:
        result = _run_status(["--output", "json"])
    except OSError as e:
        log_verbose(f"Supabase CLI not available: {e}")
        return None

    if result.returncode == 0 and result.stdout.strip():
        try:
            status = parse_status_json(result.stdout)
            if status is not None:
                return status
        except (ValueError, AttributeError) as e:
            log_verbose(f"Failed to parse Supabase status JSON: {e}")
    elif result.returncode != 0 and result.stderr.strip():
        log_verbose(f"Supabase status command failed: {result.stderr.strip()}")

    try:
        result = _run_status([])
    except OSError as e:
        log_verbose(f"Supabase CLI not available (fallback): {e}")
        return None

    if result.returncode != 0:
        log_verbose(f"Supabase status (fallback) exited with {result.returncode}")
        return None

    return parse_status_text((result.stdout or "") + "\n" + (result.stderr or ""))


def ensure_supabase_stopped(verbose: bool = False, reporter: Optional[Callable[[str], None]] = None) -> None:
    """Raises EnvironmentGuardError if a local Supabase stack is running."""
    status = check_supabase_status(verbose=verbose, reporter=reporter)
    if status is None or not status.running:
        return

    project_text = f" (project ID: {status.project_id})" if status.project_id else ""
    raise EnvironmentGuardError(
        f"Supabase services appear to be running{project_text}. Please stop them before renaming.\n"
        "Recommended: `supabase stop` or `supabase stop --project-id <your-project>`; then rerun this command.\n"
        "Use --no-supabase-check to bypass this safety check if you are sure Supabase is not needed."
    )
