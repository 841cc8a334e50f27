# src/rebrand/core/driver.py
from pathlib import Path
from typing import Callable, List, Optional

import pathspec

from rebrand.core.ignore import load_ignore_spec
from rebrand.core.replacer import apply_plan, find_remaining
from rebrand.core.scanner import ProjectScanner, read_text_file, write_text_file
from rebrand.models import FileResult, RemainingMatch, RenameReport, ReplacementPlan

Reporter = Callable[[str], None]


def _silent(message: str) -> None:
    pass


class RenameDriver:
    """
    Applies a replacement plan to every text file under `root_dir`.

    Files are processed one at a time in scanner order. Any read or write
    error propagates and aborts the run; nothing is skipped silently except
    ignored paths and files that look binary.
    """

    def __init__(
        self,
        root_dir: Path,
        plan: ReplacementPlan,
        *,
        dry_run: bool = False,
        sequential: bool = False,
        verbose: bool = False,
        ignore_spec: Optional[pathspec.PathSpec] = None,
        reporter: Optional[Reporter] = None,
    ):
        self.root_dir = root_dir
        self.plan = plan
        self.dry_run = dry_run
        self.sequential = sequential
        self.verbose = verbose
        self.ignore_spec = ignore_spec if ignore_spec is not None else load_ignore_spec(root_dir)
        self.reporter = reporter or _silent

    def _rel(self, path: Path) -> str:
        return path.relative_to(self.root_dir).as_posix()

    def process_file(self, path: Path) -> FileResult:
        original = read_text_file(path)
        if original is None:
            return FileResult(self._rel(path), changed=False, replacements=0)

        updated, count = apply_plan(original, self.plan, sequential=self.sequential)
        # A cascade in sequential mode can put the original text back.
        if count == 0 or updated == original:
            return FileResult(self._rel(path), changed=False, replacements=0)

        if not self.dry_run:
            write_text_file(path, updated)
        return FileResult(self._rel(path), changed=True, replacements=count)

    def collect_remaining(self, files: List[Path]) -> List[RemainingMatch]:
        """Audits `files` for any source pattern of the plan that is still present."""
        patterns = self.plan.patterns
        occurrences = []
        for path in files:
            content = read_text_file(path)
            if content is None:
                continue
            matches = find_remaining(content, patterns)
            if matches:
                occurrences.append(RemainingMatch(self._rel(path), tuple(sorted(matches))))
        return occurrences

    def run(self) -> RenameReport:
        files = list(ProjectScanner(self.root_dir, self.ignore_spec).scan())
        report = RenameReport(files_scanned=len(files), dry_run=self.dry_run)

        for path in files:
            result = self.process_file(path)
            if not result.changed:
                continue
            report.files_changed += 1
            report.total_replacements += result.replacements
            report.changed.append(result)

            if self.verbose:
                tag = "[dry-run]" if self.dry_run else "[update]"
                self.reporter(f"{tag} {result.rel_path} ({result.replacements} replacements)")

        report.remaining = self.collect_remaining(files)
        return report
