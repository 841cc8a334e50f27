# src/rebrand/cli.py
import sys
import argparse
import os
from pathlib import Path
from typing import List, Optional

from rebrand.core.driver import RenameDriver
from rebrand.core.guard import ensure_supabase_stopped
from rebrand.core.ignore import load_ignore_spec
from rebrand.core.planner import build_plan
from rebrand.errors import EnvironmentGuardError, RebrandError
from rebrand.models import RenameReport, ReplacementPlan

EXAMPLE = 'Example: rebrand --from "Beaker Stack" --to "Acme App" --dry-run'


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="rebrand",
        description="Rename a project: rewrite every casing variant of its old name to the new one.",
        epilog=EXAMPLE,
    )
    parser.add_argument("root_dir", type=str, nargs="?", default=os.getcwd(), help="Project root directory")
    parser.add_argument("--from", dest="from_name", required=True, metavar="NAME",
                        help='Existing project name (display form, e.g. "Old Name")')
    parser.add_argument("--to", dest="to_name", required=True, metavar="NAME",
                        help='Replacement project name (display form, e.g. "New Name")')
    parser.add_argument("--dry-run", action="store_true", help="Show files that would change without writing")
    parser.add_argument("--strict", action="store_true", help="Exit with failure if any legacy names remain")
    parser.add_argument("--no-supabase-check", dest="skip_supabase_check", action="store_true",
                        help="Skip the running Supabase instance guard")
    parser.add_argument("--sequential", action="store_true",
                        help="Apply replacements one pair at a time instead of in a single pass")
    parser.add_argument("--ignore", action="append", default=[], metavar="PATTERN",
                        help="Extra gitignore-style pattern to skip (repeatable)")
    parser.add_argument("--verbose", action="store_true", help="Print detailed progress information")
    return parser


def print_plan(plan: ReplacementPlan) -> None:
    print(f"{'From':<24} | {'To':<24} | {'Style'}")
    print("-" * 70)
    for pair in plan:
        print(f"{pair.source:<24} | {pair.target:<24} | {pair.description}")
    print("-" * 70)


def print_summary(report: RenameReport) -> None:
    label = "Files to update:" if report.dry_run else "Files updated:"
    print("")
    print("Rename Summary")
    print("--------------")
    print(f"{'Files scanned:':<20}{report.files_scanned}")
    print(f"{label:<20}{report.files_changed}")
    print(f"{'Total replacements:':<20}{report.total_replacements}")

    if report.remaining:
        print("")
        print("Warning: Legacy name instances remain after processing.")
        for entry in report.remaining:
            print(f"  {entry.rel_path}: {', '.join(entry.matches)}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_arg_parser()
    args = parser.parse_args(argv)

    try:
        root_dir = Path(args.root_dir).resolve()
        if not root_dir.is_dir():
            print(f"Error: Invalid directory '{root_dir}'", file=sys.stderr)
            return 1

        if not args.skip_supabase_check:
            ensure_supabase_stopped(verbose=args.verbose, reporter=print)

        plan = build_plan(args.from_name, args.to_name)

        print("--- rebrand ---")
        print(f"Root:     {root_dir}")
        print(f"Rename:   {args.from_name!r} -> {args.to_name!r}")
        print(f"Mode:     {'dry-run' if args.dry_run else 'write'}"
              f"{' (sequential)' if args.sequential else ''}")

        if not plan.pairs:
            print("Nothing to rename: both names produce the same variants.")
            return 0

        if args.verbose:
            print("")
            print_plan(plan)

        ignore_spec = load_ignore_spec(root_dir, extra_patterns=args.ignore)
        driver = RenameDriver(
            root_dir,
            plan,
            dry_run=args.dry_run,
            sequential=args.sequential,
            verbose=args.verbose,
            ignore_spec=ignore_spec,
            reporter=print,
        )
        report = driver.run()
        print_summary(report)

        if report.remaining and args.strict:
            print("\nRename failed due to remaining legacy identifiers (strict mode).", file=sys.stderr)
            return 1

        if args.dry_run:
            print("\nDry-run complete. Re-run without --dry-run to apply changes.")
        else:
            print("\nRename complete.")
        return 0

    except EnvironmentGuardError as e:
        print(str(e), file=sys.stderr)
        return 1

    except RebrandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except OSError as e:
        print("Rename failed.", file=sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nCancelled.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
