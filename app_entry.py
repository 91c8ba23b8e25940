"""
Frozen-build entrypoint for the land area calculator.

Run from the project root so `import landcalc` resolves without installation.
`--preflight` checks dependencies and directories and exits without a GUI;
`--version` prints the application title.
"""

from __future__ import annotations

import argparse


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="landcalc", description="Land area unit and rate calculator")
    parser.add_argument(
        "--preflight",
        action="store_true",
        help="Check dependencies, internal imports and data directories, then exit.",
    )
    parser.add_argument("--version", action="store_true", help="Print the application version and exit.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.version:
        from landcalc.config import APP_TITLE

        print(APP_TITLE)
        return 0

    if args.preflight:
        from landcalc.utils.preflight import run_preflight_checks

        ok, errors = run_preflight_checks()
        for msg in errors:
            print(msg)
        return 0 if ok else 1

    from landcalc.main import main as gui_main

    return int(gui_main() or 0)


if __name__ == "__main__":
    raise SystemExit(main())
