"""CLI entry point: python -m transducers [--list] [--suite NAME ...] [-v]"""

import argparse
import logging
import sys

from transducers.examples.suite import SUITES, run_all


def _make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="transducers",
        description="Run the golden rehearsals of the example transducers and report mismatches",
    )
    p.add_argument("--suite", action="append", choices=sorted(SUITES), help="Run only this suite (repeatable)")
    p.add_argument("--list", action="store_true", help="List the available suites and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def main(argv=None) -> int:
    args = _make_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        for name in SUITES:
            print(name)
        return 0

    mismatches = run_all(args.suite)
    for suite, mismatch in mismatches:
        print(f"[{suite}] actual:   {mismatch.actual!r}")
        print(f"[{suite}] expected: {mismatch.expected!r}")
    if mismatches:
        print(f"{len(mismatches)} mismatch(es)")
        return 1
    print("No mismatches")
    return 0


if __name__ == "__main__":
    sys.exit(main())
