"""Command-line front end: solve one or more problem files."""

import argparse
import logging
import sys

from exactpoly import report
from exactpoly.errors import ExactPolyError, MalformedProblem
from exactpoly.problem import Problem, load_problem
from exactpoly.solver import reconstruct

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2


def _configure_logging(verbosity: int) -> None:
    """Install a default handler only if the host has not configured one."""
    if verbosity < 0:
        level = logging.ERROR
    elif verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format="[%(levelname)s] %(name)s: %(message)s",
        )
    root.setLevel(level)


def _load(path: str) -> Problem:
    if path == '-':
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError as e:
            raise MalformedProblem(f"stdin: not valid UTF-8: {e}") from e
        return Problem.from_json(text)
    return load_problem(path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='exactpoly',
        description="Reconstruct a polynomial exactly from radix-encoded points",
    )
    parser.add_argument("files", nargs='*', default=['-'],
                        help="problem JSON files ('-' for stdin, the default)")
    parser.add_argument("--json", action="store_true",
                        help="print the solution as JSON")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="log progress (-vv for per-row elimination)")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="only log errors")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(-1 if args.quiet else args.verbose)

    status = EXIT_OK
    for i, path in enumerate(args.files):
        if len(args.files) > 1:
            if i:
                print()
            print(f"--- Solving {path} ---")
        try:
            problem = _load(path)
            solution = reconstruct(problem)
        except (ExactPolyError, OSError) as e:
            print(f"error: {e}", file=sys.stderr)
            status = EXIT_ERROR
            continue

        print(report.to_json(solution) if args.json else report.to_text(solution))
        if not solution.valid:
            status = max(status, EXIT_MISMATCH)

    return status
