"""Evaluates a λ-term built from the named-term library, reporting its reduction at the requested verbosity. Uses
the error handling context manager. Called from the lambdaeval console script.

Terms are given as names and numbers applied left to right, e.g. `lambdaeval FACT 3` reduces [FACT 3] and
`lambdaeval --decode IPLUS -2 +5` adds two signed integers and shows the result as +3. This is not a λ-calculus
parser: only names from the library (see --list) and number literals are understood.
"""

import argparse
import sys

from lambdaeval.lang import library
from lambdaeval.lang.error import ErrorHandler, GenericException
from lambdaeval.lang.session import Session
from lambdaeval.lang.syntax import app
from lambdaeval.pure.reducer import Verbosity, within


DEFAULT_TERM = ["FACT", "3"]


def build_parser():
    parser = argparse.ArgumentParser(prog="lambdaeval", description=__doc__.split("\n\n")[0])
    parser.add_argument("term", nargs="*", help=f"names/numbers to apply left to right (default: "
                                                f"{' '.join(DEFAULT_TERM)})")
    parser.add_argument("-v", "--verbosity", default="basic", choices=[v.name.lower() for v in Verbosity],
                        help="basic: start and result only; summary: all steps after the run; verbose: all steps "
                             "as they happen plus the summary")
    parser.add_argument("-n", "--max-steps", type=int, default=None, metavar="N",
                        help="give up after N steps (by default, reduction runs until a normal form is reached)")
    parser.add_argument("-d", "--decode", action="store_true", help="show numbers encoded by the result")
    parser.add_argument("-l", "--list", action="store_true", help="list named terms and exit")
    return parser


def build_term(names):
    """Looks up every name in names and applies the results left to right."""
    original_expr = " ".join(names)

    terms = []
    start = 0
    for name in names:
        terms.append(library.lookup(name, original_expr, start))
        start += len(name) + 1
    return app(*terms)


def main(argv=None):
    """Runs lambdaeval. Called from the lambdaeval console script."""
    with ErrorHandler() as error_handler:
        args = build_parser().parse_args(argv)

        if args.list:
            for name, term in library.NAMED.items():
                print(f"{name} := {term.render()}")
            return

        if args.max_steps is not None and args.max_steps < 0:
            raise GenericException("--max-steps expects a non-negative number, got '{}'", str(args.max_steps),
                                   diagnosis=False)

        names = args.term if args.term else DEFAULT_TERM
        keep_going = within(args.max_steps) if args.max_steps is not None else None

        sess = Session(error_handler, Verbosity.parse(args.verbosity), keep_going=keep_going, decode=args.decode)
        sess.run(build_term(names))


if __name__ == "__main__":
    sys.exit(main())
