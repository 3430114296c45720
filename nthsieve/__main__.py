"""
Command line entry point.

Usage:
    python -m nthsieve count 1000000
    python -m nthsieve nth 10000
    python -m nthsieve backends
    python -m nthsieve --baseline count 1e7
"""

import argparse
import sys

from .config import EngineConfig
from .dispatch import Dispatcher, check_backends
from .errors import InvalidArgument


def _int_arg(text: str) -> int:
    # Accept 1e7 style shorthand like the experiment runners
    return int(float(text)) if "e" in text.lower() else int(text)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="nthsieve", description="Prime counting with backend fallback")
    parser.add_argument("--baseline", action="store_true", help="Force the numpy baseline backend")
    sub = parser.add_subparsers(dest="command", required=True)

    p_count = sub.add_parser("count", help="Count primes <= LIMIT")
    p_count.add_argument("limit", type=_int_arg)

    p_nth = sub.add_parser("nth", help="Print the Nth prime")
    p_nth.add_argument("n", type=_int_arg)

    sub.add_parser("backends", help="Show backend probe and selection")

    args = parser.parse_args(argv)

    config = EngineConfig.from_env()
    if args.baseline:
        config = EngineConfig(disable_all=True, debug=config.debug)
    dispatcher = Dispatcher(config)

    if args.command == "backends":
        check_backends(dispatcher)
        return 0

    if args.command == "count":
        print(dispatcher.count_primes(args.limit))
        return 0

    try:
        print(dispatcher.nth_prime(args.n))
    except InvalidArgument as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
