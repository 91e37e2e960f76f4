# cli.py

import argparse
import sys

from engine import ReplacementPolicy, simulate
from utils import format_accesses, format_table, generate_trace, parse_trace


def build_parser():
    parser = argparse.ArgumentParser(
        prog="page-replacement",
        description="Simulate FIFO, LRU and OPT page replacement over a reference string",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "1 2 3 4 1 2 5 1 2 3 4 5" -f 3            LRU with 3 frames
  %(prog)s 7 0 1 2 0 3 0 4 -f 4 -t opt               Optimal with 4 frames
  %(prog)s --random 20 --seed 1 -f 3 -t fifo         Random trace
        """
    )
    parser.add_argument("-f", "--frames", type=int, required=True,
                        help="Number of memory frames that can hold pages")
    parser.add_argument("-t", "--type", dest="policy", default="lru",
                        type=str.upper, choices=ReplacementPolicy.ALL,
                        help="Replacement policy: fifo, lru or opt (default: lru)")
    parser.add_argument("reference_string", nargs="*",
                        help="Memory reference string, split on spaces")
    parser.add_argument("--random", type=int, metavar="N",
                        help="Generate a random reference string of N accesses")
    parser.add_argument("--seed", type=int, help="Seed for --random")
    parser.add_argument("--no-color", action="store_true", help="Disable colors")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print the event log")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.frames < 0:
        parser.error("--frames must not be negative")

    if args.random is not None:
        if args.reference_string:
            parser.error("give either a reference string or --random, not both")
        try:
            accesses = generate_trace(args.random, seed=args.seed)
        except ValueError as e:
            parser.error(str(e))
    else:
        try:
            accesses = parse_trace(" ".join(args.reference_string))
        except ValueError as e:
            parser.error(str(e))

    policy = simulate(args.policy, args.frames, accesses)
    results = policy.results

    print(format_accesses(results, color=not args.no_color))
    print(f"Hits: {results.hits()} - Misses: {results.misses()}")
    table = format_table(policy.gen_table())
    if table:
        print(table)

    if args.verbose:
        print()
        for ev in policy.event_log:
            print(ev)

    return 0


if __name__ == "__main__":
    sys.exit(main())
