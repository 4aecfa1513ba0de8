"""Benchmark driver. Builds a large Church numeral sum, add 5 (add 5 (... 5)), and repeatedly normalizes it with nf.
Also uses error handling context manager. Called from the nbe-bench executable script.
"""

import argparse
import sys
import time

from termcolor import colored

from nbe.lang.error import ErrorHandler
from nbe.lang.numerical import ADD, FIVE, number
from nbe.pure.lexical import App, kind
from nbe.pure.normalize import nf


def build(times):
    """Returns add 5 applied times times to 5, i.e. the term of 5 * (times + 1)."""
    add5 = App(ADD, FIVE)

    term = FIVE
    for __ in range(times):
        term = App(add5, term)
    return term


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="normalize add 5 (add 5 (... 5)) repeatedly and time it")
    parser.add_argument("--times", type=int, default=256, help="number of add 5 applications (default: %(default)s)")
    parser.add_argument("--iterations", type=int, default=10, help="number of normalizations (default: %(default)s)")
    parser.add_argument("--recursion-limit", type=int, default=20000,
                        help="minimum python recursion limit while normalizing (default: %(default)s)")
    args = parser.parse_args(argv)

    if args.times < 0:
        parser.error("--times must not be negative")
    if args.iterations < 1:
        parser.error("--iterations must be at least 1")
    return args


def run(args, error_handler):
    """Normalizes the benchmark term args.iterations times. Returns the list of timings, in seconds."""
    term = build(args.times)
    timings = []
    result = None

    for iteration in range(args.iterations):
        label = f"iteration {iteration + 1}"
        error_handler.register(label, f"add 5 applied {args.times} times to 5")

        start = time.perf_counter()
        result = nf(term)
        timings.append(time.perf_counter() - start)

        error_handler.remove(label)
        print(f"{label}: {kind(result)} in {timings[-1] * 1000:.2f} ms")

    summary = f"normal form is Church numeral {number(result)}, "
    summary += f"best {min(timings) * 1000:.2f} ms, mean {sum(timings) / len(timings) * 1000:.2f} ms"
    print(colored(summary, attrs=["bold"]))

    return timings


def main(argv=None):
    """Runs the benchmark. The recursion limit is raised only while normalizing."""
    with ErrorHandler() as error_handler:
        args = parse_args(argv)

        limit = sys.getrecursionlimit()
        if args.recursion_limit > limit:
            error_handler.warn("raising recursion limit to {}", str(args.recursion_limit), diagnosis=False)
            sys.setrecursionlimit(args.recursion_limit)

        try:
            return run(args, error_handler)
        finally:
            sys.setrecursionlimit(limit)


if __name__ == "__main__":
    main()
