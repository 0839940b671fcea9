"""CLI entry point for the divisible sum pairs counter.

With no arguments it counts the classic example (k=3, ar=[1, 3, 2, 6, 1, 2])
and prints 5.
"""

from __future__ import annotations

import argparse
import sys

from dotenv import load_dotenv

from divisible_pairs.core.config import LOG_LEVELS, OUTPUT_FORMATS, config, parse_int_list
from divisible_pairs.core.counting import STRATEGY_REGISTRY, BruteForcePairCounter, create_counter
from divisible_pairs.core.errors import FileAccessError, InvalidSequence, PairCountError
from divisible_pairs.core.formatting import format_error, format_result
from divisible_pairs.core.models import PairCountRequest, PairCountResult
from divisible_pairs.utils.file_io import read_json_file, write_to_file
from divisible_pairs.utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="divisible-pairs",
        description="Count index pairs i < j whose element sum is divisible by k",
    )
    parser.add_argument(
        "values",
        nargs="*",
        type=int,
        help="Integer sequence (default: DEFAULT_VALUES env var or 1 3 2 6 1 2)",
    )
    parser.add_argument(
        "-k",
        "--divisor",
        type=int,
        default=None,
        help="Divisor k (default: DEFAULT_DIVISOR env var or 3)",
    )
    parser.add_argument(
        "--values",
        dest="values_csv",
        default=None,
        help="Comma-separated sequence, alternative to positional values",
    )
    parser.add_argument(
        "--input",
        default=None,
        help='JSON file holding {"k": ..., "ar": [...]} (optional "n")',
    )
    parser.add_argument(
        "--strategy",
        choices=sorted(STRATEGY_REGISTRY),
        default=None,
        help="Counting strategy (default: PAIR_COUNT_STRATEGY env var or brute_force)",
    )
    parser.add_argument(
        "--pairs", action="store_true", help="Also list the qualifying index pairs"
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: OUTPUT_FORMAT env var or text)",
    )
    parser.add_argument("--output", default=None, help="Also write the result to this file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: LOG_LEVEL env var or WARNING)",
    )
    return parser


def resolve_request(args: argparse.Namespace) -> PairCountRequest:
    """Build the request from CLI arguments, an input file, or configuration.

    Precedence: ``--input`` file, then explicit values, then configured
    defaults. ``--input`` cannot be combined with explicit values. ``-k``
    always overrides the divisor from other sources.
    """
    if args.input:
        if args.values or args.values_csv is not None:
            raise InvalidSequence("Give the sequence either with --input or as values, not both")
        try:
            data = read_json_file(args.input)
        except OSError as e:
            raise FileAccessError(args.input, str(e)) from e
        request = PairCountRequest.from_dict(data)
        if args.divisor is not None:
            request = PairCountRequest(values=request.values, divisor=args.divisor)
        return request

    if args.values_csv is not None:
        if args.values:
            raise InvalidSequence("Give the sequence either positionally or with --values, not both")
        try:
            values = parse_int_list(args.values_csv)
        except ValueError as e:
            raise InvalidSequence(f"--values is not a list of integers: {args.values_csv!r}") from e
    elif args.values:
        values = tuple(args.values)
    else:
        values = config.default_values

    divisor = args.divisor if args.divisor is not None else config.default_divisor
    return PairCountRequest(values=tuple(values), divisor=divisor)


def run(request: PairCountRequest, strategy: str | None = None, with_pairs: bool = False) -> PairCountResult:
    """Count pairs for ``request`` and optionally collect them."""
    counter = create_counter(strategy)
    count = counter.count(request.values, request.divisor)

    pairs = None
    if with_pairs:
        pairs = list(BruteForcePairCounter().iter_pairs(request.values, request.divisor))

    logger.info("Counted %d of %d pairs (n=%d, k=%d)", count, request.max_pairs, request.n, request.divisor)
    return PairCountResult(
        count=count, divisor=request.divisor, n=request.n, strategy=counter.name, pairs=pairs
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI workflow. Returns the process exit status."""
    load_dotenv()
    config.reload()

    args = build_parser().parse_args(argv)
    setup_logging(
        level=args.log_level or config.log_level,
        log_file=config.log_file if config.log_to_file else None,
    )

    for issue in config.validate():
        logger.warning("Configuration issue: %s", issue)

    output_format = args.output_format or config.output_format
    if output_format not in OUTPUT_FORMATS:
        output_format = "text"

    try:
        request = resolve_request(args)
        result = run(request, strategy=args.strategy, with_pairs=args.pairs)
    except PairCountError as e:
        logger.error("Counting failed: %s", e.message)
        # JSON consumers read errors from stdout, like results
        stream = sys.stdout if output_format == "json" else sys.stderr
        print(format_error(e, output_format), file=stream)
        return EXIT_USAGE

    rendered = format_result(result, output_format, values=request.values)
    print(rendered)

    if args.output:
        content = result.to_dict() if output_format == "json" else rendered
        try:
            write_to_file(content, args.output)
        except OSError as e:
            # The result is already on stdout; report the failed copy on stderr only
            error = FileAccessError(args.output, str(e), error_code="output_unwritable")
            logger.error("Could not save result: %s", error.message)
            print(format_error(error), file=sys.stderr)
            return EXIT_USAGE
        logger.info("Result saved to %s", args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
