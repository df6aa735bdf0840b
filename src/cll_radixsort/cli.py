"""CLI for cll-radixsort."""

import argparse
import json
import random
import sys
from pathlib import Path

from .benchmark import benchmark_sort, generate_values
from .check import PassChecker
from .cll import Node, iter_values
from .errors import RadixSortError
from .output import (
    generate_csv,
    generate_json,
    generate_summary,
    generate_text,
    write_values,
)
from .sorter import RadixSorter
from .tokens import read_tokens

OUTPUT_FORMATS = ("text", "json", "csv")


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dictionary of configuration values.
    """
    try:
        import yaml

        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    except ImportError as err:
        raise ImportError("PyYAML required for config files: pip install pyyaml") from err


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments shared between the sorting subcommands."""
    parser.add_argument(
        "input",
        type=str,
        help="Input file: radix on the first line, then one value per token ('-' for stdin)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Verify the list links and node identities after every pass",
    )
    parser.add_argument("--config", type=Path, help="Path to YAML config file")


def resolve_common_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> dict:
    """Load config, merge it into args and validate the input path.

    Returns:
        The loaded config, for subcommand-specific keys.
    """
    config: dict = {}
    if args.config:
        config = load_config(args.config)
        if not isinstance(config, dict):
            parser.error(f"config file must contain a mapping: {args.config}")
        if not args.check and "check" in config:
            if not isinstance(config["check"], bool):
                parser.error(f"config key 'check' must be true or false, got {config['check']!r}")
            args.check = config["check"]

    if args.input != "-":
        input_path = Path(args.input)
        if not input_path.is_file():
            parser.error(f"input file not found: {args.input}")
        args.input = input_path.resolve()

    return config


def run_sort(args: argparse.Namespace, on_pass=None) -> RadixSorter:
    """Sort the input named in args.

    Args:
        args: Parsed arguments with ``input`` and ``check``.
        on_pass: Optional per-pass callback, run after the integrity check.

    Returns:
        The sorter, holding the sorted master list.
    """
    checker = PassChecker() if args.check else None

    def after_pass(pass_index: int, rear: Node) -> None:
        if checker is not None:
            checker(pass_index, rear)
        if on_pass is not None:
            on_pass(pass_index, rear)

    sorter = RadixSorter(
        on_pass=after_pass,
        on_load=checker.loaded if checker is not None else None,
    )
    source = sys.stdin if args.input == "-" else args.input
    sorter.sort(read_tokens(source))

    if checker is not None:
        print(
            f"Checked {checker.passes_checked} pass(es) over {len(checker.expected)} nodes",
            file=sys.stderr,
        )

    return sorter


def cmd_sort(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Sort the input and write the result."""
    config = resolve_common_args(args, parser)
    if args.format is None:
        args.format = config.get("format", "text")
    if args.output is None and "output" in config:
        args.output = Path(config["output"])

    if args.format not in OUTPUT_FORMATS:
        parser.error(f"unknown format: {args.format}")
    if args.output is None and args.format != "text":
        parser.error(f"--output is required for {args.format} output")

    sorter = run_sort(args)
    rear = sorter.master_rear

    if args.output is None:
        write_values(rear, sys.stdout)
    else:
        args.output = args.output.resolve()
        if args.format == "json":
            generate_json(rear, args.output, sorter.radix)
        elif args.format == "csv":
            generate_csv(rear, args.output)
        else:
            generate_text(rear, args.output)
        print(f"Wrote {args.output.name}")

    if args.summary:
        print(generate_summary(rear, sorter.radix, sorter.passes), end="", file=sys.stderr)


def cmd_trace(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Print the master list after every pass."""
    resolve_common_args(args, parser)

    def print_pass(pass_index: int, rear: Node) -> None:
        print(f"Pass {pass_index}: {' '.join(iter_values(rear))}")

    sorter = run_sort(args, on_pass=print_pass)
    rear = sorter.master_rear

    if rear is None:
        print("No values to sort.")
        return

    print(f"\nSorted ({sorter.passes} pass(es), radix {sorter.radix}):")
    write_values(rear, sys.stdout)


def cmd_bench(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Benchmark the sort on random inputs."""
    if args.radix < 2 or args.radix > 36:
        parser.error("--radix must be in 2..36")
    if args.count < 0 or args.max_width < 1:
        parser.error("--count must be >= 0 and --max-width >= 1")

    rng = random.Random(args.seed)
    print(
        f"Generating {args.count} radix-{args.radix} values "
        f"of up to {args.max_width} digits..."
    )
    values = generate_values(args.count, args.radix, args.max_width, rng)
    result = benchmark_sort(values, args.radix, repeat=args.repeat)

    print(f"Passes:          {result.passes}")
    print(f"Linked list sort: {result.radix_sort_s * 1000:10.3f} ms")
    print(f"Built-in sorted:  {result.builtin_sort_s * 1000:10.3f} ms")
    if not result.matches:
        print("WARNING: sort results differ from sorted()", file=sys.stderr)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(result.__dict__, f, indent=2)
        print(f"Wrote {args.output.name}")


def main() -> None:
    """Main entry point for cll-radixsort CLI."""
    parser = argparse.ArgumentParser(
        description="Sort numeric strings with LSD radix sort on a circular linked list"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    sort_parser = subparsers.add_parser("sort", help="Sort an input file")
    add_common_args(sort_parser)
    sort_parser.add_argument(
        "--output",
        type=Path,
        help="Output file (default: values to stdout)",
    )
    sort_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: text)",
    )
    sort_parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a summary of the sort to stderr",
    )

    trace_parser = subparsers.add_parser(
        "trace",
        help="Show the master list after every scatter/gather pass",
    )
    add_common_args(trace_parser)

    bench_parser = subparsers.add_parser(
        "bench",
        help="Time the sort on random input against sorted()",
    )
    bench_parser.add_argument("-n", "--count", type=int, default=10000, help="Number of values (default: 10000)")
    bench_parser.add_argument("--radix", type=int, default=10, help="Radix of the values (default: 10)")
    bench_parser.add_argument(
        "--max-width",
        type=int,
        default=8,
        help="Maximum digits per value (default: 8)",
    )
    bench_parser.add_argument("--seed", type=int, help="Random seed for reproducible input")
    bench_parser.add_argument("--repeat", type=int, default=3, help="Timed runs per sort (default: 3)")
    bench_parser.add_argument("--output", type=Path, help="Optional JSON output path")

    args = parser.parse_args()

    try:
        if args.command == "sort":
            cmd_sort(args, sort_parser)
        elif args.command == "trace":
            cmd_trace(args, trace_parser)
        elif args.command == "bench":
            cmd_bench(args, bench_parser)
        else:
            # No subcommand provided - show help
            parser.print_help()
    except RadixSortError as err:
        print(f"ERROR: {err}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
