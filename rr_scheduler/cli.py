from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .errors import InvalidArgumentError
from .formatting import build_results_table, build_summary_table, write_results
from .gantt import build_rich_gantt
from .models import ScheduleResult
from .scenarios import check_reference
from .simulator import DEFAULT_TIME_SLICE, schedule_rr
from .workload_io import load_workload

EXIT_MISMATCH = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rr-scheduler",
        description="Round Robin CPU scheduling simulator.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every admission, preemption and completion.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Simulate a workload file.")
    run_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    run_parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=DEFAULT_TIME_SLICE,
        help=f"Time slice given to each process per turn (default: {DEFAULT_TIME_SLICE}).",
    )
    run_parser.add_argument(
        "--plain",
        action="store_true",
        help="Print the fixed-width text table instead of Rich tables.",
    )
    run_parser.add_argument(
        "--gantt",
        action="store_true",
        help="Also show a Gantt chart of the execution timeline.",
    )

    subparsers.add_parser(
        "demo",
        help="Run the built-in reference scenario and check it against known results.",
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _print_result(result: ScheduleResult, console: Console, gantt: bool) -> None:
    console.print(f"[bold]Algorithm:[/bold] {result.algorithm}")
    console.print(f"[bold]Quantum:[/bold] {result.quantum}")
    console.print()

    if gantt:
        panel, time_marks = build_rich_gantt(result.timeline)
        console.print(panel)
        if time_marks:
            console.print(time_marks)
        console.print()

    console.print(build_results_table(result.processes))
    console.print()
    console.print(build_summary_table(result))


def _run(args: argparse.Namespace, console: Console) -> int:
    processes = load_workload(Path(args.workload))
    result = schedule_rr(processes, args.quantum)
    if args.plain:
        write_results(result.processes, sys.stdout)
    else:
        _print_result(result, console, gantt=args.gantt)
    return 0


def _demo(console: Console) -> int:
    results, mismatches = check_reference()
    write_results(results, sys.stdout)
    if mismatches:
        for line in mismatches:
            console.print(f"[red]{line}[/red]")
        return EXIT_MISMATCH
    console.print("[green]All tests passed[/green]")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    console = Console()

    try:
        if args.command == "run":
            return _run(args, console)
        if args.command == "demo":
            return _demo(console)
    except (InvalidArgumentError, OSError) as exc:
        console.print(f"[red]Error: {exc}[/red]")
        return EXIT_INVALID

    parser.error(f"Unknown command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
