from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import List

from rich import box
from rich.console import Console
from rich.table import Table

from .algorithms import ALGORITHMS, run_algorithm
from .bankers import evaluate_snapshot
from .config import DEFAULT_ALGORITHMS, DEFAULT_SEED, IDLE_LABEL, MIN_BATCH_PROCESSES
from .errors import SchedulerError
from .gantt import build_rich_gantt, render_gantt
from .generator import generate_processes, generate_snapshot
from .logging_setup import configure_logging
from .models import BankersResult, ScheduleResult, SystemSnapshot
from .validation import validate_processes, validate_snapshot
from .workload_io import load_snapshot, load_workload, save_snapshot, save_workload

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sched-viz",
        description="Visualize FCFS / SJF scheduling and Banker's Algorithm safe sequences.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging from the engines.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run a scheduling algorithm on a workload file.")
    run_parser.add_argument(
        "--algorithm",
        "-a",
        required=True,
        choices=sorted(ALGORITHMS),
        help="Algorithm to use.",
    )
    run_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    run_parser.add_argument(
        "--scale",
        type=int,
        default=1,
        help="Characters per time unit in the Gantt chart (default: 1).",
    )
    run_parser.add_argument(
        "--plain",
        action="store_true",
        help="Draw the Gantt chart as plain ASCII instead of colored blocks.",
    )
    run_parser.add_argument(
        "--step",
        action="store_true",
        help="Show a simple time-stepped simulation in the terminal.",
    )
    run_parser.add_argument(
        "--step-delay",
        type=float,
        default=0.3,
        help="Seconds to wait between steps when --step is used (default: 0.3).",
    )

    compare_parser = subparsers.add_parser(
        "compare",
        help="Run several algorithms on the same workload and compare average metrics.",
    )
    compare_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    compare_parser.add_argument(
        "--algorithms",
        "-a",
        nargs="+",
        default=DEFAULT_ALGORITHMS,
        help="Algorithms to compare (default: fcfs sjf).",
    )

    bankers_parser = subparsers.add_parser(
        "bankers",
        help="Classify every process ordering of a Banker's snapshot as safe or unsafe.",
    )
    bankers_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV snapshot file.",
    )
    bankers_parser.add_argument(
        "--total",
        "-t",
        type=int,
        default=None,
        help="Total resource units (required for CSV, overrides the JSON value).",
    )
    only = bankers_parser.add_mutually_exclusive_group()
    only.add_argument("--only-safe", action="store_true", help="List safe sequences only.")
    only.add_argument("--only-unsafe", action="store_true", help="List unsafe sequences only.")
    bankers_parser.add_argument(
        "--limit",
        type=int,
        default=50,
        help="Maximum number of sequences to list, 0 for all (default: 50).",
    )

    gen_parser = subparsers.add_parser("generate", help="Write a random workload to a JSON file.")
    gen_parser.add_argument(
        "kind",
        choices=["processes", "bankers"],
        help="Scheduling workload or Banker's snapshot.",
    )
    gen_parser.add_argument(
        "--count",
        "-n",
        type=int,
        default=MIN_BATCH_PROCESSES,
        help=f"Number of processes, 3 to 10 (default: {MIN_BATCH_PROCESSES}).",
    )
    gen_parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"Random seed (default: {DEFAULT_SEED}).",
    )
    gen_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Output path (default: print to the terminal).",
    )

    return parser


def _print_result(result: ScheduleResult, console: Console, scale: int = 1, plain: bool = False) -> None:
    console.print(f"[bold]Algorithm:[/bold] {result.algorithm}")
    console.print()

    if plain:
        console.print(render_gantt(result.timeline, scale=scale), markup=False, highlight=False)
    else:
        panel, time_marks = build_rich_gantt(result.timeline, scale=scale)
        console.print(panel)
        if time_marks:
            console.print(time_marks)

    console.print()

    headers = ["Process", "Arrive", "Burst", "Start", "Complete", "Wait", "Turnaround"]

    proc_table = Table(title="Per-process metrics", box=box.SIMPLE_HEAVY)
    for h in headers:
        justify = "center" if h == "Process" else "right"
        proc_table.add_column(h, justify=justify)

    for p in result.processes:
        proc_table.add_row(
            p.name,
            str(p.arrival_time),
            str(p.burst_time),
            str(p.start_time),
            str(p.completion_time),
            str(p.waiting_time),
            str(p.turnaround_time),
        )

    summary = result.summary
    if summary:
        proc_table.add_section()
        proc_table.add_row(
            "Total", "", "", "", "", str(summary.total_waiting), str(summary.total_turnaround), style="bold"
        )
        proc_table.add_row(
            "Average", "", "", "", "", f"{summary.avg_waiting:.2f}", f"{summary.avg_turnaround:.2f}", style="bold"
        )

    console.print(proc_table)
    console.print()

    if result.system:
        sys = result.system
        sys_table = Table(title="System metrics", box=box.SIMPLE_HEAVY)
        sys_table.add_column("Metric")
        sys_table.add_column("Value", justify="right")

        sys_table.add_row("Makespan", str(sys.makespan))
        sys_table.add_row("CPU idle time", str(sys.idle_time))
        sys_table.add_row("Throughput (proc/time)", f"{sys.throughput:.3f}")
        sys_table.add_row("CPU utilization", f"{sys.cpu_utilization*100:.1f}%")

        console.print(sys_table)


def _print_bankers(
    snapshot: SystemSnapshot,
    result: BankersResult,
    console: Console,
    only_safe: bool = False,
    only_unsafe: bool = False,
    limit: int = 50,
) -> None:
    need_table = Table(title="Process needs", box=box.SIMPLE_HEAVY)
    need_table.add_column("Process", justify="center")
    need_table.add_column("Max need", justify="right")
    need_table.add_column("Holding", justify="right")
    need_table.add_column("Need", justify="right")
    for p in snapshot.processes:
        need_table.add_row(p.pid, str(p.max_need), str(p.allocation), str(p.need))
    console.print(need_table)

    summary_table = Table(title="Summary", box=box.SIMPLE_HEAVY)
    summary_table.add_column("Metric")
    summary_table.add_column("Value", justify="right")
    summary_table.add_row("Total resources", str(snapshot.total_resources))
    summary_table.add_row("Available", str(result.available))
    summary_table.add_row("Orderings", str(len(result.sequences)))
    summary_table.add_row("[green]Safe[/green]", str(result.safe_count))
    summary_table.add_row("[red]Unsafe[/red]", str(result.unsafe_count))
    console.print(summary_table)

    numbered = list(enumerate(result.sequences, start=1))
    if only_safe:
        numbered = [(n, s) for n, s in numbered if s.safe]
    elif only_unsafe:
        numbered = [(n, s) for n, s in numbered if not s.safe]

    shown = numbered[:limit] if limit > 0 else numbered

    seq_table = Table(title="Sequences", box=box.SIMPLE_HEAVY)
    seq_table.add_column("#", justify="right")
    seq_table.add_column("Order")
    seq_table.add_column("State", justify="center")
    for n, seq in shown:
        state = "[green]SAFE[/green]" if seq.safe else "[red]UNSAFE[/red]"
        seq_table.add_row(str(n), " → ".join(seq.order), state)
    console.print(seq_table)

    if len(shown) < len(numbered):
        console.print(f"[dim]... {len(numbered) - len(shown)} more (use --limit 0 to list all)[/dim]")


def _animate_result(result: ScheduleResult, delay: float, console: Console) -> None:
    """
    Simple time-stepped textual simulation using the computed timeline.
    """
    if not result.timeline:
        console.print("[red]No execution to animate.[/red]")
        return

    makespan = result.timeline[-1].end
    console.print(f"[bold]Simulating {result.algorithm}[/bold] (duration {makespan} time units)")
    console.print("[dim]Press Ctrl+C to skip animation.[/dim]")

    for t in range(makespan):
        block = next(b for b in result.timeline if b.start <= t < b.end)
        if block.label == IDLE_LABEL:
            console.print(f"t={t:2d}: [dim]{IDLE_LABEL.lower()}[/dim]")
        else:
            bar = f"[green]{'█' * (t - block.start + 1)}[/green]"
            console.print(f"t={t:2d}: {block.label} {bar}")
        time.sleep(delay)


def _compare(processes, algorithms: List[str], title: str, console: Console) -> None:
    summary_table = Table(title=title, box=box.SIMPLE_HEAVY)
    summary_table.add_column("Algorithm")
    summary_table.add_column("Order")
    summary_table.add_column("Avg waiting", justify="right")
    summary_table.add_column("Avg turnaround", justify="right")
    summary_table.add_column("Makespan", justify="right")

    for alg in algorithms:
        result = run_algorithm(alg, processes)
        summary_table.add_row(
            result.algorithm,
            ", ".join(p.name for p in result.processes),
            f"{result.summary.avg_waiting:.2f}",
            f"{result.summary.avg_turnaround:.2f}",
            str(result.system.makespan),
        )

    console.print(summary_table)


def _generate(args: argparse.Namespace, console: Console) -> None:
    if args.kind == "processes":
        processes = generate_processes(args.count, seed=args.seed)
        if args.output:
            path = save_workload(processes, args.output)
            console.print(f"Wrote {len(processes)} processes to [green]{path}[/green]")
            return
        table = Table(title=f"Generated workload (seed {args.seed})", box=box.SIMPLE_HEAVY)
        for h in ("pid", "arrival_time", "burst_time"):
            table.add_column(h, justify="right")
        for p in processes:
            table.add_row(p.pid, str(p.arrival_time), str(p.burst_time))
        console.print(table)
        return

    snapshot = generate_snapshot(args.count, seed=args.seed)
    if args.output:
        path = save_snapshot(snapshot, args.output)
        console.print(f"Wrote snapshot of {len(snapshot.processes)} processes to [green]{path}[/green]")
        return
    table = Table(title=f"Generated snapshot (seed {args.seed}, total {snapshot.total_resources})", box=box.SIMPLE_HEAVY)
    for h in ("pid", "max_need", "allocation"):
        table.add_column(h, justify="right")
    for p in snapshot.processes:
        table.add_row(p.pid, str(p.max_need), str(p.allocation))
    console.print(table)


def _dispatch(args: argparse.Namespace, console: Console) -> int:
    if args.command == "run":
        processes = validate_processes(load_workload(Path(args.workload)))
        result = run_algorithm(args.algorithm, processes)
        if args.step:
            try:
                _animate_result(result, delay=args.step_delay, console=console)
            except KeyboardInterrupt:
                console.print("[yellow]Animation skipped.[/yellow]")
        _print_result(result, console, scale=max(1, args.scale), plain=args.plain)
        return 0

    if args.command == "compare":
        workload_path = Path(args.workload)
        processes = validate_processes(load_workload(workload_path))
        _compare(processes, args.algorithms, f"Algorithm comparison: {workload_path}", console)
        return 0

    if args.command == "bankers":
        snapshot = validate_snapshot(load_snapshot(Path(args.workload), total_resources=args.total))
        result = evaluate_snapshot(snapshot)
        _print_bankers(
            snapshot,
            result,
            console,
            only_safe=args.only_safe,
            only_unsafe=args.only_unsafe,
            limit=args.limit,
        )
        return 0

    if args.command == "generate":
        _generate(args, console)
        return 0

    return 1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    console = Console()

    try:
        return _dispatch(args, console)
    except SchedulerError as exc:
        logger.debug("Rejected %s request", args.command, exc_info=True)
        console.print(f"[red]Error: {exc}[/red]")
        return 2
    except OSError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
