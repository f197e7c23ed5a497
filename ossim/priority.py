"""Priority scheduling, with and without preemption; a lower number is a higher priority."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence

from ossim.scheduling import (
    Process,
    ProcessResult,
    Schedule,
    Slice,
    _in_input_order,
    _Prompter,
    _require,
)


def _rank(item: tuple[int, Process]) -> tuple[int, int]:
    return item[1].priority, item[1].arrival


def priority_non_preemptive(processes: Iterable[Process]) -> Schedule:
    """Run the highest-priority ready process to completion; idle time passes one unit at a time."""
    pending = list(enumerate(_require(processes)))
    now = 0
    done: dict[int, ProcessResult] = {}
    slices: list[Slice] = []
    while pending:
        ready = [item for item in pending if item[1].arrival <= now]
        if not ready:
            slices.append(Slice(None, now, now + 1))
            now += 1
            continue
        chosen = min(ready, key=_rank)
        pending.remove(chosen)
        index, proc = chosen
        done[index] = ProcessResult(proc, now, now + proc.burst)
        slices.append(Slice(proc.pid, now, now + proc.burst))
        now += proc.burst
    return Schedule(_in_input_order(done), tuple(slices))


def priority_preemptive(processes: Iterable[Process]) -> Schedule:
    """Re-pick the highest-priority ready process at every time unit."""
    procs = _require(processes)
    remaining = [proc.burst for proc in procs]
    starts: dict[int, int] = {}
    done: dict[int, ProcessResult] = {}
    slices: list[Slice] = []
    now = 0
    while len(done) < len(procs):
        ready = [
            (index, proc)
            for index, proc in enumerate(procs)
            if proc.arrival <= now and remaining[index] > 0
        ]
        if not ready:
            slices.append(Slice(None, now, now + 1))
            now += 1
            continue
        index, proc = min(ready, key=_rank)
        starts.setdefault(index, now)
        slices.append(Slice(proc.pid, now, now + 1))
        remaining[index] -= 1
        now += 1
        if remaining[index] == 0:
            done[index] = ProcessResult(proc, starts[index], now)
    return Schedule(_in_input_order(done), tuple(slices))


def render_unit_gantt(schedule: Schedule) -> str:
    """Draw a chart with one block per slice and a time mark after each."""
    border = "--------" * len(schedule.slices)
    labels = "|" + "".join(
        " IDLE  |" if s.idle else f" P{s.pid:<3} |" for s in schedule.slices
    )
    times = "0" + "".join(f"\t{s.end}" for s in schedule.slices)
    return "\n".join([border, labels, border, times])


def render_segment_gantt(schedule: Schedule) -> str:
    """Draw a chart of whole segments with the time at which each one ends."""
    border = " " + "--------" * len(schedule.slices)
    labels = "|" + "".join(
        " IDLE  |" if s.idle else f" P{s.pid:<4} |" for s in schedule.slices
    )
    first = schedule.slices[0].start if schedule.slices else 0
    times = f"{first}" + "".join(f"      {s.end}" for s in schedule.slices)
    return "\n".join([border, labels, border, times])


def format_priority_table(schedule: Schedule) -> str:
    """Tabulate each process with its priority and timings, followed by the averages."""
    lines = ["PID\tAT\tBT\tPRI\tST\tCT\tTAT\tWT"]
    lines.extend(
        f"P{r.pid}\t{r.arrival}\t{r.burst}\t{r.priority}\t{r.start}"
        f"\t{r.completion}\t{r.turnaround}\t{r.waiting}"
        for r in schedule.results
    )
    lines.append("")
    lines.append(f"Average Turnaround Time: {schedule.average_turnaround():.2f}")
    lines.append(f"Average Waiting Time: {schedule.average_waiting():.2f}")
    return "\n".join(lines)


def _format_non_preemptive_table(schedule: Schedule) -> str:
    lines = ["PID\tArrival\tBurst\tPriority\tCompletion\tTurnaround\tWaiting"]
    lines.extend(
        f"P{r.pid}\t{r.arrival}\t{r.burst}\t{r.priority}\t\t{r.completion}"
        f"\t\t{r.turnaround}\t\t{r.waiting}"
        for r in schedule.results
    )
    return "\n".join(lines)


def _read_processes(prompter: _Prompter, preemptive: bool) -> list[Process]:
    count = prompter.int("Enter the number of processes: ")
    processes = []
    for pid in range(1, count + 1):
        if preemptive:
            arrival, burst = prompter.ints(
                f"Enter arrival time and burst time for process {pid}: ", 2
            )
        else:
            arrival = prompter.int(f"\nEnter arrival time for process {pid}: ")
            burst = prompter.int(f"Enter burst time for process {pid}: ")
        priority = prompter.int(
            f"Enter priority for process {pid} (lower number = higher priority): "
        )
        processes.append(Process(pid, arrival, burst, priority))
    return processes


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ossim-priority", description="Simulate priority CPU scheduling."
    )
    parser.add_argument("mode", choices=("non-preemptive", "preemptive"))
    args = parser.parse_args(argv)
    preemptive = args.mode == "preemptive"

    try:
        processes = _read_processes(_Prompter(), preemptive)
        if preemptive:
            schedule = priority_preemptive(processes)
            print("\nGantt Chart:\n")
            print(render_unit_gantt(schedule))
            print("\n")
            print(format_priority_table(schedule))
        else:
            schedule = priority_non_preemptive(processes)
            print()
            print(_format_non_preemptive_table(schedule))
            print("\nGantt Chart:\n")
            print(render_segment_gantt(schedule))
            print(f"\nAverage Waiting Time: {schedule.average_waiting():.2f}")
            print(f"Average Turnaround Time: {schedule.average_turnaround():.2f}")
    except (ValueError, EOFError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())