"""CPU scheduling: first-come first-served, non-preemptive shortest job first and round robin."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence, TextIO


@dataclass(frozen=True)
class Process:
    """A process waiting to be scheduled."""

    pid: int
    arrival: int
    burst: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.arrival < 0:
            raise ValueError(f"process {self.pid}: arrival time must not be negative")
        if self.burst <= 0:
            raise ValueError(f"process {self.pid}: burst time must be positive")


@dataclass(frozen=True)
class ProcessResult:
    """Timing of one process once the schedule has run to completion."""

    process: Process
    start: int
    completion: int

    @property
    def pid(self) -> int:
        return self.process.pid

    @property
    def arrival(self) -> int:
        return self.process.arrival

    @property
    def burst(self) -> int:
        return self.process.burst

    @property
    def priority(self) -> int:
        return self.process.priority

    @property
    def turnaround(self) -> int:
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst


@dataclass(frozen=True)
class Slice:
    """A stretch of CPU time given to one process, or idle when ``pid`` is None."""

    pid: int | None
    start: int
    end: int

    @property
    def idle(self) -> bool:
        return self.pid is None

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Schedule:
    """Per-process results and the timeline of CPU slices that produced them."""

    results: tuple[ProcessResult, ...]
    slices: tuple[Slice, ...]

    @property
    def end(self) -> int:
        return self.slices[-1].end if self.slices else 0

    def result_for(self, pid: int) -> ProcessResult:
        for result in self.results:
            if result.pid == pid:
                return result
        raise KeyError(pid)

    def average_turnaround(self) -> float:
        return sum(r.turnaround for r in self.results) / len(self.results)

    def average_waiting(self) -> float:
        return sum(r.waiting for r in self.results) / len(self.results)


def _require(processes: Iterable[Process]) -> list[Process]:
    procs = list(processes)
    if not procs:
        raise ValueError("no processes to schedule")
    return procs


def _in_input_order(done: dict[int, ProcessResult]) -> tuple[ProcessResult, ...]:
    return tuple(result for _, result in sorted(done.items()))


def fcfs(processes: Iterable[Process]) -> Schedule:
    """Run processes in order of arrival; equal arrivals keep their input order."""
    ordered = sorted(_require(processes), key=lambda p: p.arrival)
    now = 0
    results: list[ProcessResult] = []
    slices: list[Slice] = []
    for proc in ordered:
        if proc.arrival > now:
            slices.append(Slice(None, now, proc.arrival))
            now = proc.arrival
        results.append(ProcessResult(proc, now, now + proc.burst))
        slices.append(Slice(proc.pid, now, now + proc.burst))
        now += proc.burst
    return Schedule(tuple(results), tuple(slices))


def sjf_non_preemptive(processes: Iterable[Process]) -> Schedule:
    """Always run the shortest ready job to completion; ties go to the earlier arrival."""
    pending = list(enumerate(_require(processes)))
    now = 0
    done: dict[int, ProcessResult] = {}
    slices: list[Slice] = []
    while pending:
        ready = [item for item in pending if item[1].arrival <= now]
        if not ready:
            next_arrival = min(proc.arrival for _, proc in pending)
            slices.append(Slice(None, now, next_arrival))
            now = next_arrival
            continue
        chosen = min(ready, key=lambda item: (item[1].burst, item[1].arrival))
        pending.remove(chosen)
        index, proc = chosen
        done[index] = ProcessResult(proc, now, now + proc.burst)
        slices.append(Slice(proc.pid, now, now + proc.burst))
        now += proc.burst
    return Schedule(_in_input_order(done), tuple(slices))


def round_robin(processes: Iterable[Process], quantum: int) -> Schedule:
    """Cycle through ready processes in input order, giving each at most ``quantum`` units."""
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    procs = _require(processes)
    remaining = [proc.burst for proc in procs]
    first_start: dict[int, int] = {}
    done: dict[int, ProcessResult] = {}
    slices: list[Slice] = []
    now = 0
    while len(done) < len(procs):
        executed = False
        for index, proc in enumerate(procs):
            if proc.arrival > now or remaining[index] == 0:
                continue
            executed = True
            run = min(quantum, remaining[index])
            slices.append(Slice(proc.pid, now, now + run))
            first_start.setdefault(index, now)
            now += run
            remaining[index] -= run
            if remaining[index] == 0:
                done[index] = ProcessResult(proc, first_start[index], now)
        if not executed:
            if slices and slices[-1].idle and slices[-1].end == now:
                slices[-1] = Slice(None, slices[-1].start, now + 1)
            else:
                slices.append(Slice(None, now, now + 1))
            now += 1
    return Schedule(_in_input_order(done), tuple(slices))


def render_block_gantt(schedule: Schedule) -> str:
    """Draw a Gantt chart with one fixed-width block per slice."""
    border = "---------" * len(schedule.slices)
    labels = "|" + "".join(
        " IDLE |" if s.idle else f" P{s.pid}   |" for s in schedule.slices
    )
    times = "0" + "".join(f"\t{s.end}" for s in schedule.slices)
    return "\n".join([border, labels, border, times])


def render_round_robin_gantt(schedule: Schedule) -> str:
    """Draw the single-line round robin chart: each run with its start time, then the end time."""
    rule = "-" * 96
    body = "".join(
        f"| P[{s.pid}] {s.start} " for s in schedule.slices if not s.idle
    ) + f"| {schedule.end} |"
    return "\n".join([rule, body, rule])


def format_table(schedule: Schedule) -> str:
    """Tabulate start, completion, turnaround and waiting time, followed by the averages."""
    lines = ["PID\tAT\tBT\tST\tCT\tTAT\tWT"]
    lines.extend(
        f"P{r.pid}\t{r.arrival}\t{r.burst}\t{r.start}\t{r.completion}\t{r.turnaround}\t{r.waiting}"
        for r in schedule.results
    )
    lines.append("")
    lines.append(f"Average Turnaround Time: {schedule.average_turnaround():.2f}")
    lines.append(f"Average Waiting Time: {schedule.average_waiting():.2f}")
    return "\n".join(lines)


def _format_round_robin_table(schedule: Schedule) -> str:
    lines = ["Process\tArrival Time\tBurst Time\tWaiting Time\tTurnaround Time\tCompletion Time"]
    lines.extend(
        f"P[{r.pid}]\t{r.arrival}\t\t{r.burst}\t\t{r.waiting}\t\t{r.turnaround}\t\t{r.completion}"
        for r in schedule.results
    )
    lines.append("")
    lines.append(f"Average Waiting Time: {schedule.average_waiting():.2f}")
    lines.append(f"Average Turnaround Time: {schedule.average_turnaround():.2f}")
    return "\n".join(lines)


class _Prompter:
    """Reads whitespace-separated integers after showing a prompt, across lines if needed."""

    def __init__(self, stream: TextIO | None = None, out: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._out = out if out is not None else sys.stdout
        self._tokens: deque[str] = deque()

    def ints(self, prompt: str, count: int = 1) -> list[int]:
        self._out.write(prompt)
        self._out.flush()
        values: list[int] = []
        while len(values) < count:
            if not self._tokens:
                line = self._stream.readline()
                if not line:
                    raise EOFError("unexpected end of input")
                self._tokens.extend(line.split())
                continue
            values.append(int(self._tokens.popleft()))
        return values

    def int(self, prompt: str) -> int:
        return self.ints(prompt)[0]


def _read_processes(prompter: _Prompter, separate: bool) -> list[Process]:
    count = prompter.int("Enter the number of processes: ")
    processes = []
    for pid in range(1, count + 1):
        if separate:
            arrival = prompter.int(f"\nEnter arrival time for process {pid}: ")
            burst = prompter.int(f"Enter burst time for process {pid}: ")
        else:
            arrival, burst = prompter.ints(
                f"Enter arrival time and burst time for process {pid}: ", 2
            )
        processes.append(Process(pid, arrival, burst))
    return processes


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ossim-scheduling", description="Simulate CPU scheduling algorithms."
    )
    parser.add_argument("algorithm", choices=("fcfs", "sjf", "rr"))
    parser.add_argument("-q", "--quantum", type=int, help="time quantum for round robin")
    args = parser.parse_args(argv)

    prompter = _Prompter()
    try:
        processes = _read_processes(prompter, separate=args.algorithm == "rr")
        if args.algorithm == "rr":
            quantum = args.quantum
            if quantum is None:
                quantum = prompter.int("Enter Time Quantum: ")
            schedule = round_robin(processes, quantum)
            print("\nGantt Chart:")
            print(render_round_robin_gantt(schedule))
            print()
            print(_format_round_robin_table(schedule))
        else:
            algorithm = fcfs if args.algorithm == "fcfs" else sjf_non_preemptive
            schedule = algorithm(processes)
            print("\nGantt Chart:\n")
            print(render_block_gantt(schedule))
            print("\n")
            print(format_table(schedule))
    except (ValueError, EOFError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())