"""Disk head scheduling: FCFS, SSTF, SCAN and C-SCAN."""

from __future__ import annotations

import argparse
import enum
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

from ossim.scheduling import _Prompter


class Direction(str, enum.Enum):
    """Which way the head sweeps first."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class SeekResult:
    """Positions the head visits, starting at its initial position, and the total movement."""

    order: tuple[int, ...]
    total: int


def _travel(head: int, stops: Iterable[int]) -> SeekResult:
    order = [head]
    total = 0
    for stop in stops:
        total += abs(stop - order[-1])
        order.append(stop)
    return SeekResult(tuple(order), total)


def _split(requests: Sequence[int], head: int) -> tuple[list[int], list[int]]:
    left = sorted(r for r in requests if r < head)
    right = sorted(r for r in requests if r >= head)
    return left, right


def fcfs(requests: Sequence[int], head: int) -> SeekResult:
    """Serve requests in the order given."""
    return _travel(head, requests)


def sstf(requests: Sequence[int], head: int) -> SeekResult:
    """Always serve the nearest pending request; ties go to the earlier request."""
    pending = list(requests)
    stops = []
    position = head
    while pending:
        nearest = min(pending, key=lambda r: abs(r - position))
        pending.remove(nearest)
        stops.append(nearest)
        position = nearest
    return _travel(head, stops)


def scan(
    requests: Sequence[int], head: int, disk_size: int, direction: Direction | str
) -> SeekResult:
    """Sweep to the end of the disk in one direction, then reverse."""
    left, right = _split(requests, head)
    if direction == Direction.LEFT:
        stops = [*reversed(left), 0, *right]
    else:
        stops = [*right, disk_size - 1, *reversed(left)]
    return _travel(head, stops)


def c_scan(
    requests: Sequence[int], head: int, disk_size: int, direction: Direction | str
) -> SeekResult:
    """Sweep to one end, jump to the other end and keep sweeping the same way."""
    left, right = _split(requests, head)
    if direction == Direction.LEFT:
        stops = [*reversed(left), 0, disk_size - 1, *reversed(right)]
    else:
        stops = [*right, disk_size - 1, 0, *left]
    return _travel(head, stops)


def format_result(name: str, result: SeekResult) -> str:
    """Show the visiting order and the total head movement."""
    order = " -> ".join(str(position) for position in result.order)
    return f"{name} Disk Scheduling Order: {order}\nTotal Head Movement: {result.total}"


class _DiskPrompter(_Prompter):
    def word(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        while not self._tokens:
            line = self._stream.readline()
            if not line:
                raise EOFError("unexpected end of input")
            self._tokens.extend(line.split())
        return self._tokens.popleft()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ossim-disk", description="Simulate disk scheduling algorithms."
    )
    parser.parse_args(argv)

    prompter = _DiskPrompter()
    try:
        count = prompter.int("Enter number of requests: ")
        requests = prompter.ints("Enter the request queue: ", max(count, 0))
        head = prompter.int("Enter initial head position: ")
        disk_size = prompter.int("Enter disk size: ")
        direction: Direction | str = Direction.RIGHT

        while True:
            print("\nChoose Disk Scheduling Algorithm:")
            print("1. FCFS (First Come First Serve)")
            print("2. SSTF (Shortest Seek Time First)")
            print("3. SCAN")
            print("4. C-SCAN")
            print("5. Exit")
            choice = prompter.int("Enter your choice: ")
            if choice in (3, 4):
                direction = prompter.word("Enter direction (left/right): ")

            if choice == 1:
                print("\n" + format_result("FCFS", fcfs(requests, head)))
            elif choice == 2:
                print("\n" + format_result("SSTF", sstf(requests, head)))
            elif choice == 3:
                print("\n" + format_result("SCAN", scan(requests, head, disk_size, direction)))
            elif choice == 4:
                print(
                    "\n"
                    + format_result("C-SCAN", c_scan(requests, head, disk_size, direction))
                )
            elif choice == 5:
                print("Exiting...")
                break
            else:
                print("Invalid choice!")
    except (ValueError, EOFError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())