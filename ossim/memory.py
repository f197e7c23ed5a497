"""Contiguous memory allocation: first, best, worst and next fit."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from ossim.scheduling import _Prompter

MAX_BLOCKS = 10
MAX_PROCESSES = 10

Allocation = list["int | None"]
_Chooser = Callable[[list[int], int], "int | None"]


def _allocate(blocks: Sequence[int], processes: Sequence[int], choose: _Chooser) -> Allocation:
    free = list(blocks)
    allocation: Allocation = []
    for size in processes:
        index = choose(free, size)
        if index is not None:
            free[index] -= size
        allocation.append(index)
    return allocation


def _candidates(free: list[int], size: int) -> list[int]:
    return [j for j, room in enumerate(free) if room >= size]


def first_fit(blocks: Sequence[int], processes: Sequence[int]) -> Allocation:
    """Place each process in the first block with room; returns block indices or None."""
    return _allocate(
        blocks, processes, lambda free, size: next(iter(_candidates(free, size)), None)
    )


def best_fit(blocks: Sequence[int], processes: Sequence[int]) -> Allocation:
    """Place each process in the smallest block that still has room for it."""
    return _allocate(
        blocks,
        processes,
        lambda free, size: min(_candidates(free, size), key=free.__getitem__, default=None),
    )


def worst_fit(blocks: Sequence[int], processes: Sequence[int]) -> Allocation:
    """Place each process in the largest block that has room for it."""
    return _allocate(
        blocks,
        processes,
        lambda free, size: max(_candidates(free, size), key=free.__getitem__, default=None),
    )


def next_fit(blocks: Sequence[int], processes: Sequence[int]) -> Allocation:
    """Like first fit, but each search starts at the block used last and wraps around."""
    free = list(blocks)
    count = len(free)
    last = 0
    allocation: Allocation = []
    for size in processes:
        chosen = next(
            (
                (last + offset) % count
                for offset in range(count)
                if free[(last + offset) % count] >= size
            ),
            None,
        )
        if chosen is not None:
            free[chosen] -= size
            last = chosen
        allocation.append(chosen)
    return allocation


def format_allocation(processes: Sequence[int], allocation: Sequence[int | None]) -> str:
    """Tabulate each process with the (1-based) block it was given."""
    lines = [
        "Process No.\tProcess Size\tBlock No.",
        "-----------------------------------------------",
    ]
    for number, (size, block) in enumerate(zip(processes, allocation), start=1):
        placed = "Not Allocated" if block is None else str(block + 1)
        lines.append(f"{number}\t\t{size}\t\t{placed}")
    return "\n".join(lines)


_TECHNIQUES: dict[int, tuple[str, Callable[[Sequence[int], Sequence[int]], Allocation]]] = {
    1: ("First Fit", first_fit),
    2: ("Best Fit", best_fit),
    3: ("Worst Fit", worst_fit),
    4: ("Next Fit", next_fit),
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ossim-memory", description="Simulate contiguous memory allocation."
    )
    parser.parse_args(argv)

    prompter = _Prompter()
    try:
        block_count = prompter.int(f"Enter the number of blocks (max {MAX_BLOCKS}): ")
        if not 0 < block_count <= MAX_BLOCKS:
            print("Invalid number of blocks!")
            return 1
        process_count = prompter.int(
            f"Enter the number of processes (max {MAX_PROCESSES}): "
        )
        if not 0 < process_count <= MAX_PROCESSES:
            print("Invalid number of processes!")
            return 1

        print("\nEnter the block sizes:")
        blocks = [prompter.int(f"Block {i} -> ") for i in range(1, block_count + 1)]
        print("\nEnter process sizes:")
        processes = [prompter.int(f"Process {i} -> ") for i in range(1, process_count + 1)]

        while True:
            print("\nChoose the memory allocation technique:")
            print("1. First Fit\n2. Best Fit\n3. Worst Fit\n4. Next Fit\n5. Exit")
            choice = prompter.int("Enter your choice: ")
            if choice == 5:
                print("\nExiting...")
                break
            technique = _TECHNIQUES.get(choice)
            if technique is None:
                print("\nInvalid choice! Please try again.")
                continue
            name, allocate = technique
            print(f"\n{name} Allocation:\n")
            print(format_allocation(processes, allocate(blocks, processes)))
    except (ValueError, EOFError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())