"""The banker's algorithm for deadlock avoidance."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from ossim.scheduling import _Prompter

Matrix = Sequence[Sequence[int]]


def _check_same_shape(first: Matrix, second: Matrix, what: str) -> None:
    if len(first) != len(second) or any(len(a) != len(b) for a, b in zip(first, second)):
        raise ValueError(f"{what} must have the same shape")


def need_matrix(maximum: Matrix, allocation: Matrix) -> list[list[int]]:
    """What each process may still request: its maximum less what it holds."""
    _check_same_shape(maximum, allocation, "maximum and allocation matrices")
    return [[m - a for m, a in zip(max_row, alloc_row)] for max_row, alloc_row in zip(maximum, allocation)]


def safe_sequence(allocation: Matrix, need: Matrix, available: Sequence[int]) -> list[int] | None:
    """Return an order in which every process can finish, or None if the state is unsafe."""
    _check_same_shape(allocation, need, "allocation and need matrices")
    if any(len(row) != len(available) for row in need):
        raise ValueError("every row must have one entry per resource type")
    work = list(available)
    finished = [False] * len(need)
    sequence: list[int] = []
    while len(sequence) < len(need):
        progressed = False
        for index, (held, wanted) in enumerate(zip(allocation, need)):
            if finished[index]:
                continue
            if all(w <= free for w, free in zip(wanted, work)):
                work = [free + h for free, h in zip(work, held)]
                finished[index] = True
                sequence.append(index)
                progressed = True
        if not progressed:
            return None
    return sequence


def is_safe(allocation: Matrix, need: Matrix, available: Sequence[int]) -> bool:
    """Whether some order lets every process run to completion."""
    return safe_sequence(allocation, need, available) is not None


def _row(values: Sequence[int]) -> str:
    return "".join(f"{v} " for v in values)


def format_state(allocation: Matrix, maximum: Matrix, need: Matrix, available: Sequence[int]) -> str:
    """Tabulate allocation, maximum and need per process, then the available resources."""
    lines = ["Process\tAllocated\tMax\t\tNeed"]
    for index, (held, most, wanted) in enumerate(zip(allocation, maximum, need)):
        lines.append(f"P{index}\t{_row(held)}\t\t{_row(most)}\t\t{_row(wanted)}")
    lines.append("")
    lines.append("Available Resources:")
    lines.append("".join(f"R{j}: {v}\t" for j, v in enumerate(available)))
    return "\n".join(lines)


def _read_matrix(prompter: _Prompter, name: str, rows: int, cols: int) -> list[list[int]]:
    print(f"Enter {name} Matrix:")
    matrix = []
    label = "Allocation" if name == "Allocation" else "Max"
    for i in range(rows):
        print(f"For Process P{i}:")
        matrix.append([prompter.int(f"{label}[{i}][{j}]: ") for j in range(cols)])
    return matrix


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ossim-banker", description="Compute the banker's algorithm need matrix."
    )
    parser.add_argument(
        "--safety", action="store_true", help="also report whether the state is safe"
    )
    args = parser.parse_args(argv)

    prompter = _Prompter()
    try:
        processes = prompter.int("Enter number of processes (n): ")
        resources = prompter.int("Enter number of resource types (m): ")
        allocation = _read_matrix(prompter, "Allocation", processes, resources)
        maximum = _read_matrix(prompter, "Max", processes, resources)
        print("Enter Available Resources:")
        available = [prompter.int(f"Available[{j}]: ") for j in range(resources)]

        need = need_matrix(maximum, allocation)
        print("\nCalculating Need Matrix:")
        for index, row in enumerate(need):
            print(f"P{index}: {_row(row)}")
        print("\n" + format_state(allocation, maximum, need, available))

        if args.safety:
            sequence = safe_sequence(allocation, need, available)
            if sequence is None:
                print("\nSystem is in an UNSAFE state!")
            else:
                print("\nSystem is in a SAFE state.")
                print("Safe Sequence: " + "".join(f"P{i} " for i in sequence))
    except (ValueError, EOFError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())