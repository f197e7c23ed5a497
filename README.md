# ossim

Small, dependency-free simulators for the algorithms usually met in an
operating-systems course. Each one can be used as a Python library and as an
interactive console command.

## What is included

| Module              | What it does                                                      |
|---------------------|-------------------------------------------------------------------|
| `ossim.scheduling`  | FCFS, non-preemptive SJF and Round Robin CPU scheduling           |
| `ossim.priority`    | Priority CPU scheduling, non-preemptive and preemptive            |
| `ossim.memory`      | First fit, best fit, worst fit and next fit block allocation      |
| `ossim.disk`        | FCFS, SSTF, SCAN and C-SCAN disk head scheduling                  |
| `ossim.banker`      | Banker's algorithm: need matrix and safety check                  |
| `ossim.pipeline`    | Sort the lines of a file and keep each distinct line once         |
| `ossim.listdir`     | List the entries of a directory whose names do not start with `.` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

The interactive commands prompt for their input on standard input and print
tables and text Gantt charts.

```
ossim-scheduling fcfs          # first-come first-served
ossim-scheduling sjf           # non-preemptive shortest job first
ossim-scheduling rr -q 2       # round robin; without -q the quantum is asked for
ossim-priority non-preemptive  # priority scheduling, run to completion
ossim-priority preemptive      # priority scheduling, re-picked every time unit
ossim-memory                   # menu of first / best / worst / next fit
ossim-disk                     # menu of FCFS / SSTF / SCAN / C-SCAN
ossim-banker                   # print the need matrix and the state
ossim-banker --safety          # ... and whether the state is safe
ossim-pipeline SOURCE DEST     # write SOURCE's sorted, distinct lines to DEST
ossim-listdir [DIRECTORY]      # list visible entries (default: .)
```

For the priority schedulers a lower number means a higher priority. In the
disk command, a direction other than `left` sweeps right.

## Library use

CPU scheduling works on `Process` records (`pid`, `arrival`, `burst`, and
`priority`, which defaults to 0) and returns a `Schedule`. A schedule holds
one `ProcessResult` per process, in input order, with `start`, `completion`,
`turnaround` and `waiting`, and a timeline of `Slice`s (idle slices have
`pid` of `None`). `average_turnaround()` and `average_waiting()` give the
summary figures.

```python
from ossim.scheduling import Process, fcfs, round_robin, format_table, render_block_gantt

procs = [Process(1, 0, 5), Process(2, 1, 3), Process(3, 2, 8)]
schedule = fcfs(procs)
print(render_block_gantt(schedule))
print(format_table(schedule))

rr = round_robin(procs, quantum=2)
print(rr.average_waiting())
```

`sjf_non_preemptive` lives beside `fcfs`; `render_round_robin_gantt` draws the
one-line round robin chart. `ossim.priority` provides
`priority_non_preemptive`, `priority_preemptive`, `render_segment_gantt`,
`render_unit_gantt` and `format_priority_table`.

The other modules return plain data:

```python
from ossim import banker, disk, memory

# Disk scheduling: the positions the head visits and the total movement.
result = disk.sstf([98, 183, 37, 122, 14, 124, 65, 67], 53)
print(disk.format_result("SSTF", result))
print(disk.scan([98, 183, 37], 53, 200, disk.Direction.LEFT).total)

# Memory allocation: the 0-based block index for each process, or None.
processes = [212, 417, 112, 426]
allocation = memory.best_fit([100, 500, 200, 300, 600], processes)
print(memory.format_allocation(processes, allocation))

# Banker's algorithm.
allocation = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
maximum = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
need = banker.need_matrix(maximum, allocation)
print(banker.is_safe(allocation, need, [3, 3, 2]))          # True
print(banker.safe_sequence(allocation, need, [3, 3, 2]))    # [1, 3, 4, 0, 2]
print(banker.format_state(allocation, maximum, need, [3, 3, 2]))
```

`ossim.pipeline.sort_uniq(source, destination)` compares lines byte by byte
and returns the number of lines written; `ossim.listdir.visible_entries(path)`
returns the names in directory order.

## Limits

Everything is computed in memory from the values given; nothing is saved
between runs. Invalid input (a negative arrival time, a burst or quantum that
is not positive, matrices of different shapes, an empty process list) raises
`ValueError`, which the commands report on standard error.