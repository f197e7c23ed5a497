import io
import statistics

import pytest

from ossim.scheduling import (
    Process,
    Slice,
    fcfs,
    format_table,
    main,
    render_block_gantt,
    render_round_robin_gantt,
    round_robin,
    sjf_non_preemptive,
)

MIXED = [
    Process(1, 0, 5),
    Process(2, 1, 3),
    Process(3, 2, 8),
    Process(4, 12, 2),
    Process(5, 30, 4),
]

ALGORITHMS = [
    fcfs,
    sjf_non_preemptive,
    lambda procs: round_robin(procs, 2),
    lambda procs: round_robin(procs, 100),
]


def test_process_rejects_nonpositive_burst():
    with pytest.raises(ValueError):
        Process(1, 0, 0)


def test_process_rejects_negative_arrival():
    with pytest.raises(ValueError):
        Process(1, -1, 3)


def test_fcfs_empty_input_raises():
    with pytest.raises(ValueError):
        fcfs([])


def test_sjf_empty_input_raises():
    with pytest.raises(ValueError):
        sjf_non_preemptive([])


@pytest.mark.parametrize("quantum", [2, 100])
def test_round_robin_empty_input_raises(quantum):
    with pytest.raises(ValueError):
        round_robin([], quantum)


@pytest.mark.parametrize("quantum", [0, -3])
def test_round_robin_rejects_bad_quantum(quantum):
    with pytest.raises(ValueError):
        round_robin(MIXED, quantum)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_result_metrics_are_consistent(algorithm):
    schedule = algorithm(MIXED)
    assert len(schedule.results) == len(MIXED)
    for result in schedule.results:
        assert result.turnaround == result.completion - result.arrival
        assert result.waiting == result.turnaround - result.burst
        assert result.start >= result.arrival
        assert result.waiting >= 0


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_slices_cover_timeline_contiguously(algorithm):
    schedule = algorithm(MIXED)
    assert schedule.slices[0].start == 0
    for before, after in zip(schedule.slices, schedule.slices[1:]):
        assert after.start == before.end
    assert all(s.length > 0 for s in schedule.slices)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_each_process_gets_exactly_its_burst(algorithm):
    schedule = algorithm(MIXED)
    for proc in MIXED:
        used = sum(s.length for s in schedule.slices if s.pid == proc.pid)
        assert used == proc.burst
        assert schedule.result_for(proc.pid).completion == max(
            s.end for s in schedule.slices if s.pid == proc.pid
        )


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_averages_match_results(algorithm):
    schedule = algorithm(MIXED)
    assert schedule.average_turnaround() == pytest.approx(
        statistics.mean(r.turnaround for r in schedule.results)
    )
    assert schedule.average_waiting() == pytest.approx(
        statistics.mean(r.waiting for r in schedule.results)
    )


def test_fcfs_orders_by_arrival_and_inserts_idle():
    schedule = fcfs([Process(1, 5, 2), Process(2, 0, 3)])
    assert [r.pid for r in schedule.results] == [2, 1]
    idle = [s for s in schedule.slices if s.idle]
    assert len(idle) == 1
    assert idle[0].end == 5
    assert schedule.result_for(1).start == 5


def test_fcfs_keeps_input_order_for_equal_arrivals():
    procs = [Process(1, 0, 4), Process(2, 0, 1), Process(3, 0, 2)]
    schedule = fcfs(procs)
    assert [s.pid for s in schedule.slices] == [1, 2, 3]


def test_fcfs_start_follows_previous_completion():
    schedule = fcfs(MIXED)
    previous = 0
    for result in schedule.results:
        assert result.start == max(result.arrival, previous)
        previous = result.completion


def test_sjf_runs_shortest_first_when_all_ready():
    procs = [Process(1, 0, 6), Process(2, 0, 2), Process(3, 0, 4)]
    schedule = sjf_non_preemptive(procs)
    by_burst = [p.pid for p in sorted(procs, key=lambda p: p.burst)]
    assert [s.pid for s in schedule.slices] == by_burst


def test_sjf_breaks_ties_by_arrival():
    procs = [Process(1, 0, 5), Process(2, 2, 3), Process(3, 1, 3)]
    schedule = sjf_non_preemptive(procs)
    assert [s.pid for s in schedule.slices] == [1, 3, 2]


def test_sjf_results_in_input_order():
    schedule = sjf_non_preemptive(MIXED)
    assert [r.pid for r in schedule.results] == [p.pid for p in MIXED]


def test_round_robin_with_large_quantum_matches_fcfs():
    procs = [Process(1, 0, 4), Process(2, 0, 3), Process(3, 0, 5)]
    rr = round_robin(procs, 100)
    first = fcfs(procs)
    assert [r.completion for r in rr.results] == [r.completion for r in first.results]


def test_round_robin_slices_never_exceed_quantum():
    schedule = round_robin(MIXED, 3)
    assert all(s.length <= 3 for s in schedule.slices if not s.idle)


def test_round_robin_merges_idle_time():
    schedule = round_robin([Process(1, 3, 2)], 2)
    assert schedule.slices[0] == Slice(None, 0, 3)
    assert schedule.result_for(1).start == 3


def test_block_gantt_layout():
    schedule = fcfs([Process(1, 2, 1)])
    lines = render_block_gantt(schedule).split("\n")
    assert len(lines) == 4
    assert lines[0] == "-" * 9 * len(schedule.slices)
    assert lines[2] == lines[0]
    assert lines[1] == "| IDLE | P1   |"
    assert lines[3].split("\t") == ["0"] + [str(s.end) for s in schedule.slices]


def test_round_robin_gantt_layout():
    schedule = round_robin([Process(1, 0, 3)], 2)
    lines = render_round_robin_gantt(schedule).split("\n")
    assert lines[0] == "-" * 96
    assert lines[2] == lines[0]
    assert lines[1].startswith("| P[1] 0 ")
    assert lines[1].endswith(f"| {schedule.slices[-1].end} |")
    assert lines[1].count("P[1]") == len(schedule.slices)


def test_format_table_rows_and_averages():
    schedule = fcfs(MIXED)
    lines = format_table(schedule).split("\n")
    assert lines[0] == "PID\tAT\tBT\tST\tCT\tTAT\tWT"
    for line, result in zip(lines[1:], schedule.results):
        fields = line.split("\t")
        assert fields[0] == f"P{result.pid}"
        assert int(fields[4]) == result.completion
    assert lines[-2] == f"Average Turnaround Time: {schedule.average_turnaround():.2f}"
    assert lines[-1] == f"Average Waiting Time: {schedule.average_waiting():.2f}"


def test_main_fcfs(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0 3\n1 2\n"))
    assert main(["fcfs"]) == 0
    out = capsys.readouterr().out
    assert "Gantt Chart:" in out
    assert "P1\t0\t3\t0\t3\t3\t0" in out


def test_main_round_robin_reads_quantum(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n0\n4\n2\n"))
    assert main(["rr"]) == 0
    out = capsys.readouterr().out
    assert "Enter Time Quantum: " in out
    assert "| P[1] 0 " in out


def test_main_rejects_empty_process_list(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main(["sjf"]) == 1
    assert "error" in capsys.readouterr().err