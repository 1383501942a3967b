import json
from pathlib import Path

import pytest

from sched_viz.errors import InputError
from sched_viz.generator import generate_processes, generate_snapshot
from sched_viz.models import Process
from sched_viz.workload_io import load_snapshot, load_workload, save_snapshot, save_workload


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","arrival_time":0,"burst_time":3,"name":"Editor"},'
                 '{"pid":"B","arrival_time":1,"burst_time":2}]')
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert procs[0].label == "Editor"
    assert procs[1].name is None
    assert procs[1].arrival_time == 1


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time\nA,0,3\nB,1,2\n")
    procs = load_workload(p)
    assert procs[0].pid == "A"
    assert procs[1].burst_time == 2


def test_bad_entries(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","arrival_time":"soon","burst_time":3}]')
    with pytest.raises(InputError):
        load_workload(p)

    with pytest.raises(InputError, match="Unsupported"):
        load_workload(tmp_path / "w.yaml")

    broken = tmp_path / "broken.json"
    broken.write_text("[{")
    with pytest.raises(InputError, match="invalid JSON"):
        load_workload(broken)


def test_load_snapshot_json(tmp_path: Path):
    p = tmp_path / "s.json"
    p.write_text(json.dumps({
        "total_resources": 10,
        "processes": [
            {"pid": "P1", "max_need": 7, "allocation": 2},
            {"pid": "P2", "max_need": 5, "allocation": 3},
        ],
    }))
    snapshot = load_snapshot(p)
    assert snapshot.total_resources == 10
    assert snapshot.available == 5
    assert load_snapshot(p, total_resources=20).total_resources == 20


def test_load_snapshot_csv_needs_total(tmp_path: Path):
    p = tmp_path / "s.csv"
    p.write_text("pid,max_need,allocation\nP1,7,2\nP2,5,3\n")
    with pytest.raises(InputError, match="Total resources"):
        load_snapshot(p)
    snapshot = load_snapshot(p, total_resources=12)
    assert [q.need for q in snapshot.processes] == [5, 2]


def test_generated_workloads_round_trip(tmp_path: Path):
    procs = generate_processes(5, seed=7)
    assert procs == generate_processes(5, seed=7)
    assert load_workload(save_workload(procs, tmp_path / "g.json")) == procs

    snapshot = generate_snapshot(4, seed=7)
    assert snapshot.available == 3
    assert all(0 <= p.allocation <= p.max_need for p in snapshot.processes)
    assert load_snapshot(save_snapshot(snapshot, tmp_path / "s.json")) == snapshot


def test_generate_rejects_out_of_range_count():
    with pytest.raises(InputError):
        generate_processes(2)
    with pytest.raises(InputError):
        generate_snapshot(11)


@pytest.mark.parametrize("burst", [2.7, True, None, "3.5"])
def test_json_rejects_non_integer_values(tmp_path: Path, burst):
    p = tmp_path / "w.json"
    p.write_text(json.dumps([{"pid": "A", "arrival_time": 0, "burst_time": burst}]))
    with pytest.raises(InputError):
        load_workload(p)


def test_snapshot_rejects_fractional_values(tmp_path: Path):
    p = tmp_path / "s.json"
    p.write_text(json.dumps({
        "total_resources": 10,
        "processes": [{"pid": "P1", "max_need": 4, "allocation": 1.5}],
    }))
    with pytest.raises(InputError):
        load_snapshot(p)

    p.write_text(json.dumps({"total_resources": 9.9, "processes": []}))
    with pytest.raises(InputError, match="total resources"):
        load_snapshot(p)
