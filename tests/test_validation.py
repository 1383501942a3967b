import pytest

from sched_viz.errors import ConfigurationError, InputError
from sched_viz.models import BankersProcess, Process, SystemSnapshot
from sched_viz.validation import validate_batch_size, validate_processes, validate_snapshot


def test_valid_processes_pass_through():
    procs = [Process("P1", 0, 3), Process("P2", 2, 1)]
    assert validate_processes(procs) is procs


@pytest.mark.parametrize(
    "procs",
    [
        [],
        [Process("", 0, 1)],
        [Process("P1", -1, 1)],
        [Process("P1", 0, 0)],
        [Process("P1", 0, 2), Process("p1", 1, 2)],
        [Process("1", 0, 2, name="Job"), Process("2", 1, 2, name="job ")],
    ],
)
def test_invalid_processes(procs):
    with pytest.raises(InputError):
        validate_processes(procs)


def test_batch_size_bounds():
    validate_batch_size(3)
    validate_batch_size(10)
    with pytest.raises(InputError, match="between 3 and 10"):
        validate_batch_size(2)
    with pytest.raises(InputError):
        validate_processes([Process(f"P{i}", 0, 1) for i in range(11)], enforce_batch_size=True)


def test_snapshot_checks():
    ok = SystemSnapshot(10, [BankersProcess("P1", 5, 2), BankersProcess("P2", 4, 4)])
    assert validate_snapshot(ok) is ok

    with pytest.raises(InputError):
        validate_snapshot(SystemSnapshot(0, []))
    with pytest.raises(InputError, match="maximum need"):
        validate_snapshot(SystemSnapshot(10, [BankersProcess("P1", 3, 4)]))
    with pytest.raises(InputError):
        validate_snapshot(SystemSnapshot(10, [BankersProcess("P1", 0, 0)]))
    with pytest.raises(InputError, match="unique"):
        validate_snapshot(SystemSnapshot(10, [BankersProcess("A", 3, 1), BankersProcess("a", 3, 1)]))


def test_over_allocation_is_configuration_error():
    snapshot = SystemSnapshot(5, [BankersProcess("P1", 5, 4), BankersProcess("P2", 4, 2)])
    with pytest.raises(ConfigurationError):
        validate_snapshot(snapshot)


@pytest.mark.parametrize("procs", [
    [Process("Idle", 0, 1)],
    [Process("P1", 0, 1, name=" IDLE ")],
])
def test_idle_label_is_reserved(procs):
    with pytest.raises(InputError, match="reserved"):
        validate_processes(procs)
