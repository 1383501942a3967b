from itertools import permutations
from math import factorial

import pytest

from sched_viz import config
from sched_viz.bankers import evaluate_bankers, evaluate_snapshot, heap_permutations, is_safe_order
from sched_viz.errors import ComputationError, ConfigurationError
from sched_viz.models import BankersProcess, SystemSnapshot


def _snapshot(total=10):
    return SystemSnapshot(
        total_resources=total,
        processes=[
            BankersProcess("P1", max_need=7, allocation=2),
            BankersProcess("P2", max_need=5, allocation=3),
            BankersProcess("P3", max_need=6, allocation=2),
        ],
    )


def _simulate(processes, order, available):
    for pid in order:
        p = next(q for q in processes if q.pid == pid)
        if p.need > available:
            return False
        available += p.allocation
    return True


def test_heap_permutations_identity_first_and_complete():
    perms = list(heap_permutations(4))
    assert perms[0] == [0, 1, 2, 3]
    assert len(perms) == 24
    assert {tuple(p) for p in perms} == set(permutations(range(4)))


def test_heap_permutations_small_sequence():
    assert list(heap_permutations(3)) == [
        [0, 1, 2],
        [1, 0, 2],
        [2, 0, 1],
        [0, 2, 1],
        [1, 2, 0],
        [2, 1, 0],
    ]
    assert list(heap_permutations(0)) == []
    assert list(heap_permutations(1)) == [[0]]


def test_example_snapshot():
    snapshot = _snapshot()
    result = evaluate_snapshot(snapshot)
    assert result.available == 3
    assert [p.need for p in snapshot.processes] == [5, 2, 4]

    by_order = {s.order: s.safe for s in result.sequences}
    assert by_order[("P2", "P1", "P3")] is True
    assert by_order[("P1", "P2", "P3")] is False
    assert by_order[("P1", "P3", "P2")] is False
    assert len(result.sequences) == 6
    assert result.safe_count + result.unsafe_count == 6
    assert all(s.order[0] == "P2" for s in result.safe_sequences)


def test_identity_order_evaluated_first():
    result = evaluate_snapshot(_snapshot())
    assert result.sequences[0].order == ("P1", "P2", "P3")


def test_exhaustive_and_matches_direct_simulation():
    processes = [
        BankersProcess("A", max_need=4, allocation=1),
        BankersProcess("B", max_need=3, allocation=2),
        BankersProcess("C", max_need=6, allocation=0),
        BankersProcess("D", max_need=2, allocation=1),
    ]
    results = evaluate_bankers(processes, available=2)
    assert len(results) == factorial(4)
    assert len({r.order for r in results}) == factorial(4)
    for r in results:
        assert r.safe == _simulate(processes, r.order, 2)


def test_more_resources_never_make_safe_order_unsafe():
    base = {s.order: s.safe for s in evaluate_snapshot(_snapshot(10)).sequences}
    more = {s.order: s.safe for s in evaluate_snapshot(_snapshot(12)).sequences}
    for order, safe in base.items():
        if safe:
            assert more[order]
    assert sum(more.values()) >= sum(base.values())


def test_is_safe_order_short_circuits():
    processes = _snapshot().processes
    assert not is_safe_order(processes, [0, 1, 2], 3)
    assert is_safe_order(processes, [1, 0, 2], 3)


def test_empty_process_list():
    assert evaluate_bankers([], available=5) == []
    result = evaluate_snapshot(SystemSnapshot(total_resources=5))
    assert result.sequences == []
    assert result.available == 5


def test_over_allocation_rejected_before_enumeration():
    with pytest.raises(ConfigurationError):
        evaluate_snapshot(_snapshot(total=6))


def test_permutation_ceiling():
    processes = [BankersProcess(f"P{i}", max_need=1, allocation=0) for i in range(config.MAX_BANKERS_PROCESSES + 1)]
    with pytest.raises(ComputationError, match="too large"):
        evaluate_bankers(processes, available=1)


def test_negative_available_is_rejected():
    processes = [BankersProcess("A", max_need=1, allocation=1), BankersProcess("B", max_need=1, allocation=1)]
    with pytest.raises(ConfigurationError):
        evaluate_bankers(processes, available=-1)
    with pytest.raises(ConfigurationError):
        evaluate_bankers([], available=-1)


def test_ceiling_matches_batch_limit():
    assert config.MAX_BANKERS_PROCESSES == config.MAX_BATCH_PROCESSES
