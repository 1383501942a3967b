from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from .config import IDLE_LABEL
from .errors import InputError
from .models import ProcessMetrics, TimelineBlock

logger = logging.getLogger(__name__)

Execution = Tuple[str, int, int]


def build_timeline(executions: Iterable[Execution], *, durations: bool = False) -> List[TimelineBlock]:
    """
    Turn a service order into a contiguous list of Gantt blocks.

    Each execution is ``(label, start, end)``, or ``(label, start, burst)``
    when ``durations`` is true. Whenever the clock is behind an execution's
    start an ``Idle`` block fills the gap. An execution whose start is
    already in the past runs from the current clock for its full duration,
    so the result always tiles ``[0, makespan)``.
    """
    clock = 0
    blocks: List[TimelineBlock] = []

    for label, start, third in executions:
        duration = third if durations else third - start
        if duration <= 0:
            raise InputError(f"Execution of {label!r} has non-positive duration {duration}")

        if clock < start:
            blocks.append(TimelineBlock(label=IDLE_LABEL, start=clock, end=start))
            clock = start

        blocks.append(TimelineBlock(label=label, start=clock, end=clock + duration))
        clock += duration

    logger.debug("Built timeline with %d blocks, makespan %d", len(blocks), clock)
    return blocks


def timeline_for(processes: Sequence[ProcessMetrics]) -> List[TimelineBlock]:
    """Blocks for scheduler output already in service order."""
    return build_timeline((p.name, p.start_time, p.completion_time) for p in processes)


def makespan(blocks: Sequence[TimelineBlock]) -> int:
    return blocks[-1].end if blocks else 0


def is_contiguous(blocks: Sequence[TimelineBlock]) -> bool:
    """
    True when the blocks tile ``[0, makespan)`` with no gaps or overlaps.
    """
    clock = 0
    for block in blocks:
        if block.start != clock or block.end <= block.start:
            return False
        clock = block.end
    return True
