from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class Process:
    pid: str
    arrival_time: int
    burst_time: int
    name: Optional[str] = None

    @property
    def label(self) -> str:
        return self.name or self.pid


@dataclass
class TimelineBlock:
    """
    One contiguous block of the Gantt chart: a process run or an idle gap.
    """

    label: str
    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start


@dataclass
class ProcessMetrics:
    pid: str
    name: str
    arrival_time: int
    burst_time: int
    start_time: int
    completion_time: int
    waiting_time: int
    turnaround_time: int


@dataclass
class ScheduleSummary:
    total_waiting: int
    total_turnaround: int
    avg_waiting: float
    avg_turnaround: float


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    idle_time: int
    makespan: int
    throughput: float
    cpu_utilization: float


@dataclass
class ScheduleResult:
    algorithm: str
    processes: List[ProcessMetrics] = field(default_factory=list)
    timeline: List[TimelineBlock] = field(default_factory=list)
    summary: Optional[ScheduleSummary] = None
    system: Optional[SystemMetrics] = None


@dataclass
class BankersProcess:
    pid: str
    max_need: int
    allocation: int

    @property
    def need(self) -> int:
        return self.max_need - self.allocation


@dataclass
class SystemSnapshot:
    total_resources: int
    processes: List[BankersProcess] = field(default_factory=list)

    @property
    def allocated(self) -> int:
        return sum(p.allocation for p in self.processes)

    @property
    def available(self) -> int:
        return self.total_resources - self.allocated


@dataclass
class SequenceResult:
    order: Tuple[str, ...]
    safe: bool


@dataclass
class BankersResult:
    available: int
    sequences: List[SequenceResult] = field(default_factory=list)

    @property
    def safe_count(self) -> int:
        return sum(1 for s in self.sequences if s.safe)

    @property
    def unsafe_count(self) -> int:
        return len(self.sequences) - self.safe_count

    @property
    def safe_sequences(self) -> List[SequenceResult]:
        return [s for s in self.sequences if s.safe]
