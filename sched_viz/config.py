"""
Engine limits and CLI defaults.
"""

# Label used for gaps where the CPU has nothing to run.
IDLE_LABEL = "Idle"

# Batch size accepted for generated / entered workloads.
MIN_BATCH_PROCESSES = 3
MAX_BATCH_PROCESSES = 10

# Hard ceiling for Banker's enumeration (10! is already ~3.6M orderings).
MAX_BANKERS_PROCESSES = MAX_BATCH_PROCESSES

DEFAULT_ALGORITHMS = ["fcfs", "sjf"]

# Random workload generation
DEFAULT_SEED = 42
ARRIVAL_RANGE = (0, 10)
BURST_RANGE = (1, 10)
MAX_NEED_RANGE = (1, 10)
