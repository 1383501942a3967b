"""
Exceptions raised by the scheduling and safety engines.

All of them derive from ``ValueError`` so callers that only care about
"bad input" can keep catching that.
"""

from __future__ import annotations


class SchedulerError(ValueError):
    """Base class for every error the engine reports to its caller."""


class InputError(SchedulerError):
    """Malformed or out-of-range process data (bad times, duplicate ids...)."""


class ConfigurationError(SchedulerError):
    """The Banker's snapshot allocates more units than the system owns."""


class ComputationError(SchedulerError):
    """The request is valid but too large to enumerate."""
