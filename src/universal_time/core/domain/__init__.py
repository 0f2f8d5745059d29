"""
Domain models and value objects.

Contains Instant and the calendar-conversion helpers built on it.
"""

from universal_time.core.domain.instant import (
    EPOCH,
    Instant,
    add,
    construct,
    equals,
    greater_equal,
    greater_than,
    less_equal,
    less_than,
    not_equals,
    subtract,
)
from universal_time.core.domain.calendar import (
    SNO_EPOCH,
    SNO_PLUS_EPOCH,
    Epoch,
    from_civil,
    select_epoch,
    to_civil,
)

__all__ = [
    # Instant model
    "Instant",
    "EPOCH",
    # Instant operations
    "construct",
    "add",
    "subtract",
    "equals",
    "not_equals",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    # Calendar
    "Epoch",
    "SNO_PLUS_EPOCH",
    "SNO_EPOCH",
    "select_epoch",
    "to_civil",
    "from_civil",
]
