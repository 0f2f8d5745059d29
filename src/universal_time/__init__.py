"""
universal-time — время с фиксированной точкой относительно эпохи

Момент хранится тройкой (days, seconds, nanoseconds) в единственной
канонической форме после каждой операции.
"""

from universal_time.core.domain.instant import EPOCH, Instant
from universal_time.core.domain.calendar import SNO_EPOCH, SNO_PLUS_EPOCH, from_civil, to_civil

__all__ = [
    "EPOCH",
    "Instant",
    "SNO_EPOCH",
    "SNO_PLUS_EPOCH",
    "from_civil",
    "to_civil",
]
