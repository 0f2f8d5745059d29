"""
Calendar — перевод Instant в гражданские дату/время и обратно

Эпохи:
- SNO+: полночь 01 Jan 2010 (UTC), по умолчанию
- SNO:  полночь 01 Jan 1996 (UTC)

days откладываются от 1 января года эпохи, переполнение месяцев и лет
разрешает datetime. Субсекундная часть переносится целыми микросекундами.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Final

from universal_time.core.domain.instant import Instant

logger = logging.getLogger("universal_time.calendar")


# =============================================================================
# ЭПОХИ
# =============================================================================


@dataclass(frozen=True)
class Epoch:
    """Нулевая точка универсального времени"""

    name: str
    year: int

    @property
    def origin(self) -> datetime:
        """Полночь 1 января года эпохи (UTC)"""
        return datetime(self.year, 1, 1, tzinfo=timezone.utc)


SNO_PLUS_EPOCH: Final[Epoch] = Epoch(name="SNO+", year=2010)

SNO_EPOCH: Final[Epoch] = Epoch(name="SNO", year=1996)

NANOSECONDS_PER_MICROSECOND: Final[int] = 1000


def select_epoch(sno_plus: bool = True) -> Epoch:
    """SNO+ эпоха (True) или SNO эпоха (False)"""
    return SNO_PLUS_EPOCH if sno_plus else SNO_EPOCH


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_civil(instant: Instant, sno_plus: bool = True) -> datetime:
    """
    Конверсия: Instant → UTC datetime.

    Args:
        instant: Канонический Instant
        sno_plus: Эпоха SNO+ (True, default) или SNO (False)

    Returns:
        timezone-aware datetime (UTC)

    Raises:
        OverflowError: Если дата выходит за диапазон datetime (годы 1..9999)

    Examples:
        >>> to_civil(Instant.of(31, 3661, 0))
        datetime.datetime(2010, 2, 1, 1, 1, 1, tzinfo=datetime.timezone.utc)
    """
    epoch = select_epoch(sno_plus)
    offset = timedelta(
        days=instant.days,
        seconds=instant.seconds,
        microseconds=int(instant.nanoseconds // NANOSECONDS_PER_MICROSECOND),
    )
    logger.debug(f"Converting {instant!r} relative to {epoch.name} epoch")
    return epoch.origin + offset


def from_civil(moment: datetime, sno_plus: bool = True) -> Instant:
    """
    Конверсия: datetime → Instant.

    Naive datetime трактуется как UTC.

    Args:
        moment: Гражданские дата/время
        sno_plus: Эпоха SNO+ (True, default) или SNO (False)

    Returns:
        Канонический Instant с точностью до микросекунды
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)

    epoch = select_epoch(sno_plus)
    delta = moment - epoch.origin
    return Instant(
        days=delta.days,
        seconds=delta.seconds,
        nanoseconds=float(delta.microseconds * NANOSECONDS_PER_MICROSECOND),
    )
