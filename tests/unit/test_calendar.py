"""
Тесты для конверсии Instant ↔ гражданские дата/время

Проверяет:
1. Выбор эпохи (SNO+ / SNO)
2. Переполнение дней в месяцы и годы
3. Моменты до эпохи
4. Обратную конверсию from_civil
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from universal_time.core.domain import (
    SNO_EPOCH,
    SNO_PLUS_EPOCH,
    Instant,
    construct,
    from_civil,
    select_epoch,
    to_civil,
)

UTC = timezone.utc


class TestEpochs:
    """Эпохи и их выбор"""

    def test_epoch_years(self) -> None:
        assert SNO_PLUS_EPOCH.year == 2010
        assert SNO_EPOCH.year == 1996

    def test_origin_is_midnight_utc(self) -> None:
        assert SNO_PLUS_EPOCH.origin == datetime(2010, 1, 1, tzinfo=UTC)
        assert SNO_EPOCH.origin == datetime(1996, 1, 1, tzinfo=UTC)

    def test_select_epoch(self) -> None:
        assert select_epoch() is SNO_PLUS_EPOCH
        assert select_epoch(sno_plus=True) is SNO_PLUS_EPOCH
        assert select_epoch(sno_plus=False) is SNO_EPOCH

    def test_epoch_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            SNO_PLUS_EPOCH.year = 2011


class TestToCivil:
    """Instant → datetime"""

    def test_epoch_maps_to_origin(self) -> None:
        assert to_civil(Instant()) == datetime(2010, 1, 1, tzinfo=UTC)
        assert to_civil(Instant(), sno_plus=False) == datetime(1996, 1, 1, tzinfo=UTC)

    def test_days_roll_over_months(self) -> None:
        assert to_civil(construct(31, 3661, 0)) == datetime(2010, 2, 1, 1, 1, 1, tzinfo=UTC)

    def test_days_roll_over_years(self) -> None:
        assert to_civil(construct(365, 0, 0)) == datetime(2011, 1, 1, tzinfo=UTC)

    def test_leap_year_in_sno_epoch(self) -> None:
        """1996 — високосный год"""
        assert to_civil(construct(59, 0, 0), sno_plus=False) == datetime(1996, 2, 29, tzinfo=UTC)
        assert to_civil(construct(59, 0, 0)) == datetime(2010, 3, 1, tzinfo=UTC)

    def test_before_epoch(self) -> None:
        instant = construct(0, 0, 0) - construct(0, 1, 0)
        assert to_civil(instant) == datetime(2009, 12, 31, 23, 59, 59, tzinfo=UTC)

    def test_sub_second_truncated_to_microseconds(self) -> None:
        result = to_civil(construct(0, 0, 123456789.0))
        assert result.microsecond == 123456

    def test_result_is_timezone_aware(self) -> None:
        assert to_civil(construct(10, 0, 0)).tzinfo is UTC

    def test_out_of_range(self) -> None:
        with pytest.raises(OverflowError):
            to_civil(construct(10**7, 0, 0))


class TestFromCivil:
    """datetime → Instant"""

    def test_origin_maps_to_epoch(self) -> None:
        assert from_civil(datetime(2010, 1, 1, tzinfo=UTC)) == Instant()

    def test_naive_datetime_read_as_utc(self) -> None:
        assert from_civil(datetime(2010, 2, 1, 1, 1, 1)) == construct(31, 3661, 0)

    def test_microseconds_preserved(self) -> None:
        instant = from_civil(datetime(2010, 1, 1, 0, 0, 1, 250000, tzinfo=UTC))
        assert instant == construct(0, 1, 2.5e8)

    def test_before_epoch(self) -> None:
        instant = from_civil(datetime(2009, 12, 31, 23, 59, 59, tzinfo=UTC))
        assert instant == construct(-1, 86399, 0)
        assert instant.is_negative

    def test_other_timezone(self) -> None:
        moment = datetime(2010, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))
        assert from_civil(moment) == Instant()

    def test_sno_epoch(self) -> None:
        instant = from_civil(datetime(2010, 1, 1, tzinfo=UTC), sno_plus=False)
        # 1996..2009: 14 лет, из них 4 високосных (1996, 2000, 2004, 2008)
        assert instant == construct(14 * 365 + 4, 0, 0)

    def test_inverse_of_to_civil(self) -> None:
        for instant in [construct(100, 4000, 5e8), construct(-200, 10, 0), construct(0, 0, 1000.0)]:
            for sno_plus in (True, False):
                assert from_civil(to_civil(instant, sno_plus), sno_plus) == instant
