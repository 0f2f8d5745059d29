"""
Instant — момент (или длительность) в универсальном времени

Immutable Pydantic модель: тройка (days, seconds, nanoseconds) относительно
эпохи. Любой путь создания проходит через normalize(), поэтому каждый
существующий Instant находится в канонической форме:
    0 <= seconds < 86400
    0.0 <= nanoseconds < 1e9
    days несёт знак величины

Арифметика возвращает новые экземпляры; `a += b` перепривязывает имя к
новому значению.

Порядок:
    a == b  ⇔ все три поля равны
    a < b   ⇔ лексикографически по (days, seconds, nanoseconds)
    <=, >, >= выводятся только из < и ==
"""

from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

from universal_time.core.math.normalization import (
    NANOSECONDS_PER_SECOND,
    SECONDS_PER_DAY,
    TimeTriple,
    normalize,
)
from universal_time.core.math.numerical_safeguards import (
    EPS_NANOSECONDS_ABS,
    compare_with_tolerance,
)


# =============================================================================
# INSTANT MODEL
# =============================================================================


class Instant(BaseModel):
    """
    Момент времени с наносекундной точностью.

    Immutable модель (frozen=True). Вход может быть неканоническим
    (отрицательные или переполненные поля), он нормализуется до валидации.
    """

    days: int = Field(0, description="Целые дни от эпохи (может быть отрицательным)")
    seconds: int = Field(
        0, ge=0, lt=SECONDS_PER_DAY, description="Секунды внутри дня [0, 86400)"
    )
    nanoseconds: float = Field(
        0.0, ge=0.0, lt=NANOSECONDS_PER_SECOND, description="Наносекунды внутри секунды [0, 1e9)"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="before")
    @classmethod
    def normalize_fields(cls, data: Any) -> Any:
        """Приведение сырой тройки к канонической форме"""
        if not isinstance(data, dict):
            return data

        triple = normalize(
            data.get("days", 0),
            data.get("seconds", 0),
            data.get("nanoseconds", 0.0),
        )
        return {**data, **triple._asdict()}

    @classmethod
    def of(cls, days: int = 0, seconds: int = 0, nanoseconds: float = 0.0) -> "Instant":
        """
        Позиционный конструктор.

        Examples:
            >>> Instant.of(1, 86500, 0)
            Instant(days=2, seconds=100, nanoseconds=0.0)
        """
        return cls(days=days, seconds=seconds, nanoseconds=nanoseconds)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Instant":
        if not isinstance(other, Instant):
            return NotImplemented
        return Instant(
            days=self.days + other.days,
            seconds=self.seconds + other.seconds,
            nanoseconds=self.nanoseconds + other.nanoseconds,
        )

    def __sub__(self, other: object) -> "Instant":
        if not isinstance(other, Instant):
            return NotImplemented
        return Instant(
            days=self.days - other.days,
            seconds=self.seconds - other.seconds,
            nanoseconds=self.nanoseconds - other.nanoseconds,
        )

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return (
            self.days == other.days
            and self.seconds == other.seconds
            and self.nanoseconds == other.nanoseconds
        )

    def __hash__(self) -> int:
        return hash((self.days, self.seconds, self.nanoseconds))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        if self.days != other.days:
            return self.days < other.days
        if self.seconds != other.seconds:
            return self.seconds < other.seconds
        return self.nanoseconds < other.nanoseconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return not self <= other

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self > other or self == other

    # -------------------------------------------------------------------------
    # Производные величины
    # -------------------------------------------------------------------------

    @property
    def is_negative(self) -> bool:
        """Момент лежит до эпохи (в канонической форме знак несут days)"""
        return self.days < 0

    def total_seconds(self) -> float:
        """
        Вещественное значение в секундах.

        Для больших days теряет наносекундную точность (float64).
        """
        return TimeTriple(self.days, self.seconds, self.nanoseconds).total_seconds()

    def is_close(self, other: "Instant", abs_tol_ns: float = EPS_NANOSECONDS_ABS) -> bool:
        """
        Сравнение с толерантностью в наносекундах.

        Нужно для значений, прошедших через много float-операций, где
        точное == может не выполняться.

        Args:
            other: Второй момент
            abs_tol_ns: Допустимая разница в наносекундах

        Returns:
            True если |self - other| <= abs_tol_ns
        """
        if abs_tol_ns < 0:
            raise ValueError(f"abs_tol_ns must be non-negative, got {abs_tol_ns}")

        diff = self - other if self >= other else other - self
        if diff.days != 0:
            return False

        diff_ns = diff.seconds * NANOSECONDS_PER_SECOND + diff.nanoseconds
        return compare_with_tolerance(diff_ns, 0.0, tol=abs_tol_ns) == 0


# Эпоха: (0, 0, 0.0)
EPOCH: Final[Instant] = Instant()


# =============================================================================
# ИМЕНОВАННЫЕ ОПЕРАЦИИ
# =============================================================================


def construct(days: int = 0, seconds: int = 0, nanoseconds: float = 0.0) -> Instant:
    """
    Создание канонического Instant из произвольной тройки.

    Raises:
        pydantic.ValidationError: Если days/seconds не целые или nanoseconds NaN/Inf
    """
    return Instant.of(days, seconds, nanoseconds)


def add(a: Instant, b: Instant) -> Instant:
    """Сумма a + b в канонической форме"""
    return a + b


def subtract(a: Instant, b: Instant) -> Instant:
    """Разность a - b в канонической форме"""
    return a - b


def equals(a: Instant, b: Instant) -> bool:
    """a == b: все три поля равны"""
    return a == b


def not_equals(a: Instant, b: Instant) -> bool:
    """a != b"""
    return not a == b


def less_than(a: Instant, b: Instant) -> bool:
    """a < b лексикографически по (days, seconds, nanoseconds)"""
    return a < b


def less_equal(a: Instant, b: Instant) -> bool:
    """a <= b (выводится из < и ==)"""
    return a <= b


def greater_than(a: Instant, b: Instant) -> bool:
    """a > b (выводится из <=)"""
    return a > b


def greater_equal(a: Instant, b: Instant) -> bool:
    """a >= b (выводится из > и ==)"""
    return a >= b
