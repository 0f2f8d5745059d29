"""
Normalization — каноническая форма тройки (days, seconds, nanoseconds)

Модуль приводит произвольную тройку к единственному каноническому виду:
    0 <= seconds < SECONDS_PER_DAY
    0.0 <= nanoseconds < NANOSECONDS_PER_SECOND
    days — любое целое, несёт знак всей величины

Алгоритм (чистая функция, без мутации входа):
    1. is_in_order: лексикографический знак ИСХОДНОЙ тройки
       (старшее ненулевое поле days > seconds > nanoseconds определяет знак)
    2. correct_sign: один шаг заёма
       - in order:     отрицательные младшие поля занимают у старших
       - not in order: положительные младшие поля отдают старшим
    3. carry: безусловный перенос nanoseconds → seconds → days

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вещественное значение days*86400 + seconds + nanoseconds*1e-9 сохраняется
2. Результат в режиме CarryMode.FLOOR всегда канонический
3. NaN/Inf в nanoseconds → NonFiniteTimeError

РЕЖИМЫ ПЕРЕНОСА:
    FLOOR    — настоящее floor-деление (по умолчанию)
    TRUNCATE — усечение к нулю (историческое поведение); для отрицательных
               остатков больше одной единицы результат НЕ канонический
"""

import logging
from enum import Enum
from typing import Final, NamedTuple

from universal_time.core.math.numerical_safeguards import as_integral, is_valid_float

logger = logging.getLogger("universal_time.normalization")

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

NANOSECONDS_PER_SECOND: Final[float] = 1.0e9

SECONDS_PER_DAY: Final[int] = 60 * 60 * 24


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NonFiniteTimeError(ValueError):
    """
    nanoseconds содержит NaN или Inf.

    Такое значение не представимо ни одной тройкой, поэтому нормализация
    отказывается его принимать вместо того, чтобы молча распространить NaN.
    """

    pass


# =============================================================================
# TYPES
# =============================================================================


class CarryMode(str, Enum):
    """Способ деления при переносе переполнения в старшее поле"""

    FLOOR = "floor"
    TRUNCATE = "truncate"


class TimeTriple(NamedTuple):
    """Тройка полей времени (сырая или каноническая)"""

    days: int
    seconds: int
    nanoseconds: float

    def total_seconds(self) -> float:
        """Вещественное значение тройки в секундах"""
        return self.days * SECONDS_PER_DAY + self.seconds + self.nanoseconds / NANOSECONDS_PER_SECOND

    def is_canonical(self) -> bool:
        """Проверка диапазонов канонической формы"""
        return 0 <= self.seconds < SECONDS_PER_DAY and 0.0 <= self.nanoseconds < NANOSECONDS_PER_SECOND


# =============================================================================
# ВХОДНАЯ ВАЛИДАЦИЯ
# =============================================================================


def coerce_triple(days: int, seconds: int, nanoseconds: float) -> TimeTriple:
    """
    Проверка и приведение типов сырой тройки.

    Args:
        days: Целое (или float без дробной части)
        seconds: Целое (или float без дробной части)
        nanoseconds: Любое конечное число

    Returns:
        TimeTriple(int, int, float)

    Raises:
        ValueError: Если days/seconds не целые или nanoseconds не число
        NonFiniteTimeError: Если nanoseconds NaN/Inf
    """
    days_int = as_integral(days)
    if days_int is None:
        raise ValueError(f"days must be an integer, got {days!r}")

    seconds_int = as_integral(seconds)
    if seconds_int is None:
        raise ValueError(f"seconds must be an integer, got {seconds!r}")

    if isinstance(nanoseconds, bool) or not isinstance(nanoseconds, (int, float)):
        raise ValueError(f"nanoseconds must be a real number, got {nanoseconds!r}")

    nanoseconds = float(nanoseconds)
    if not is_valid_float(nanoseconds):
        raise NonFiniteTimeError(f"nanoseconds must be finite, got {nanoseconds}")

    return TimeTriple(days_int, seconds_int, nanoseconds)


# =============================================================================
# ЭТАПЫ НОРМАЛИЗАЦИИ
# =============================================================================


def is_in_order(days: int, seconds: int, nanoseconds: float) -> bool:
    """
    Лексикографический тест знака тройки.

    Поле считается значимым только если все более старшие поля равны нулю.

    Returns:
        False если старшее значимое поле отрицательно, иначе True

    Examples:
        >>> is_in_order(0, 1, -5.0)
        True
        >>> is_in_order(0, 0, -1.0)
        False
        >>> is_in_order(-1, 90000, 0.0)
        False
    """
    if days < 0:
        return False
    if days == 0 and seconds < 0:
        return False
    if days == 0 and seconds == 0 and nanoseconds < 0.0:
        return False
    return True


def correct_sign(days: int, seconds: int, nanoseconds: float, in_order: bool) -> TimeTriple:
    """
    Один шаг заёма, согласованный со знаком тройки.

    in_order=True: отрицательные младшие поля занимают единицу у старших.
    in_order=False: положительные младшие поля отдают единицу старшим.

    Examples:
        >>> correct_sign(0, 1, -991974300.0, in_order=True)
        TimeTriple(days=0, seconds=0, nanoseconds=8025700.0)
        >>> correct_sign(-1, 5, 3.0, in_order=False)
        TimeTriple(days=0, seconds=-86394, nanoseconds=-999999997.0)
    """
    if in_order:
        if nanoseconds < 0.0:
            seconds -= 1
            nanoseconds += NANOSECONDS_PER_SECOND
        if seconds < 0:
            days -= 1
            seconds += SECONDS_PER_DAY
    else:
        if nanoseconds > 0.0:
            seconds += 1
            nanoseconds -= NANOSECONDS_PER_SECOND
        if seconds > 0:
            days += 1
            seconds -= SECONDS_PER_DAY

    return TimeTriple(days, seconds, nanoseconds)


def _divmod_nanoseconds(nanoseconds: float, mode: CarryMode) -> tuple[int, float]:
    if mode is CarryMode.FLOOR:
        # float divmod держит остаток в [0, 1e9] при любой величине nanoseconds
        quotient, remainder = divmod(nanoseconds, NANOSECONDS_PER_SECOND)
        return int(quotient), remainder
    quotient = int(nanoseconds / NANOSECONDS_PER_SECOND)
    return quotient, nanoseconds - quotient * NANOSECONDS_PER_SECOND


def _divide_seconds(seconds: int, mode: CarryMode) -> int:
    # Целочисленное деление: float-деление теряет точность на больших seconds
    if mode is CarryMode.FLOOR:
        return seconds // SECONDS_PER_DAY
    quotient = abs(seconds) // SECONDS_PER_DAY
    return quotient if seconds >= 0 else -quotient


def carry(
    days: int,
    seconds: int,
    nanoseconds: float,
    mode: CarryMode = CarryMode.FLOOR,
) -> TimeTriple:
    """
    Безусловный перенос переполнения: nanoseconds → seconds → days.

    Args:
        days, seconds, nanoseconds: Тройка после correct_sign
        mode: FLOOR (канонический результат) или TRUNCATE (усечение к нулю)

    Returns:
        Тройка после переноса

    Examples:
        >>> carry(1, 86500, 0.0)
        TimeTriple(days=2, seconds=100, nanoseconds=0.0)
        >>> carry(0, 0, -1.0)
        TimeTriple(days=-1, seconds=86399, nanoseconds=999999999.0)
        >>> carry(0, 0, -1.0, mode=CarryMode.TRUNCATE)
        TimeTriple(days=0, seconds=0, nanoseconds=-1.0)
    """
    overflow_seconds, nanoseconds = _divmod_nanoseconds(nanoseconds, mode)
    seconds += overflow_seconds

    if mode is CarryMode.FLOOR:
        # Остаток divmod может совпасть с верхней границей 1e9
        if nanoseconds < 0.0:
            seconds -= 1
            nanoseconds += NANOSECONDS_PER_SECOND
        if nanoseconds >= NANOSECONDS_PER_SECOND:
            seconds += 1
            nanoseconds -= NANOSECONDS_PER_SECOND

    overflow_days = _divide_seconds(seconds, mode)
    days += overflow_days
    seconds -= overflow_days * SECONDS_PER_DAY

    # -0.0 → 0.0
    return TimeTriple(days, seconds, nanoseconds + 0.0)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(
    days: int,
    seconds: int,
    nanoseconds: float,
    mode: CarryMode = CarryMode.FLOOR,
) -> TimeTriple:
    """
    Приведение произвольной тройки к канонической форме.

    Знак определяется по ИСХОДНОЙ тройке (до любых переносов), затем
    выполняется один шаг заёма и безусловный перенос. В режиме FLOOR уже
    каноническая тройка возвращается без изменений, поэтому normalize
    идемпотентна.

    В режиме TRUNCATE шаги 1-4 выполняются буквально для любого входа,
    а знак после ветви "in order" проверяется повторно: если первый заём
    сделал тройку отрицательной, дополнительно выполняется ветвь
    "not in order".

    Args:
        days: Дни относительно эпохи (любое целое)
        seconds: Секунды (любое целое, в т.ч. отрицательное или >= 86400)
        nanoseconds: Наносекунды (любое конечное число)
        mode: Режим переноса (default: CarryMode.FLOOR)

    Returns:
        Каноническая TimeTriple (для CarryMode.FLOOR)

    Raises:
        ValueError: Если days/seconds не целые или nanoseconds не число
        NonFiniteTimeError: Если nanoseconds NaN/Inf

    Examples:
        >>> normalize(0, 1, -991974300.0)
        TimeTriple(days=0, seconds=0, nanoseconds=8025700.0)
        >>> normalize(0, 0, -1.0)
        TimeTriple(days=-1, seconds=86399, nanoseconds=999999999.0)
        >>> normalize(1, 86500, 0)
        TimeTriple(days=2, seconds=100, nanoseconds=0.0)
    """
    raw = coerce_triple(days, seconds, nanoseconds)
    if mode is CarryMode.FLOOR and raw.is_canonical():
        # Переносы не нужны; ns - 1e9 + 1e9 потерял бы младшие биты
        return TimeTriple(raw.days, raw.seconds, raw.nanoseconds + 0.0)

    in_order = is_in_order(*raw)

    logger.debug(
        f"Normalizing {tuple(raw)}: {'in order' if in_order else 'not in order'}, mode={mode.value}"
    )

    corrected = correct_sign(*raw, in_order=in_order)
    if mode is CarryMode.TRUNCATE and in_order and not is_in_order(*corrected):
        # Историческое поведение: знак проверяется повторно после первого заёма
        corrected = correct_sign(*corrected, in_order=False)
    result = carry(*corrected, mode=mode)

    logger.debug(f"Normalized {tuple(raw)} -> {tuple(result)}")
    return result
