import numbers
from typing import Optional

from .types import Name, Year, YearRange

SEXES = ("female", "male")

# years are stored as Int64
MIN_YEAR = -(2**63)
MAX_YEAR = 2**63 - 1


def _is_year(x: object) -> bool:
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


def _check_year(year: object) -> int:
    if not _is_year(year):
        raise TypeError(f"Years must be integers, got `{year!r}`.")

    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError(f"`{year}` is outside the range of representable years.")

    return int(year)


def _validate_year_range(min_year: object, max_year: object) -> YearRange:
    min_year = _check_year(min_year)
    max_year = _check_year(max_year)

    if min_year > max_year:
        raise ValueError(
            f"`min_year` ({min_year}) must not be greater than `max_year` ({max_year})."
        )

    return YearRange(min_year, max_year)


def _parse_years(years: Optional[Year]) -> tuple[Optional[int], Optional[int]]:
    """Accepts a single year, a (min, max) pair, or None."""
    if years is None:
        return None, None

    if _is_year(years):
        return years, years

    try:
        min_year, max_year = years
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"`years` must be a single year or a pair of years, got `{years!r}`."
        ) from e

    return min_year, max_year


def _to_name_list(name: Name) -> list[str]:
    if isinstance(name, str):
        return [name]

    names = list(name)
    for n in names:
        if not isinstance(n, str):
            raise TypeError(f"Names must be strings, got `{n!r}`.")

    return names
