from __future__ import annotations

from collections.abc import Sequence
from typing import Literal, NamedTuple, Optional, TypedDict, Union

import pandas as pd
import polars as pl

ArrayLike = Union[Sequence[str], pl.Series, pd.Series]
Name = Union[str, ArrayLike]
Year = Union[int, tuple[int, int]]
Sex = Literal["female", "male"]
Gender = Literal["female", "male", "either", "unknown"]
Resource = Literal["ssa"]


class YearRange(NamedTuple):
    min_year: int
    max_year: int


class CorrectionFactors(NamedTuple):
    female: float
    male: float


class GenderEstimate(TypedDict, total=False):
    name: str
    year_min: int
    year_max: int
    proportion_male: Optional[float]
    proportion_female: Optional[float]
    gender: Gender
