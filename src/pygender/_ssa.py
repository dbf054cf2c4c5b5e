from __future__ import annotations

import logging
import math
from typing import Optional, Union

import polars as pl

from .dataset import Frame, NameDataset, _resolve_dataset
from .utils.types import CorrectionFactors, GenderEstimate, Name, Year, YearRange
from .utils.utils import (
    SEXES,
    _check_year,
    _parse_years,
    _to_name_list,
    _validate_year_range,
)

logger = logging.getLogger(__name__)

NO_CORRECTION = CorrectionFactors(female=1.0, male=1.0)

Data = Optional[Union[NameDataset, Frame]]


def _spread_sex(lf: pl.LazyFrame, by: list[str]) -> pl.LazyFrame:
    # long to wide on sex, a missing sex counts as 0
    return lf.group_by(by).agg(
        [
            pl.col("count").filter(pl.col("sex") == sex).sum().alias(sex)
            for sex in SEXES
        ]
    )


def _in_years(years: YearRange) -> pl.Expr:
    return pl.col("year").is_between(years.min_year, years.max_year, closed="both")


def _resolve_years(
    min_year: Optional[int], max_year: Optional[int], data: Data
) -> tuple[NameDataset, YearRange]:
    # bad bounds fail before the data is touched
    for bound in (min_year, max_year):
        if bound is not None:
            _check_year(bound)

    if min_year is not None and max_year is not None:
        years = _validate_year_range(min_year, max_year)
        return _resolve_dataset(data), years

    dataset = _resolve_dataset(data)
    years = _validate_year_range(
        dataset.min_year if min_year is None else min_year,
        dataset.max_year if max_year is None else max_year,
    )

    return dataset, years


def _calc_correx(dataset: NameDataset, years: YearRange) -> CorrectionFactors:
    correx = (
        dataset.lazy()
        .filter(_in_years(years))
        .pipe(_spread_sex, by=["name", "year"])
        .select(pl.col(*SEXES).sum().cast(pl.Float64))
        .select(ratio_female=pl.col("female") / (pl.col("female") + pl.col("male")))
        .select(
            female=0.5 / pl.col("ratio_female"),
            male=0.5 / (1 - pl.col("ratio_female")),
        )
        .collect()
    )
    factors = CorrectionFactors(*correx.row(0))

    if not all(math.isfinite(f) for f in factors):
        logger.warning("Degenerate correction factors for %s-%s: %s", *years, factors)
    else:
        logger.debug("Correction factors for %s-%s: %s", *years, factors)

    return factors


def get_correction_factors(
    min_year: Optional[int] = None,
    max_year: Optional[int] = None,
    data: Data = None,
) -> CorrectionFactors:
    r"""Calculates the factors by which female and male counts must be multiplied so
    that the sex ratio of the name data in a range of years is 1:1. SSA data
    undercounts men in early years, so without the correction names look more female
    than they were.

    .. math::

        c_f = \frac{0.5}{F / (F + M)}, \quad c_m = \frac{0.5}{1 - F / (F + M)}

    where `F` and `M` are the total female and male counts in the year range.

    Parameters
    ----------
    min_year : int, optional
        First year of the range, by default the first year of the data
    max_year : int, optional
        Last year of the range, by default the last year of the data
    data : NameDataset | Frame, optional
        The name data, by default the bundled SSA data

    Returns
    -------
    CorrectionFactors
        A named tuple of the female and male factors. If the range has no records,
        both factors are `NaN`.

    Examples
    --------
    >>> import pygender
    >>> pygender.get_correction_factors(1930, 1940)
    """
    dataset, years = _resolve_years(min_year, max_year, data)

    return _calc_correx(dataset, years)


def _classify(proportion_female: pl.Expr) -> pl.Expr:
    return (
        pl.when(proportion_female.is_null())
        .then(pl.lit("unknown"))
        .when(proportion_female == 0.5)
        .then(pl.lit("either"))
        .when(proportion_female > 0.5)
        .then(pl.lit("female"))
        .otherwise(pl.lit("male"))
    )


def predict_gender_ssa(
    first_name: Name,
    min_year: Optional[int] = None,
    max_year: Optional[int] = None,
    certainty: bool = True,
    correct_skew: bool = True,
    data: Data = None,
) -> pl.DataFrame:
    """Predicts gender from first name and a range of years using Social Security
    Administration data. Counts of the name are summed by sex across the years,
    optionally corrected for the skew in the sex ratio of the data, and the gender
    is whichever sex holds the majority.

    Parameters
    ----------
    first_name : Name
        A string or array-like of strings. Matching is case-insensitive.
    min_year : int, optional
        First year of the range, by default the first year of the data
    max_year : int, optional
        Last year of the range, by default the last year of the data
    certainty : bool, optional
        Whether to return the proportions of male and female uses, by default True
    correct_skew : bool, optional
        Whether to correct the skew in the sex ratio of the data, by default True
    data : NameDataset | Frame, optional
        The name data, by default the bundled SSA data

    Returns
    -------
    pl.DataFrame
        A DataFrame of name, year_min, year_max, proportion_male, proportion_female
        and gender, one row per input name in input order. Proportions are rounded to
        4 decimals. Gender is one of `female`, `male`, `either` (an exact 50/50 split
        after rounding) or `unknown` (the name is not in the data for those years).

    Notes
    -----
    The data files can be found in:
        - data/distributions/ssa.parquet

    Examples
    --------
    >>> import pygender
    >>> pygender.predict_gender_ssa("madison")
    >>> pygender.predict_gender_ssa(["john", "leslie"], min_year=1930, max_year=1960)
    """
    names = _to_name_list(first_name)
    dataset, years = _resolve_years(min_year, max_year, data)

    # shared by every name in the batch
    correx = _calc_correx(dataset, years) if correct_skew else NO_CORRECTION

    inputs = (
        pl.LazyFrame({"name": names}, schema={"name": pl.String})
        .with_row_index("index")
        .with_columns(name_clean=pl.col("name").str.to_lowercase())
    )

    counts = (
        dataset.lazy()
        .filter(_in_years(years))
        .with_columns(name_clean=pl.col("name").str.to_lowercase())
        .join(inputs.select("name_clean").unique(), on="name_clean", how="semi")
        .pipe(_spread_sex, by=["name_clean", "year"])
        .group_by("name_clean")
        .agg(pl.col(*SEXES).sum())
    )

    res = (
        inputs.join(counts, on="name_clean", how="left")
        .sort("index")
        .with_columns(
            pl.col("female") * correx.female,
            pl.col("male") * correx.male,
        )
        .with_columns(
            proportion_male=(pl.col("male") / (pl.col("male") + pl.col("female")))
            .fill_nan(None)
            .round(4)
        )
        .with_columns(proportion_female=(1 - pl.col("proportion_male")).round(4))
        .with_columns(gender=_classify(pl.col("proportion_female")))
        .select(
            "name",
            pl.lit(years.min_year, dtype=pl.Int64).alias("year_min"),
            pl.lit(years.max_year, dtype=pl.Int64).alias("year_max"),
            "proportion_male",
            "proportion_female",
            "gender",
        )
    )

    if not certainty:
        res = res.drop("proportion_male", "proportion_female")

    return res.collect()


def gender_ssa(
    name: Name,
    years: Optional[Year] = None,
    certainty: bool = True,
    correct_skew: bool = True,
    data: Data = None,
) -> Union[GenderEstimate, list[GenderEstimate]]:
    """Record-shaped version of :func:`predict_gender_ssa`.

    `years` may be a single year or a `(min_year, max_year)` pair. A single name
    returns a single record; anything else returns a list of records, one per name.

    Examples
    --------
    >>> import pygender
    >>> pygender.gender_ssa("sue", years=1950)
    {'name': 'sue', 'year_min': 1950, 'year_max': 1950, ...}
    >>> pygender.gender_ssa(["sue", "pat"], years=(1930, 1960), certainty=False)
    """
    min_year, max_year = _parse_years(years)

    records = predict_gender_ssa(
        name,
        min_year=min_year,
        max_year=max_year,
        certainty=certainty,
        correct_skew=correct_skew,
        data=data,
    ).to_dicts()

    if isinstance(name, str):
        return records[0]

    return records
