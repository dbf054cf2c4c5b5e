from __future__ import annotations

import logging
import typing
from typing import Optional, Union

import pandas as pd
import polars as pl

from .utils.paths import DIST_PATH
from .utils.types import Resource, YearRange
from .utils.utils import SEXES

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("name", "year", "sex", "count")
SEX_MAPPER = {"f": "female", "m": "male", "female": "female", "male": "male"}

# Years covered by each bundled resource
RESOURCE_SPANS: dict[Resource, YearRange] = {"ssa": YearRange(1880, 2012)}

Frame = Union[pl.LazyFrame, pl.DataFrame, pd.DataFrame]


class NameDataset:
    """A read-only table of name counts by year and sex.

    Parameters
    ----------
    data : Frame
        A polars or pandas frame with the columns `name`, `year`, `sex` and `count`.
        `sex` may be coded as `F`/`M` or `female`/`male`, in any case.
    min_year : int, optional
        First year covered by the data. Read from the data if not given.
    max_year : int, optional
        Last year covered by the data. Read from the data if not given.
    """

    def __init__(
        self,
        data: Frame,
        min_year: Optional[int] = None,
        max_year: Optional[int] = None,
    ):
        if isinstance(data, pd.DataFrame):
            data = pl.from_pandas(data)

        lf = data.lazy()

        missing = [c for c in REQUIRED_COLUMNS if c not in lf.collect_schema().names()]
        if missing:
            raise ValueError(f"Name data is missing the columns {missing}.")

        self._data = lf.select(
            pl.col("name").cast(pl.String),
            pl.col("year").cast(pl.Int64),
            pl.col("sex")
            .cast(pl.String)
            .str.to_lowercase()
            .replace_strict(SEX_MAPPER, default=None, return_dtype=pl.String),
            pl.col("count").cast(pl.Int64),
        ).filter(pl.col("sex").is_in(list(SEXES)))

        self._min_year = min_year
        self._max_year = max_year

    def lazy(self) -> pl.LazyFrame:
        return self._data

    def _resolve_span(self):
        span = self._data.select(
            pl.col("year").min().alias("min_year"),
            pl.col("year").max().alias("max_year"),
        ).collect()
        min_year, max_year = span.row(0)

        if min_year is None or max_year is None:
            raise ValueError(
                "Name data has no years, pass `min_year` and `max_year` explicitly."
            )

        if self._min_year is None:
            self._min_year = min_year
        if self._max_year is None:
            self._max_year = max_year

    @property
    def min_year(self) -> int:
        if self._min_year is None:
            self._resolve_span()

        return self._min_year

    @property
    def max_year(self) -> int:
        if self._max_year is None:
            self._resolve_span()

        return self._max_year

    @property
    def span(self) -> YearRange:
        return YearRange(self.min_year, self.max_year)


class DatasetLoader:
    def __init__(self):
        self._datasets: dict[Resource, Optional[NameDataset]] = {
            k: None for k in typing.get_args(Resource)
        }

    def load(self, resource: Resource = "ssa") -> NameDataset:
        if resource not in self._datasets:
            raise ValueError(f"`{resource}` is not a valid resource.")

        if self._datasets[resource] is None:
            file = DIST_PATH / f"{resource}.parquet"
            if not file.exists():
                raise FileNotFoundError(
                    f"Could not find the `{resource}` name data at {file}."
                )

            logger.debug("Scanning %s", file)
            min_year, max_year = RESOURCE_SPANS[resource]
            self._datasets[resource] = NameDataset(
                pl.scan_parquet(file), min_year=min_year, max_year=max_year
            )

        data = self._datasets[resource]
        assert data is not None

        return data


DATASET_LOADER = DatasetLoader()


def _resolve_dataset(data: Optional[Union[NameDataset, Frame]]) -> NameDataset:
    if data is None:
        return DATASET_LOADER.load("ssa")

    if isinstance(data, NameDataset):
        return data

    return NameDataset(data)
