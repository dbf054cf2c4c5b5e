__version__ = "0.1.0"

from ._ssa import gender_ssa, get_correction_factors, predict_gender_ssa
from .dataset import DATASET_LOADER, NameDataset
from .utils.types import CorrectionFactors, GenderEstimate, YearRange

__all__ = [
    "DATASET_LOADER",
    "CorrectionFactors",
    "GenderEstimate",
    "NameDataset",
    "YearRange",
    "gender_ssa",
    "get_correction_factors",
    "predict_gender_ssa",
]
