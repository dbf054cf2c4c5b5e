from pathlib import Path

BASE_PATH = Path(__file__).resolve().parents[1]
DAT_PATH = BASE_PATH / "data"
DIST_PATH = DAT_PATH / "distributions"
