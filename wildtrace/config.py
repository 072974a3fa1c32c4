import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Project root
ROOT = Path(__file__).resolve().parent.parent

# Data directories
DATA_DIR = ROOT / "data"
RAW_DIR = Path(os.environ.get("WILDTRACE_DATA_DIR", DATA_DIR / "raw"))
DERIVED_DIR = DATA_DIR / "derived"
EXPORT_DIR = DERIVED_DIR / "archive"

# Output files
DASHBOARD_JSON = DERIVED_DIR / "dashboard.json"

# Record source
DEFAULT_SOURCE = os.environ.get("WILDTRACE_SOURCE", "csv")
API_URL = os.environ.get("WILDTRACE_API_URL", "")
API_TOKEN = os.environ.get("WILDTRACE_API_TOKEN", "")

# Scope sentinel and unmatched-reference placeholder
ALL_LOCATIONS = "all"
UNKNOWN_LOCATION = "Unknown Location"

# Ceilings used to rescale raw readings onto 0-100. These are calibration
# thresholds for display, not physical limits.
NORMALIZATION_SCALES = {
    "temperature": float(os.environ.get("WILDTRACE_SCALE_TEMPERATURE", 40)),
    "light": float(os.environ.get("WILDTRACE_SCALE_LIGHT", 10000)),
    "air_quality": float(os.environ.get("WILDTRACE_SCALE_AIR_QUALITY", 200)),
    "noise": float(os.environ.get("WILDTRACE_SCALE_NOISE", 100)),
}

# Harmony score reference points
HRV_REFERENCE = 50
SCORE_SCALE = 10
