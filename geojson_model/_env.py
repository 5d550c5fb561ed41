import os
from typing import Final


__docformat__ = "google"
__all__ = (
    "STRICT",
    "VALIDATE_RANGES",
)

_TRUTHY = {"1", "true", "yes", "on"}

STRICT: Final[bool] = os.environ.get("GEOJSON_MODEL_STRICT", "").lower() in _TRUTHY
VALIDATE_RANGES: Final[bool] = (
    os.environ.get("GEOJSON_MODEL_VALIDATE_RANGES", "").lower() in _TRUTHY
)
