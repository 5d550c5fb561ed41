"""Decoder configuration."""

import logging
from dataclasses import dataclass, field

from geojson_model._env import STRICT, VALIDATE_RANGES


__docformat__ = "google"
__all__ = (
    "GeoJsonConfig",
    "DEFAULT_CONFIG",
)


_NULL_LOGGER = logging.getLogger("geojson_model")
_NULL_LOGGER.addHandler(logging.NullHandler())


@dataclass(kw_only=True, slots=True, frozen=True)
class GeoJsonConfig:
    """
    Settings that decide how lenient decoding and validation are.

    The defaults are read from the environment once, when this module is imported:
    ``GEOJSON_MODEL_STRICT`` and ``GEOJSON_MODEL_VALIDATE_RANGES`` accept
    ``1``, ``true``, ``yes`` or ``on``.

    Attributes:
        strict: If set, enforce RFC 7946 rules that are relaxed by default:
                Features must have ``geometry`` and ``properties`` members,
                LineStrings need at least two positions, and every Polygon ring
                needs at least four positions and must be closed.
        validate_coordinate_ranges: If set, every longitude must be in ``[-180, 180]``,
                                    and every latitude in ``[-90, 90]``. Leave this off
                                    for projected coordinates.
        logger: The logger to use for all logging output related to decoding.

    References:
        - https://tools.ietf.org/html/rfc7946#section-3.1
    """

    strict: bool = STRICT
    validate_coordinate_ranges: bool = VALIDATE_RANGES
    logger: logging.Logger = field(default=_NULL_LOGGER, compare=False)


DEFAULT_CONFIG = GeoJsonConfig()
"""Configuration used when none is passed explicitly."""
