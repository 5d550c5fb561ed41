import dataclasses
import logging

from geojson_model import GeoJsonConfig
from geojson_model.codec import decode
from geojson_model.config import DEFAULT_CONFIG

import pytest


@pytest.mark.xdist_group(name="fast")
def test_default_config():
    assert not DEFAULT_CONFIG.strict
    assert not DEFAULT_CONFIG.validate_coordinate_ranges
    assert DEFAULT_CONFIG.logger.name == "geojson_model"
    assert any(isinstance(h, logging.NullHandler) for h in DEFAULT_CONFIG.logger.handlers)


@pytest.mark.xdist_group(name="fast")
def test_config_is_frozen():
    config = GeoJsonConfig(strict=True)

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.strict = False  # type: ignore[misc]

    with pytest.raises(TypeError):
        _ = GeoJsonConfig(True)  # type: ignore[misc]


@pytest.mark.xdist_group(name="fast")
def test_config_equality_ignores_logger():
    a = GeoJsonConfig(logger=logging.getLogger("a"))
    b = GeoJsonConfig(logger=logging.getLogger("b"))
    assert a == b
    assert a != GeoJsonConfig(strict=True)


@pytest.mark.xdist_group(name="fast")
def test_config_logger(caplog):
    logger = logging.getLogger("test_config_logger")
    config = GeoJsonConfig(logger=logger)

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        _ = decode({"type": "Feature"}, config=config)

    assert "treat absent 'geometry' member at $ as null" in caplog.text
    assert "treat absent 'properties' member at $ as null" in caplog.text
    assert "decoded Feature" in caplog.text
