"""
Pytest fixtures for graphics extractor tests.
"""

import logging

import pytest

from graphics_extractor.logging_config import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging() so they never outlive capsys."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def well_formed_log():
    """Log with a quoted-key graphics wrapper."""
    return """
      some log content
      {"graphics": {"points": [{"x": 0, "y": 0, "label": "A"}], "title": "test"}}
      more content
    """


@pytest.fixture
def relaxed_log():
    """Log with an unquoted-key graphics wrapper."""
    return """
      debug log
      {graphics: {points: [{x: 1, y: 2}], title: "relaxed"}}
      other content
    """


@pytest.fixture
def marker_log():
    """Output of a debug logger using the ':graphics' namespace marker."""
    return (
        'graphics-debug:example-usage:graphics {"rects":[{"center": {"x": 0,"y":0},'
        '"width":100,"height":100,"color":"green"}],"points":[{"x":50,"y":50,'
        '"color":"red","label":"Test Output!"}]} +0ms'
    )


@pytest.fixture
def marker_objects():
    """Graphics object carried by marker_log."""
    return [
        {
            "rects": [
                {"center": {"x": 0, "y": 0}, "width": 100, "height": 100, "color": "green"},
            ],
            "points": [{"x": 50, "y": 50, "color": "red", "label": "Test Output!"}],
        },
    ]


@pytest.fixture
def log_file(tmp_path, relaxed_log):
    """relaxed_log written to disk."""
    path = tmp_path / "render.log"
    path.write_text(relaxed_log, encoding="utf-8")
    return path
