# config_test.py
# PyTest unit tests for configuration, logging setup and the CLI parser

import logging

import pytest

from hull_stepper.__main__ import build_parser, main
from hull_stepper.config import TICK_RATE_MS, X_BOUNDS, Y_BOUNDS, ViewerConfig
from hull_stepper.logging_config import setup_logging


def test_defaults():
    config = ViewerConfig()
    assert config.x_bounds == X_BOUNDS == (-200.0, 200.0)
    assert config.y_bounds == Y_BOUNDS == (-100.0, 100.0)
    assert config.tick_rate_ms == TICK_RATE_MS == 250
    assert config.seed is None


@pytest.mark.parametrize("kwargs", [
    {"x_bounds": (1.0, 1.0)},
    {"y_bounds": (5.0, -5.0)},
    {"tick_rate_ms": 0},
])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        ViewerConfig(**kwargs)


def test_from_args():
    args = build_parser().parse_args(["--tick-rate", "100", "--points", "30", "--seed", "5",
                                      "--log-level", "debug"])
    config = ViewerConfig.from_args(args)
    assert config.tick_rate_ms == 100
    assert config.initial_points == 30
    assert config.seed == 5
    assert config.log_level == logging.DEBUG


def test_cli_reports_bad_config(capsys):
    assert main(["--tick-rate", "0"]) == 2
    assert "tick_rate_ms" in capsys.readouterr().err


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    log_file = tmp_path / "hull.log"
    setup_logging(logging.DEBUG)
    logger = logging.getLogger("hull_stepper")
    assert len(logger.handlers) == 1

    setup_logging(logging.DEBUG, str(log_file))
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG

    logging.getLogger("hull_stepper.hull_engine").debug("recorded")
    for handler in logger.handlers:
        handler.flush()
    assert "recorded" in log_file.read_text(encoding="utf-8")


def test_setup_logging_returns_package_logger():
    logger = setup_logging(logging.WARNING)
    assert logger is logging.getLogger("hull_stepper")
    assert logger.level == logging.WARNING
