"""Shared fixtures for the lottie-sanitize test suite."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from loguru import logger

from lottie_sanitize.config import AppConfig


@pytest.fixture(autouse=True)
def _reset_logger():
    """Drop sinks added by cli.main so they never outlive a captured stream."""
    yield
    logger.remove()


@pytest.fixture
def default_config() -> AppConfig:
    """Return a default AppConfig with no file."""
    return AppConfig()


@pytest.fixture
def broken_animation() -> dict:
    """A trimmed Lottie document with minified (null) position tangents."""
    return {
        "v": "5.7.4",
        "fr": 30,
        "layers": [
            {
                "nm": "dot",
                "ks": {
                    "p": {
                        "a": 1,
                        "k": [
                            {"t": 0, "s": [10, 10, 0], "to": None, "ti": None},
                            {"t": 15, "s": [50, 10, 0], "to": [0, 0, 0], "ti": None},
                            {"t": 30, "s": [50, 10, 0]},
                        ],
                    },
                    "o": {"a": 0, "k": 100},
                },
                "parent": None,
            }
        ],
    }


@pytest.fixture
def animation_file(tmp_path: Path, broken_animation: dict) -> Path:
    """Write the broken animation to disk and return its path."""
    path = tmp_path / "animation.json"
    path.write_text(json.dumps(broken_animation), encoding="utf-8")
    return path


@pytest.fixture
def sample_yaml(tmp_path: Path) -> Path:
    """Write a minimal config file and return its path."""
    cfg = tmp_path / "lottie-sanitize.yaml"
    cfg.write_text(
        "paths:\n"
        "  input: in.json\n"
        "  output: out/fixed.json\n"
        "sanitize:\n"
        "  target_keys: [to, ti, e]\n"
        "  policy: zero\n"
        "output:\n"
        "  indent: 2\n"
    )
    return cfg
