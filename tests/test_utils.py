"""Tests for ratio and cents conversion helpers."""

import importlib
import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

utils = importlib.import_module("modular_scale.utils")


def test_ratio_to_cents_known_intervals():
    """Octave, unison and fifth map to their familiar sizes."""
    assert utils.ratio_to_cents(2) == pytest.approx(1200.0)
    assert utils.ratio_to_cents(1) == 0.0
    assert utils.ratio_to_cents(1.5) == pytest.approx(701.955, abs=1e-3)
    assert utils.ratio_to_cents(0.5) == pytest.approx(-1200.0)


@pytest.mark.parametrize("ratio", [0, -1.5])
def test_ratio_to_cents_rejects_non_positive(ratio, caplog):
    """Non-positive ratios have no size in cents."""
    with caplog.at_level(logging.ERROR):
        with pytest.raises(ValueError):
            utils.ratio_to_cents(ratio)
    assert "non-positive" in caplog.text


def test_cents_to_ratio():
    """Cents convert back into frequency ratios."""
    assert utils.cents_to_ratio(0) == 1.0
    assert utils.cents_to_ratio(1200) == pytest.approx(2.0)
    assert utils.cents_to_ratio(-1200) == pytest.approx(0.5)
    assert utils.cents_to_ratio(700) == pytest.approx(1.4983, abs=1e-4)
