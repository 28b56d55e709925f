"""Conversions between frequency ratios and cents.

A cent is one hundredth of an equal-tempered semitone, so an octave
(ratio ``2``) spans ``1200`` cents.  Expressing a scale factor in cents
makes it easy to compare the catalog entries with familiar intervals.

Usage Example
-------------
>>> from modular_scale.utils import ratio_to_cents, cents_to_ratio
>>> ratio_to_cents(2)
1200.0
>>> round(cents_to_ratio(700), 4)
1.4983
"""

from __future__ import annotations

import logging
import math

__all__ = ["ratio_to_cents", "cents_to_ratio"]


def ratio_to_cents(ratio: float) -> float:
    """Return the size of ``ratio`` in cents.

    Raises
    ------
    ValueError
        If ``ratio`` is not positive, since the logarithm is undefined.
    """

    if not ratio > 0:
        logging.error("Cannot express non-positive ratio in cents: %r", ratio)
        raise ValueError(f"Ratio must be positive, got {ratio!r}")
    return 1200.0 * math.log2(ratio)


def cents_to_ratio(cents: float) -> float:
    """Return the frequency ratio spanning ``cents``."""

    return 2.0 ** (cents / 1200.0)
