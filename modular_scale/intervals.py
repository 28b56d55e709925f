"""Named scale factors derived from musical intervals.

Each entry binds a fixed ratio to :func:`modular_scale.scale.make_scale`
so callers only pick an interval and a base size.  The ratios follow
classical just intonation grouped by interval family, plus the golden
ratio.

Example
-------
>>> from modular_scale.intervals import major_third, scale_for
>>> major_third(12)(2)
18.75
>>> scale_for("perfectOctave", 12)(-1)
6.0

Design Notes
------------
- ``PERFECT_FOURTH``, ``PERFECT_FIFTH`` and ``AUGMENTED_FOURTH`` are the
  rounded literals ``1.333``, ``1.500`` and ``1.414`` rather than ``4/3``,
  ``3/2`` and ``sqrt(2)``.  Changing them would shift every size derived
  from those scales, so they stay as published.
- ``FACTORS`` and ``FAMILIES`` are read-only mapping proxies. Factors are
  computed once at import time and never change afterwards.
- Builders do not validate their base; see :mod:`modular_scale.scale`.
"""

from __future__ import annotations

import logging
import math
import re
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Tuple

from .scale import Scale, make_scale
from .utils import ratio_to_cents

__all__ = [
    "FACTORS",
    "FAMILIES",
    "DEFAULT_BASE",
    "canonical_interval",
    "get_factor",
    "scale_for",
    "interval_builders",
    "describe_interval",
    "minor_second",
    "minor_third",
    "minor_sixth",
    "minor_seventh",
    "major_second",
    "major_third",
    "major_sixth",
    "major_seventh",
    "perfect_fourth",
    "perfect_fifth",
    "perfect_octave",
    "augmented_second",
    "augmented_third",
    "augmented_fourth",
    "augmented_fifth",
    "augmented_sixth",
    "augmented_seventh",
    "augmented_octave",
    "golden_ratio",
]

# Conventional browser font size in pixels, used when ``scale_for`` is
# called without a base.
DEFAULT_BASE = 16.0

MINOR_SECOND = 16 / 15
MINOR_THIRD = 6 / 5
MINOR_SIXTH = 8 / 5
MINOR_SEVENTH = 16 / 9

MAJOR_SECOND = 9 / 8
MAJOR_THIRD = 1.250
MAJOR_SIXTH = 27 / 16
MAJOR_SEVENTH = 15 / 8

PERFECT_FOURTH = 1.333
PERFECT_FIFTH = 1.500
PERFECT_OCTAVE = 2.0

AUGMENTED_SECOND = 75 / 64
AUGMENTED_THIRD = 125 / 96
AUGMENTED_FOURTH = 1.414
AUGMENTED_FIFTH = 25 / 16
AUGMENTED_SIXTH = 7 / 4
AUGMENTED_SEVENTH = 125 / 64
AUGMENTED_OCTAVE = 25 / 12

GOLDEN_RATIO = (1 + math.sqrt(5)) / 2


def minor_second(base: float) -> Scale:
    """Scale growing by a minor second (16:15)."""
    return make_scale(MINOR_SECOND, base)


def minor_third(base: float) -> Scale:
    """Scale growing by a minor third (6:5)."""
    return make_scale(MINOR_THIRD, base)


def minor_sixth(base: float) -> Scale:
    """Scale growing by a minor sixth (8:5)."""
    return make_scale(MINOR_SIXTH, base)


def minor_seventh(base: float) -> Scale:
    """Scale growing by a minor seventh (16:9)."""
    return make_scale(MINOR_SEVENTH, base)


def major_second(base: float) -> Scale:
    """Scale growing by a major second (9:8)."""
    return make_scale(MAJOR_SECOND, base)


def major_third(base: float) -> Scale:
    """Scale growing by a major third (5:4).

    >>> [major_third(12)(n) for n in range(3)]
    [12.0, 15.0, 18.75]
    """
    return make_scale(MAJOR_THIRD, base)


def major_sixth(base: float) -> Scale:
    """Scale growing by a major sixth (27:16)."""
    return make_scale(MAJOR_SIXTH, base)


def major_seventh(base: float) -> Scale:
    """Scale growing by a major seventh (15:8)."""
    return make_scale(MAJOR_SEVENTH, base)


def perfect_fourth(base: float) -> Scale:
    """Scale growing by a perfect fourth, rounded to ``1.333``."""
    return make_scale(PERFECT_FOURTH, base)


def perfect_fifth(base: float) -> Scale:
    """Scale growing by a perfect fifth (3:2)."""
    return make_scale(PERFECT_FIFTH, base)


def perfect_octave(base: float) -> Scale:
    """Scale doubling at every step.

    >>> perfect_octave(12)(1), perfect_octave(12)(-1)
    (24.0, 6.0)
    """
    return make_scale(PERFECT_OCTAVE, base)


def augmented_second(base: float) -> Scale:
    """Scale growing by an augmented second (75:64)."""
    return make_scale(AUGMENTED_SECOND, base)


def augmented_third(base: float) -> Scale:
    """Scale growing by an augmented third (125:96)."""
    return make_scale(AUGMENTED_THIRD, base)


def augmented_fourth(base: float) -> Scale:
    """Scale growing by an augmented fourth, rounded to ``1.414``."""
    return make_scale(AUGMENTED_FOURTH, base)


def augmented_fifth(base: float) -> Scale:
    """Scale growing by an augmented fifth (25:16)."""
    return make_scale(AUGMENTED_FIFTH, base)


def augmented_sixth(base: float) -> Scale:
    """Scale growing by an augmented sixth (7:4)."""
    return make_scale(AUGMENTED_SIXTH, base)


def augmented_seventh(base: float) -> Scale:
    """Scale growing by an augmented seventh (125:64)."""
    return make_scale(AUGMENTED_SEVENTH, base)


def augmented_octave(base: float) -> Scale:
    """Scale growing by an augmented octave (25:12)."""
    return make_scale(AUGMENTED_OCTAVE, base)


def golden_ratio(base: float) -> Scale:
    """Scale growing by the golden ratio ``(1 + sqrt(5)) / 2``."""
    return make_scale(GOLDEN_RATIO, base)


# Catalog rows in publication order: (name, factor, builder, family).
_CATALOG: Tuple[Tuple[str, float, Callable[[float], Scale], str], ...] = (
    ("minorSecond", MINOR_SECOND, minor_second, "minor"),
    ("minorThird", MINOR_THIRD, minor_third, "minor"),
    ("minorSixth", MINOR_SIXTH, minor_sixth, "minor"),
    ("minorSeventh", MINOR_SEVENTH, minor_seventh, "minor"),
    ("majorSecond", MAJOR_SECOND, major_second, "major"),
    ("majorThird", MAJOR_THIRD, major_third, "major"),
    ("majorSixth", MAJOR_SIXTH, major_sixth, "major"),
    ("majorSeventh", MAJOR_SEVENTH, major_seventh, "major"),
    ("perfectFourth", PERFECT_FOURTH, perfect_fourth, "perfect"),
    ("perfectFifth", PERFECT_FIFTH, perfect_fifth, "perfect"),
    ("perfectOctave", PERFECT_OCTAVE, perfect_octave, "perfect"),
    ("augmentedSecond", AUGMENTED_SECOND, augmented_second, "augmented"),
    ("augmentedThird", AUGMENTED_THIRD, augmented_third, "augmented"),
    ("augmentedFourth", AUGMENTED_FOURTH, augmented_fourth, "augmented"),
    ("augmentedFifth", AUGMENTED_FIFTH, augmented_fifth, "augmented"),
    ("augmentedSixth", AUGMENTED_SIXTH, augmented_sixth, "augmented"),
    ("augmentedSeventh", AUGMENTED_SEVENTH, augmented_seventh, "augmented"),
    ("augmentedOctave", AUGMENTED_OCTAVE, augmented_octave, "augmented"),
    ("goldenRatio", GOLDEN_RATIO, golden_ratio, "golden"),
)

FACTORS: Mapping[str, float] = MappingProxyType(
    {name: factor for name, factor, _, _ in _CATALOG}
)

_families: Dict[str, Tuple[str, ...]] = {}
for _name, _, _, _family in _CATALOG:
    _families[_family] = _families.get(_family, ()) + (_name,)
FAMILIES: Mapping[str, Tuple[str, ...]] = MappingProxyType(_families)
_FAMILY_OF: Dict[str, str] = {name: family for name, _, _, family in _CATALOG}
del _name, _family

# Lookup keys with case and word separators removed so ``majorThird``,
# ``major_third`` and ``Major Third`` all resolve to the same entry.
_LOOKUP: Dict[str, str] = {name.lower(): name for name in FACTORS}
_SEPARATORS = re.compile(r"[\s_\-]+")


@lru_cache(maxsize=None)
def canonical_interval(name: str) -> str:
    """Return the catalog name matching ``name``.

    ``name`` may be written in camelCase, snake_case or as separate words
    in any letter case.

    Raises
    ------
    ValueError
        If ``name`` does not identify a catalog entry.
    """

    key = _SEPARATORS.sub("", name).lower()
    try:
        return _LOOKUP[key]
    except KeyError:
        logging.error("Unknown interval name: %s", name)
        raise ValueError(f"Unknown interval name: {name}")


def get_factor(name: str) -> float:
    """Return the factor registered under ``name``."""

    return FACTORS[canonical_interval(name)]


def scale_for(name: str, base: float = DEFAULT_BASE) -> Scale:
    """Return the scale for catalog entry ``name`` starting at ``base``."""

    return make_scale(get_factor(name), base)


def interval_builders() -> Dict[str, Callable[[float], Scale]]:
    """Return a fresh ``{name: builder}`` dictionary in catalog order."""

    return {name: builder for name, _, builder, _ in _CATALOG}


def describe_interval(name: str) -> Dict[str, object]:
    """Summarise catalog entry ``name``.

    Returns
    -------
    dict
        Keys ``name``, ``factor``, ``cents`` and ``family``.  ``cents`` is
        the size of the factor in equal-tempered hundredths of a semitone,
        handy when comparing the rounded literals with their exact ratios.
    """

    canonical = canonical_interval(name)
    factor = FACTORS[canonical]
    return {
        "name": canonical,
        "factor": factor,
        "cents": ratio_to_cents(factor),
        "family": _FAMILY_OF[canonical],
    }
