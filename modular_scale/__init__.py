"""Modular Scale library.

This package computes proportional size ladders for typography and
layout.  A typical workflow picks a named interval such as
:func:`major_third`, applies it to a base size and then asks the
resulting scale for successive integer steps::

    >>> from modular_scale import major_third
    >>> body = major_third(12)
    >>> [body(n) for n in range(4)]
    [12.0, 15.0, 18.75, 23.4375]

Underlying Algorithm
--------------------
Every scale is the geometric progression ``base * factor ** n``.  The
factor fixes the ratio between neighbouring steps, so any two sizes taken
from one scale relate by a whole power of that ratio.  The named factors
come from just-intonation interval ratios (minor, major, perfect and
augmented families) plus the golden ratio, giving sizes that sit in the
same proportions as consonant musical intervals.

Features include:
- :func:`make_scale` for arbitrary factors.
- One builder per catalog interval and name-based lookup via
  :func:`scale_for`.
- :func:`ladder`, :func:`steps` and :func:`nearest_step` for evaluating or
  inverting a scale over many exponents, vectorised with NumPy when
  installed.
- Ratio/cents conversions for describing factors in musical terms.
"""

__version__ = "0.1.0"

from .scale import Scale, make_scale
from .intervals import (
    DEFAULT_BASE,
    FACTORS,
    FAMILIES,
    canonical_interval,
    describe_interval,
    get_factor,
    interval_builders,
    scale_for,
    minor_second,
    minor_third,
    minor_sixth,
    minor_seventh,
    major_second,
    major_third,
    major_sixth,
    major_seventh,
    perfect_fourth,
    perfect_fifth,
    perfect_octave,
    augmented_second,
    augmented_third,
    augmented_fourth,
    augmented_fifth,
    augmented_sixth,
    augmented_seventh,
    augmented_octave,
    golden_ratio,
)
from .ladder import ladder, nearest_step, steps
from .utils import cents_to_ratio, ratio_to_cents
