"""Geometric scale construction.

A *scale* maps an integer exponent to a magnitude using
``base * factor ** exponent``.  :func:`make_scale` builds such a function
from a factor and a base so a caller can derive a ladder of related sizes
(font sizes, spacing values) by varying only the exponent.

Example
-------
>>> from modular_scale.scale import make_scale
>>> third = make_scale(1.25, 12)
>>> third(0), third(1), third(2)
(12.0, 15.0, 18.75)
>>> make_scale(2, 12)(-1)
6.0

Design Notes
------------
- Inputs are not validated.  Degenerate factors or bases produce ``0``,
  ``inf`` or ``nan`` exactly as IEEE-754 arithmetic would, leaving any
  range checks to the caller.
- Python raises ``OverflowError`` and ``ZeroDivisionError`` where IEEE
  ``pow`` returns an infinity. :func:`_power` translates those cases so a
  scale never raises for numeric input.
- Exponents must be integers. ``operator.index`` accepts ``int``, ``bool``
  and NumPy integer scalars while rejecting floats.
"""

from __future__ import annotations

import logging
import math
import operator
from typing import Callable

__all__ = ["Scale", "make_scale"]

# A scale takes an integer exponent and returns the magnitude for that step.
Scale = Callable[[int], float]


def _power(factor: float, exponent: int) -> float:
    """Return ``factor ** exponent`` following IEEE-754 ``pow`` semantics."""

    # The sign comes from the integer exponent; a float exponent loses its
    # parity beyond 2**53.  Negative factors (including -0.0) alternate sign.
    negative = math.copysign(1.0, factor) < 0 and exponent % 2 == 1
    size = abs(factor)
    try:
        magnitude = size ** exponent
    except ZeroDivisionError:
        # Zero raised to a negative power.
        magnitude = math.inf
    except OverflowError:
        try:
            float(exponent)
        except OverflowError:
            # The exponent itself does not fit in a float; only its sign
            # matters for the limit.
            magnitude = size ** (math.inf if exponent > 0 else -math.inf)
        else:
            magnitude = math.inf
        logging.debug(
            "Scale magnitude overflowed for factor %r and exponent %d", factor, exponent
        )

    return -magnitude if negative else magnitude


def make_scale(factor: float, base: float) -> Scale:
    """Return a function computing ``base * factor ** exponent``.

    Parameters
    ----------
    factor:
        Ratio between consecutive steps, for example ``1.25`` for a major
        third.  Values of ``0`` or below are accepted and simply follow
        floating-point arithmetic.
    base:
        Magnitude returned for exponent ``0``.

    Returns
    -------
    Scale
        Callable taking an integer exponent. Negative exponents divide the
        base by ``factor`` repeatedly. The callable carries ``factor`` and
        ``base`` attributes holding the coerced float values.

    Raises
    ------
    TypeError
        Raised by the returned scale when the exponent is not an integer.
    """

    factor = float(factor)
    base = float(base)

    def scale(exponent: int) -> float:
        return base * _power(factor, operator.index(exponent))

    scale.factor = factor
    scale.base = base
    scale.__qualname__ = f"make_scale({factor!r}, {base!r})"
    return scale
