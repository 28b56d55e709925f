"""Evaluate scales over many exponents.

A *ladder* is the list of magnitudes a scale yields for a run of
exponents, for example the heading sizes of a document.  ``ladder``
evaluates any scale over an iterable of exponents while ``steps`` covers
the common ``range`` case.  ``nearest_step`` goes the other way and finds
the exponent whose magnitude lies closest to a target size.

Example
-------
>>> from modular_scale.intervals import perfect_octave
>>> steps(perfect_octave(12), -1, 3)
[6.0, 12.0, 24.0, 48.0]
>>> nearest_step(perfect_octave(12), 40)
2

Design Notes
------------
- ``numpy`` is optional (the ``numpy`` extra).  NumPy arrays of exponents
  are evaluated in a single vectorised ``numpy.power`` call; every other
  iterable falls back to calling the scale once per exponent.
- The vectorised path needs the ``factor`` and ``base`` attributes that
  :func:`modular_scale.scale.make_scale` attaches.  Arbitrary callables
  always use the pure Python path.
- Floating-point warnings are silenced on the vectorised path so overflow
  yields ``inf`` quietly, matching the scalar behaviour.
"""

from __future__ import annotations

import logging
import math
import operator
from typing import Iterable, List

try:
    import numpy as np
except Exception:  # pragma: no cover - optional dependency
    # Without NumPy every input takes the pure Python path.
    np = None

from .scale import Scale

__all__ = ["ladder", "steps", "nearest_step"]


def ladder(scale: Scale, exponents: Iterable[int]) -> Iterable[float]:
    """Return ``scale(n)`` for every ``n`` in ``exponents``.

    Parameters
    ----------
    scale:
        Function produced by :func:`~modular_scale.scale.make_scale` or any
        callable mapping an integer exponent to a magnitude.
    exponents:
        Integer exponents. May be a list, ``range``, generator or, when
        NumPy is installed, an integer ``numpy.ndarray``.

    Returns
    -------
    Iterable[float]
        A ``numpy.ndarray`` of ``float64`` when ``exponents`` is an array
        and ``scale`` exposes its factor and base, otherwise a new list.

    Raises
    ------
    TypeError
        If ``exponents`` contains non-integer values.
    """

    factor = getattr(scale, "factor", None)
    base = getattr(scale, "base", None)
    if (
        np is not None
        and isinstance(exponents, np.ndarray)
        and factor is not None
        and base is not None
    ):
        if exponents.dtype.kind not in "biu":
            raise TypeError(
                f"exponent array must have an integer dtype, got {exponents.dtype}"
            )
        if exponents.dtype.kind == "b":
            # Booleans count as 0 and 1, as ``operator.index`` does for scalars.
            exponents = exponents.astype(np.int64)
        # ``float64`` exponents keep ``numpy.power`` from rejecting negative
        # integers and from wrapping on overflow.  The sign is taken from the
        # integer array because the cast loses parity beyond 2**53.
        with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
            magnitudes = np.power(
                np.float64(abs(factor)), exponents.astype(np.float64)
            )
        if math.copysign(1.0, factor) < 0:
            magnitudes = np.where(exponents % 2 == 1, -magnitudes, magnitudes)
        return base * magnitudes

    return [scale(n) for n in exponents]


def steps(scale: Scale, start: int, stop: int) -> List[float]:
    """Return magnitudes for exponents ``start`` up to but excluding ``stop``.

    Raises
    ------
    ValueError
        If ``stop`` is lower than ``start``.
    """

    start = operator.index(start)
    stop = operator.index(stop)
    if stop < start:
        logging.error("Invalid step range: %d to %d", start, stop)
        raise ValueError(f"stop ({stop}) must not be lower than start ({start})")
    return list(ladder(scale, range(start, stop)))


def nearest_step(scale: Scale, value: float) -> int:
    """Return the exponent whose magnitude is closest to ``value``.

    Distance is measured on a logarithmic axis. A ``value`` exactly halfway
    between two steps in ratio terms rounds up to the higher exponent.

    Parameters
    ----------
    scale:
        Function produced by :func:`~modular_scale.scale.make_scale`; its
        ``factor`` and ``base`` attributes drive the calculation.
    value:
        Target magnitude.

    Raises
    ------
    ValueError
        If ``value`` or the scale's base is not positive and finite, or if
        the factor is not positive or equals ``1``.  No single exponent
        exists in those cases.
    TypeError
        If ``scale`` was not created by ``make_scale``.
    """

    try:
        factor = scale.factor
        base = scale.base
    except AttributeError:
        raise TypeError("nearest_step requires a scale created by make_scale")

    if not 0 < value < math.inf:
        logging.error("Target magnitude must be positive and finite: %r", value)
        raise ValueError(f"value must be positive and finite, got {value!r}")
    if not 0 < base < math.inf:
        logging.error("Scale base must be positive and finite: %r", base)
        raise ValueError(f"scale base must be positive and finite, got {base!r}")
    if not factor > 0 or factor == 1:
        logging.error("Scale factor has no inverse: %r", factor)
        raise ValueError(f"scale factor must be positive and not 1, got {factor!r}")

    # Subtracting logarithms avoids the quotient under- or overflowing.
    position = (math.log(value) - math.log(base)) / math.log(factor)
    # Halves round up, not to even.
    return math.floor(position + 0.5)
