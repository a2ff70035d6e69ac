"""Truncated discrete Fourier transform of a drawn path.

The path is treated as a sequence of complex samples ``x + iy`` measured from
a fixed reference point (normally the canvas centre). Only the first K
non-negative frequency bins are evaluated, each normalized by ``1/N``, and the
resulting coefficients are ranked by amplitude.
"""

import cmath
import logging
import math
from collections.abc import Iterable
from typing import Union

import numpy as np

from fourierdraw import InvalidInputError
from fourierdraw.models import CoefficientSet, DrawnPath, FourierCoefficient, Point

logger = logging.getLogger(__name__)

PathLike = Union[DrawnPath, Iterable[Point], Iterable[tuple[float, float]]]


def canvas_origin(width: float, height: float) -> tuple[float, float]:
    """Reference point used to centre samples on a canvas of the given size."""
    return (width / 2, height / 2)


def _as_array(path: PathLike) -> np.ndarray:
    """Convert a path into an ``(N, 2)`` float array.

    Raises:
        InvalidInputError: If any sample is not a numeric ``(x, y)`` pair
    """
    try:
        pairs = [p.as_tuple() if isinstance(p, Point) else tuple(p) for p in path]
        if not pairs:
            return np.empty((0, 2), dtype=float)
        samples = np.asarray(pairs, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Path samples must be numeric (x, y) pairs: {e}") from e

    if samples.ndim != 2 or samples.shape[1] != 2:
        raise InvalidInputError(
            f"Path samples must be (x, y) pairs, got array of shape {samples.shape}"
        )
    return samples



def _validate_count(num_coefficients) -> int:
    if isinstance(num_coefficients, bool) or not isinstance(num_coefficients, (int, np.integer)):
        raise InvalidInputError(
            f"Coefficient count must be an integer, got {type(num_coefficients).__name__}"
        )
    if num_coefficients < 1:
        raise InvalidInputError(f"Coefficient count must be >= 1, got {num_coefficients}")
    return int(num_coefficients)


def compute_coefficients(
    path: PathLike,
    num_coefficients: int,
    origin: tuple[float, float] = (0.0, 0.0),
) -> CoefficientSet:
    """Compute the first ``num_coefficients`` DFT bins of a path.

    For each bin ``k`` in ``0..K-1`` with ``phi = 2*pi*k*n/N``::

        re = sum(x[n]*cos(phi) + y[n]*sin(phi)) / N
        im = sum(-x[n]*sin(phi) + y[n]*cos(phi)) / N

    where ``x``/``y`` are the samples translated by ``origin``. A K larger
    than N is accepted and simply evaluates aliased bins.

    Args:
        path: Ordered samples in canvas coordinates
        num_coefficients: Number of frequency bins to compute (K)
        origin: Fixed reference point subtracted from every sample

    Returns:
        CoefficientSet: Exactly K coefficients, sorted by descending amplitude
        with a stable sort so equal amplitudes keep ascending ``freq``

    Raises:
        InvalidInputError: If the path is empty or K is not a positive integer
    """
    k_count = _validate_count(num_coefficients)
    samples = _as_array(path)
    n_samples = len(samples)
    if n_samples == 0:
        raise InvalidInputError("Path must contain at least one point")

    x = samples[:, 0] - origin[0]
    y = samples[:, 1] - origin[1]

    n = np.arange(n_samples)
    k = np.arange(k_count).reshape((k_count, 1))
    phi = 2 * np.pi * k * n / n_samples
    cos_phi = np.cos(phi)
    sin_phi = np.sin(phi)

    re = (x * cos_phi + y * sin_phi).sum(axis=1) / n_samples
    im = (-x * sin_phi + y * cos_phi).sum(axis=1) / n_samples
    amp = np.sqrt(re * re + im * im)
    phase = np.arctan2(im, re)

    # Stable, so ties stay in frequency order.
    order = np.argsort(-amp, kind="stable")

    coefficients = tuple(
        FourierCoefficient(
            re=float(re[i]),
            im=float(im[i]),
            freq=int(i),
            amp=float(amp[i]),
            phase=float(phase[i]),
        )
        for i in order
    )

    logger.debug(
        "Computed %d coefficients over %d samples (largest amp %.4f at freq %d)",
        k_count,
        n_samples,
        coefficients[0].amp,
        coefficients[0].freq,
    )

    return CoefficientSet(
        coefficients=coefficients,
        path_length=n_samples,
        origin=(float(origin[0]), float(origin[1])),
    )


def evaluate(coefficients: CoefficientSet, t: float, scale: float = 1.0) -> complex:
    """Sum the rotating vectors at time ``t``.

    The result is relative to the reference origin of the coefficient set.
    At ``t = 0`` with every bin of an N-point path this recovers the first
    sample.
    """
    total = sum(c.value * cmath.exp(1j * c.freq * t) for c in coefficients)
    return complex(total) * scale


def reconstruction_error(path: PathLike, coefficients: CoefficientSet) -> float:
    """Root-mean-square distance between a path and its truncated series.

    Sample ``n`` is compared with :func:`evaluate` at ``t = 2*pi*n/N``, shifted
    back by the coefficient set's origin. Zero (up to rounding) when every
    bin is present.
    """
    samples = _as_array(path)
    n_samples = len(samples)
    if n_samples == 0:
        raise InvalidInputError("Path must contain at least one point")

    origin = complex(*coefficients.origin)
    squared = 0.0
    for n, (x, y) in enumerate(samples):
        z = evaluate(coefficients, 2 * math.pi * n / n_samples) + origin
        squared += abs(z - complex(x, y)) ** 2
    return math.sqrt(squared / n_samples)
