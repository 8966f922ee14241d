"""Discrete Fourier transform and greatest common divisor."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from algori.complex import Complex


def dft(signal: Sequence[float]) -> list[Complex]:
    """Return the discrete Fourier transform of a real signal."""
    n = len(signal)
    spectrum = []
    for k in range(n):
        total = Complex(0.0, 0.0)
        for t, sample in enumerate(signal):
            angle = -2.0 * math.pi * k * t / n
            total = total + Complex(float(sample), 0.0) * Complex(
                math.cos(angle), math.sin(angle)
            )
        spectrum.append(total)
    return spectrum


def _truncated_remainder(a: Any, b: Any) -> Any:
    """Remainder whose sign follows the dividend."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def gcd(a: Any, b: Any) -> Any:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, _truncated_remainder(a, b)
    return a