"""Complex numbers with component-wise ordering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, order=True)
class Complex:
    """A complex number ordered by real part first, then imaginary part."""

    real: Any
    imag: Any

    def __add__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imag + other.imag)

    def __sub__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real - other.real, self.imag - other.imag)

    def __mul__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    def __truediv__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        denom = other.real * other.real + other.imag * other.imag
        return Complex(
            (self.real * other.real + self.imag * other.imag) / denom,
            (self.imag * other.real - self.real * other.imag) / denom,
        )