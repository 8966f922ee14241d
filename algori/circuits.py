"""Adders and 8-bit circuits composed from logic gates."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields

from algori.gates import And, Not, Or, Xor


@dataclass
class HalfAdder:
    """Adds two bits, giving (sum, carry)."""

    input1: bool | None = None
    input2: bool | None = None

    def output(self) -> tuple[bool, bool]:
        return (
            Xor(self.input1, self.input2).output(),
            And(self.input1, self.input2).output(),
        )


@dataclass
class FullAdder:
    """Adds three bits, giving (sum, carry)."""

    input1: bool | None = None
    input2: bool | None = None
    input3: bool | None = None

    def output(self) -> tuple[bool, bool]:
        partial = Xor(self.input1, self.input2).output()
        carry_a = And(self.input1, self.input2).output()
        total = Xor(partial, self.input3).output()
        carry_b = And(partial, self.input3).output()
        return total, Or(carry_a, carry_b).output()


@dataclass
class EightBitSplitter:
    """Splits the low eight bits of an integer, least significant first."""

    input: int = 0

    def output(self) -> tuple[bool, bool, bool, bool, bool, bool, bool, bool]:
        return tuple(bool(self.input & (1 << bit)) for bit in range(8))  # type: ignore[return-value]


def _combine(bits: Iterable[bool | None]) -> int:
    return sum(1 << position for position, bit in enumerate(bits) if bit is True)


@dataclass
class EightBitMux:
    """Joins eight bits, input1 least significant, into an integer; None counts as 0."""

    input1: bool | None = None
    input2: bool | None = None
    input3: bool | None = None
    input4: bool | None = None
    input5: bool | None = None
    input6: bool | None = None
    input7: bool | None = None
    input8: bool | None = None

    def output(self) -> int:
        return _combine(getattr(self, f.name) for f in fields(self))


@dataclass
class EightBitAdder:
    """Ripple-carry adder: carry-in input1 plus input2 plus input3, giving (low 8 bits, carry)."""

    input1: bool | None = None
    input2: int = 0
    input3: int = 0

    def output(self) -> tuple[int, bool | None]:
        a_bits = EightBitSplitter(self.input2).output()
        b_bits = EightBitSplitter(self.input3).output()
        carry: bool | None = self.input1
        sums = []
        for a, b in zip(a_bits, b_bits):
            total, carry = FullAdder(carry, a, b).output()
            sums.append(total)
        return EightBitMux(*sums).output(), carry


@dataclass
class EightBitNot:
    """Inverts the low eight bits of an integer."""

    input: int = 0

    def output(self) -> int:
        bits = EightBitSplitter(self.input).output()
        return EightBitMux(*(Not(bit).output() for bit in bits)).output()


@dataclass
class EightBitOr:
    """Bitwise OR of the low eight bits of two integers."""

    input1: int = 0
    input2: int = 0

    def output(self) -> int:
        a_bits = EightBitSplitter(self.input1).output()
        b_bits = EightBitSplitter(self.input2).output()
        return EightBitMux(*(Or(a, b).output() for a, b in zip(a_bits, b_bits))).output()