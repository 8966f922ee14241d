"""Logic gates built from NAND, plus a few switching elements.

Inputs are ``True``, ``False`` or ``None``; a NAND input counts as high only
when it is ``True``.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass


class LogicGate(ABC):
    """Anything that produces a single logic level."""

    @abstractmethod
    def output(self) -> bool | None:
        """Return the gate's output level."""


@dataclass
class Nand(LogicGate):
    """Low only when both inputs are high."""

    input1: bool | None = None
    input2: bool | None = None

    def output(self) -> bool:
        return not (self.input1 is True and self.input2 is True)


@dataclass
class Not(LogicGate):
    """Inverter: a NAND with both inputs tied together."""

    input: bool | None = None

    def output(self) -> bool:
        return Nand(self.input, self.input).output()


@dataclass
class Or(LogicGate):
    """High when either input is high; three NAND gates."""

    input1: bool | None = None
    input2: bool | None = None

    def output(self) -> bool:
        a = Nand(self.input1, self.input1).output()
        b = Nand(self.input2, self.input2).output()
        return Nand(a, b).output()


@dataclass
class Nor(LogicGate):
    """High only when both inputs are low; four NAND gates."""

    input1: bool | None = None
    input2: bool | None = None

    def output(self) -> bool:
        either = Or(self.input1, self.input2).output()
        return Nand(either, either).output()


@dataclass
class And(LogicGate):
    """High only when both inputs are high; two NAND gates."""

    input1: bool | None = None
    input2: bool | None = None

    def output(self) -> bool:
        a = Nand(self.input1, self.input2).output()
        return Nand(a, a).output()


@dataclass
class HighLevel(LogicGate):
    """Constant high."""

    def output(self) -> bool:
        return True


@dataclass
class LowLevel(LogicGate):
    """Constant low."""

    def output(self) -> bool:
        return False


@dataclass
class Xor(LogicGate):
    """High when the inputs differ."""

    input1: bool | None = None
    input2: bool | None = None

    def output(self) -> bool:
        both = And(self.input1, self.input2).output()
        neither = Nor(self.input1, self.input2).output()
        return Nor(both, neither).output()


@dataclass
class ThreeOr(LogicGate):
    """High when any of three inputs is high."""

    input1: bool | None = None
    input2: bool | None = None
    input3: bool | None = None

    def output(self) -> bool:
        a = Or(self.input1, self.input2).output()
        b = Or(self.input2, self.input3).output()
        return Or(a, b).output()


@dataclass
class ThreeAnd(LogicGate):
    """High only when all three inputs are high."""

    input1: bool | None = None
    input2: bool | None = None
    input3: bool | None = None

    def output(self) -> bool:
        a = And(self.input1, self.input2).output()
        b = And(self.input2, self.input3).output()
        return And(a, b).output()


@dataclass
class Xnor(LogicGate):
    """High when the inputs are the same."""

    input1: bool | None = None
    input2: bool | None = None

    def output(self) -> bool:
        return Not(Xor(self.input1, self.input2).output()).output()


@dataclass
class Switch(LogicGate):
    """Passes its input through when switched on, otherwise outputs None."""

    switch: bool | None = None
    input: bool | None = None

    def output(self) -> bool | None:
        return self.input if self.switch is True else None


@dataclass
class DelayLine(LogicGate):
    """Outputs its input after a delay given in milliseconds."""

    delay: int = 0
    input: bool | None = None

    def output(self) -> bool | None:
        time.sleep(self.delay / 1000)
        return self.input


@dataclass
class EightSwitch:
    """Passes an 8-bit value through when switched on, otherwise outputs None."""

    switch: bool | None = None
    input: int = 0

    def output(self) -> int | None:
        return self.input if self.switch is True else None


@dataclass
class DataSelector:
    """Outputs input2 when input1 is low, input3 when input1 is high."""

    input1: bool | None = None
    input2: int = 0
    input3: int = 0

    def output(self) -> int:
        return self.input3 if self.input1 is True else self.input2