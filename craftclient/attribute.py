"""Entity attributes and the modifiers that adjust them."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field


class ModifierOperation(enum.IntEnum):
    """How a modifier changes an attribute's value, in order of application."""

    ADD = 0
    ADD_PERCENT = 1
    MULTIPLY_PERCENT = 2


@dataclass(frozen=True)
class Modifier:
    """A single change to an attribute, identified by a UUID."""

    uuid: uuid.UUID
    amount: float
    operation: ModifierOperation


@dataclass
class Attribute:
    """A named base value together with the modifiers applied to it."""

    key: str
    base_amount: float
    modifiers: list[Modifier] = field(default_factory=list)

    def get_amount(self) -> float:
        """Return the value after every modifier has been applied.

        Additions come first, then percentages of the added value, and
        multiplications last.
        """
        amount = self.base_amount + sum(
            m.amount for m in self.modifiers if m.operation is ModifierOperation.ADD
        )

        added = amount
        for modifier in self.modifiers:
            if modifier.operation is ModifierOperation.ADD_PERCENT:
                amount += added * modifier.amount

        for modifier in self.modifiers:
            if modifier.operation is ModifierOperation.MULTIPLY_PERCENT:
                amount *= 1 + modifier.amount

        return amount

    def add_modifier(self, modifier: Modifier) -> None:
        self.modifiers.append(modifier)

    def copy(self) -> Attribute:
        """Return an independent copy of this attribute."""
        return Attribute(self.key, self.base_amount, list(self.modifiers))