"""Error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'ALL_SLOTS_EMPTY_MESSAGE',
    'AllSlotsEmpty',
    'AllSlotsEmptyError',
    'FamilyConformanceError',
]

ALL_SLOTS_EMPTY_MESSAGE = 'no value of any accepted type present'


# --- Construction Errors ---


class AllSlotsEmpty(msgspec.Struct, frozen=True, gc=False):
    """Every optional slot was None - struct variant for Result[T, AllSlotsEmpty]."""

    arity: int

    def to_exception(self) -> AllSlotsEmptyError:
        """Convert to exception for raise-based code."""
        return AllSlotsEmptyError(self.arity)


class AllSlotsEmptyError(ValueError):
    """Every optional slot was None - exception variant.

    Raised by ``SomeN.from_options`` when none of the N inputs carries a
    value. The message is always ``ALL_SLOTS_EMPTY_MESSAGE``.
    """

    def __init__(self, arity: int) -> None:
        self.arity = arity
        super().__init__(ALL_SLOTS_EMPTY_MESSAGE)

    def to_struct(self) -> AllSlotsEmpty:
        """Convert to struct for Result-based code."""
        return AllSlotsEmpty(self.arity)


# --- Pattern Errors ---


class FamilyConformanceError(TypeError):
    """A SomeN family does not follow the shared arity pattern."""

    def __init__(self, family: str, reason: str) -> None:
        self.family = family
        self.reason = reason
        super().__init__(f'{family}: {reason}')
