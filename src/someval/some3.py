"""Some3 type: any non-empty combination of three values A, B and C."""

from __future__ import annotations

from typing import ClassVar, Self

import msgspec

from someval.errors import AllSlotsEmptyError

__all__ = [
    'Some3',
    'Some3A',
    'Some3AB',
    'Some3ABC',
    'Some3AC',
    'Some3B',
    'Some3BC',
    'Some3C',
]


class Some3[A, B, C](msgspec.Struct, frozen=True, gc=False):
    """At least one of three values of distinct types A, B and C.

    There is one variant for each of the seven non-empty combinations of
    slots, named after the slots it holds (``Some3A`` ... ``Some3ABC``).
    Neither the base class nor any subclass without slots can be
    instantiated.

    None marks an absent slot in the tuple of optionals, so a slot can never
    hold None: ``Some3C(None)`` raises TypeError.

    Examples:
        >>> val = Some3AC(42, False)
        >>> val.into_options()
        (42, None, False)
        >>> Some3.try_from_options(None, None, None) is None
        True
    """

    arity: ClassVar[int] = 3
    labels: ClassVar[tuple[str, ...]] = ('a', 'b', 'c')
    slots: ClassVar[tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        if not type(self).slots:
            raise TypeError(f'{type(self).__name__} has no slots, use one of the Some3 variants')
        if any(value is None for value in msgspec.structs.astuple(self)):
            raise TypeError(f'{type(self).__name__} slots cannot hold None')

    @classmethod
    def variants(cls) -> tuple[type[Some3[A, B, C]], ...]:
        """Return the variant classes in canonical subset order."""
        return (Some3A, Some3B, Some3C, Some3AB, Some3AC, Some3BC, Some3ABC)

    @staticmethod
    def try_from_options(a: A | None, b: B | None, c: C | None) -> Some3[A, B, C] | None:
        """Build the variant matching which inputs are not None.

        Returns:
            The matching variant, or None if all three inputs are None.
        """
        match (a, b, c):
            case (None, None, None):
                return None
            case (_, None, None):
                return Some3A(a)
            case (None, _, None):
                return Some3B(b)
            case (None, None, _):
                return Some3C(c)
            case (_, _, None):
                return Some3AB(a, b)
            case (_, None, _):
                return Some3AC(a, c)
            case (None, _, _):
                return Some3BC(b, c)
            case _:
                return Some3ABC(a, b, c)

    @staticmethod
    def from_options(a: A | None, b: B | None, c: C | None) -> Some3[A, B, C]:
        """Build the variant matching which inputs are present.

        Raises:
            AllSlotsEmptyError: If all three inputs are None.
        """
        value = Some3.try_from_options(a, b, c)
        if value is None:
            raise AllSlotsEmptyError(Some3.arity)
        return value

    @staticmethod
    def from_tuple(values: tuple[A, B, C]) -> Some3ABC[A, B, C]:
        """Build the all-slots variant from a fully populated triple."""
        a, b, c = values
        return Some3ABC(a, b, c)

    @staticmethod
    def from_a(a: A) -> Some3A[A, B, C]:
        return Some3A(a)

    @staticmethod
    def from_b(b: B) -> Some3B[A, B, C]:
        return Some3B(b)

    @staticmethod
    def from_c(c: C) -> Some3C[A, B, C]:
        return Some3C(c)

    @staticmethod
    def from_ab(a: A, b: B) -> Some3AB[A, B, C]:
        return Some3AB(a, b)

    @staticmethod
    def from_ac(a: A, c: C) -> Some3AC[A, B, C]:
        return Some3AC(a, c)

    @staticmethod
    def from_bc(b: B, c: C) -> Some3BC[A, B, C]:
        return Some3BC(b, c)

    @staticmethod
    def from_abc(a: A, b: B, c: C) -> Some3ABC[A, B, C]:
        return Some3ABC(a, b, c)

    def into_options(self) -> tuple[A | None, B | None, C | None]:
        """Decompose into a triple of optional values.

        Present slots carry their value, absent slots are None.
        """
        raise NotImplementedError

    def as_ref(self) -> Self:
        """Return a view of this value sharing the same slot objects.

        Values are frozen, so the view is the value itself: the variant and
        the identity of every slot are preserved.
        """
        return self

    def get_a(self) -> A | None:
        """Return the A slot, or None if this variant does not hold one."""
        return self.into_options()[0]

    def get_b(self) -> B | None:
        """Return the B slot, or None if this variant does not hold one."""
        return self.into_options()[1]

    def get_c(self) -> C | None:
        """Return the C slot, or None if this variant does not hold one."""
        return self.into_options()[2]


class Some3A[A, B, C](Some3[A, B, C], frozen=True, gc=False):
    """Only the A slot is present."""

    slots: ClassVar[tuple[str, ...]] = ('a',)

    a: A

    def into_options(self) -> tuple[A, None, None]:
        return (self.a, None, None)


class Some3B[A, B, C](Some3[A, B, C], frozen=True, gc=False):
    """Only the B slot is present."""

    slots: ClassVar[tuple[str, ...]] = ('b',)

    b: B

    def into_options(self) -> tuple[None, B, None]:
        return (None, self.b, None)


class Some3C[A, B, C](Some3[A, B, C], frozen=True, gc=False):
    """Only the C slot is present."""

    slots: ClassVar[tuple[str, ...]] = ('c',)

    c: C

    def into_options(self) -> tuple[None, None, C]:
        return (None, None, self.c)


class Some3AB[A, B, C](Some3[A, B, C], frozen=True, gc=False):
    """The A and B slots are present."""

    slots: ClassVar[tuple[str, ...]] = ('a', 'b')

    a: A
    b: B

    def into_options(self) -> tuple[A, B, None]:
        return (self.a, self.b, None)


class Some3AC[A, B, C](Some3[A, B, C], frozen=True, gc=False):
    """The A and C slots are present."""

    slots: ClassVar[tuple[str, ...]] = ('a', 'c')

    a: A
    c: C

    def into_options(self) -> tuple[A, None, C]:
        return (self.a, None, self.c)


class Some3BC[A, B, C](Some3[A, B, C], frozen=True, gc=False):
    """The B and C slots are present."""

    slots: ClassVar[tuple[str, ...]] = ('b', 'c')

    b: B
    c: C

    def into_options(self) -> tuple[None, B, C]:
        return (None, self.b, self.c)


class Some3ABC[A, B, C](Some3[A, B, C], frozen=True, gc=False):
    """All three slots are present."""

    slots: ClassVar[tuple[str, ...]] = ('a', 'b', 'c')

    a: A
    b: B
    c: C

    def into_options(self) -> tuple[A, B, C]:
        return (self.a, self.b, self.c)
