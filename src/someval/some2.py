"""Some2 type: one or both of two values, A and/or B."""

from __future__ import annotations

from typing import ClassVar, Self

import msgspec

from someval.errors import AllSlotsEmptyError

__all__ = ['Some2', 'Some2A', 'Some2AB', 'Some2B']


class Some2[A, B](msgspec.Struct, frozen=True, gc=False):
    """At least one of two values of distinct types A and B.

    Some2 is the closed sum of its three variants, one per non-empty
    combination of slots:

    - ``Some2A(a)``: only A is present
    - ``Some2B(b)``: only B is present
    - ``Some2AB(a, b)``: both are present

    There is no variant with neither slot, so an "all absent" value cannot
    be built. Neither the base class nor any subclass without slots can be
    instantiated; the base carries the family-level constructors and serves
    as the annotation type.

    None marks an absent slot in the tuple of optionals, so a slot can never
    hold None: ``Some2A(None)`` raises TypeError. Wrap such values (for
    example in a one-element tuple) if "present but None" must be kept.

    Examples:
        >>> nid = Some2.try_from_options(42, None)
        >>> nid
        Some2A(a=42)
        >>> nid.into_options()
        (42, None)
        >>> Some2.from_tuple((13, 'Bob'))
        Some2AB(a=13, b='Bob')
    """

    arity: ClassVar[int] = 2
    labels: ClassVar[tuple[str, ...]] = ('a', 'b')
    slots: ClassVar[tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        if not type(self).slots:
            raise TypeError(f'{type(self).__name__} has no slots, use one of the Some2 variants')
        if any(value is None for value in msgspec.structs.astuple(self)):
            raise TypeError(f'{type(self).__name__} slots cannot hold None')

    @classmethod
    def variants(cls) -> tuple[type[Some2[A, B]], ...]:
        """Return the variant classes in canonical subset order."""
        return (Some2A, Some2B, Some2AB)

    @staticmethod
    def try_from_options(a: A | None, b: B | None) -> Some2[A, B] | None:
        """Build the variant matching which of ``a`` and ``b`` are not None.

        Returns:
            The matching variant, or None if both inputs are None.
        """
        match (a, b):
            case (None, None):
                return None
            case (_, None):
                return Some2A(a)
            case (None, _):
                return Some2B(b)
            case _:
                return Some2AB(a, b)

    @staticmethod
    def from_options(a: A | None, b: B | None) -> Some2[A, B]:
        """Build the variant matching which inputs are present.

        Raises:
            AllSlotsEmptyError: If both inputs are None.
        """
        value = Some2.try_from_options(a, b)
        if value is None:
            raise AllSlotsEmptyError(Some2.arity)
        return value

    @staticmethod
    def from_tuple(values: tuple[A, B]) -> Some2AB[A, B]:
        """Build the all-slots variant from a fully populated pair."""
        a, b = values
        return Some2AB(a, b)

    @staticmethod
    def from_a(a: A) -> Some2A[A, B]:
        return Some2A(a)

    @staticmethod
    def from_b(b: B) -> Some2B[A, B]:
        return Some2B(b)

    @staticmethod
    def from_ab(a: A, b: B) -> Some2AB[A, B]:
        return Some2AB(a, b)

    def into_options(self) -> tuple[A | None, B | None]:
        """Decompose into a pair of optional values.

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


class Some2A[A, B](Some2[A, B], frozen=True, gc=False):
    """Only the A slot is present."""

    slots: ClassVar[tuple[str, ...]] = ('a',)

    a: A

    def into_options(self) -> tuple[A, None]:
        return (self.a, None)


class Some2B[A, B](Some2[A, B], frozen=True, gc=False):
    """Only the B slot is present."""

    slots: ClassVar[tuple[str, ...]] = ('b',)

    b: B

    def into_options(self) -> tuple[None, B]:
        return (None, self.b)


class Some2AB[A, B](Some2[A, B], frozen=True, gc=False):
    """Both slots are present."""

    slots: ClassVar[tuple[str, ...]] = ('a', 'b')

    a: A
    b: B

    def into_options(self) -> tuple[A, B]:
        return (self.a, self.b)
