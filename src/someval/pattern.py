"""The shared pattern every SomeN family follows, and a checker for it.

Each arity is written out by hand in its own module. What keeps them
consistent is the convention encoded here:

- slots are labelled ``a``, ``b``, ``c``, ... in order;
- there is one variant per non-empty subset of slots, listed by subset size
  and then slot order, and named ``SomeN`` followed by the upper-cased labels;
- a variant's fields are exactly its subset's labels;
- every family exposes ``try_from_options``, ``from_options``, ``from_tuple``,
  ``from_<subset>`` constructors, ``into_options``, ``as_ref`` and one
  ``get_<label>`` accessor per slot, with identical semantics.

``check_family`` verifies a family against that convention, which is how a
new arity is validated before it is exported.
"""

from __future__ import annotations

import itertools
import string
from typing import Any

from someval._logging import get_logger
from someval.errors import AllSlotsEmptyError, FamilyConformanceError

__all__ = ['check_family', 'slot_labels', 'subsets', 'variant_name']

log = get_logger(__name__)

MAX_ARITY = len(string.ascii_lowercase)


def slot_labels(arity: int) -> tuple[str, ...]:
    """Return the slot labels for a family of the given arity.

    Raises:
        ValueError: If arity is not between 1 and 26.
    """
    if not 1 <= arity <= MAX_ARITY:
        raise ValueError(f'arity must be between 1 and {MAX_ARITY}, got {arity}')
    return tuple(string.ascii_lowercase[:arity])


def subsets(arity: int) -> tuple[tuple[str, ...], ...]:
    """Return every non-empty subset of slot labels in canonical order.

    Examples:
        >>> subsets(2)
        (('a',), ('b',), ('a', 'b'))
    """
    labels = slot_labels(arity)
    return tuple(
        combo for size in range(1, arity + 1) for combo in itertools.combinations(labels, size)
    )


def variant_name(family_name: str, subset: tuple[str, ...]) -> str:
    """Return the conventional class name of a variant, e.g. ``Some3AC``."""
    return family_name + ''.join(label.upper() for label in subset)


class _Marker:
    """Distinct slot value compared by identity."""

    __slots__ = ('label',)

    def __init__(self, label: str) -> None:
        self.label = label

    def __repr__(self) -> str:
        return f'<slot {self.label}>'


def check_family(family: type[Any]) -> None:
    """Verify that a SomeN family follows the shared pattern.

    Every variant is built with distinct marker values and pushed through
    each construction and decomposition path, so the checker exercises the
    real code rather than just inspecting names.

    Args:
        family: The family base class, e.g. ``Some3``.

    Raises:
        FamilyConformanceError: On the first deviation from the pattern.
    """
    name = family.__name__

    def fail(reason: str) -> FamilyConformanceError:
        log.warning('family_nonconforming', family=name, reason=reason)
        return FamilyConformanceError(name, reason)

    arity = family.arity
    labels = slot_labels(arity)
    if tuple(family.labels) != labels:
        raise fail(f'labels {family.labels!r} != {labels!r}')

    expected = subsets(arity)
    variants = family.variants()
    if len(variants) != len(expected):
        raise fail(f'{len(variants)} variants, expected {len(expected)}')

    markers = {label: _Marker(label) for label in labels}
    empty = (None,) * arity

    for variant, subset in zip(variants, expected, strict=True):
        if variant.__name__ != variant_name(name, subset):
            raise fail(f'variant {variant.__name__} should be named {variant_name(name, subset)}')
        if not issubclass(variant, family):
            raise fail(f'{variant.__name__} is not a subclass of {name}')
        if tuple(variant.slots) != subset:
            raise fail(f'{variant.__name__}.slots is {variant.slots!r}, expected {subset!r}')
        fields = tuple(variant.__struct_fields__)
        if fields != subset:
            raise fail(f'{variant.__name__} fields are {fields!r}, expected {subset!r}')

        args = [markers[label] for label in subset]
        value = variant(*args)
        options = tuple(markers[label] if label in subset else None for label in labels)

        if value.into_options() != options:
            raise fail(f'{variant.__name__}.into_options() is {value.into_options()!r}')
        for index, label in enumerate(labels):
            if getattr(value, f'get_{label}')() is not options[index]:
                raise fail(f'{variant.__name__}.get_{label}() disagrees with into_options()')

        constructor = getattr(family, 'from_' + ''.join(subset), None)
        if constructor is None:
            raise fail(f'missing constructor from_{"".join(subset)}')
        if constructor(*args) != value:
            raise fail(f'from_{"".join(subset)} does not build {variant.__name__}')

        rebuilt = family.try_from_options(*options)
        if type(rebuilt) is not variant or rebuilt != value:
            raise fail(f'try_from_options{options!r} gave {rebuilt!r}')
        if family.from_options(*options) != value:
            raise fail(f'from_options{options!r} does not build {variant.__name__}')

        view = value.as_ref()
        if type(view) is not variant or view.into_options() != options:
            raise fail(f'{variant.__name__}.as_ref() changed the variant or its slots')

        log.debug('variant_checked', family=name, variant=variant.__name__, slots=subset)

    if family.try_from_options(*empty) is not None:
        raise fail('try_from_options accepted all-empty input')
    try:
        family.from_options(*empty)
    except AllSlotsEmptyError:
        pass
    else:
        raise fail('from_options accepted all-empty input')

    full = family.from_tuple(tuple(markers[label] for label in labels))
    if type(full) is not variants[-1]:
        raise fail(f'from_tuple built {type(full).__name__}, expected {variants[-1].__name__}')

    log.info('family_conforms', family=name, arity=arity, variants=len(variants))
