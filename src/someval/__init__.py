"""someval: groups of optional values where at least one value is present.

A ``SomeN`` value holds one or more of N values of distinct types. It replaces
N independent optional attributes plus a runtime "at least one is set" check:
the "all absent" state has no variant, so it cannot be constructed.

Flat imports (preferred):
    from someval import Some2, Some2A, Some2B, Some2AB
    from someval import Some3, Some3AC, AllSlotsEmptyError

Submodule imports (for organization):
    from someval.some2 import Some2
    from someval.some3 import Some3
    from someval.pattern import check_family
"""

from someval._logging import configure_logging, get_logger
from someval.errors import (
    ALL_SLOTS_EMPTY_MESSAGE,
    AllSlotsEmpty,
    AllSlotsEmptyError,
    FamilyConformanceError,
)
from someval.pattern import check_family, slot_labels, subsets, variant_name
from someval.some2 import Some2, Some2A, Some2AB, Some2B
from someval.some3 import (
    Some3,
    Some3A,
    Some3AB,
    Some3ABC,
    Some3AC,
    Some3B,
    Some3BC,
    Some3C,
)

__all__ = [
    # Errors
    'ALL_SLOTS_EMPTY_MESSAGE',
    'AllSlotsEmpty',
    'AllSlotsEmptyError',
    'FamilyConformanceError',
    # Some2
    'Some2',
    'Some2A',
    'Some2AB',
    'Some2B',
    # Some3
    'Some3',
    'Some3A',
    'Some3AB',
    'Some3ABC',
    'Some3AC',
    'Some3B',
    'Some3BC',
    'Some3C',
    # Pattern
    'check_family',
    'slot_labels',
    'subsets',
    'variant_name',
    # Logging
    'configure_logging',
    'get_logger',
]
