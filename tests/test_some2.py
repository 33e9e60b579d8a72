"""Tests for Some2 (Some2A, Some2B, Some2AB)."""

import copy

import msgspec
import pytest
from hypothesis import given

from someval import ALL_SLOTS_EMPTY_MESSAGE, AllSlotsEmptyError, Some2, Some2A, Some2AB, Some2B
from tests.strategies import integers, nonempty_option_pairs, some2_values, texts


class TestSome2Creation:
    """Tests for direct variant construction."""

    def test_a_creation(self):
        """Some2A holds only the A slot."""
        nid = Some2A(42)
        assert nid.a == 42

    def test_b_creation(self):
        """Some2B holds only the B slot."""
        nid = Some2B('Alice')
        assert nid.b == 'Alice'

    def test_ab_creation(self):
        """Some2AB holds both slots in slot order."""
        nid = Some2AB(13, 'Bob')
        assert nid.a == 13
        assert nid.b == 'Bob'

    def test_variants_are_some2(self):
        """Every variant is an instance of the Some2 family."""
        for value in (Some2A(1), Some2B('x'), Some2AB(1, 'x')):
            assert isinstance(value, Some2)

    def test_falsy_values_are_present(self):
        """Falsy values still count as present."""
        assert Some2A(0).into_options() == (0, None)
        assert Some2B('').into_options() == (None, '')

    def test_variant_is_frozen(self):
        """Variants are immutable."""
        nid = Some2A(42)
        with pytest.raises(AttributeError):
            nid.a = 43  # type: ignore[misc]

    def test_missing_slot_raises(self):
        """A variant requires a value for each of its slots."""
        with pytest.raises(TypeError):
            Some2AB(13)  # type: ignore[call-arg]

    def test_none_slot_raises(self):
        """None is the absent marker and cannot be a slot value."""
        with pytest.raises(TypeError, match='cannot hold None'):
            Some2A(None)
        with pytest.raises(TypeError, match='cannot hold None'):
            Some2AB(13, None)

    def test_base_cannot_be_instantiated(self):
        """The empty base class would be an all-absent value."""
        with pytest.raises(TypeError, match='Some2 has no slots'):
            Some2()

    def test_slotless_subclass_cannot_be_instantiated(self):
        """A subclass adding no slots is rejected like the base."""

        class Pair(Some2):
            pass

        with pytest.raises(TypeError, match='Pair has no slots'):
            Pair()

    def test_from_subset_constructors(self):
        """from_<subset> builds the matching variant."""
        assert Some2.from_a(42) == Some2A(42)
        assert Some2.from_b('Alice') == Some2B('Alice')
        assert Some2.from_ab(13, 'Bob') == Some2AB(13, 'Bob')

    def test_variants_order(self):
        """variants() lists every subset once, by size then slot order."""
        assert Some2.variants() == (Some2A, Some2B, Some2AB)
        assert [v.slots for v in Some2.variants()] == [('a',), ('b',), ('a', 'b')]

    def test_metadata(self):
        """The family records its arity and labels."""
        assert Some2.arity == 2
        assert Some2.labels == ('a', 'b')


class TestSome2FromOptions:
    """Tests for try_from_options and from_options."""

    def test_a_only(self):
        assert Some2.try_from_options(42, None) == Some2A(42)

    def test_b_only(self):
        assert Some2.try_from_options(None, 'Alice') == Some2B('Alice')

    def test_both(self):
        assert Some2.try_from_options(13, 'Bob') == Some2AB(13, 'Bob')

    def test_neither_is_none(self):
        """All-empty input has no variant."""
        assert Some2.try_from_options(None, None) is None

    def test_from_options_success(self):
        assert Some2.from_options(42, None) == Some2A(42)

    def test_from_options_all_empty_raises(self):
        """from_options raises AllSlotsEmptyError with the fixed message."""
        with pytest.raises(AllSlotsEmptyError, match=ALL_SLOTS_EMPTY_MESSAGE) as exc_info:
            Some2.from_options(None, None)
        assert exc_info.value.arity == 2

    def test_all_empty_error_is_value_error(self):
        with pytest.raises(ValueError):
            Some2.from_options(None, None)

    @given(nonempty_option_pairs)
    def test_nonempty_always_succeeds(self, opts):
        """Any combination other than (None, None) is accepted."""
        assert Some2.try_from_options(*opts) is not None


class TestSome2FromTuple:
    """Tests for total construction from a fully populated pair."""

    def test_from_tuple(self):
        assert Some2.from_tuple((13, 'Bob')) == Some2AB(13, 'Bob')

    def test_from_tuple_decomposes(self):
        assert Some2.from_tuple((13, 'Bob')).into_options() == (13, 'Bob')

    @given(integers, texts)
    def test_from_tuple_round_trip(self, a, b):
        assert Some2.from_tuple((a, b)).into_options() == (a, b)


class TestSome2IntoOptions:
    """Tests for decomposition into a pair of optionals."""

    def test_a(self):
        optid, optname = Some2A(42).into_options()
        assert optid == 42
        assert optname is None

    def test_b(self):
        assert Some2B('Alice').into_options() == (None, 'Alice')

    def test_ab(self, name_id):
        assert name_id.into_options() == (13, 'Bob')

    def test_round_trip_example(self):
        """(42, None) survives construct then decompose."""
        assert Some2.from_options(42, None).into_options() == (42, None)

    @given(nonempty_option_pairs)
    def test_round_trip(self, opts):
        """Decomposing a value built from optionals reproduces them."""
        assert Some2.from_options(*opts).into_options() == opts

    @given(some2_values)
    def test_rebuild(self, value):
        """Feeding a decomposition back in reproduces an equal value."""
        rebuilt = Some2.try_from_options(*value.into_options())
        assert rebuilt == value
        assert type(rebuilt) is type(value)


class TestSome2Accessors:
    """Tests for get_a and get_b."""

    def test_a_accessors(self):
        assert Some2A(42).get_a() == 42
        assert Some2A(42).get_b() is None

    def test_b_accessors(self):
        assert Some2B('Alice').get_a() is None
        assert Some2B('Alice').get_b() == 'Alice'

    def test_ab_accessors(self, name_id):
        assert name_id.get_a() == 13
        assert name_id.get_b() == 'Bob'

    def test_accessors_do_not_consume(self, name_id):
        """Reading a slot leaves the value intact."""
        name_id.get_a()
        assert name_id == Some2AB(13, 'Bob')

    @given(some2_values)
    def test_accessors_match_decomposition(self, value):
        opta, optb = copy.copy(value).into_options()
        assert value.get_a() == opta
        assert value.get_b() == optb


class TestSome2AsRef:
    """Tests for the borrowing view."""

    def test_as_ref_preserves_variant(self):
        nid = Some2A(42)
        assert type(nid.as_ref()) is Some2A

    def test_as_ref_shares_slot_objects(self):
        name = 'Bob'
        nid = Some2AB(13, name)
        assert nid.as_ref().b is name

    def test_as_ref_in_match(self):
        """The view can be destructured without touching the original."""
        nid = Some2A(42)
        match nid.as_ref():
            case Some2A(x):
                idref = x
            case _:
                pytest.fail('expected Some2A')
        assert idref == 42
        assert nid == Some2A(42)

    def test_as_ref_accessors(self):
        nid = Some2A(42)
        assert nid.as_ref().get_a() == 42
        assert nid.as_ref().get_b() is None

    @given(some2_values)
    def test_as_ref_fidelity(self, value):
        view = value.as_ref()
        assert type(view) is type(value)
        assert view.into_options() == value.into_options()


class TestSome2Equality:
    """Tests for equality, hashing and repr."""

    def test_same_variant_same_values(self):
        assert Some2AB(13, 'Bob') == Some2AB(13, 'Bob')

    def test_from_tuple_equals_variant(self, name_id):
        assert Some2.from_tuple((13, 'Bob')) == name_id

    def test_same_variant_different_values(self):
        assert Some2A(42) != Some2A(43)

    def test_different_variants_unequal(self):
        """Different subsets differ even when shared slots coincide."""
        assert Some2A(13) != Some2AB(13, 'Bob')
        assert Some2B('Bob') != Some2AB(13, 'Bob')

    def test_a_and_b_with_equal_payload_unequal(self):
        assert Some2A(1) != Some2B(1)

    def test_hashable(self):
        assert hash(Some2A(42)) == hash(Some2A(42))
        assert {Some2AB(13, 'Bob'): 'value'}[Some2AB(13, 'Bob')] == 'value'

    def test_repr(self):
        assert repr(Some2A(42)) == 'Some2A(a=42)'
        assert repr(Some2AB(13, 'Bob')) == "Some2AB(a=13, b='Bob')"

    def test_copy(self, name_id):
        assert copy.copy(name_id) == name_id
        assert copy.deepcopy(name_id) == name_id

    def test_structs_astuple(self, name_id):
        """Variants expose their slots as plain struct fields."""
        assert msgspec.structs.astuple(name_id) == (13, 'Bob')
