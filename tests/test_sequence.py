"""Tests for UnmodifiableList - read access, rejected mutation and pickling."""

import copy
import pickle

import pytest

from frozen_collectors import UnmodifiableList, UnsupportedOperationError
from frozen_collectors.constants import MUTATING_LIST_METHODS


class PersistentList(list):
    pass


def iadd(elements):
    elements += ["c"]


def imul(elements):
    elements *= 2


def setitem(elements):
    elements[0] = "c"


def setslice(elements):
    elements[0:1] = ["c"]


def delitem(elements):
    del elements[0]


MUTATIONS = {
    'append': lambda elements: elements.append("c"),
    'extend': lambda elements: elements.extend(["c"]),
    'insert': lambda elements: elements.insert(0, "c"),
    'pop': lambda elements: elements.pop(),
    'remove': lambda elements: elements.remove("a"),
    'clear': lambda elements: elements.clear(),
    'sort': lambda elements: elements.sort(),
    'reverse': lambda elements: elements.reverse(),
    '__setitem__': setitem,
    '__delitem__': delitem,
    '__iadd__': iadd,
    '__imul__': imul,
}


@pytest.fixture
def elements():
    return UnmodifiableList(["a", "b", "a"])


class TestReadAccess:
    def test_len_and_indexing(self, elements):
        assert len(elements) == 3
        assert elements[0] == "a"
        assert elements[1] == "b"
        assert elements[-1] == "a"
        with pytest.raises(IndexError):
            elements[3]

    def test_iteration_preserves_order(self, elements):
        assert list(elements) == ["a", "b", "a"]
        assert list(reversed(elements)) == ["a", "b", "a"][::-1]

    def test_membership_index_and_count(self, elements):
        assert "b" in elements
        assert "c" not in elements
        assert elements.index("b") == 1
        assert elements.count("a") == 2

    def test_slice_returns_unmodifiable_list(self, elements):
        sliced = elements[1:]
        assert isinstance(sliced, UnmodifiableList)
        assert sliced == ["b", "a"]
        with pytest.raises(UnsupportedOperationError):
            sliced.append("c")
        assert elements == ["a", "b", "a"]

    def test_empty(self):
        empty = UnmodifiableList()
        assert len(empty) == 0
        assert list(empty) == []

    def test_non_indexable_input_is_materialized(self):
        elements = UnmodifiableList(e for e in "abc")
        assert elements == ["a", "b", "c"]
        assert elements[2] == "c"

    def test_data_is_a_copy(self, elements):
        data = elements.data
        data.append("c")
        assert elements == ["a", "b", "a"]

    def test_repr(self, elements):
        assert repr(elements) == "UnmodifiableList(['a', 'b', 'a'])"
        assert str(elements) == "['a', 'b', 'a']"


class TestEquality:
    def test_equal_to_list_and_view(self, elements):
        assert elements == ["a", "b", "a"]
        assert elements == UnmodifiableList(["a", "b", "a"])
        assert elements != ["a", "a", "b"]

    def test_not_equal_to_tuple(self, elements):
        assert elements != ("a", "b", "a")

    def test_equal_views_hash_equal(self, elements):
        other = UnmodifiableList(PersistentList(["a", "b", "a"]))
        assert elements == other
        assert hash(elements) == hash(other)
        assert len({elements, other}) == 1

    def test_unhashable_elements(self):
        with pytest.raises(TypeError):
            hash(UnmodifiableList([["a"]]))


class TestRejectedMutation:
    def test_every_list_mutator_is_covered(self):
        assert set(MUTATIONS) == set(MUTATING_LIST_METHODS)

    @pytest.mark.parametrize("method", list(MUTATIONS))
    def test_mutation_rejected(self, elements, method):
        with pytest.raises(UnsupportedOperationError) as exc:
            MUTATIONS[method](elements)
        assert MUTATING_LIST_METHODS[method] in str(exc.value)
        assert elements == ["a", "b", "a"]

    @pytest.mark.parametrize("method", list(MUTATIONS))
    def test_mutation_rejected_every_time(self, elements, method):
        for _ in range(3):
            with pytest.raises(UnsupportedOperationError):
                MUTATIONS[method](elements)
        assert elements == ["a", "b", "a"]

    def test_slice_assignment_rejected(self, elements):
        with pytest.raises(UnsupportedOperationError):
            setslice(elements)
        assert elements == ["a", "b", "a"]

    def test_rejection_is_a_type_error(self, elements):
        with pytest.raises(TypeError):
            elements.append("c")

    def test_message(self, elements):
        with pytest.raises(UnsupportedOperationError) as exc:
            elements.append("c")
        assert str(exc.value) == (
            "The operation `append` is not supported by UnmodifiableList, it "
            "is unmodifiable."
        )

    def test_attribute_assignment_rejected(self, elements):
        with pytest.raises(UnsupportedOperationError):
            elements._store = []
        with pytest.raises(UnsupportedOperationError):
            elements.extra = 1
        with pytest.raises(UnsupportedOperationError):
            del elements._store
        assert elements == ["a", "b", "a"]


class TestPersistence:
    def test_pickle_round_trip(self, elements):
        restored = pickle.loads(pickle.dumps(elements))
        assert isinstance(restored, UnmodifiableList)
        assert restored == ["a", "b", "a"]
        with pytest.raises(UnsupportedOperationError):
            restored.append("c")

    def test_pickle_preserves_backing_container_type(self):
        elements = UnmodifiableList(PersistentList(["a", "b"]))
        restored = pickle.loads(pickle.dumps(elements))
        assert type(restored._store) is PersistentList
        assert restored == ["a", "b"]

    def test_pickle_fails_with_unpicklable_container(self):
        class LocalList(list):
            pass

        elements = UnmodifiableList(LocalList(["a"]))
        with pytest.raises((pickle.PicklingError, AttributeError)):
            pickle.dumps(elements)

    def test_deepcopy(self, elements):
        copied = copy.deepcopy(elements)
        assert copied == elements
        assert isinstance(copied, UnmodifiableList)
