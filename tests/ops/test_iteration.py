"""Tests for for_each, filter_items and map_items"""

import pytest

from collkit.errors import InvalidCallbackError, InvalidCollectionError
from collkit.ops import filter_items, for_each, map_items


class TestForEach:
    """Test for_each"""

    def test_returns_same_collection(self, numbers):
        """The very object passed in comes back"""
        result = for_each(numbers, lambda item: None)
        assert result is numbers

    def test_visits_in_index_order(self, numbers):
        """Callback sees item, index and collection, ascending"""
        seen = []
        for_each(numbers, lambda item, index, collection: seen.append((item, index, collection)))
        assert seen == [(1, 0, numbers), (2, 1, numbers), (3, 2, numbers), (4, 3, numbers)]

    def test_in_place_mutation_is_visible(self, packages):
        """Mutating elements shows through the returned collection"""
        def upper(item):
            item["name"] = item["name"].upper()

        result = for_each(packages, upper)
        assert result is packages
        assert result[0]["name"] == "GRUNT-MOCHA-CLI"
        assert [p["name"] for p in packages][-1] == "LODASH"

    def test_callback_return_value_ignored(self, numbers):
        """Returning a value does not replace elements"""
        result = for_each(numbers, lambda item: item * 100)
        assert result == [1, 2, 3, 4]

    def test_empty_collection(self):
        """Callback never runs for an empty collection"""
        calls = []
        assert for_each([], calls.append) == []
        assert calls == []

    def test_tuple_collection(self):
        """Any sequence works, and is returned as is"""
        data = (1, 2)
        assert for_each(data, lambda item: None) is data

    def test_rejects_non_sequence(self):
        """Sets have no index order"""
        with pytest.raises(InvalidCollectionError) as exc_info:
            for_each({1, 2}, print)
        assert exc_info.value.actual_type == "set"
        assert isinstance(exc_info.value, TypeError)

    def test_rejects_non_callable(self, numbers):
        """Non-callable callbacks fail before iterating"""
        with pytest.raises(InvalidCallbackError):
            for_each(numbers, "not callable")


class TestFilterItems:
    """Test filter_items"""

    def test_keeps_truthy_in_order(self, numbers):
        """Kept elements retain their relative order"""
        assert filter_items(numbers, lambda item: item % 2 == 0) == [2, 4]

    def test_index_and_collection_passed(self, numbers):
        """Callback can use the index"""
        result = filter_items(numbers, lambda item, index, collection: index >= len(collection) - 2)
        assert result == [3, 4]

    def test_mit_license(self, packages):
        """Filter records by field value"""
        result = filter_items(packages, lambda item: item["license"] == "MIT")
        names = [item["name"] for item in result]
        assert names == ["grunt-mocha-cli", "grunt-contrib-watch", "grunt-contrib-jshint", "lodash"]

    def test_returns_new_list_and_leaves_input(self, numbers):
        """Input is not mutated and the output is a new object"""
        result = filter_items(numbers, lambda item: True)
        assert result == numbers
        assert result is not numbers
        assert numbers == [1, 2, 3, 4]

    def test_truthiness_not_identity(self):
        """Any truthy value keeps the element"""
        assert filter_items(["a", "", "b"], lambda item: item) == ["a", "b"]

    def test_empty_input(self):
        """Empty in, empty out"""
        assert filter_items([], lambda item: True) == []

    def test_subsequence_property(self, numbers):
        """Every kept element satisfies the predicate and no dropped one does"""
        def predicate(item):
            return item > 2

        kept = filter_items(numbers, predicate)
        dropped = [item for item in numbers if item not in kept]
        assert all(predicate(item) for item in kept)
        assert not any(predicate(item) for item in dropped)

    def test_keeps_same_objects(self, packages):
        """Elements are not copied"""
        result = filter_items(packages, lambda item: item["name"] == "lodash")
        assert result[0] is packages[4]


class TestMapItems:
    """Test map_items"""

    def test_times_ten(self, numbers):
        """Results line up with inputs"""
        assert map_items(numbers, lambda item: item * 10) == [10, 20, 30, 40]

    def test_length_and_pointwise(self, numbers):
        """len(result) == len(input) and result[i] == f(input[i])"""
        def square(item):
            return item * item

        result = map_items(numbers, square)
        assert len(result) == len(numbers)
        assert all(result[i] == square(numbers[i]) for i in range(len(numbers)))

    def test_extract_authors(self, packages):
        """Map records to a nested field"""
        result = map_items(packages, lambda item: item["author"]["name"])
        assert result[0] == "Roland Warmerdam"
        assert result[-1] == "John-David Dalton"

    def test_builtin_callback(self):
        """Builtin callables get the item only"""
        assert map_items(["a", "b"], str.upper) == ["A", "B"]
        assert map_items([-1, 2], abs) == [1, 2]

    def test_optional_parameters_left_alone(self):
        """Callables with optional parameters get the item only"""
        assert map_items([1.6, 2.6], round) == [2, 3]
        assert map_items(["a b"], str.split) == [["a", "b"]]

        def tag(item, prefix="#"):
            return f"{prefix}{item}"

        assert map_items(["a", "b"], tag) == ["#a", "#b"]

    def test_varargs_callback_gets_item_only(self, numbers):
        """*args callables receive just the item"""
        result = map_items(numbers, lambda *args: args)
        assert result == [(1,), (2,), (3,), (4,)]

    def test_pointwise_with_builtin(self, numbers):
        """map_items(S, f)[i] == f(S[i]) holds for builtins too"""
        result = map_items(numbers, str)
        assert all(result[i] == str(numbers[i]) for i in range(len(numbers)))

    def test_input_untouched(self, numbers):
        """Input is not mutated"""
        result = map_items(numbers, lambda item: item + 1)
        assert numbers == [1, 2, 3, 4]
        assert result is not numbers

    def test_string_is_a_sequence(self):
        """Strings are mapped character by character"""
        assert map_items("ab", lambda char: char * 2) == ["aa", "bb"]

    def test_callback_errors_propagate(self, numbers):
        """Errors raised by the callback are not wrapped"""
        def boom(item):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            map_items(numbers, boom)

    def test_rejects_none_collection(self):
        """None is not a collection"""
        with pytest.raises(InvalidCollectionError) as exc_info:
            map_items(None, lambda item: item)
        assert exc_info.value.context["operation"] == "map_items"
