"""Tests for Option-returning sequence helpers."""

from types import SimpleNamespace

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fundament import Nothing, Some, at, compact, find, find_index, first, last
from fundament.arrays import (
    append,
    chunk,
    difference,
    drop,
    drop_while,
    group,
    group_by,
    insert,
    into,
    move,
    prepend,
    remove,
    reverse,
    shuffle,
    sort,
    swap,
    take,
    take_while,
    union,
    uniq,
    without,
    zip_,
)


class TestAt:
    def test_in_range(self):
        assert at([1, 2, 3], 0) == Some(1)
        assert at([1, 2, 3], 2) == Some(3)

    def test_negative(self):
        assert at([1, 2, 3], -1) == Some(3)
        assert at([1, 2, 3], -3) == Some(1)

    def test_out_of_range(self):
        assert at([1, 2, 3], 3) is Nothing
        assert at([1, 2, 3], -4) is Nothing
        assert at([], 0) is Nothing

    def test_none_item_is_nothing(self):
        assert at([None], 0) is Nothing
        assert at([1, None], -1) is Nothing

    def test_falsy_items_are_present(self):
        assert at([0, '', False], 0) == Some(0)
        assert at([0, '', False], 1) == Some('')
        assert at([0, '', False], 2) == Some(False)

    @given(st.lists(st.integers()), st.integers(min_value=-50, max_value=50))
    def test_agrees_with_indexing(self, items, index):
        try:
            expected = Some(items[index])
        except IndexError:
            expected = Nothing
        assert at(items, index) == expected


class TestFirstLast:
    def test_first(self):
        assert first('abc') == Some('a')
        assert first([]) is Nothing

    def test_last(self):
        assert last((1, 2)) == Some(2)
        assert last(()) is Nothing

    def test_none_ends_are_nothing(self):
        assert first([None, 1]) is Nothing
        assert last([1, None]) is Nothing


class TestFind:
    def test_find(self):
        assert find([1, 2, 3, 4], lambda x: x % 2 == 0) == Some(2)
        assert find([1, 3], lambda x: x % 2 == 0) is Nothing

    def test_found_none_is_nothing(self):
        assert find([None, 1], lambda x: True) is Nothing

    def test_find_index(self):
        assert find_index(['a', 'b'], lambda x: x == 'b') == Some(1)
        assert find_index(['a'], lambda x: x == 'z') is Nothing

    def test_find_index_of_none_is_some(self):
        assert find_index([1, None], lambda x: x is None) == Some(1)

    def test_find_consumes_iterators_lazily(self):
        seen = []

        def items():
            for i in range(10):
                seen.append(i)
                yield i

        assert find(items(), lambda x: x == 2) == Some(2)
        assert seen == [0, 1, 2]


class TestCompact:
    def test_drops_only_none(self):
        assert compact([0, None, '', False, None, 'x']) == [0, '', False, 'x']

    @given(st.lists(st.none() | st.integers()))
    def test_no_none_left(self, items):
        out = compact(items)
        assert None not in out
        assert len(out) == sum(item is not None for item in items)


class TestBuilding:
    def test_into(self):
        assert into(None) == []
        assert into((1, 2)) == [1, 2]
        assert into(x for x in 'ab') == ['a', 'b']

    def test_append_prepend(self):
        items = [2, 3]
        assert append(items, 4, 5) == [2, 3, 4, 5]
        assert prepend(items, 0, 1) == [0, 1, 2, 3]
        assert items == [2, 3]


class TestSlicing:
    def test_take(self):
        assert take([1, 2, 3], 2) == [1, 2]
        assert take([1, 2, 3], 10) == [1, 2, 3]
        assert take([1, 2, 3], 0) == []

    def test_drop(self):
        assert drop([1, 2, 3], 1) == [2, 3]
        assert drop([1, 2, 3], 10) == []

    def test_negative_counts_are_empty(self):
        assert take([1, 2, 3], -1) == []
        assert drop([1, 2, 3], -1) == []

    def test_take_while_drop_while(self):
        assert take_while([1, 2, 5, 1], lambda n: n < 3) == [1, 2]
        assert drop_while([1, 2, 5, 1], lambda n: n < 3) == [5, 1]

    @given(st.lists(st.integers()))
    def test_take_while_and_drop_while_split(self, items):
        def small(n):
            return n < 0

        assert take_while(items, small) + drop_while(items, small) == items

    def test_chunk(self):
        assert chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
        assert chunk([], 3) == []

    @pytest.mark.parametrize('size', [0, -1])
    def test_chunk_non_positive_size(self, size):
        assert chunk([1, 2, 3], size) == []

    @given(st.lists(st.integers()), st.integers(min_value=1, max_value=10))
    def test_chunks_flatten_back(self, items, size):
        chunks = chunk(items, size)
        assert [item for part in chunks for item in part] == items
        assert all(len(part) == size for part in chunks[:-1])


class TestReordering:
    def test_reverse(self):
        assert reverse((1, 2, 3)) == [3, 2, 1]

    def test_sort(self):
        assert sort([3, 1, 2]) == [1, 2, 3]
        assert sort([3, 1, 2], descending=True) == [3, 2, 1]
        assert sort(['bb', 'a', 'ccc'], key=len) == ['a', 'bb', 'ccc']

    @given(st.lists(st.integers()))
    def test_shuffle_is_permutation(self, items):
        assert sorted(shuffle(items)) == sorted(items)

    def test_insert(self):
        assert insert(['a', 'c'], 'b', 1) == ['a', 'b', 'c']
        assert insert(['a', 'b'], 'x', -1) == ['a', 'x', 'b']
        assert insert(['a'], 'z', 10) == ['a', 'z']
        assert insert(['a'], 'z', -10) == ['z', 'a']

    def test_remove(self):
        assert remove(['a', 'b', 'c'], 1) == ['a', 'c']
        assert remove(['a', 'b', 'c'], -1) == ['a', 'b']

    @pytest.mark.parametrize('index', [3, -4])
    def test_remove_out_of_range_is_noop(self, index):
        assert remove(['a', 'b', 'c'], index) == ['a', 'b', 'c']

    def test_move(self):
        assert move(['a', 'b', 'c'], 0, 2) == ['b', 'c', 'a']
        assert move(['a', 'b', 'c'], -1, 0) == ['c', 'a', 'b']
        assert move(['a', 'b', 'c'], 5, 0) == ['a', 'b', 'c']

    def test_swap(self):
        assert swap([1, 2, 3], 0, -1) == [3, 2, 1]
        assert swap([1, 2, 3], 0, 9) == [1, 2, 3]

    def test_input_untouched(self):
        items = [1, 2, 3]
        move(items, 0, 2)
        swap(items, 0, 1)
        remove(items, 0)
        insert(items, 9, 0)
        assert items == [1, 2, 3]


class TestSetLike:
    def test_uniq_keeps_first_occurrence(self):
        assert uniq([3, 1, 3, 2, 1]) == [3, 1, 2]

    def test_union(self):
        assert union([1, 2], [2, 3], [3, 4]) == [1, 2, 3, 4]
        assert union() == []

    def test_difference(self):
        assert difference([1, 2, 3, 2], [2]) == [1, 3]

    def test_without(self):
        assert without([1, 2, 3, 1], 1, 3) == [2]
        assert without([[1], [2]], [1]) == [[2]]

    def test_zip(self):
        assert zip_([1, 2, 3], ['a', 'b']) == [[1, 'a'], [2, 'b']]
        assert zip_() == []

    @given(st.lists(st.integers()))
    def test_uniq_has_no_repeats(self, items):
        out = uniq(items)
        assert len(out) == len(set(items))
        assert set(out) == set(items)


class TestGrouping:
    def test_group(self):
        assert group([1, 2, 3, 4], lambda n: n % 2) == {1: [1, 3], 0: [2, 4]}

    def test_group_by_mapping_key(self):
        rows = [{'kind': 'a', 'n': 1}, {'kind': 'b', 'n': 2}, {'kind': 'a', 'n': 3}]
        assert group_by(rows, 'kind') == {'a': [rows[0], rows[2]], 'b': [rows[1]]}

    def test_group_by_attribute(self):
        rows = [SimpleNamespace(kind='x'), SimpleNamespace(kind='y'), SimpleNamespace(kind='x')]
        grouped = group_by(rows, 'kind')
        assert list(grouped) == ['x', 'y']
        assert len(grouped['x']) == 2
