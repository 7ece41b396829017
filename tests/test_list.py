"""Tests for the immutable List type."""

import msgspec
import pytest
from hypothesis import given
from hypothesis import strategies as st

from fundament import List, Nothing, Some


class TestConstruction:
    def test_empty(self):
        assert List.empty().is_empty()
        assert len(List.empty()) == 0
        assert List.empty() == List()

    def test_from_iter(self):
        assert List.from_iter([1, 2]).items == (1, 2)
        assert List.from_iter(x for x in 'ab').to_list() == ['a', 'b']
        assert List.from_iter(None).is_empty()

    def test_range(self):
        assert List.range(0, 4).to_list() == [0, 1, 2, 3]
        assert List.range(0, 10, 3).to_list() == [0, 3, 6, 9]
        assert List.range(3, 1).is_empty()

    def test_range_zero_step(self):
        with pytest.raises(ValueError, match='must not be zero'):
            List.range(0, 3, 0)

    def test_is_frozen(self):
        items = List.from_iter([1])
        with pytest.raises(AttributeError):
            items.items = (2,)  # type: ignore[misc]


class TestSequenceProtocol:
    def test_iter_len_contains(self):
        items = List.from_iter([1, 2, 3])
        assert list(items) == [1, 2, 3]
        assert len(items) == items.length == 3
        assert 2 in items
        assert 9 not in items

    def test_getitem(self):
        items = List.from_iter('abc')
        assert items[0] == 'a'
        assert items[1:] == List.from_iter('bc')

    def test_str_joins_with_commas(self):
        assert str(List.from_iter([1, 2, 3])) == '1,2,3'

    def test_hashable_and_comparable(self):
        assert List.from_iter([1, 2]) == List.from_iter((1, 2))
        assert len({List.from_iter([1]), List.from_iter([1])}) == 1

    def test_encodes_items_to_json(self):
        data = msgspec.json.decode(msgspec.json.encode(List.from_iter([1, 2])))
        assert data == {'items': [1, 2]}


class TestLookup:
    def test_at_first_last(self):
        items = List.from_iter([1, 2, 3])
        assert items.at(-2) == Some(2)
        assert items.first() == Some(1)
        assert items.last() == Some(3)
        assert items.at(5) is Nothing

    def test_none_reads_as_absent(self):
        assert List.from_iter([None]).first() is Nothing

    def test_find(self):
        items = List.from_iter([1, 2, 3])
        assert items.find(lambda n: n > 1) == Some(2)
        assert items.find_index(lambda n: n > 1) == Some(1)
        assert items.find(lambda n: n > 5) is Nothing


class TestTransforming:
    def test_chaining_leaves_receiver_alone(self):
        items = List.from_iter([3, 1, 2, 3])
        out = items.uniq().sort().append(4).prepend(0)
        assert out.to_list() == [0, 1, 2, 3, 4]
        assert items.to_list() == [3, 1, 2, 3]

    def test_map_filter_reduce(self):
        items = List.range(1, 5)
        assert items.map(lambda n: n * 2).to_list() == [2, 4, 6, 8]
        assert items.filter(lambda n: n % 2 == 0).to_list() == [2, 4]
        assert items.reduce(lambda acc, n: acc + n, 0) == 10

    def test_each_returns_self(self):
        seen = []
        items = List.from_iter([1, 2])
        assert items.each(seen.append) is items
        assert seen == [1, 2]

    def test_compact(self):
        assert List.from_iter([0, None, 'a']).compact().to_list() == [0, 'a']

    def test_take_drop(self):
        items = List.range(0, 5)
        assert items.take(2).to_list() == [0, 1]
        assert items.drop(3).to_list() == [3, 4]
        assert items.take(-1).is_empty()
        assert items.drop(-1).is_empty()

    def test_while(self):
        items = List.from_iter([1, 2, 9, 1])
        assert items.take_while(lambda n: n < 5).to_list() == [1, 2]
        assert items.drop_while(lambda n: n < 5).to_list() == [9, 1]

    def test_reorder(self):
        items = List.from_iter('abc')
        assert items.reverse().to_list() == ['c', 'b', 'a']
        assert items.insert('x', 1).to_list() == ['a', 'x', 'b', 'c']
        assert items.remove(0).to_list() == ['b', 'c']
        assert items.move(0, -1).to_list() == ['b', 'c', 'a']
        assert items.swap(0, 2).to_list() == ['c', 'b', 'a']
        assert items.sort(descending=True).to_list() == ['c', 'b', 'a']

    def test_group(self):
        grouped = List.range(0, 5).group(lambda n: n % 2 == 0)
        assert grouped == {True: List.from_iter([0, 2, 4]), False: List.from_iter([1, 3])}

    def test_group_by(self):
        rows = List.from_iter([{'k': 'a'}, {'k': 'b'}, {'k': 'a'}])
        assert rows.group_by('k')['a'].length == 2

    @given(st.lists(st.integers()))
    def test_shuffle_keeps_items(self, values):
        assert sorted(List.from_iter(values).shuffle()) == sorted(values)

    @given(st.lists(st.integers()))
    def test_reverse_twice_is_identity(self, values):
        items = List.from_iter(values)
        assert items.reverse().reverse() == items
