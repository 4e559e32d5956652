"""Tests for the combinator adapters."""

import pytest
from oxiter import (
    NegativeCountError,
    Nothing,
    Some,
    empty,
    from_fn,
    from_iter,
    once,
    repeat,
    successors,
)


def pull(iterator, times):
    return [iterator.next() for _ in range(times)]


def naturals():
    return successors(Some(0), lambda x: Some(x + 1))


class ListPuller:
    """Implements next() without subclassing Iterator."""

    def __init__(self, items):
        self.items = list(items)

    def next(self):
        if not self.items:
            return Nothing
        return Some(self.items.pop(0))


class TestMap:
    """Tests for map (scenario B)."""

    def test_doubles(self):
        """map applies f to each item and propagates Nothing."""
        it = from_iter([1, 2, 3]).map(lambda x: x * 2)
        assert pull(it, 4) == [Some(2), Some(4), Some(6), Nothing]

    def test_lazy(self):
        """f is not called until items are pulled."""
        seen = []
        it = from_iter([1, 2]).map(seen.append)
        assert seen == []
        it.next()
        assert seen == [1]

    def test_result_none_is_present(self):
        """A mapping returning None still yields a present item."""
        assert from_iter([1]).map(lambda _: None).next() == Some(None)

    def test_exception_propagates(self):
        """Exceptions from f propagate unchanged and the source stays usable."""

        def boom(x):
            if x == 2:
                raise KeyError(x)
            return x

        it = from_iter([1, 2, 3]).map(boom)
        assert it.next() == Some(1)
        with pytest.raises(KeyError):
            it.next()
        assert it.next() == Some(3)

    def test_resumable_source(self, resumable):
        """map does not assume Nothing is permanent."""
        it = resumable.map(str)
        assert pull(it, 5) == [Some('1'), Some('2'), Nothing, Some('3'), Nothing]


class TestFilter:
    """Tests for filter."""

    def test_keeps_matching(self):
        """Only items satisfying the predicate are yielded."""
        it = from_iter([1, 2, 3, 4]).filter(lambda x: x % 2 == 0)
        assert pull(it, 4) == [Some(2), Some(4), Nothing, Nothing]

    def test_none_match(self):
        """No matches means immediate Nothing."""
        assert from_iter([1, 3]).filter(lambda x: x % 2 == 0).next() is Nothing

    def test_falsy_items_kept(self):
        """Filtering is on the predicate, not the item's truthiness."""
        assert from_iter([0, '', None]).filter(lambda _: True).collect() == [0, '', None]

    def test_exception_propagates(self):
        """Predicate exceptions propagate."""
        it = from_iter([1]).filter(lambda x: 1 / 0)
        with pytest.raises(ZeroDivisionError):
            it.next()


class TestChain:
    """Tests for chain (scenario C)."""

    def test_sequential(self):
        """Items of the first, then items of the second."""
        it = from_iter([1]).chain(from_iter([2, 3]))
        assert pull(it, 4) == [Some(1), Some(2), Some(3), Nothing]

    def test_both_empty(self):
        """Two empty iterators chain to an empty iterator."""
        assert empty().chain(empty()).next() is Nothing

    def test_first_dropped_after_exhaustion(self, resumable):
        """The first iterator is not polled again after its first Nothing."""
        it = resumable.chain(from_iter(['a']))
        assert pull(it, 4) == [Some(1), Some(2), Some('a'), Nothing]

    def test_second_not_pulled_early(self, counted):
        """The second iterator is untouched while the first has items."""
        second = counted(from_iter([9]))
        it = from_iter([1, 2]).chain(second)
        pull(it, 2)
        assert second.pulls == 0


class TestZip:
    """Tests for zip."""

    def test_pairs(self):
        """Pairs are formed while both sides have items."""
        it = from_iter([1, 2, 3]).zip(from_iter('abcd'))
        assert pull(it, 5) == [Some((1, 'a')), Some((2, 'b')), Some((3, 'c')), Nothing, Nothing]

    def test_right_not_pulled_when_left_exhausted(self, counted):
        """The right side is not polled once the left returns Nothing."""
        right = counted(repeat('r'))
        it = from_iter([1]).zip(right)
        assert pull(it, 3) == [Some((1, 'r')), Nothing, Nothing]
        assert right.pulls == 1

    def test_with_infinite(self):
        """Zipping with an infinite iterator is bounded by the finite side."""
        assert from_iter('xy').zip(naturals()).collect() == [('x', 0), ('y', 1)]


class TestEnumerate:
    """Tests for enumerate."""

    def test_indices(self):
        """Items are paired with 0, 1, 2, ..."""
        it = from_iter(['hello', 'there', 'world']).enumerate()
        assert pull(it, 4) == [
            Some((0, 'hello')),
            Some((1, 'there')),
            Some((2, 'world')),
            Nothing,
        ]

    def test_index_only_counts_present(self, resumable):
        """Nothing from the source does not consume an index."""
        it = resumable.enumerate()
        assert pull(it, 4) == [Some((0, 1)), Some((1, 2)), Nothing, Some((2, 3))]


class TestSkip:
    """Tests for skip."""

    def test_skips(self):
        """The first n items are dropped."""
        it = from_iter([1, 2, 3]).skip(1)
        assert pull(it, 3) == [Some(2), Some(3), Nothing]

    def test_skip_zero(self):
        """skip(0) passes everything through."""
        assert from_iter([1, 2]).skip(0).collect() == [1, 2]

    def test_skip_past_end(self):
        """Skipping more items than exist gives Nothing."""
        assert pull(from_iter([1, 2]).skip(5), 2) == [Nothing, Nothing]

    def test_skip_is_lazy(self, counted):
        """Nothing is pulled until the first next()."""
        source = counted(from_iter([1, 2, 3]))
        it = source.skip(2)
        assert source.pulls == 0
        assert it.next() == Some(3)
        assert source.pulls == 3

    def test_negative_count_raises(self):
        """Negative counts are rejected."""
        with pytest.raises(NegativeCountError) as excinfo:
            from_iter([1]).skip(-1)
        assert excinfo.value.operation == 'skip'
        assert excinfo.value.count == -1


class TestSkipWhile:
    """Tests for skip_while (scenario E)."""

    def test_odd_prefix_dropped(self):
        """The matching prefix is dropped; the first failing item is kept."""
        it = from_iter([1, 3, 2, 3]).skip_while(lambda x: x % 2 != 0)
        assert pull(it, 3) == [Some(2), Some(3), Nothing]

    def test_predicate_not_consulted_after_first_failure(self):
        """Later matching items pass through."""
        calls = []

        def odd(x):
            calls.append(x)
            return x % 2 != 0

        it = from_iter([1, 2, 3, 5]).skip_while(odd)
        assert it.collect() == [2, 3, 5]
        assert calls == [1, 2]

    def test_all_skipped(self):
        """If every item matches, the result is empty."""
        assert from_iter([1, 3]).skip_while(lambda x: True).next() is Nothing


class TestTake:
    """Tests for take."""

    def test_takes_n(self):
        """At most n items, then Nothing forever."""
        it = from_iter([1, 2, 3]).take(2)
        assert pull(it, 4) == [Some(1), Some(2), Nothing, Nothing]

    def test_take_more_than_available(self):
        """take(n) on a shorter source yields the whole source."""
        assert from_iter([1]).take(5).collect() == [1]

    def test_take_zero_never_pulls(self, counted):
        """take(0) does not touch the source."""
        source = counted(repeat(1))
        assert pull(source.take(0), 3) == [Nothing, Nothing, Nothing]
        assert source.pulls == 0

    def test_source_not_pulled_after_n(self, counted):
        """The source is not polled beyond the nth item."""
        source = counted(repeat('x'))
        it = source.take(3)
        pull(it, 10)
        assert source.pulls == 3

    def test_infinite_source(self):
        """take bounds an infinite iterator."""
        assert naturals().take(4).collect() == [0, 1, 2, 3]

    def test_negative_count_raises(self):
        """Negative counts are rejected."""
        with pytest.raises(NegativeCountError):
            repeat(1).take(-3)


class TestTakeWhile:
    """Tests for take_while."""

    def test_stops_at_first_failure(self):
        """Items are yielded until the predicate first fails."""
        it = from_iter([4, 2, 3, 4]).take_while(lambda x: x % 2 == 0)
        assert pull(it, 4) == [Some(4), Some(2), Nothing, Nothing]

    def test_failure_is_terminal(self, counted):
        """After the first failure the source is never polled again."""
        source = counted(from_iter([2, 3, 4, 6]))
        it = source.take_while(lambda x: x % 2 == 0)
        pull(it, 5)
        assert source.pulls == 2

    def test_source_nothing_is_terminal(self, resumable):
        """A Nothing from the source also ends take_while for good."""
        it = resumable.take_while(lambda _: True)
        assert pull(it, 4) == [Some(1), Some(2), Nothing, Nothing]


class TestFlatten:
    """Tests for flatten and flat_map."""

    def test_flattens_iterators(self):
        """Each inner iterator is drained in order."""
        it = from_iter([once(1), empty(), from_iter([2, 3])]).flatten()
        assert pull(it, 5) == [Some(1), Some(2), Some(3), Nothing, Nothing]

    def test_flattens_python_iterables(self):
        """Inner items may be plain Python iterables."""
        assert from_iter([[1, 2], (), range(3, 5)]).flatten().collect() == [1, 2, 3, 4]

    def test_lazy_outer(self, counted):
        """The next outer item is pulled only after the current inner is drained."""
        outer = counted(from_iter([from_iter([1, 2]), from_iter([3])]))
        it = outer.flatten()
        it.next()
        it.next()
        assert outer.pulls == 1
        it.next()
        assert outer.pulls == 2

    def test_flat_map(self):
        """flat_map maps then flattens."""
        assert from_iter([1, 2, 3]).flat_map(lambda x: [x] * x).collect() == [1, 2, 2, 3, 3, 3]

    def test_infinite_inner(self):
        """An infinite inner iterator is consumed lazily."""
        it = from_iter([repeat('a'), once('b')]).flatten()
        assert pull(it, 3) == [Some('a')] * 3

    def test_flattens_next_only_objects(self):
        """Inner items that only define next() are pulled directly."""
        it = from_iter([ListPuller([1, 2]), [3], ListPuller([])]).flatten()
        assert pull(it, 4) == [Some(1), Some(2), Some(3), Nothing]

    def test_flat_map_next_only_objects(self):
        """flat_map accepts a function returning a next()-only object."""
        assert from_iter([2, 1]).flat_map(lambda n: ListPuller(range(n))).collect() == [0, 1, 0]


class TestInspect:
    """Tests for inspect."""

    def test_side_effect_and_passthrough(self):
        """inspect sees each item and yields it unchanged."""
        seen = []
        it = from_iter([1, 2, 3]).inspect(lambda x: seen.append(x * x))
        assert it.collect() == [1, 2, 3]
        assert seen == [1, 4, 9]

    def test_not_called_on_nothing(self):
        """The callback is not called for Nothing."""
        seen = []
        assert empty().inspect(seen.append).next() is Nothing
        assert seen == []


class TestIntersperse:
    """Tests for intersperse."""

    def test_alternates(self):
        """Items alternate between the two sources, starting with self."""
        it = from_iter([1, 3, 5]).intersperse(from_iter([2, 4]))
        assert pull(it, 6) == [Some(1), Some(2), Some(3), Some(4), Some(5), Nothing]


class TestComposition:
    """Combinators chained together."""

    def test_pipeline(self):
        """A longer pipeline composes lazily."""
        result = (
            naturals()
            .filter(lambda x: x % 3 == 0)
            .map(lambda x: x * x)
            .skip(1)
            .take_while(lambda x: x < 200)
            .enumerate()
            .collect()
        )
        assert result == [(0, 9), (1, 36), (2, 81), (3, 144)]

    def test_from_fn_counter(self):
        """A from_fn source composes like any other."""
        state = {'n': 0}

        def tick():
            state['n'] += 1
            return Some(state['n'])

        assert from_fn(tick).take(3).map(str).collect() == ['1', '2', '3']
