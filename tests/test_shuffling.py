"""Tests for the shuffle algorithms and the per-thread random source."""

import itertools
import random
import threading
from collections import Counter

import pytest

from deckcraft.shuffling import SHUFFLES, cut, fisher_yates, get_rng, overhand, reseed, riffle


@pytest.fixture
def rng():
    return random.Random(2024)


class TestPermutation:
    """Every shuffle keeps the same multiset of cards."""

    @pytest.mark.parametrize("name", sorted(SHUFFLES))
    @pytest.mark.parametrize("size", [0, 1, 2, 3, 10, 52, 53])
    def test_preserves_items(self, name, size, rng):
        cards = list(range(size))
        SHUFFLES[name](cards, rng)
        assert sorted(cards) == list(range(size))

    @pytest.mark.parametrize("name", sorted(SHUFFLES))
    def test_duplicates_preserved(self, name, rng):
        cards = [1, 1, 2, 2, 2, 3]
        SHUFFLES[name](cards, rng)
        assert Counter(cards) == Counter([1, 1, 2, 2, 2, 3])

    @pytest.mark.parametrize("name", sorted(SHUFFLES))
    def test_empty_and_single_are_noops(self, name, rng):
        empty, single = [], ["x"]
        SHUFFLES[name](empty, rng)
        SHUFFLES[name](single, rng)
        assert empty == []
        assert single == ["x"]


class TestFisherYates:
    def test_uniform(self):
        """All 6 orders of 3 cards show up about equally often."""
        rng = random.Random(12345)
        counts = Counter()
        for _ in range(6000):
            cards = ["a", "b", "c"]
            fisher_yates(cards, rng)
            counts[tuple(cards)] += 1

        assert set(counts) == set(itertools.permutations("abc"))
        for count in counts.values():
            assert 850 <= count <= 1150

    def test_deterministic_with_seed(self):
        a, b = list(range(20)), list(range(20))
        fisher_yates(a, random.Random(9))
        fisher_yates(b, random.Random(9))
        assert a == b


class TestRiffle:
    def test_two_cards_either_order(self):
        seen = set()
        for seed in range(50):
            cards = ["a", "b"]
            riffle(cards, random.Random(seed))
            seen.add(tuple(cards))
        assert seen == {("a", "b"), ("b", "a")}

    def test_interleaves_halves(self, rng):
        """Each half keeps its own relative order."""
        cards = list(range(20))
        riffle(cards, rng)
        low = [c for c in cards if c < 9]
        assert low == sorted(low)
        high = [c for c in cards if c >= 11]
        assert high == sorted(high)

    def test_max_run_one_alternates(self):
        cards = list(range(8))
        riffle(cards, random.Random(0), max_run=1)
        assert sorted(cards) == list(range(8))
        assert cards != list(range(8))

    def test_bad_max_run(self, rng):
        with pytest.raises(ValueError):
            riffle(list(range(10)), rng, max_run=0)


class TestOverhand:
    def test_fraction_one(self, rng):
        cards = list(range(30))
        overhand(cards, rng, fraction=1.0)
        assert sorted(cards) == list(range(30))

    def test_chunks_keep_inner_order(self):
        """A tiny fraction peels single cards, which reverses the deck."""
        cards = list(range(3))
        overhand(cards, random.Random(1), fraction=0.01)
        assert cards == [2, 1, 0]

    @pytest.mark.parametrize("fraction", [0, -0.5, 1.5])
    def test_bad_fraction(self, fraction, rng):
        with pytest.raises(ValueError):
            overhand([1, 2, 3], rng, fraction=fraction)


class TestCut:
    def test_cut(self):
        assert cut([1, 2, 3, 4, 5], 2) == [3, 4, 5, 1, 2]

    def test_cuts_compose(self):
        cards = list(range(10))
        assert cut(cut(cards, 3), 4) == cut(cards, 7)

    def test_ends(self):
        assert cut([1, 2, 3], 0) == [1, 2, 3]
        assert cut([1, 2, 3], 3) == [1, 2, 3]


class TestRng:
    def test_same_thread_same_rng(self):
        assert get_rng() is get_rng()

    def test_reseed(self):
        first = reseed(5).random()
        assert reseed(5).random() == first
        fresh = reseed(6)
        assert get_rng() is fresh

    def test_threads_get_their_own(self):
        mine = get_rng()
        theirs = []
        thread = threading.Thread(target=lambda: theirs.append(get_rng()))
        thread.start()
        thread.join()
        assert theirs[0] is not mine
