"""Tests for splitting a coset into smaller twin-cosets."""

import pytest

from circle_domain import CosetBuilder, DomainSplitter, OutOfRangeError
from tests.vectors import Q31_COSET_N3, Q31_SPLIT_N2, as_tuples


def _assert_partition(domain, pieces) -> None:
    """Union of pieces equals domain with no point repeated."""
    all_points = [point for piece in pieces for point in piece]
    assert len(all_points) == len(set(all_points))
    assert set(all_points) == domain.points()


class TestReferenceSplit:
    """p = 31, Q = (13, 7), size-8 coset split into size-4 pieces."""

    def test_split_into_two(self, q31, chain31) -> None:
        domain = CosetBuilder.standard_position_coset(q31, 3, chain31)
        pieces = DomainSplitter.split(domain, 2)
        assert len(pieces) == 2
        assert [as_tuples(piece) for piece in pieces] == Q31_SPLIT_N2
        assert set().union(*(as_tuples(piece) for piece in pieces)) == Q31_COSET_N3
        _assert_partition(domain, pieces)

    def test_piece_bases(self, q31, chain31) -> None:
        """Pieces are based at Q^(4k+1)."""
        domain = CosetBuilder.standard_position_coset(q31, 3, chain31)
        for n in (1, 2):
            pieces = DomainSplitter.split(domain, n)
            assert [piece.base for piece in pieces] == [q31.pow(4 * k + 1) for k in range(len(pieces))]
            assert all(piece.log_size == n for piece in pieces)

    def test_split_to_pairs(self, q31, chain31) -> None:
        domain = CosetBuilder.standard_position_coset(q31, 3, chain31)
        pieces = DomainSplitter.split(domain, 1)
        assert len(pieces) == 4
        for piece in pieces:
            a, b = list(piece)
            assert b == a.inverse()
        _assert_partition(domain, pieces)

    def test_split_to_same_size(self, q31, chain31) -> None:
        domain = CosetBuilder.standard_position_coset(q31, 3, chain31)
        assert DomainSplitter.split(domain, 3) == [domain]


class TestSplitProperties:
    """Partition property over p = 127."""

    @pytest.mark.parametrize("m", [2, 4, 6])
    def test_every_split_is_a_partition(self, chain127, m: int) -> None:
        domain = CosetBuilder.canonical_coset(m, chain127)
        for n in range(1, m + 1):
            pieces = DomainSplitter.split(domain, n)
            assert len(pieces) == 1 << (m - n)
            _assert_partition(domain, pieces)
            for piece in pieces:
                assert all(point.as_tuple()[1] != 0 for point in piece)
                # only the whole domain is in standard position
                assert piece.is_standard_position == (n == m)

    def test_matches_lemma_formula(self, chain127) -> None:
        """Each piece is Q^(4k+1) * G_{n-1} u Q^-(4k+1) * G_{n-1}."""
        domain = CosetBuilder.canonical_coset(5, chain127)
        q = domain.base
        half = chain127.subgroup(1)
        for k, piece in enumerate(DomainSplitter.split(domain, 2)):
            expected = {q.pow(4 * k + 1).compose(g) for g in half}
            expected |= {q.pow(-(4 * k + 1)).compose(g) for g in half}
            assert piece.points() == expected

    def test_general_twin_coset(self, chain127) -> None:
        """Twin-cosets outside standard position split into a partition too."""
        q = chain127.subgroup(7).generator
        domain = CosetBuilder.twin_coset(q, 4, chain127, exact_order=False)
        assert not domain.is_standard_position
        for n in range(1, 5):
            _assert_partition(domain, DomainSplitter.split(domain, n))

    def test_split_is_pure(self, q31, chain31) -> None:
        domain = CosetBuilder.standard_position_coset(q31, 3, chain31)
        before = list(domain)
        first = DomainSplitter.split(domain, 2)
        second = DomainSplitter.split(domain, 2)
        assert first == second
        assert list(domain) == before


class TestSplitErrors:
    """Requested piece size outside [1, m]."""

    @pytest.mark.parametrize("n", [-1, 0, 4, 10])
    def test_out_of_range(self, q31, chain31, n: int) -> None:
        domain = CosetBuilder.standard_position_coset(q31, 3, chain31)
        with pytest.raises(OutOfRangeError):
            DomainSplitter.split(domain, n)
