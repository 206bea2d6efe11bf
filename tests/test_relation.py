"""Tests for the Relation value object."""

import dataclasses

import pytest

from relgraph import Relation, RelationOrderError


class TestRelationEquality:
    """Tests for orientation-symmetric equality and hashing."""

    def test_same_orientation_equal(self):
        assert Relation("a", "b", 1) == Relation("a", "b", 1)

    def test_swapped_orientation_equal(self):
        """Test that (a, b, w) and (b, a, w) are the same relation."""
        r1 = Relation("a", "b", 1)
        r2 = Relation("b", "a", 1)
        assert r1 == r2
        assert r1.equivalent(r2)
        assert hash(r1) == hash(r2)
        assert r1.identity_hash() == r2.identity_hash()

    def test_different_label_not_equal(self):
        assert Relation("a", "b", 1) != Relation("a", "b", 2)
        assert Relation("a", "b", 1) != Relation("b", "a", 2)

    def test_different_nodes_not_equal(self):
        assert Relation("a", "b", 1) != Relation("a", "c", 1)

    def test_dedup_in_set(self):
        """Test that de-duplication ignores orientation."""
        rels = [
            Relation("a", "b", 1),
            Relation("b", "a", 1),
            Relation("b", "a", 2),
            Relation("a", "b", 1),
        ]
        unique = list(dict.fromkeys(rels))
        assert unique == [Relation("a", "b", 1), Relation("b", "a", 2)]
        assert len(set(rels)) == 2

    def test_self_relation_hash(self):
        r = Relation("a", "a", 1)
        assert r == Relation("a", "a", 1)
        assert len({r, Relation("a", "a", 1)}) == 1

    def test_compare_with_other_type(self):
        assert Relation("a", "b", 1) != ("a", "b", 1)


class TestRelationAccessors:
    """Tests for accessors and immutability."""

    def test_endpoints_and_label(self):
        r = Relation("a", "b", 7)
        assert r.endpoints() == ("a", "b")
        assert r.edge_label() == 7
        assert r.source == "a"
        assert r.target == "b"

    def test_index_access(self):
        r = Relation("a", "b", 7)
        assert (r[0], r[1], r[2]) == ("a", "b", 7)
        with pytest.raises(IndexError):
            r[3]

    @pytest.mark.parametrize("index", [-1, -3, slice(0, 2), "0", 1.0, True])
    def test_index_outside_fields_rejected(self, index):
        """Test that only the integers 0, 1 and 2 select a field."""
        with pytest.raises(IndexError):
            Relation("a", "b", 7)[index]

    def test_frozen(self):
        r = Relation("a", "b", 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.edge = 2

    def test_repr(self):
        assert repr(Relation("a", "b", 1)) == "Relation('a', 'b', 1)"


class TestRelationOrdering:
    """Tests for ordering by edge label."""

    def test_compare(self):
        small = Relation("x", "y", 1)
        large = Relation("a", "b", 2)
        assert small.compare(large) == -1
        assert large.compare(small) == 1
        assert small.compare(Relation("p", "q", 1)) == 0

    def test_ordering_ignores_nodes(self):
        r1 = Relation("z", "z", 1)
        r2 = Relation("a", "a", 2)
        assert r1 < r2
        assert r2 > r1
        assert r1 <= Relation("b", "c", 1)
        assert r1 >= Relation("b", "c", 1)

    def test_sorted(self):
        rels = [Relation("a", "c", 5), Relation("a", "b", 1), Relation("b", "c", 3)]
        assert [r.edge for r in sorted(rels)] == [1, 3, 5]

    def test_unorderable_labels_raise(self):
        """Test that labels without an order raise RelationOrderError."""
        with pytest.raises(RelationOrderError):
            Relation("a", "b", None).compare(Relation("a", "c", 1))
        with pytest.raises(RelationOrderError):
            sorted([Relation("a", "b", 1), Relation("b", "c", "x")])

    def test_order_error_is_type_error(self):
        with pytest.raises(TypeError):
            Relation("a", "b", 1) < Relation("a", "b", {"w": 1})

    def test_nan_label_raises(self):
        with pytest.raises(RelationOrderError):
            Relation("a", "b", float("nan")).compare(Relation("a", "b", 1.0))
