"""
Property and stress tests: invariants hold across random insert/delete sequences.
"""

import random

from hypothesis import given, settings
from hypothesis import strategies as st

from avlstore.models.sortedcontainers import AVLTree

keys = st.integers(min_value=-50, max_value=50)
operations = st.lists(st.tuples(st.sampled_from(["insert", "delete"]), keys))


class TestInvariantProperties:
    """Hypothesis-driven checks against a reference set."""

    @given(operations)
    def test_invariants_after_every_operation(self, ops):
        """Test order, height, balance and size hold after each step."""
        tree = AVLTree()
        expected = set()

        for op, key in ops:
            if op == "insert":
                assert tree.insert(key) == (key not in expected)
                expected.add(key)
            else:
                assert tree.delete(key) == (key in expected)
                expected.discard(key)

            tree.validate()
            assert len(tree) == len(expected)

        for key in range(-50, 51):
            assert tree.has(key) == (key in expected)

    @given(st.lists(keys, min_size=1), keys)
    def test_duplicate_insert_keeps_shape(self, inserted, extra):
        """Test re-inserting any present key leaves the serialization unchanged."""
        tree = AVLTree()
        for key in inserted:
            tree.insert(key)
        before = tree.serialize()

        assert not tree.insert(inserted[0])
        assert tree.serialize() == before

        if extra in inserted:
            assert not tree.insert(extra)
            assert tree.serialize() == before

    @given(st.lists(keys), keys)
    def test_absent_delete_keeps_shape(self, inserted, key):
        """Test deleting an absent key leaves the serialization unchanged."""
        tree = AVLTree()
        for k in inserted:
            tree.insert(k)
        tree.delete(key)
        before = tree.serialize()

        assert not tree.delete(key)
        assert tree.serialize() == before

    @given(st.lists(keys, unique=True))
    def test_serialization_lists_keys_in_preorder(self, inserted):
        """Test serialization has one token per key plus one per empty slot."""
        tree = AVLTree()
        for key in inserted:
            tree.insert(key)

        tokens = tree.serialize().split(",")

        assert len(tokens) == 2 * len(inserted) + 1
        assert sorted(int(t) for t in tokens if t != "X") == sorted(inserted)

    @settings(max_examples=50)
    @given(st.lists(keys, unique=True, min_size=1))
    def test_min_and_max(self, inserted):
        """Test min_key and max_key match the reference set."""
        tree = AVLTree()
        for key in inserted:
            tree.insert(key)

        assert tree.min_key() == min(inserted)
        assert tree.max_key() == max(inserted)


class TestRandomWorkload:
    """Larger seeded random workloads."""

    def test_mixed_workload(self):
        """Test a long mixed insert/delete workload keeps every invariant."""
        rng = random.Random(1234)
        tree = AVLTree()
        expected = set()

        for _ in range(5000):
            key = rng.randint(0, 999)
            if rng.random() < 0.6:
                tree.insert(key)
                expected.add(key)
            else:
                tree.delete(key)
                expected.discard(key)

        tree.validate()
        assert len(tree) == len(expected)
        assert all(tree.has(key) for key in expected)

    def test_height_bound(self):
        """Test height stays within the AVL bound of about 1.44 log2(N)."""
        rng = random.Random(42)
        tree = AVLTree()
        for key in rng.sample(range(100_000), 10_000):
            tree.insert(key)

        # Minimal AVL tree of height 19 already holds 10945 nodes
        assert tree.height() <= 18
        tree.validate()
