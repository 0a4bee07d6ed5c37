from __future__ import annotations

import unittest

from menumanager.menus.collection import OrderedItemCollection, Position
from menumanager.menus.errors import (
    DuplicateKeyError,
    InvalidConfigurationError,
    NotFoundError,
    PositionNotFoundError,
)


def _collection(*keys: str) -> OrderedItemCollection[str]:
    collection: OrderedItemCollection[str] = OrderedItemCollection()
    for key in keys:
        collection.insert(key, key.upper())
    return collection


class OrderedItemCollectionInsertTestCase(unittest.TestCase):
    def test_insert_without_position_keeps_insertion_order(self):
        collection = _collection("c", "a", "d", "b")
        self.assertEqual(collection.keys(), ["c", "a", "d", "b"])
        self.assertEqual(collection.values(), ["C", "A", "D", "B"])

    def test_insert_after_places_item_right_behind_anchor(self):
        collection = _collection("a", "b", "c")
        collection.insert("x", "X", {"after": "a"})
        self.assertEqual(collection.keys(), ["a", "x", "b", "c"])

    def test_insert_after_last_item_appends(self):
        collection = _collection("a", "b")
        collection.insert("x", "X", {"after": "b"})
        self.assertEqual(collection.keys(), ["a", "b", "x"])

    def test_insert_before_places_item_right_in_front_of_anchor(self):
        collection = _collection("a", "b", "c")
        collection.insert("x", "X", {"before": "c"})
        self.assertEqual(collection.keys(), ["a", "b", "x", "c"])

    def test_insert_at_index(self):
        collection = _collection("a", "b", "c")
        collection.insert("x", "X", {"index": 1})
        collection.insert("y", "Y", {"index": 0})
        self.assertEqual(collection.keys(), ["y", "a", "x", "b", "c"])

    def test_negative_index_counts_from_end(self):
        collection = _collection("a", "b", "c")
        collection.insert("x", "X", {"index": -1})
        self.assertEqual(collection.keys(), ["a", "b", "x", "c"])

    def test_first_and_last_shorthands(self):
        collection = _collection("a", "b")
        collection.insert("x", "X", "first")
        collection.insert("y", "Y", "last")
        self.assertEqual(collection.keys(), ["x", "a", "b", "y"])

    def test_batch_keeps_its_own_order_around_one_anchor(self):
        collection = _collection("a", "b")
        collection.insert_many([("x", "X"), ("y", "Y"), ("z", "Z")], {"after": "a"})
        self.assertEqual(collection.keys(), ["a", "x", "y", "z", "b"])

        collection.insert_many([("p", "P"), ("q", "Q")], {"before": "a"})
        self.assertEqual(collection.keys(), ["p", "q", "a", "x", "y", "z", "b"])

    def test_duplicate_key_is_rejected(self):
        collection = _collection("a", "b")
        with self.assertRaises(DuplicateKeyError) as ctx:
            collection.insert("a", "other")
        self.assertEqual(ctx.exception.key, "a")
        self.assertEqual(collection["a"], "A")
        self.assertEqual(collection.keys(), ["a", "b"])

    def test_duplicate_inside_batch_leaves_collection_unchanged(self):
        collection = _collection("a")
        with self.assertRaises(DuplicateKeyError):
            collection.insert_many([("x", "X"), ("x", "X2")])
        self.assertEqual(collection.keys(), ["a"])

    def test_missing_anchor_fails_without_changing_order(self):
        collection = _collection("a", "b")
        for position in ({"after": "missing"}, {"before": "missing"}, {"index": 5}, {"index": -3}):
            with self.subTest(position=position):
                with self.assertRaises(PositionNotFoundError):
                    collection.insert_many([("x", "X"), ("y", "Y")], position)
                self.assertEqual(collection.keys(), ["a", "b"])
                self.assertNotIn("x", collection)

    def test_malformed_position_is_a_configuration_error(self):
        collection = _collection("a")
        for position in ({"after": "a", "before": "a"}, {"around": "a"}, "middle", 3, {"index": "1"}):
            with self.subTest(position=position):
                with self.assertRaises(InvalidConfigurationError):
                    collection.insert("x", "X", position)
        self.assertEqual(collection.keys(), ["a"])


class OrderedItemCollectionMutationTestCase(unittest.TestCase):
    def test_remove_returns_item_and_drops_key(self):
        collection = _collection("a", "b", "c")
        self.assertEqual(collection.remove("b"), "B")
        self.assertEqual(collection.keys(), ["a", "c"])

    def test_remove_missing_key_raises_not_found(self):
        collection = _collection("a")
        with self.assertRaises(NotFoundError):
            collection.remove("missing")
        # NotFoundError is also a KeyError for dict-like callers.
        with self.assertRaises(KeyError):
            collection.remove("missing")

    def test_replace_keeps_position(self):
        collection = _collection("a", "b", "c")
        collection.replace("b", "new")
        self.assertEqual(collection.values(), ["A", "new", "C"])

    def test_replace_missing_key_raises_not_found(self):
        collection = _collection("a")
        with self.assertRaises(NotFoundError):
            collection.replace("b", "B")

    def test_merge_appends_only_new_keys_in_source_order(self):
        target = _collection("a", "b")
        source: OrderedItemCollection[str] = OrderedItemCollection(
            [("c", "source-c"), ("a", "source-a"), ("d", "source-d")]
        )
        added = target.merge(source)
        self.assertEqual(added, ["c", "d"])
        self.assertEqual(target.keys(), ["a", "b", "c", "d"])
        self.assertEqual(target["a"], "A")
        self.assertEqual(target["c"], "source-c")

    def test_merge_into_empty_collection_copies_order(self):
        target: OrderedItemCollection[str] = OrderedItemCollection()
        target.merge([("z", 1), ("y", 2)])
        self.assertEqual(target.keys(), ["z", "y"])

    def test_clear_and_lookups(self):
        collection = _collection("a", "b")
        self.assertEqual(collection.index_of("b"), 1)
        self.assertEqual(collection.get("missing", "default"), "default")
        self.assertEqual(list(collection), ["a", "b"])
        self.assertEqual(len(collection), 2)
        collection.clear()
        self.assertFalse(collection)
        with self.assertRaises(NotFoundError):
            collection["a"]


class PositionTestCase(unittest.TestCase):
    def test_parse_normalizes_directives(self):
        self.assertEqual(Position.parse(None), Position())
        self.assertEqual(Position.parse({}), Position())
        self.assertEqual(Position.parse("last"), Position())
        self.assertEqual(Position.parse("first"), Position("index", 0))
        self.assertEqual(Position.parse({"after": "a"}), Position("after", "a"))
        self.assertEqual(Position.parse({"before": 3}), Position("before", "3"))

    def test_named_anchor_without_value_is_rejected(self):
        for where in ({"after": None}, {"before": None}, {"index": None}):
            with self.subTest(where=where):
                with self.assertRaises(InvalidConfigurationError):
                    Position.parse(where)


if __name__ == "__main__":
    unittest.main()
