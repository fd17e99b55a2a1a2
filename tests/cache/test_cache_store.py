import json
import os
import tempfile
import unittest

from bowishlist.cache import CacheStore
from bowishlist.errors import CacheCorruptError, CacheNotFoundError


class TestCacheStore(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.store = CacheStore(self._tmp.name)

    def _write(self, key: str, text: str) -> None:
        with open(os.path.join(self._tmp.name, key), "w", encoding="utf-8") as f:
            f.write(text)

    def test_missing_file_is_not_found(self) -> None:
        with self.assertRaises(CacheNotFoundError) as ctx:
            self.store.load("nope.json")
        self.assertTrue(ctx.exception.details["path"].endswith("nope.json"))

    def test_save_then_load(self) -> None:
        self.store.save("boids.json", {"3001": "771344", "3002": "770901"})

        self.assertEqual(
            self.store.load("boids.json"),
            {"3001": "771344", "3002": "770901"},
        )

    def test_save_writes_flat_json_object(self) -> None:
        self.store.save("colors.json", {"red": "38"})
        with open(self.store.path_for("colors.json"), encoding="utf-8") as f:
            self.assertEqual(json.load(f), {"red": "38"})

    def test_save_leaves_no_temp_files(self) -> None:
        self.store.save("boids.json", {"a": "b"})
        self.assertEqual(os.listdir(self._tmp.name), ["boids.json"])

    def test_save_creates_directory(self) -> None:
        store = CacheStore(os.path.join(self._tmp.name, "nested"))
        store.save("boids.json", {})
        self.assertEqual(store.load("boids.json"), {})

    def test_invalid_json_is_corrupt(self) -> None:
        self._write("boids.json", "{not json")
        with self.assertRaises(CacheCorruptError):
            self.store.load("boids.json")

    def test_non_object_is_corrupt(self) -> None:
        self._write("boids.json", '["3001"]')
        with self.assertRaises(CacheCorruptError):
            self.store.load("boids.json")

    def test_non_string_values_are_corrupt(self) -> None:
        self._write("boids.json", '{"3001": 771344}')
        with self.assertRaises(CacheCorruptError):
            self.store.load("boids.json")


if __name__ == "__main__":
    unittest.main()
