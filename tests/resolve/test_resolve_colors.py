import os
import tempfile
import unittest

from bowishlist.cache import CacheStore
from bowishlist.errors import CacheCorruptError, ColorNotFoundError, NetworkError
from bowishlist.models import ColorRecord
from bowishlist.resolve import ColorResolver, invert_color_catalog, lookup_color_id


class FakeCatalog:
    def __init__(self, catalog=None, error=None) -> None:
        self.catalog = catalog or {}
        self.error = error
        self.calls = 0

    def color_list(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.catalog


CATALOG = {
    "38": ColorRecord(color_id="38", name="Red"),
    "20": ColorRecord(color_id="20", name="Dark Bluish Gray"),
}


class TestColorResolver(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.store = CacheStore(self._tmp.name)

    def test_fetches_inverts_and_persists_on_cache_miss(self) -> None:
        source = FakeCatalog(CATALOG)
        colors = ColorResolver(source, self.store, "colors.json").resolve_all()

        self.assertEqual(colors, {"red": "38", "dark bluish gray": "20"})
        self.assertEqual(source.calls, 1)
        self.assertEqual(self.store.load("colors.json"), colors)

    def test_uses_cache_without_remote_call(self) -> None:
        self.store.save("colors.json", {"red": "38"})
        source = FakeCatalog(CATALOG)

        colors = ColorResolver(source, self.store, "colors.json").resolve_all()

        self.assertEqual(colors, {"red": "38"})
        self.assertEqual(source.calls, 0)

    def test_corrupt_cache_is_fatal_without_remote_call(self) -> None:
        with open(os.path.join(self._tmp.name, "colors.json"), "w", encoding="utf-8") as f:
            f.write("[")
        source = FakeCatalog(CATALOG)

        with self.assertRaises(CacheCorruptError):
            ColorResolver(source, self.store, "colors.json").resolve_all()
        self.assertEqual(source.calls, 0)

    def test_remote_failure_propagates_and_writes_nothing(self) -> None:
        source = FakeCatalog(error=NetworkError("down"))
        with self.assertRaises(NetworkError):
            ColorResolver(source, self.store, "colors.json").resolve_all()
        self.assertEqual(os.listdir(self._tmp.name), [])


class TestColorLookup(unittest.TestCase):
    def test_lookup_is_case_insensitive(self) -> None:
        colors = invert_color_catalog(CATALOG)
        self.assertEqual(lookup_color_id(colors, "RED"), lookup_color_id(colors, "red"))
        self.assertEqual(lookup_color_id(colors, "Dark Bluish GRAY"), "20")

    def test_unknown_color_raises(self) -> None:
        with self.assertRaises(ColorNotFoundError) as ctx:
            lookup_color_id({"red": "38"}, "Chartreuse")
        self.assertEqual(ctx.exception.details["color"], "Chartreuse")

    def test_duplicate_names_keep_first(self) -> None:
        catalog = {
            "1": ColorRecord(color_id="1", name="White"),
            "99": ColorRecord(color_id="99", name="WHITE"),
        }
        self.assertEqual(invert_color_catalog(catalog), {"white": "1"})


if __name__ == "__main__":
    unittest.main()
