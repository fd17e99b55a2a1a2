import unittest

from bowishlist.util.text import color_key, ellipsis


class TestText(unittest.TestCase):
    def test_ellipsis_short_value_untouched(self) -> None:
        self.assertEqual(ellipsis("abc"), "abc")

    def test_ellipsis_truncates_at_fifty(self) -> None:
        value = "x" * 80
        out = ellipsis(value)
        self.assertEqual(out, "x" * 50 + "...")

    def test_color_key_is_case_insensitive(self) -> None:
        self.assertEqual(color_key("Dark Bluish Gray"), color_key("DARK BLUISH GRAY"))
        self.assertEqual(color_key("RED"), "red")


if __name__ == "__main__":
    unittest.main()
