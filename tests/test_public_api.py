import unittest

import bowishlist


class TestPublicApi(unittest.TestCase):
    def test_top_level_exports_exist(self) -> None:
        self.assertTrue(hasattr(bowishlist, "WishlistManager"))
        self.assertTrue(hasattr(bowishlist, "load_desired_lists"))
        self.assertTrue(hasattr(bowishlist, "ClientConfig"))
        self.assertTrue(hasattr(bowishlist, "CacheStore"))

        self.assertTrue(hasattr(bowishlist, "Action"))
        self.assertTrue(hasattr(bowishlist, "ReconcilePlan"))
        self.assertTrue(hasattr(bowishlist, "DesiredList"))
        self.assertTrue(hasattr(bowishlist, "ReconcileResult"))

        self.assertTrue(hasattr(bowishlist, "BOWishlistError"))
        self.assertTrue(hasattr(bowishlist, "PartNotFoundError"))

    def test___all___is_defined(self) -> None:
        self.assertTrue(hasattr(bowishlist, "__all__"))
        self.assertIn("WishlistManager", bowishlist.__all__)
        self.assertIn("BOWishlistError", bowishlist.__all__)
        for name in bowishlist.__all__:
            self.assertTrue(hasattr(bowishlist, name), name)


if __name__ == "__main__":
    unittest.main()
