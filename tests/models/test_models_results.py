import unittest

from bowishlist.models import DesiredItem, DesiredList, ItemResult, ReconcileResult


class TestModels(unittest.TestCase):
    def test_desired_item_defaults(self) -> None:
        item = DesiredItem(part_code="3001", color_name="Red")
        self.assertEqual(item.quantity, 1)
        self.assertIsNone(item.boid)

    def test_desired_list_is_immutable(self) -> None:
        desired = DesiredList(name="Set A")
        with self.assertRaises(Exception):
            desired.name = "Set B"  # type: ignore[misc]

    def test_reconcile_result_skipped_view(self) -> None:
        result = ReconcileResult(plan_id="P", dummy_created=False)
        result.items.append(ItemResult("L", "3001", "red", "created", boid="B1"))
        result.items.append(ItemResult("L", "9999", "red", "skipped", reason="no boid"))

        self.assertEqual([r.part_code for r in result.skipped], ["9999"])
        self.assertEqual(result.created_lists, {})


if __name__ == "__main__":
    unittest.main()
