import unittest

from bowishlist.models import DesiredList
from bowishlist.plan import Action, PlanOperation


class TestPlanOperation(unittest.TestCase):
    def test_delete_requires_list_id(self) -> None:
        op = PlanOperation(seq=0, action=Action.DELETE_LIST, name="Foo")
        with self.assertRaises(ValueError):
            op.validate_required_fields()

    def test_create_requires_desired(self) -> None:
        op = PlanOperation(seq=0, action=Action.CREATE_LIST, name="Foo")
        with self.assertRaises(ValueError):
            op.validate_required_fields()

        op.desired = DesiredList(name="Foo")
        op.validate_required_fields()

    def test_dummy_requires_name(self) -> None:
        op = PlanOperation(seq=0, action=Action.CREATE_DUMMY_LIST, name=" ")
        with self.assertRaises(ValueError):
            op.validate_required_fields()

    def test_describe(self) -> None:
        op = PlanOperation(seq=1, action=Action.DELETE_LIST, name="Foo", list_id="12")
        self.assertEqual(op.describe(), "DELETE_LIST 'Foo' (id 12)")

    def test_action_values_are_strings(self) -> None:
        self.assertEqual(Action("CREATE_LIST"), Action.CREATE_LIST)
        self.assertEqual(Action.DELETE_LIST.value, "DELETE_LIST")


if __name__ == "__main__":
    unittest.main()
