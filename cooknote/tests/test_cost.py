import unittest

from cooknote.domain.Ingredient import Ingredient
from cooknote.domain.Recipe import Recipe
from cooknote.logic.costing.reconciler import (
    CostEditor, DecimalInput, auto_cost, display_cost, final_cost, initial_override,
    parse_float, sanitize_amount, sanitize_cost,
)


def ing(iid, cost=None, amount=None):
    return Ingredient(iid, f"ing-{iid}", cost=cost, amount=amount)


class TestAutoCost(unittest.TestCase):

    def test_sum_treats_missing_as_zero(self):
        self.assertEqual(auto_cost([]), 0)
        self.assertEqual(auto_cost([ing("a", 3), ing("b"), ing("c", 4.5)]), 7.5)
        self.assertEqual(auto_cost([ing("a", 0.1), ing("b", 0.2)]), 0.3)

    def test_override_takes_precedence(self):
        items = [ing("a", 3), ing("b", 4.5)]
        self.assertEqual(display_cost(items, ""), "7.50")
        self.assertEqual(display_cost(items, "10"), "10")
        self.assertEqual(display_cost(items, None), "7.50")

    def test_final_cost_parses_leading_number(self):
        self.assertEqual(final_cost("7.50"), 7.5)
        self.assertEqual(final_cost("12abc"), 12)
        self.assertEqual(final_cost(""), 0)
        self.assertEqual(final_cost("."), 0)
        self.assertIsNone(parse_float("abc"))


class TestInitialOverride(unittest.TestCase):

    def test_matching_cost_is_treated_as_automatic(self):
        recipe = Recipe("r", "菜", ["p"], [ing("a", 3), ing("b", 4.5)], cost=7.5)
        self.assertEqual(initial_override(recipe), "")
        self.assertEqual(initial_override(recipe.copy(cost=7.505)), "")

    def test_diverging_cost_is_manual(self):
        recipe = Recipe("r", "菜", ["p"], [ing("a", 3), ing("b", 4.5)], cost=10)
        self.assertEqual(initial_override(recipe), "10")
        self.assertEqual(initial_override(recipe.copy(cost=8.25)), "8.25")

    def test_zero_cost_is_manual(self):
        recipe = Recipe("r", "菜", ["p"], [], cost=0)
        self.assertEqual(initial_override(recipe), "0")

    def test_missing_cost_leaves_override_empty(self):
        self.assertEqual(initial_override(Recipe("r", "菜", ["p"], [ing("a", 3)])), "")

    def test_legacy_string_amounts_are_sanitized(self):
        legacy = Recipe.from_dict({"id": "r", "name": "菜", "imageUris": ["p"], "cost": 5,
                                   "ingredients": [{"id": "a", "name": "牛肉", "amount": "200g", "cost": 5}]})
        editor = CostEditor.open(legacy)
        self.assertEqual(editor.ingredients[0].amount, 200)
        self.assertEqual(editor.manual_override, "")
        self.assertEqual(editor.display_cost, "5.00")


class TestSanitizers(unittest.TestCase):

    def test_amount_keeps_digits(self):
        self.assertEqual(sanitize_amount("12a3g"), "123")
        self.assertEqual(sanitize_amount("1.5"), "15")

    def test_cost_keeps_one_decimal_point(self):
        self.assertEqual(sanitize_cost("3.5.2元"), "3.52")
        self.assertEqual(sanitize_cost("¥12"), "12")
        self.assertEqual(sanitize_cost(".."), ".")

    def test_decimal_input_keeps_partial_text(self):
        state = DecimalInput.typed("3.")
        self.assertEqual(state.raw, "3.")
        self.assertEqual(state.value, 3.0)
        self.assertTrue(state.valid)
        lone = DecimalInput.typed(".")
        self.assertEqual((lone.raw, lone.value, lone.valid), (".", None, False))
        self.assertEqual(DecimalInput.typed(""), DecimalInput())
        self.assertEqual(DecimalInput.typed("20g", integer=True).value, 20)


class TestCostEditor(unittest.TestCase):

    def test_override_cycle(self):
        editor = CostEditor([ing("a", 3), ing("b", 4.5)])
        self.assertEqual(editor.display_cost, "7.50")
        editor.set_override("10")
        self.assertEqual(editor.display_cost, "10")
        editor.clear_override()
        self.assertEqual(editor.display_cost, "7.50")

    def test_typing_costs_updates_auto_cost(self):
        editor = CostEditor([ing("a"), ing("b")])
        editor.set_ingredient_cost("a", "3.")
        self.assertEqual(editor.cost_inputs["a"].raw, "3.")
        editor.set_ingredient_cost("b", "1.25")
        self.assertEqual(editor.display_cost, "4.25")
        editor.set_ingredient_amount("a", "150克")
        self.assertEqual(editor.ingredients[0].amount, 150)
        with self.assertRaises(KeyError):
            editor.set_ingredient_cost("zz", "1")

    def test_apply_sets_reconciled_cost(self):
        recipe = Recipe("r", "菜", ["p"], [ing("a", 3), ing("b", 4.5)], created_at=1)
        editor = CostEditor.open(recipe)
        self.assertEqual(editor.apply(recipe).cost, 7.5)
        editor.set_override("12.8")
        saved = editor.apply(recipe)
        self.assertEqual(saved.cost, 12.8)
        self.assertEqual(saved.created_at, 1)
        self.assertIsNone(recipe.cost)
