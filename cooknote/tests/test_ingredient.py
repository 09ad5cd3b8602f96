import unittest
from cooknote.domain.Ingredient import Ingredient, IngredientCategory


class TestIngredient(unittest.TestCase):

    def test_category_defaults_to_other(self):
        self.assertEqual(Ingredient("x", "盐").category, IngredientCategory.OTHER)
        self.assertEqual(IngredientCategory.parse(None), IngredientCategory.OTHER)
        self.assertEqual(IngredientCategory.parse("水果类"), IngredientCategory.OTHER)
        self.assertEqual(IngredientCategory.parse("海鲜类"), IngredientCategory.SEAFOOD)
        self.assertEqual(IngredientCategory.parse("seafood"), IngredientCategory.SEAFOOD)

    def test_priority_table(self):
        ordered = sorted(IngredientCategory, key=lambda c: c.priority)
        self.assertEqual(ordered, [
            IngredientCategory.POULTRY_MEAT, IngredientCategory.SEAFOOD, IngredientCategory.VEGETABLE,
            IngredientCategory.STAPLE, IngredientCategory.CONDIMENT, IngredientCategory.OTHER,
        ])

    def test_from_dict_sanitizes_legacy_amount(self):
        ing = Ingredient.from_dict({"id": "1", "name": "牛肉", "category": "肉禽类", "amount": "200g"})
        self.assertEqual(ing.amount, 200)
        self.assertIsNone(Ingredient.from_dict({"id": "2", "name": "盐", "amount": "少许"}).amount)
        self.assertEqual(Ingredient.from_dict({"id": "3", "name": "油", "amount": 12.7}).amount, 12)

    def test_from_dict_drops_unusable_cost(self):
        self.assertIsNone(Ingredient.from_dict({"id": "1", "name": "a", "cost": "abc"}).cost)
        self.assertIsNone(Ingredient.from_dict({"id": "1", "name": "a", "cost": -1}).cost)
        self.assertEqual(Ingredient.from_dict({"id": "1", "name": "a", "cost": "3.5"}).cost, 3.5)

    def test_from_dict_drops_non_finite_numbers(self):
        ing = Ingredient.from_dict({"id": "1", "name": "a", "amount": float("inf"), "cost": float("inf")})
        self.assertIsNone(ing.amount)
        self.assertIsNone(ing.cost)
        self.assertIsNone(Ingredient.from_dict({"id": "1", "name": "a", "amount": float("nan")}).amount)

    def test_to_dict_omits_absent_fields(self):
        self.assertEqual(Ingredient("1", "鸡蛋").to_dict(), {"id": "1", "name": "鸡蛋", "category": "其他"})
        d = Ingredient("1", "鸡蛋", IngredientCategory.POULTRY_MEAT, amount=50, cost=1.5).to_dict()
        self.assertEqual(d["amount"], 50)
        self.assertEqual(d["cost"], 1.5)
        self.assertEqual(d["category"], "肉禽类")
