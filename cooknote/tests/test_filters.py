import unittest

from cooknote.domain.Ingredient import Ingredient
from cooknote.domain.Recipe import Recipe
from cooknote.logic.filtering.filters import RecipeFilter, filter_recipes


class TestRecipeFilter(unittest.TestCase):

    def setUp(self):
        self.recipes = [
            Recipe("1", "清炒西兰花", ["p"], [Ingredient("a", "西兰花")], liked_by=["m1"]),
            Recipe("2", "Beef Stew", ["p"], [Ingredient("b", "牛肉"), Ingredient("c", "西兰花梗")], liked_by=["m2"]),
            Recipe("3", "蒜蓉西兰花", ["p"], [Ingredient("d", "大蒜"), Ingredient("e", "西兰花")], liked_by=["m1", "m2"]),
            Recipe("4", "番茄炒蛋", ["p"], [Ingredient("f", "鸡蛋")]),
        ]

    def ids(self, criteria):
        return [r.id for r in filter_recipes(self.recipes, criteria)]

    def test_no_predicates_returns_everything_in_order(self):
        self.assertEqual(self.ids(RecipeFilter()), ["1", "2", "3", "4"])
        self.assertFalse(RecipeFilter().is_active)
        self.assertEqual(self.ids(RecipeFilter(search_text="")), ["1", "2", "3", "4"])

    def test_ingredient_match_is_exact(self):
        self.assertEqual(self.ids(RecipeFilter(ingredient_name="西兰花")), ["1", "3"])

    def test_search_is_case_insensitive_on_name(self):
        self.assertEqual(self.ids(RecipeFilter(search_text="beef")), ["2"])

    def test_search_ignores_ingredient_names(self):
        self.assertEqual(self.ids(RecipeFilter(search_text="鸡蛋")), [])

    def test_member_predicate(self):
        self.assertEqual(self.ids(RecipeFilter(member_id="m2")), ["2", "3"])
        self.assertEqual(self.ids(RecipeFilter(member_id="ghost")), [])

    def test_predicates_combine_with_and(self):
        criteria = RecipeFilter(search_text="西兰花", ingredient_name="西兰花", member_id="m2")
        self.assertTrue(criteria.is_active)
        self.assertEqual(self.ids(criteria), ["3"])
