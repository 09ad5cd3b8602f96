import unittest
from cooknote.domain.errors import ValidationError
from cooknote.domain.FamilyMember import FamilyMember
from cooknote.domain.Ingredient import Ingredient
from cooknote.domain.Recipe import Recipe, new_recipe_id, new_ai_recipe_id


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.recipe = Recipe(
            id="r1", name="番茄炒蛋", image_uris=["cover.jpg", "second.jpg"],
            ingredients=[Ingredient("1", "鸡蛋"), Ingredient("2", "西红柿")],
            steps=["打蛋", "翻炒"], created_at=1_700_000_000_000, liked_by=["m1", "m1", "m2"],
        )

    def test_liked_by_has_set_semantics(self):
        self.assertEqual(self.recipe.liked_by, ["m1", "m2"])

    def test_cover_image_is_first(self):
        self.assertEqual(self.recipe.cover_image, "cover.jpg")

    def test_validate_requires_name_and_image(self):
        self.recipe.validate()
        with self.assertRaises(ValidationError):
            self.recipe.copy(name="   ").validate()
        with self.assertRaises(ValidationError):
            self.recipe.copy(image_uris=[]).validate()

    def test_round_trip_keeps_fields(self):
        self.assertEqual(Recipe.from_dict(self.recipe.to_dict()), self.recipe)

    def test_from_dict_tolerates_legacy_records(self):
        legacy = {
            "id": "old", "name": "老菜谱", "imageUris": ["a.jpg"],
            "ingredients": [{"id": "i", "name": "牛肉", "amount": "300克"}],
            "createdAt": 1_600_000_000_000,
        }
        recipe = Recipe.from_dict(legacy)
        self.assertEqual(recipe.liked_by, [])
        self.assertIsNone(recipe.cost)
        self.assertFalse(recipe.is_favorite)
        self.assertEqual(recipe.ingredients[0].amount, 300)
        self.assertNotIn("cost", recipe.to_dict())

    def test_ids(self):
        rid = new_recipe_id()
        self.assertEqual(len(rid), 9)
        self.assertTrue(rid.isalnum())
        self.assertTrue(new_ai_recipe_id().startswith("ai-"))


class TestFamilyMember(unittest.TestCase):

    def test_validate_color_palette(self):
        FamilyMember("1", "妈妈", "#FF6B6B").validate()
        with self.assertRaises(ValidationError):
            FamilyMember("1", "妈妈", "#000000").validate()
        with self.assertRaises(ValidationError):
            FamilyMember("1", " ", "#FF6B6B").validate()

    def test_from_dict_unknown_color_falls_back(self):
        self.assertEqual(FamilyMember.from_dict({"id": "1", "name": "a", "color": "red"}).color, "#FF6B6B")
