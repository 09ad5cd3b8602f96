import logging
from typing import List, Optional

from cooknote.domain.Recipe import Recipe
from cooknote.events.Event_Bus import EventBus, RECIPES_CHANGED
from cooknote.infra.Collection_Repository import CollectionRepository
from cooknote.infra.seed_data import default_recipes
from cooknote.infra.storage import KeyValueStore
from cooknote.utilities.constants import RECIPES_KEY

logger = logging.getLogger(__name__)


class RecipeRepository(CollectionRepository[Recipe]):
    """Recipe collection, stored newest-first."""

    def __init__(self, store: KeyValueStore, bus: Optional[EventBus] = None, seed_factory=default_recipes):
        super().__init__(store, RECIPES_KEY, Recipe.from_dict, seed_factory, RECIPES_CHANGED, bus)

    async def get(self, recipe_id: str) -> Optional[Recipe]:
        for recipe in await self._load():
            if recipe.id == recipe_id:
                return recipe
        return None

    async def add(self, recipe: Recipe) -> List[Recipe]:
        recipe.validate()
        recipes = await self._load()
        new_recipes = [recipe] + recipes
        await self._save(new_recipes)
        return new_recipes

    async def update(self, recipe: Recipe) -> List[Recipe]:
        recipe.validate()
        recipes = await self._load()
        new_recipes = [recipe if r.id == recipe.id else r for r in recipes]
        await self._save(new_recipes)
        return new_recipes

    async def delete(self, recipe_id: str) -> List[Recipe]:
        recipes = await self._load()
        new_recipes = [r for r in recipes if r.id != recipe_id]
        await self._save(new_recipes)
        return new_recipes

    async def save(self, recipe: Recipe) -> List[Recipe]:
        """Update the recipe when its id is already stored, add it otherwise."""
        recipes = await self._load()
        if any(r.id == recipe.id for r in recipes):
            return await self.update(recipe)
        return await self.add(recipe)

    async def toggle_favorite(self, recipe_id: str) -> Optional[Recipe]:
        recipes = await self._load()
        toggled = None
        for r in recipes:
            if r.id == recipe_id:
                r.is_favorite = not r.is_favorite
                toggled = r
                break
        if toggled is None:
            logger.warning("Cannot toggle favorite, no recipe with id %s", recipe_id)
            return None
        await self._save(recipes)
        return toggled

    async def remove_member_likes(self, member_id: str) -> List[Recipe]:
        """Drop a member id from every recipe's likedBy; writes only if something changed."""
        recipes = await self._load()
        changed = 0
        for r in recipes:
            if member_id in r.liked_by:
                r.liked_by = [m for m in r.liked_by if m != member_id]
                changed += 1
        if changed:
            logger.info("Removed member %s from %d recipes", member_id, changed)
            await self._save(recipes)
        return recipes
