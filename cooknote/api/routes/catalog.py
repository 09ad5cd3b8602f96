from fastapi import APIRouter, Depends, Query

from cooknote.api.dependencies import get_catalog_cache, get_recipe_repository
from cooknote.infra.Recipe_Repository import RecipeRepository
from cooknote.logic.catalog.aggregator import categorize, quick_picks, search_catalog
from cooknote.logic.catalog.cache import CatalogCache

router = APIRouter(prefix="/api/ingredients", tags=["ingredients"])


@router.get("")
async def ranked_ingredients(repo: RecipeRepository = Depends(get_recipe_repository),
                             cache: CatalogCache = Depends(get_catalog_cache)):
    snapshot = cache.get(await repo.get_all())
    return {
        "items": [ing.to_dict() for ing in snapshot.ranked],
        "quickPicks": [ing.name for ing in quick_picks(snapshot.ranked)],
        "frequencies": snapshot.frequencies,
    }


@router.get("/search")
async def search_ingredients(q: str = Query(""), repo: RecipeRepository = Depends(get_recipe_repository),
                             cache: CatalogCache = Depends(get_catalog_cache)):
    snapshot = cache.get(await repo.get_all())
    return [ing.to_dict() for ing in search_catalog(snapshot.catalog, q)]


@router.get("/categories")
async def ingredient_categories(repo: RecipeRepository = Depends(get_recipe_repository),
                                cache: CatalogCache = Depends(get_catalog_cache)):
    snapshot = cache.get(await repo.get_all())
    return [
        {"category": cat.value, "items": [ing.to_dict() for ing in items]}
        for cat, items in categorize(snapshot.catalog)
    ]
