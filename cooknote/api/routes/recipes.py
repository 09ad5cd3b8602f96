from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from cooknote.api.dependencies import get_analysis_client, get_recipe_repository
from cooknote.domain.Recipe import Recipe, new_recipe_id, now_ms
from cooknote.infra.ai_client import AnalysisClient, draft_to_recipe
from cooknote.infra.Recipe_Repository import RecipeRepository
from cooknote.infra.seed_data import default_recipes
from cooknote.logic.filtering.filters import RecipeFilter, filter_recipes
from cooknote.logic.grouping.groups import group_recipes
from cooknote.utilities.validators import RecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


class DraftRequest(BaseModel):
    images: List[str] = Field(default_factory=list)
    imageUris: List[str] = Field(default_factory=list)


def _criteria(search: Optional[str], ingredient: Optional[str], member: Optional[str]) -> RecipeFilter:
    return RecipeFilter(search_text=search, ingredient_name=ingredient, member_id=member)


@router.get("")
async def list_recipes(search: Optional[str] = Query(None), ingredient: Optional[str] = Query(None),
                       member: Optional[str] = Query(None),
                       repo: RecipeRepository = Depends(get_recipe_repository)):
    recipes = filter_recipes(await repo.get_all(), _criteria(search, ingredient, member))
    return [r.to_dict() for r in recipes]


@router.get("/grouped")
async def grouped_recipes(search: Optional[str] = Query(None), ingredient: Optional[str] = Query(None),
                          member: Optional[str] = Query(None),
                          repo: RecipeRepository = Depends(get_recipe_repository)):
    recipes = filter_recipes(await repo.get_all(), _criteria(search, ingredient, member))
    return [
        {"title": g.title, "isSpecial": g.is_special, "items": [r.to_dict() for r in g.items]}
        for g in group_recipes(recipes)
    ]


@router.post("/reset")
async def reset_recipes(repo: RecipeRepository = Depends(get_recipe_repository)):
    recipes = await repo.reset(default_recipes())
    return {"status": "reset", "count": len(recipes)}


@router.post("/draft")
async def draft_recipe(body: DraftRequest = Body(...), client: AnalysisClient = Depends(get_analysis_client)):
    """Analyze photos and return an unsaved recipe for the user to review."""
    try:
        draft = await client.analyze(body.images)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return draft_to_recipe(draft, body.imageUris).to_dict()


@router.get("/{recipe_id}")
async def get_recipe(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe = await repo.get(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe.to_dict()


@router.post("", status_code=201)
async def create_recipe(body: RecipeInput, repo: RecipeRepository = Depends(get_recipe_repository)):
    if body.id and await repo.get(body.id) is not None:
        return JSONResponse(status_code=409, content={"error": "Recipe with this id already exists"})
    recipe = body.to_domain(body.id or new_recipe_id(), body.createdAt or now_ms())
    await repo.add(recipe)
    return recipe.to_dict()


@router.put("/{recipe_id}")
async def update_recipe(recipe_id: str, body: RecipeInput, repo: RecipeRepository = Depends(get_recipe_repository)):
    existing = await repo.get(recipe_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    # createdAt is fixed at creation
    recipe: Recipe = body.to_domain(recipe_id, existing.created_at if existing.created_at is not None else now_ms())
    await repo.update(recipe)
    return recipe.to_dict()


@router.delete("/{recipe_id}")
async def delete_recipe(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    recipes = await repo.delete(recipe_id)
    return {"status": "deleted", "count": len(recipes)}


@router.post("/{recipe_id}/favorite")
async def toggle_favorite(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe = await repo.toggle_favorite(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe.to_dict()
