from fastapi import APIRouter, Depends, HTTPException

from cooknote.api.dependencies import get_recipe_repository
from cooknote.infra.Recipe_Repository import RecipeRepository
from cooknote.logic.costing.reconciler import CostEditor, final_cost
from cooknote.utilities.validators import CostPreviewInput

router = APIRouter(prefix="/api/cost", tags=["cost"])


@router.post("/preview")
def preview_cost(body: CostPreviewInput):
    editor = CostEditor([ing.to_domain() for ing in body.ingredients])
    editor.set_override(body.manual_override)
    display = editor.display_cost
    return {"autoCost": editor.auto_cost, "displayCost": display, "finalCost": final_cost(display)}


@router.get("/recipes/{recipe_id}")
async def open_cost_editor(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    """Cost fields as they are pre-filled when the recipe is opened for editing."""
    recipe = await repo.get(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    editor = CostEditor.open(recipe)
    return {"autoCost": editor.auto_cost, "manualOverride": editor.manual_override,
            "displayCost": editor.display_cost}
