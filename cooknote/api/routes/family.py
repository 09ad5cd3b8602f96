import logging

from fastapi import APIRouter, Depends, HTTPException

from cooknote.api.dependencies import get_family_registry, get_recipe_repository
from cooknote.infra.Family_Repository import FamilyRegistry
from cooknote.infra.Recipe_Repository import RecipeRepository
from cooknote.utilities.validators import FamilyMemberInput

router = APIRouter(prefix="/api/family", tags=["family"])
logger = logging.getLogger(__name__)


@router.get("")
async def list_members(registry: FamilyRegistry = Depends(get_family_registry)):
    return [m.to_dict() for m in await registry.get_all()]


@router.post("", status_code=201)
async def add_member(body: FamilyMemberInput, registry: FamilyRegistry = Depends(get_family_registry)):
    member = await registry.create(body.name, body.color, body.avatar)
    return member.to_dict()


@router.put("/{member_id}")
async def update_member(member_id: str, body: FamilyMemberInput,
                        registry: FamilyRegistry = Depends(get_family_registry)):
    if await registry.get(member_id) is None:
        raise HTTPException(status_code=404, detail="Member not found")
    member = body.to_domain(member_id)
    await registry.update(member)
    return member.to_dict()


@router.delete("/{member_id}")
async def delete_member(member_id: str, registry: FamilyRegistry = Depends(get_family_registry),
                        recipes: RecipeRepository = Depends(get_recipe_repository)):
    """Remove the member, then clear their id from every recipe's likes."""
    members = await registry.delete(member_id)
    await recipes.remove_member_likes(member_id)
    return {"status": "deleted", "count": len(members)}
