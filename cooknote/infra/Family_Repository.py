from typing import List, Optional

from cooknote.domain.FamilyMember import FamilyMember, new_member_id
from cooknote.events.Event_Bus import EventBus, FAMILY_CHANGED
from cooknote.infra.Collection_Repository import CollectionRepository
from cooknote.infra.seed_data import default_family
from cooknote.infra.storage import KeyValueStore
from cooknote.utilities.constants import FAMILY_KEY, PRESET_COLORS


class FamilyRegistry(CollectionRepository[FamilyMember]):
    """Household members, stored in insertion order.

    Deleting a member leaves recipes untouched; see RecipeRepository.remove_member_likes.
    """

    def __init__(self, store: KeyValueStore, bus: Optional[EventBus] = None, seed_factory=default_family):
        super().__init__(store, FAMILY_KEY, FamilyMember.from_dict, seed_factory, FAMILY_CHANGED, bus)

    async def get(self, member_id: str) -> Optional[FamilyMember]:
        for member in await self._load():
            if member.id == member_id:
                return member
        return None

    async def add(self, member: FamilyMember) -> List[FamilyMember]:
        member.validate()
        members = await self._load()
        new_members = members + [member]
        await self._save(new_members)
        return new_members

    async def create(self, name: str, color: str = PRESET_COLORS[0], avatar: Optional[str] = None) -> FamilyMember:
        member = FamilyMember(id=new_member_id(), name=name.strip(), color=color, avatar=avatar)
        await self.add(member)
        return member

    async def update(self, member: FamilyMember) -> List[FamilyMember]:
        member.validate()
        members = await self._load()
        new_members = [member if m.id == member.id else m for m in members]
        await self._save(new_members)
        return new_members

    async def delete(self, member_id: str) -> List[FamilyMember]:
        members = await self._load()
        new_members = [m for m in members if m.id != member_id]
        await self._save(new_members)
        return new_members
