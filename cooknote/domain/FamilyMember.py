"""FamilyMember domain entity: household member whose preferences are recorded on recipes."""
from typing import Optional

from cooknote.domain.errors import ValidationError
from cooknote.domain.Recipe import now_ms
from cooknote.utilities.constants import PRESET_COLORS


def new_member_id() -> str:
    return str(now_ms())


class FamilyMember:
    def __init__(self, id: str = "", name: str = "", color: str = PRESET_COLORS[0],
                 avatar: Optional[str] = None):
        self.id = id
        self.name = name
        self.color = color
        self.avatar = avatar

    def __str__(self) -> str:
        return f"{self.name} [{self.id}] {self.color}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, FamilyMember):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Member name is required")
        if self.color not in PRESET_COLORS:
            raise ValidationError(f"Unknown member color: {self.color}")

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        color = d.get("color") if d.get("color") in PRESET_COLORS else PRESET_COLORS[0]
        return FamilyMember(
            id=str(d.get("id", "")),
            name=str(d.get("name", "")),
            color=color,
            avatar=d.get("avatar") or None,
        )

    def to_dict(self):
        d = {"id": self.id, "name": self.name, "color": self.color}
        if self.avatar:
            d["avatar"] = self.avatar
        return d
