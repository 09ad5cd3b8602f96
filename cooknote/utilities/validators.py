"""
Input validation schemas using Pydantic for the HTTP layer and the AI collaborator.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from cooknote.domain.FamilyMember import FamilyMember
from cooknote.domain.Ingredient import Ingredient, IngredientCategory, sanitize_amount_value
from cooknote.domain.Recipe import Recipe
from cooknote.utilities.constants import MAX_ANALYZE_IMAGES, PRESET_COLORS


class IngredientInput(BaseModel):
    """Schema for an ingredient inside a recipe payload."""
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    category: Optional[str] = None
    amount: Optional[int] = Field(None, ge=0)
    cost: Optional[float] = Field(None, ge=0)

    @field_validator('name', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator('category')
    @classmethod
    def normalize_category(cls, v):
        """Unknown or missing categories become 'other'."""
        return IngredientCategory.parse(v).value

    def to_domain(self) -> Ingredient:
        return Ingredient(id=self.id, name=self.name, category=self.category,
                          amount=self.amount, cost=self.cost)


class RecipeInput(BaseModel):
    """Schema for a recipe create/update payload (camelCase, as stored)."""
    id: Optional[str] = None
    name: str
    imageUris: List[str] = Field(default_factory=list)
    ingredients: List[IngredientInput] = Field(default_factory=list)
    steps: Optional[List[str]] = None
    createdAt: Optional[int] = None
    isFavorite: bool = False
    cost: Optional[float] = Field(None, ge=0)
    likedBy: List[str] = Field(default_factory=list)

    @field_validator('steps')
    @classmethod
    def validate_steps(cls, v):
        """Filter out empty steps."""
        if v is None:
            return None
        return [step.strip() for step in v if step and step.strip()] or None

    def to_domain(self, recipe_id: str, created_at: int) -> Recipe:
        return Recipe(
            id=recipe_id,
            name=self.name.strip(),
            image_uris=self.imageUris,
            ingredients=[ing.to_domain() for ing in self.ingredients],
            steps=self.steps,
            created_at=created_at,
            is_favorite=self.isFavorite,
            cost=self.cost,
            liked_by=self.likedBy,
        )


class FamilyMemberInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    color: str = PRESET_COLORS[0]
    avatar: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Member name cannot be empty')
        return v.strip()

    @field_validator('color')
    @classmethod
    def validate_color(cls, v):
        if v not in PRESET_COLORS:
            raise ValueError(f'Color must be one of {", ".join(PRESET_COLORS)}')
        return v

    def to_domain(self, member_id: str) -> FamilyMember:
        return FamilyMember(id=member_id, name=self.name, color=self.color, avatar=self.avatar)


class CostPreviewInput(BaseModel):
    ingredients: List[IngredientInput] = Field(default_factory=list)
    manual_override: str = ""


class AnalyzeRequest(BaseModel):
    """Body of POST /analyze: base64 images, or a single legacy 'image' field."""
    images: Optional[List[str]] = None
    image: Optional[str] = None

    def image_list(self) -> List[str]:
        return list(self.images or ([self.image] if self.image else []))


class DraftIngredient(BaseModel):
    name: str = Field(..., min_length=1)
    amount: Optional[int] = None
    category: str = IngredientCategory.OTHER.value

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator('amount', mode='before')
    @classmethod
    def coerce_amount(cls, v):
        """Models sometimes answer "100g" or 12.5; keep whole grams."""
        return sanitize_amount_value(v)

    @field_validator('category', mode='before')
    @classmethod
    def normalize_category(cls, v):
        return IngredientCategory.parse(v).value


class RecipeDraft(BaseModel):
    """Structured recipe returned by the analysis service."""
    name: str = Field(..., min_length=1)
    ingredients: List[DraftIngredient] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


__all__ = [
    'IngredientInput', 'RecipeInput', 'FamilyMemberInput', 'CostPreviewInput',
    'AnalyzeRequest', 'DraftIngredient', 'RecipeDraft', 'MAX_ANALYZE_IMAGES',
]
