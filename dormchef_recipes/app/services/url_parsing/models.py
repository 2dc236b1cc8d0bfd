"""Pydantic models for URL recipe import."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


class ParsedIngredient(BaseModel):
    """One ingredient line split into quantity, unit and item."""

    model_config = ConfigDict(frozen=True)

    raw: str
    quantity: Optional[Decimal] = None
    unit: Optional[str] = None
    item: Optional[str] = None

    @field_serializer("quantity", when_used="json")
    def serialize_quantity(self, value: Optional[Decimal]) -> Optional[float]:
        return float(value) if value is not None else None


class Nutrition(BaseModel):
    model_config = ConfigDict(frozen=True)

    calories: Optional[str] = None


class ExtractedRecipe(BaseModel):
    """Canonical recipe record built from a page's structured data."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    source_url: str
    canonical_url: Optional[str] = None
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    yield_: Optional[str] = Field(None, alias="yield")
    total_time_minutes: Optional[int] = Field(None, ge=0)
    ingredients: List[ParsedIngredient] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    author: Optional[str] = None
    nutrition: Optional[Nutrition] = None
    tags: List[str] = Field(default_factory=list)


class FetchedPage(BaseModel):
    """Body text of a fetched page and the URL it was finally served from."""

    text: str
    final_url: str
