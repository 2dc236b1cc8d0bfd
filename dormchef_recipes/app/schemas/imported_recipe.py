from typing import Optional

from pydantic import BaseModel

from dormchef_recipes.app.services.url_parsing.models import ExtractedRecipe


class ImportUrlRequest(BaseModel):
    url: Optional[str] = None


class ImportPreviewResponse(BaseModel):
    recipe: ExtractedRecipe


class ImportSaveResponse(BaseModel):
    recipe: ExtractedRecipe
    id: int
    note: Optional[str] = None


class ImportErrorResponse(BaseModel):
    error_code: str
    message: str
    details: Optional[str] = None
