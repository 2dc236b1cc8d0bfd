import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from dormchef_recipes.app.api.deps import get_current_user, get_recipe_store
from dormchef_recipes.app.schemas.auth import CurrentUser
from dormchef_recipes.app.schemas.imported_recipe import (
    ImportPreviewResponse,
    ImportSaveResponse,
    ImportUrlRequest,
)
from dormchef_recipes.app.services import recipe_importer
from dormchef_recipes.app.services.imported_recipe_store import ImportedRecipeStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes/import", tags=["import"])

ALREADY_IMPORTED_NOTE = "You have already imported this recipe"


def _require_url(url: Optional[str]) -> str:
    if not url or not url.strip():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error_code": "missing_url", "message": "Missing required parameter: url"},
        )
    return url


@router.get("/url", response_model=ImportPreviewResponse)
async def preview_import_from_url(
    url: Optional[str] = None,
    current_user: CurrentUser = Depends(get_current_user),
):
    recipe = await recipe_importer.import_recipe_from_url(_require_url(url))
    return ImportPreviewResponse(recipe=recipe)


@router.post("/url", response_model=ImportSaveResponse)
async def import_from_url(
    payload: ImportUrlRequest,
    current_user: CurrentUser = Depends(get_current_user),
    store: ImportedRecipeStore = Depends(get_recipe_store),
):
    recipe = await recipe_importer.import_recipe_from_url(_require_url(payload.url))
    saved = store.save(current_user.id, recipe)
    if saved.already_imported:
        logger.info("User %s already imported %s (id=%s)", current_user.id, recipe.source_url, saved.id)
    return ImportSaveResponse(
        recipe=saved.recipe,
        id=saved.id,
        note=ALREADY_IMPORTED_NOTE if saved.already_imported else None,
    )
