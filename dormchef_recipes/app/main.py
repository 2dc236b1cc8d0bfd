import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

from dormchef_recipes.app.api.routes import api_router
from dormchef_recipes.app.schemas.imported_recipe import ImportErrorResponse
from dormchef_recipes.app.services.url_parsing.errors import RecipeImportError

logger = logging.getLogger(__name__)


async def validation_exception_handler(request, exc: RequestValidationError):
    details = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", []) if part is not None)
        msg = err.get("msg", "Invalid value")
        details.append({"field": loc or None, "message": msg})
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error_code": "validation_error",
            "message": "Invalid request payload.",
            "details": details,
        },
    )


async def recipe_import_exception_handler(request, exc: RecipeImportError):
    logger.warning("Recipe import failed (%s): %s", exc.error_code, exc)
    body = ImportErrorResponse(error_code=exc.error_code, message=exc.message, details=str(exc))
    return JSONResponse(status_code=exc.http_status, content=body.model_dump())


def create_app() -> FastAPI:
    app = FastAPI(title="DormChef Recipes", version="0.1.0")
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(RecipeImportError, recipe_import_exception_handler)
    app.include_router(api_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
