import importlib

from fastapi import APIRouter

import_routes = importlib.import_module("dormchef_recipes.app.api.routes.import")

api_router = APIRouter()
api_router.include_router(import_routes.router)
