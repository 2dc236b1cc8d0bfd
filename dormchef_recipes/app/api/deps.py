from functools import lru_cache

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from dormchef_recipes.app.core.config import get_settings
from dormchef_recipes.app.schemas.auth import CurrentUser
from dormchef_recipes.app.services.imported_recipe_store import (
    ImportedRecipeStore,
    InMemoryImportedRecipeStore,
)

security = HTTPBearer(auto_error=True)


def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(security)) -> CurrentUser:
    settings = get_settings()
    try:
        payload = jwt.decode(credentials.credentials, settings.auth_secret_key, algorithms=[settings.auth_algorithm])
        sub = payload.get("sub")
        if sub is None:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")
        user_id = int(sub)
        email = payload.get("email")
        return CurrentUser(id=user_id, email=email)
    except (JWTError, ValueError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")


@lru_cache
def get_recipe_store() -> ImportedRecipeStore:
    return InMemoryImportedRecipeStore()
