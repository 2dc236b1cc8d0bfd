import httpx
import pytest
from fastapi.testclient import TestClient
from jose import jwt

from dormchef_recipes.app.api.deps import get_recipe_store
from dormchef_recipes.app.core.config import get_settings
from dormchef_recipes.app.main import create_app
from dormchef_recipes.app.services.imported_recipe_store import InMemoryImportedRecipeStore
from dormchef_recipes.app.services.url_parsing import html_fetcher


@pytest.fixture
def recipe_store():
    return InMemoryImportedRecipeStore()


@pytest.fixture
def app(recipe_store):
    app = create_app()
    app.dependency_overrides[get_recipe_store] = lambda: recipe_store
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_settings():
    return get_settings()


def make_token(user_id: int, email: str, settings) -> str:
    payload = {"sub": str(user_id), "email": email}
    return jwt.encode(payload, settings.auth_secret_key, algorithm=settings.auth_algorithm)


@pytest.fixture
def user_token(auth_settings):
    return make_token(1, "user1@example.com", auth_settings)


@pytest.fixture
def other_user_token(auth_settings):
    return make_token(2, "user2@example.com", auth_settings)


@pytest.fixture
def mock_transport(monkeypatch):
    """Route the fetcher's AsyncClient through an httpx.MockTransport handler."""
    real_client = httpx.AsyncClient

    def install(handler):
        def client_factory(*args, **kwargs):
            return real_client(*args, transport=httpx.MockTransport(handler), **kwargs)

        monkeypatch.setattr(html_fetcher.httpx, "AsyncClient", client_factory)

    return install
