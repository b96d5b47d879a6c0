import os
import tempfile

# Settings and the engine are built at import time: point them at a scratch
# directory before the app is imported.
_workdir = tempfile.mkdtemp(prefix="toolcatalog-tests-")
os.environ.setdefault("DATABASE_PATH", os.path.join(_workdir, "test.db"))
os.environ.setdefault("UPLOAD_DIR", os.path.join(_workdir, "uploads"))
os.environ.setdefault("DEBUG", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from asgi_lifespan import LifespanManager

from toolcatalog.client import CatalogClient
from toolcatalog.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    """Async test client with lifespan support."""
    async with LifespanManager(app) as manager:
        async with AsyncClient(
            transport=ASGITransport(app=manager.app),
            base_url="http://test",
        ) as ac:
            yield ac


@pytest.fixture
def api(client):
    return CatalogClient(client)


@pytest.fixture
def tool_fields():
    return {
        "title": "Painel de Crédito",
        "category": "Crédito",
        "description": "Acompanhamento diário da carteira.",
        "imageUrl": "https://example.com/credito.png",
        "linkUrl": "https://example.com/credito",
        "badge": "Novo",
    }
