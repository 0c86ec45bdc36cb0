import os
import time

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("CONSOLE_LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from jose import jwt  # noqa: E402

from product_catalog.config.config import config  # noqa: E402
from product_catalog.infrastructure.services import certificate_extractor  # noqa: E402
from product_catalog.infrastructure.store.product_store import ProductStore  # noqa: E402
from product_catalog.main import create_app  # noqa: E402


@pytest.fixture
def store():
    return ProductStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store)) as test_client:
        yield test_client


@pytest.fixture
def make_token():
    def _make_token(secret=None, expires_in=300, **claims):
        payload = {"sub": "api-gateway", "exp": int(time.time()) + expires_in}
        payload.update(claims)
        if config.JWT_ISSUER:
            payload.setdefault("iss", config.JWT_ISSUER)
        if config.JWT_AUDIENCE:
            payload.setdefault("aud", config.JWT_AUDIENCE)
        return jwt.encode(
            {k: v for k, v in payload.items() if v is not None},
            secret or config.JWT_SECRET,
            algorithm=config.ALGORITHM,
        )

    return _make_token


@pytest.fixture
def auth_headers(make_token):
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def trusted_cert_header(monkeypatch):
    monkeypatch.setattr(certificate_extractor, "trust_header", True)


@pytest.fixture
def untrusted_cert_header(monkeypatch):
    monkeypatch.setattr(certificate_extractor, "trust_header", False)


@pytest.fixture
def cert_headers(trusted_cert_header):
    return {config.CLIENT_CERT_HEADER: "CN=inventory-service,OU=Platform,O=Lite"}
