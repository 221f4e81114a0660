from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import pytest
from fastapi.testclient import TestClient

from glamour_storefront.core.application.ports.text_generation_port import TextGenerationPort
from glamour_storefront.core.domain.store_profile import StoreProfile
from glamour_storefront.core.exceptions.provider_error import ProviderError
from glamour_storefront.infrastructure.configuration.main_settings import Settings
from glamour_storefront.infrastructure.entrypoints.api.app_factory import create_app
from glamour_storefront.infrastructure.persistence.in_memory_document_store import InMemoryDocumentStore
from glamour_storefront.infrastructure.resolution.container import (
    COLLECTIONS,
    StorefrontStores,
    build_container,
)


@dataclass
class FakeTextGenerator(TextGenerationPort):
    """Scripted text generator. SEO and description prompts get separate replies."""

    seo_reply: str | Exception | None = None
    description_reply: str | Exception | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    async def complete(self, system_prompt: str, user_prompt: str, temperature: float, max_tokens: int) -> str:
        self.calls.append(
            {"system": system_prompt, "user": user_prompt, "temperature": temperature, "max_tokens": max_tokens}
        )
        reply = self.seo_reply if "SEO" in system_prompt else self.description_reply
        if reply is None:
            raise ProviderError(provider="fake", message="not scripted")
        if isinstance(reply, Exception):
            raise reply
        return reply


def seo_json(**overrides: Any) -> str:
    payload = {
        "metaTitle": "Silk Serum | Glow Skincare",
        "metaDescription": "Hydrating silk serum for radiant skin.",
        "metaKeywords": ["silk serum", "skincare", "glow"],
        "seoSlug": "silk-serum-glow",
    }
    payload.update(overrides)
    return json.dumps(payload)


@pytest.fixture
def make_seo_json():
    return seo_json


@pytest.fixture
def profile():
    return StoreProfile()


@pytest.fixture
def fake_generator():
    return FakeTextGenerator()


@pytest.fixture
def product_store():
    return InMemoryDocumentStore("products", unique_fields=("slug",))


@pytest.fixture
def silk_serum_payload():
    return {
        "name": "Silk Serum",
        "description": "A lightweight serum for daily hydration.",
        "type": "skincare",
        "category": "women",
        "collection": "Summer",
        "price": 2500,
    }


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        app_name="GlamourTest",
        store_backend="memory",
        runtime_data_dir=tmp_path / "runtime_data",
        groq_api_key=None,
        listing_cache_ttl_s=30,
    )


@pytest.fixture
def memory_stores():
    return StorefrontStores(**{name: InMemoryDocumentStore(name, unique) for name, unique in COLLECTIONS.items()})


@pytest.fixture
def container(settings, memory_stores, fake_generator):
    return build_container(settings, stores=memory_stores, text_generator=fake_generator)


@pytest.fixture
def client(settings, container):
    app = create_app(settings, container=container)
    with TestClient(app) as test_client:
        yield test_client
