"""
Shared pytest fixtures and configuration for Pagantic tests.

Provides a sample paged payload in the wire shape, an element model to decode into,
and decoders bound to isolated registries so tests never freeze the process-wide one.
"""

import json
from typing import Any

import pytest
from pydantic import BaseModel

from pagantic import JsonDecoder, TypeRegistry, register_paging_types


class Customer(BaseModel):
    id: int
    name: str


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests without external dependencies")


@pytest.fixture
def customer_model() -> type[Customer]:
    return Customer


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    """A third page of customers whose reported total is stale."""
    return {
        "content": [
            {"id": 7, "name": "Ada"},
            {"id": 8, "name": "Grace"},
            {"id": 9, "name": "Linus"},
        ],
        "page": {"number": 2, "size": 3, "totalElements": 5},
    }


@pytest.fixture
def sample_json(sample_payload: dict[str, Any]) -> str:
    return json.dumps(sample_payload)


@pytest.fixture
def registry() -> TypeRegistry:
    """A registry with the paging types, isolated from the process-wide one."""
    return register_paging_types(TypeRegistry())


@pytest.fixture
def decoder(registry: TypeRegistry) -> JsonDecoder:
    return JsonDecoder(registry=registry)
