from collections.abc import Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from assetverse.api.deps import get_container
from assetverse.core.rbac import Role
from assetverse.core.security import create_access_token
from assetverse.main import app
from assetverse.models.assets import AssetCreate
from assetverse.models.auth import UserCreate
from assetverse.models.workflow import RequestCreate
from assetverse.services.container import ServiceContainer


@pytest.fixture
def services(tmp_path) -> ServiceContainer:
    return ServiceContainer(event_path=tmp_path / "events.jsonl")


@pytest.fixture
def client(services: ServiceContainer) -> Iterator[TestClient]:
    app.dependency_overrides[get_container] = lambda: services
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def make_hr(
    services: ServiceContainer,
    email: str = "hr@acme.io",
    company_name: str = "Acme",
    package_limit: int = 5,
    current_employees: int = 0,
) -> dict[str, Any]:
    services.auth_service.register(
        UserCreate(email=email, name="Harper Reyes", role=Role.HR, company_name=company_name)
    )
    return services.users.update(
        email,
        {"package_limit": package_limit, "current_employees": current_employees},
    )


def make_employee(services: ServiceContainer, email: str = "e1@mail.io") -> dict[str, Any]:
    return services.auth_service.register(UserCreate(email=email, name="Eli Park", role=Role.EMPLOYEE))


def make_asset(services: ServiceContainer, hr: dict[str, Any], name: str = "Laptop", quantity: int = 3):
    return services.asset_service.add_asset(hr, AssetCreate(name=name, product_quantity=quantity))


def submit(services: ServiceContainer, asset, requester_email: str = "e1@mail.io", hr_email: str = "hr@acme.io"):
    return services.workflow_service.submit(
        RequestCreate(
            asset_id=asset.id,
            asset_name=asset.name,
            requester_email=requester_email,
            hr_email=hr_email,
        ),
        actor={"email": requester_email, "role": "employee"},
    )


def auth_headers(email: str, role: str) -> dict[str, str]:
    token, _ = create_access_token(email, role)
    return {"Authorization": f"Bearer {token}"}
