"""FastAPI dependency injection."""

from typing import Annotated

from fastapi import Header, Request

from aftermarket_api.api.errors import ApiError
from aftermarket_api.logging import log_request, log_tenant_rejected
from aftermarket_api.services.fixtures import FixtureStore
from aftermarket_api.utils.timestamps import iso_now


def get_store(request: Request) -> FixtureStore:
    """Dependency for the fixture store bound at app construction."""
    return request.app.state.store


async def require_tenant(
    request: Request,
    x_tenant_id: Annotated[str | None, Header()] = None,
    x_role: Annotated[str | None, Header()] = None,
) -> str:
    """Fleet endpoints are tenant-scoped; reject calls without x-tenant-id."""
    role = x_role or "guest"
    if not x_tenant_id:
        log_tenant_rejected(request.method, request.url.path, role)
        raise ApiError(
            401,
            {
                "error": "x-tenant-id header is required",
                "code": "MISSING_TENANT_ID",
                "timestamp": iso_now(),
            },
        )
    log_request(request.method, request.url.path, tenant=x_tenant_id, role=role)
    return x_tenant_id
