"""Authentication dependencies for API routes."""

from taskapp.api.auth.principal_auth import get_principal, require_master

__all__: list[str] = ["get_principal", "require_master"]
