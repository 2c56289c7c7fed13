"""Authentication services."""

from hostelmanix.services.auth.authentication_service import AuthenticationService

__all__ = ["AuthenticationService"]
