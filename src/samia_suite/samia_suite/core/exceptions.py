class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class RoleMismatchError(AuthenticationError):
    """Raised when the credentials are valid but the claimed role is not the stored one."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
