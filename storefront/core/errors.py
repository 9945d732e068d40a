"""Storefront error taxonomy"""

from typing import Optional

from pydantic import ValidationError


class StorefrontError(Exception):
    """Base exception for storefront client errors"""
    pass


class NotAuthenticated(StorefrontError):
    """Action requires a logged-in identity"""
    pass


class Forbidden(StorefrontError):
    """Caller is authenticated but lacks the required role"""
    pass


class NotFound(StorefrontError):
    """Referenced id does not exist (or is not visible to the caller)"""
    pass


class ValidationFailed(StorefrontError):
    """
    Client-side form/field violation.

    Raised before any network call. `errors` maps field names to
    user-facing messages.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Validation failed: {fields}")

    def message_for(self, field: str) -> Optional[str]:
        return self.errors.get(field)


class EmptyCart(StorefrontError):
    """Checkout attempted with no cart lines"""
    pass


class RequestRejected(StorefrontError):
    """Backend refused the request (4xx other than auth/not-found)"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CheckoutRejected(RequestRejected):
    """Backend refused the checkout at commit time"""
    pass


class BackendUnavailable(StorefrontError):
    """Transport or infrastructure failure"""
    pass


def field_errors(exc: ValidationError) -> dict[str, str]:
    """Flatten a pydantic ValidationError into {field: message}"""
    errors: dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        # Messages raised by our own validators are user-facing as-is
        cause = error.get("ctx", {}).get("error")
        errors.setdefault(field, str(cause) if cause else error["msg"])
    return errors
