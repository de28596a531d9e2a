"""
Service errors

Every error raised by the shipping-method workflow carries an explicit
ErrorKind so callers (and the HTTP layer) can branch on it without
inspecting messages.
"""

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    INVALID_STATE = "invalid_state"
    NOT_FOUND = "not_found"
    SAVE_FAILED = "save_failed"


class ShippingError(Exception):
    """Base class for errors surfaced to the caller"""

    kind: ErrorKind
    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(ShippingError):
    """Request is malformed or not applicable (e.g. empty cart)"""
    kind = ErrorKind.INVALID_INPUT
    status_code = 400


class StateError(ShippingError):
    """A required piece of cart state is missing"""
    kind = ErrorKind.INVALID_STATE
    status_code = 400


class NoSuchEntityError(ShippingError):
    """Cart, carrier or method does not exist"""
    kind = ErrorKind.NOT_FOUND
    status_code = 404


class CouldNotSaveError(ShippingError):
    """Persisting the cart failed"""
    kind = ErrorKind.SAVE_FAILED
    status_code = 500
