"""Errors raised by ABI type descriptors."""

from enum import StrEnum, auto


class AbiErrorKind(StrEnum):
    """Discriminant for AbiError, so callers can branch on the failure."""

    EMPTY_COMPONENTS = auto()
    UNUSED_COMPONENTS = auto()
    INVALID_DATA = auto()


class AbiError(RuntimeError):
    """Base class for errors describing an invalid ABI definition."""

    kind: AbiErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyComponents(AbiError):
    """Raised when a tuple is given an empty component list."""

    kind = AbiErrorKind.EMPTY_COMPONENTS

    def __init__(self, message: str = "Tuple must have at least one component") -> None:
        super().__init__(message)


class UnusedComponents(AbiError):
    """Raised when components are given to a type that cannot hold them."""

    kind = AbiErrorKind.UNUSED_COMPONENTS

    def __init__(self, message: str = "Components are not used by this type") -> None:
        super().__init__(message)


class InvalidData(AbiError):
    """Raised when a type or signature is not valid for the requested use."""

    kind = AbiErrorKind.INVALID_DATA
