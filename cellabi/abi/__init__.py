"""ABI parameter type descriptors."""

from .constants import ABI_VERSIONS, DEFAULT_ABI_VERSION, NOT_AN_INTEGER, STD_ADDRESS_BIT_LENGTH
from .errors import AbiError, AbiErrorKind, EmptyComponents, InvalidData, UnusedComponents
from .param import Param
from .param_type import (
    Address,
    Array,
    Bool,
    Bytes,
    Cell,
    Expire,
    FixedArray,
    FixedBytes,
    Gram,
    Int,
    Map,
    ParamType,
    PublicKey,
    Time,
    Tuple,
    Uint,
    Unknown,
)

__all__ = [
    "ABI_VERSIONS",
    "DEFAULT_ABI_VERSION",
    "NOT_AN_INTEGER",
    "STD_ADDRESS_BIT_LENGTH",
    "AbiError",
    "AbiErrorKind",
    "EmptyComponents",
    "InvalidData",
    "UnusedComponents",
    "Param",
    "Address",
    "Array",
    "Bool",
    "Bytes",
    "Cell",
    "Expire",
    "FixedArray",
    "FixedBytes",
    "Gram",
    "Int",
    "Map",
    "ParamType",
    "PublicKey",
    "Time",
    "Tuple",
    "Uint",
    "Unknown",
]
