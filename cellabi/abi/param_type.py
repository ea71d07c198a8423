"""Function and event parameter types.

Every ABI type is a dataclass of its own and ``ParamType`` is the union of
all of them. The operations are module-level functions that ``match`` over
that union and finish with ``assert_never``, so a type checker reports every
dispatch site that misses a newly added variant. Each variant also exposes
them as methods:

    >>> t = Array(Map(Uint(8), Bool()))
    >>> t.type_signature()
    'map(uint8,bool)[]'

Descriptor trees are built bottom-up and then receive tuple components via
``set_components``, the only mutation a descriptor undergoes. Child
descriptors belong to exactly one parent; do not reuse one instance in two
places of a tree.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias, assert_never

from .constants import NOT_AN_INTEGER, STD_ADDRESS_BIT_LENGTH
from .errors import EmptyComponents, InvalidData, UnusedComponents

if TYPE_CHECKING:
    from .param import Param

logger = logging.getLogger(__name__)


def _check_size(kind: str, size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int):
        raise ValueError(f"{kind} size must be an integer, got {size!r}")
    if size < 0:
        raise ValueError(f"{kind} size must not be negative, got {size}")


class _ParamTypeBase:
    """Operations shared by every parameter type."""

    __slots__ = ()

    def type_signature(self) -> str:
        """Return the type signature according to the ABI specification."""
        return type_signature(self)  # type: ignore[arg-type]

    def set_components(self, components: Sequence[Param]) -> None:
        """Attach tuple components to the innermost structural slot."""
        set_components(self, components)  # type: ignore[arg-type]

    def bit_len(self) -> int:
        """Return the integer bit width, or NOT_AN_INTEGER."""
        return bit_len(self)  # type: ignore[arg-type]

    def is_supported(self, abi_version: int) -> bool:
        """Check if the type is supported in a particular ABI version."""
        return is_supported(self, abi_version)  # type: ignore[arg-type]

    def map_key_size(self) -> int:
        """Return the key width in bits when the type is used as a map key."""
        return map_key_size(self)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.type_signature()


@dataclass(frozen=True, slots=True)
class Unknown(_ParamTypeBase):
    """Placeholder for an unresolved type."""


@dataclass(frozen=True, slots=True)
class Uint(_ParamTypeBase):
    """uint<M>: unsigned integer of M bits."""

    size: int

    def __post_init__(self) -> None:
        _check_size("uint", self.size)


@dataclass(frozen=True, slots=True)
class Int(_ParamTypeBase):
    """int<M>: signed integer of M bits."""

    size: int

    def __post_init__(self) -> None:
        _check_size("int", self.size)


@dataclass(frozen=True, slots=True)
class Bool(_ParamTypeBase):
    """Boolean value."""


@dataclass(slots=True)
class Tuple(_ParamTypeBase):
    """Several values combined into a tuple.

    Created empty; components are installed by set_components().
    """

    params: list[Param] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.params = list(self.params)


@dataclass(frozen=True, slots=True)
class Array(_ParamTypeBase):
    """T[]: dynamic array of elements of type T."""

    param_type: ParamType

    # May hold a mutable Tuple
    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, slots=True)
class FixedArray(_ParamTypeBase):
    """T[k]: array of exactly k elements of type T."""

    param_type: ParamType
    size: int

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        _check_size("Fixed array", self.size)


@dataclass(frozen=True, slots=True)
class Cell(_ParamTypeBase):
    """Tree of cells."""


@dataclass(frozen=True, slots=True)
class Map(_ParamTypeBase):
    """Hashmap of values keyed by an integer or address."""

    key_type: ParamType
    value_type: ParamType

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, slots=True)
class Address(_ParamTypeBase):
    """Message address."""


@dataclass(frozen=True, slots=True)
class Bytes(_ParamTypeBase):
    """Byte array."""


@dataclass(frozen=True, slots=True)
class FixedBytes(_ParamTypeBase):
    """Byte array of exactly n bytes."""

    size: int

    def __post_init__(self) -> None:
        _check_size("Fixed bytes", self.size)


@dataclass(frozen=True, slots=True)
class Gram(_ParamTypeBase):
    """Nanograms."""


@dataclass(frozen=True, slots=True)
class Time(_ParamTypeBase):
    """Timestamp header (ABI v2)."""


@dataclass(frozen=True, slots=True)
class Expire(_ParamTypeBase):
    """Message expiration time header (ABI v2)."""


@dataclass(frozen=True, slots=True)
class PublicKey(_ParamTypeBase):
    """Public key header (ABI v2)."""


ParamType: TypeAlias = (
    Unknown
    | Uint
    | Int
    | Bool
    | Tuple
    | Array
    | FixedArray
    | Cell
    | Map
    | Address
    | Bytes
    | FixedBytes
    | Gram
    | Time
    | Expire
    | PublicKey
)


def type_signature(param_type: ParamType) -> str:
    """Return the canonical signature of a type.

    Computed on every call; signatures feed selector derivation, not a hot path.
    """
    match param_type:
        case Unknown():
            return "unknown"
        case Uint(size):
            return f"uint{size}"
        case Int(size):
            return f"int{size}"
        case Bool():
            return "bool"
        case Tuple(params):
            return "(" + ",".join(param.kind.type_signature() for param in params) + ")"
        case Array(inner):
            return f"{type_signature(inner)}[]"
        case FixedArray(inner, size):
            return f"{type_signature(inner)}[{size}]"
        case Cell():
            return "cell"
        case Map(key_type, value_type):
            return f"map({type_signature(key_type)},{type_signature(value_type)})"
        case Address():
            return "address"
        case Bytes():
            return "bytes"
        case FixedBytes(size):
            return f"fixedbytes{size}"
        case Gram():
            return "gram"
        case Time():
            return "time"
        case Expire():
            return "expire"
        case PublicKey():
            return "pubkey"
        case _:
            assert_never(param_type)


def set_components(param_type: ParamType, components: Sequence[Param]) -> None:
    """Attach tuple components to a type.

    Tuples take the components directly. Arrays pass them on to their element
    type and maps to their value type; map keys never have components. Any
    other type only accepts an empty list.

    Raises:
        EmptyComponents: a tuple is given no components.
        UnusedComponents: components are given to a type that cannot hold them.
    """
    match param_type:
        case Tuple():
            if not components:
                raise EmptyComponents()
            param_type.params = list(components)
            logger.debug("Attached %d components: %s", len(components), param_type)
        case Array(inner) | FixedArray(inner, _):
            set_components(inner, components)
        case Map(_, value_type):
            set_components(value_type, components)
        case (
            Unknown()
            | Uint()
            | Int()
            | Bool()
            | Cell()
            | Address()
            | Bytes()
            | FixedBytes()
            | Gram()
            | Time()
            | Expire()
            | PublicKey()
        ):
            if components:
                raise UnusedComponents(
                    f"{type_signature(param_type)} does not use components, got {len(components)}"
                )
        case _:
            assert_never(param_type)


def bit_len(param_type: ParamType) -> int:
    """Return the bit width of an integer type.

    Every other type returns NOT_AN_INTEGER. That value means "no fixed
    integer width", not a type occupying zero bits.
    """
    match param_type:
        case Uint(size) | Int(size):
            return size
        case (
            Unknown()
            | Bool()
            | Tuple()
            | Array()
            | FixedArray()
            | Cell()
            | Map()
            | Address()
            | Bytes()
            | FixedBytes()
            | Gram()
            | Time()
            | Expire()
            | PublicKey()
        ):
            return NOT_AN_INTEGER
        case _:
            assert_never(param_type)


def is_supported(param_type: ParamType, abi_version: int) -> bool:
    """Check if a type is supported in a particular ABI version.

    Only the type itself is checked, not its elements or components.
    """
    match param_type:
        case Time() | Expire() | PublicKey():
            return abi_version >= 2
        case (
            Unknown()
            | Uint()
            | Int()
            | Bool()
            | Tuple()
            | Array()
            | FixedArray()
            | Cell()
            | Map()
            | Address()
            | Bytes()
            | FixedBytes()
            | Gram()
        ):
            return abi_version >= 1
        case _:
            assert_never(param_type)


def map_key_size(param_type: ParamType) -> int:
    """Return the key width in bits for a map keyed by this type.

    Raises:
        InvalidData: the type cannot be a map key.
    """
    match param_type:
        case Int(size) | Uint(size):
            return size
        case Address():
            return STD_ADDRESS_BIT_LENGTH
        case (
            Unknown()
            | Bool()
            | Tuple()
            | Array()
            | FixedArray()
            | Cell()
            | Map()
            | Bytes()
            | FixedBytes()
            | Gram()
            | Time()
            | Expire()
            | PublicKey()
        ):
            raise InvalidData("Only integer and std address values can be map keys")
        case _:
            assert_never(param_type)
