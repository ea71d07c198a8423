"""Structural analysis of parameter types."""

from collections.abc import Iterator
from dataclasses import dataclass

from dataclasses_json import DataClassJsonMixin

from cellabi.abi import (
    ABI_VERSIONS,
    Array,
    FixedArray,
    InvalidData,
    Map,
    ParamType,
    Tuple,
)


@dataclass
class FieldInfo(DataClassJsonMixin):
    """A tuple component as shown in reports."""

    name: str
    signature: str


@dataclass
class TypeInfo(DataClassJsonMixin):
    """Summary of a parameter type.

    map_key_size is None when the type cannot be a map key.
    """

    signature: str
    bit_len: int
    map_key_size: int | None
    min_abi_version: int
    max_depth: int
    fields: list[FieldInfo]


def children(t: ParamType) -> list[ParamType]:
    """Return the direct child types of a type (map key before value)."""
    if isinstance(t, Tuple):
        return [param.kind for param in t.params]
    if isinstance(t, Array | FixedArray):
        return [t.param_type]
    if isinstance(t, Map):
        return [t.key_type, t.value_type]
    return []


def iter_types(t: ParamType) -> Iterator[ParamType]:
    """Walk a type tree in pre-order, starting with t itself."""
    yield t
    for child in children(t):
        yield from iter_types(child)


def max_depth(t: ParamType) -> int:
    """Nesting depth of a type; scalars have depth 1."""
    return 1 + max((max_depth(child) for child in children(t)), default=0)


def min_abi_version(t: ParamType) -> int:
    """Return the lowest known ABI version supporting the type itself."""
    for abi_version in ABI_VERSIONS:
        if t.is_supported(abi_version):
            return abi_version
    raise InvalidData(f"{t} is not supported by any known ABI version")


def unsupported_types(t: ParamType, abi_version: int) -> list[ParamType]:
    """Return every type in the tree that abi_version does not support."""
    return [node for node in iter_types(t) if not node.is_supported(abi_version)]


def optional_map_key_size(t: ParamType) -> int | None:
    try:
        return t.map_key_size()
    except InvalidData:
        return None


def describe(t: ParamType) -> TypeInfo:
    """Collect the report shown by the info command."""
    fields = []
    if isinstance(t, Tuple):
        fields = [FieldInfo(param.name, param.type_signature()) for param in t.params]

    return TypeInfo(
        signature=t.type_signature(),
        bit_len=t.bit_len(),
        map_key_size=optional_map_key_size(t),
        min_abi_version=min_abi_version(t),
        max_depth=max_depth(t),
        fields=fields,
    )
