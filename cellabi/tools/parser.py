"""Type signature parser using Lark."""

import logging
import os
import re
from collections.abc import Callable
from typing import Any

from lark import Lark
from lark.exceptions import UnexpectedInput, VisitError
from lark.visitors import Transformer

from cellabi.abi import (
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
    InvalidData,
    Map,
    Param,
    ParamType,
    PublicKey,
    Time,
    Tuple,
    Uint,
    Unknown,
)

logger = logging.getLogger(__name__)

_g_parser: Lark | None = None

_SIZED_RE = re.compile(r"([a-z]+)([0-9]+)")

_SIZED_TYPES: dict[str, Callable[[int], ParamType]] = {
    "uint": Uint,
    "int": Int,
    "fixedbytes": FixedBytes,
}

_PLAIN_TYPES: dict[str, Callable[[], ParamType]] = {
    "unknown": Unknown,
    "bool": Bool,
    "cell": Cell,
    "address": Address,
    "bytes": Bytes,
    "gram": Gram,
    "time": Time,
    "expire": Expire,
    "pubkey": PublicKey,
}


def tuple_field_name(index: int) -> str:
    """Name given to the index-th component of a parsed tuple."""
    return f"value{index}"


class TreeTransformer(Transformer):
    """Transform parse tree into parameter types."""

    def signature(self, args: list[Any]) -> ParamType:
        return args[0]

    def param(self, args: list[Any]) -> Param:
        return Param(name=str(args[0]), kind=args[1])

    def scalar(self, args: list[Any]) -> ParamType:
        token = args[0]
        if token.type == "SIZED_SCALAR":
            match = _SIZED_RE.fullmatch(str(token))
            if match is None:
                raise RuntimeError(f"Malformed sized type: {token}")
            return _SIZED_TYPES[match.group(1)](int(match.group(2)))
        return _PLAIN_TYPES[str(token)]()

    def array(self, args: list[Any]) -> Array:
        return Array(args[0])

    def fixed_array(self, args: list[Any]) -> FixedArray:
        return FixedArray(args[0], int(args[1]))

    def map(self, args: list[Any]) -> Map:
        return Map(args[0], args[1])

    def tuple(self, args: list[Any]) -> Tuple:
        result = Tuple()
        result.set_components([Param(tuple_field_name(i), kind) for i, kind in enumerate(args)])
        return result


def _get_parser() -> Lark:
    global _g_parser

    if not _g_parser:
        with open(f"{os.path.dirname(__file__)}/signature.lark", encoding="utf-8") as f:
            grammar = f.read()

        _g_parser = Lark(grammar, start=["signature", "param"])

    return _g_parser


def _parse(text: str, start: str) -> Any:
    try:
        tree = _get_parser().parse(text, start=start)
        result = TreeTransformer().transform(tree)
    except UnexpectedInput as e:
        raise InvalidData(f"Invalid {start} {text!r} at column {e.column}") from e
    except RecursionError as e:
        raise InvalidData(f"Invalid {start}: nested too deeply") from e
    except VisitError as e:
        if isinstance(e.orig_exc, RecursionError):
            raise InvalidData(f"Invalid {start}: nested too deeply") from e
        raise

    logger.debug("Parsed %s %r", start, text)
    return result


def parse_signature(text: str) -> ParamType:
    """Parse a type signature such as ``map(uint8,bool)[]``.

    Tuple components are named positionally (value0, value1, ...).

    Raises:
        InvalidData: the text is not a valid signature.
    """
    return _parse(text, "signature")


def parse_param(text: str) -> Param:
    """Parse a named parameter written as ``name:signature``.

    Raises:
        InvalidData: the text is not a valid parameter.
    """
    return _parse(text, "param")
