"""Markdown documentation for parameter lists."""

from collections.abc import Sequence
from dataclasses import dataclass

from jinja2 import Environment, PackageLoader

from cellabi.abi import DEFAULT_ABI_VERSION, EmptyComponents, Param, Tuple

from .analysis import min_abi_version, optional_map_key_size, unsupported_types

env = Environment(
    loader=PackageLoader("cellabi.tools", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

template = env.get_template("params.md.j2")


@dataclass(frozen=True)
class ParamRow:
    """One row of the parameter table."""

    name: str
    signature: str
    map_key_size: int | None
    min_abi_version: int


def _row(param: Param) -> ParamRow:
    return ParamRow(
        name=param.name,
        signature=param.type_signature(),
        map_key_size=optional_map_key_size(param.kind),
        min_abi_version=min_abi_version(param.kind),
    )


def render(
    params: Sequence[Param],
    abi_version: int = DEFAULT_ABI_VERSION,
    title: str = "Parameters",
) -> str:
    """Render a Markdown table describing a parameter list.

    Parameters containing types that abi_version does not support are listed
    after the table.

    Raises:
        EmptyComponents: params is empty.
    """
    if not params:
        raise EmptyComponents("No parameters to document")

    combined = Tuple()
    combined.set_components(params)

    unsupported = []
    for param in params:
        bad = unsupported_types(param.kind, abi_version)
        if bad:
            unsupported.append((param.name, [t.type_signature() for t in bad]))

    return template.render(
        title=title,
        signature=combined.type_signature(),
        rows=[_row(param) for param in params],
        unsupported=unsupported,
        abi_version=abi_version,
    )
