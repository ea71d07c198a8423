"""Tests for Markdown documentation."""

# pylint: disable=redefined-outer-name,unused-variable,expression-not-assigned

import pytest

from cellabi.abi import EmptyComponents
from cellabi.tools import parse_param
from cellabi.tools.docs import render


def params(*texts):
    return [parse_param(text) for text in texts]


def describe_render():
    def renders_table(expect):
        text = render(params("owner:address", "amount:uint128", "items:map(uint32,cell)"))

        expect(text).includes("# Parameters")
        expect(text).includes("Signature: `(address,uint128,map(uint32,cell))`")
        expect(text).includes("| owner | `address` | 267 | 1 |")
        expect(text).includes("| amount | `uint128` | 128 | 1 |")
        expect(text).includes("| items | `map(uint32,cell)` | - | 1 |")

    def uses_title(expect):
        expect(render(params("a:bool"), title="transfer")).includes("# transfer")

    def lists_unsupported_params(expect):
        text = render(params("when:time", "keys:(pubkey,bool)[]", "ok:bool"), abi_version=1)

        expect(text).includes("Not supported by ABI version 1")
        expect(text).includes("- when: time")
        expect(text).includes("- keys: pubkey")
        expect("- ok" in text) == False

    def omits_unsupported_section_when_supported(expect):
        expect("Not supported" in render(params("when:time"), abi_version=2)) == False

    def rejects_empty_list(expect):
        with pytest.raises(EmptyComponents):
            render([])
