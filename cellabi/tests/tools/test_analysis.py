"""Tests for type analysis."""

# pylint: disable=redefined-outer-name,unused-variable,expression-not-assigned

import json

from cellabi.abi import Address, Array, Bool, Cell, Map, Time, Uint
from cellabi.tools import analysis, iter_types, min_abi_version, parse_signature, unsupported_types
from cellabi.tools.analysis import FieldInfo, max_depth


def describe_iter_types():
    def walks_in_pre_order(expect):
        t = parse_signature("map(uint8,(bool,cell[]))")
        signatures = [node.type_signature() for node in iter_types(t)]
        expect(signatures) == [
            "map(uint8,(bool,cell[]))",
            "uint8",
            "(bool,cell[])",
            "bool",
            "cell[]",
            "cell",
        ]

    def yields_scalar_alone(expect):
        expect(list(iter_types(Bool()))) == [Bool()]


def describe_max_depth():
    def counts_nesting(expect):
        expect(max_depth(Uint(8))) == 1
        expect(max_depth(Array(Map(Uint(8), Array(Cell()))))) == 4


def describe_versions():
    def finds_min_version(expect):
        expect(min_abi_version(Bool())) == 1
        expect(min_abi_version(Time())) == 2
        expect(min_abi_version(Array(Time()))) == 1

    def lists_nested_unsupported_types(expect):
        t = parse_signature("(time,uint8,pubkey[])")
        found = [node.type_signature() for node in unsupported_types(t, 1)]
        expect(found) == ["time", "pubkey"]
        expect(unsupported_types(t, 2)) == []


def describe_type_info():
    def summarizes_integer(expect):
        info = analysis.describe(Uint(64))
        expect(info.signature) == "uint64"
        expect(info.bit_len) == 64
        expect(info.map_key_size) == 64
        expect(info.min_abi_version) == 1
        expect(info.fields) == []

    def reports_missing_map_key(expect):
        info = analysis.describe(Map(Address(), Cell()))
        expect(info.map_key_size) == None
        expect(info.bit_len) == 0
        expect(info.max_depth) == 2

    def lists_tuple_fields(expect):
        info = analysis.describe(parse_signature("(address,bool[])"))
        expect(info.fields) == [FieldInfo("value0", "address"), FieldInfo("value1", "bool[]")]

    def serializes_to_json(expect):
        data = json.loads(analysis.describe(parse_signature("(address)")).to_json())
        expect(data["signature"]) == "(address)"
        expect(data["map_key_size"]) == None
        expect(data["fields"]) == [{"name": "value0", "signature": "address"}]
