"""Tests for CLI interface."""

# pylint: disable=redefined-outer-name,unused-variable,expression-not-assigned

import json
import os
import tempfile

from cellabi.tools.cli import cli


def describe_signature_command():
    def prints_canonical_signature(expect, runner):
        result = runner.invoke(cli, ["signature", "map( uint8, bool )[]"])
        expect(result.exit_code) == 0
        expect(result.output) == "map(uint8,bool)[]\n"

    def fails_on_invalid_signature(expect, runner):
        result = runner.invoke(cli, ["signature", "map(uint8)"])
        expect(result.exit_code) == 1
        expect(result.output).includes("Error: Invalid signature")


def describe_info_command():
    def shows_type_table(expect, runner):
        result = runner.invoke(cli, ["info", "(address,uint64)"])
        expect(result.exit_code) == 0
        expect(result.output).includes("(address,uint64)")
        expect(result.output).includes("value1")
        expect(result.output).includes("Supported by ABI version 2")

    def outputs_json(expect, runner):
        result = runner.invoke(cli, ["info", "uint16", "--json"])
        expect(result.exit_code) == 0
        data = json.loads(result.output)
        expect(data["bit_len"]) == 16
        expect(data["map_key_size"]) == 16
        expect(data["min_abi_version"]) == 1

    def fails_for_unsupported_version(expect, runner):
        result = runner.invoke(cli, ["info", "(time,bool)", "--abi-version", "1"])
        expect(result.exit_code) == 1
        expect(result.output).includes("Not supported by ABI version 1")
        expect(result.output).includes("time")

    def rejects_version_zero(expect, runner):
        result = runner.invoke(cli, ["info", "bool", "--abi-version", "0"])
        expect(result.exit_code) == 2


def describe_doc_command():
    def prints_markdown(expect, runner):
        result = runner.invoke(cli, ["doc", "dest:address", "value:gram", "--title", "transfer"])
        expect(result.exit_code) == 0
        expect(result.output).includes("# transfer")
        expect(result.output).includes("Signature: `(address,gram)`")

    def writes_output_file(expect, runner):
        with tempfile.TemporaryDirectory() as tmpdir:
            output_file = os.path.join(tmpdir, "params.md")
            result = runner.invoke(cli, ["doc", "ids:uint32[]", "-o", output_file])
            expect(result.exit_code) == 0
            with open(output_file, encoding="utf-8") as f:
                expect(f.read()).includes("| ids | `uint32[]` | - | 1 |")

    def fails_on_invalid_param(expect, runner):
        result = runner.invoke(cli, ["doc", "address"])
        expect(result.exit_code) == 1
        expect(result.output).includes("Error: Invalid param")

    def requires_params(expect, runner):
        result = runner.invoke(cli, ["doc"])
        expect(result.exit_code) != 0


def describe_main_group():
    def shows_help(expect, runner):
        result = runner.invoke(cli, ["--help"])
        expect(result.exit_code) == 0
        expect(result.output).includes("signature")
        expect(result.output).includes("info")
        expect(result.output).includes("doc")

    def accepts_verbose_flag(expect, runner):
        result = runner.invoke(cli, ["-v", "signature", "bool"])
        expect(result.exit_code) == 0
        expect(result.output).includes("bool")
