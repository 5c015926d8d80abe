import pytest

from xlwgen.parser_data import (
    FunctionArgument,
    FunctionArgumentType,
    FunctionDescription,
    transit,
)
from xlwgen.tokenizer import GeneratorError


def _arg(name):
    return FunctionArgument(FunctionArgumentType("double", ["double"], "B"), name, "desc")


def _describe(name, **flags):
    return FunctionDescription(name, "about " + name, "double", "B", [_arg("x")], **flags)


def test_display_name_starts_as_function_name():
    desc = _describe("EchoShort")
    assert desc.display_name == "EchoShort"


def test_renaming_keeps_display_name():
    desc = _describe("EchoShort")
    desc.function_name = "mxlw_EchoShort"
    assert desc.display_name == "EchoShort"
    assert desc.function_name == "mxlw_EchoShort"


def test_number_of_arguments():
    desc = FunctionDescription("f", "d", "double", "B", [_arg("a"), _arg("b")])
    assert desc.number_of_arguments() == 2
    assert [a.name for a in desc.arguments] == ["a", "b"]


def test_conversion_chain_is_tuple():
    arg_type = FunctionArgumentType("short", ["short", "double"], "B")
    assert arg_type.conversion_chain == ("short", "double")


def test_transit_copies_flags_and_descriptions():
    source = [_describe("f", volatile=True, time=True, help_id="h1", cluster_safe=True)]
    source[0].display_name = "Shown"
    destination = [_describe("f")]
    transit(source, destination)
    dest = destination[0]
    assert dest.volatile is True
    assert dest.time is True
    assert dest.cluster_safe is True
    assert dest.help_id == "h1"
    assert dest.display_name == "Shown"
    assert dest.description == "about f"


def test_transit_rejects_different_lengths():
    with pytest.raises(GeneratorError, match="not the same"):
        transit([_describe("f")], [])


def test_transit_rejects_different_order():
    with pytest.raises(GeneratorError, match="same order"):
        transit([_describe("f"), _describe("g")], [_describe("g"), _describe("f")])