import pytest

from xlwgen.function_model import FunctionModel
from xlwgen.function_typer import check_and_get_type, function_typer
from xlwgen.tokenizer import GeneratorError
from xlwgen.type_registry import managed_registry, native_registry


@pytest.fixture
def native():
    reg = native_registry()
    reg.add("short", "double", "ConvertShort", False, True, "P")
    reg.add("double", "LPXLFOPER", "AsDouble", False, False, "B")
    return reg


def test_key_and_chain(native):
    key, chain = check_and_get_type(native, "short")
    assert key == "P"
    assert chain == ["short", "double"]


def test_empty_key_for_unregistered_base():
    native = native_registry()
    native.add("short", "double", "ConvertShort", False, False, "")
    key, chain = check_and_get_type(native, "short")
    assert key == ""
    assert chain == ["short", "double"]


def test_missing_excel_key_raises():
    native = native_registry()
    native.add("double", "LPXLFOPER", "AsDouble", False, False, "")
    with pytest.raises(GeneratorError, match="excel key not given"):
        check_and_get_type(native, "double")


def test_managed_passes_native_type(native):
    managed = managed_registry(native)
    key, chain = check_and_get_type(managed, "short")
    assert key == ""
    assert chain == ["short"]


def test_unknown_type_raises(native):
    with pytest.raises(GeneratorError, match="bad type"):
        check_and_get_type(native, "widget")


def test_function_typer_builds_descriptions(native):
    model = FunctionModel("short", "EchoShort", "echoes a short", volatile=True, help_id="7")
    model.add_argument("short", "x", "number to be echoed")
    model.add_argument("double", "y", "a double")
    (desc,) = function_typer(native, [model])
    assert desc.function_name == "EchoShort"
    assert desc.display_name == "EchoShort"
    assert desc.excel_key == "P"
    assert desc.volatile is True
    assert desc.help_id == "7"
    assert desc.number_of_arguments() == 2
    first, second = desc.arguments
    assert first.name == "x"
    assert first.description == "number to be echoed"
    assert first.the_type.name_identifier == "short"
    assert first.the_type.conversion_chain == ("short", "double")
    assert first.the_type.excel_key == "P"
    assert second.the_type.conversion_chain == ("double",)
    assert second.the_type.excel_key == "B"


def test_function_typer_keeps_order(native):
    models = [FunctionModel("short", name, "d") for name in ("a", "b", "c")]
    assert [d.function_name for d in function_typer(native, models)] == ["a", "b", "c"]


def test_function_typer_propagates_errors(native):
    model = FunctionModel("short", "f", "d")
    model.add_argument("widget", "w", "d")
    with pytest.raises(GeneratorError):
        function_typer(native, [model])