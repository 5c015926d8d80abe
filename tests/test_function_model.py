from xlwgen.function_model import FunctionModel, ModelArgument


def test_defaults():
    model = FunctionModel("short", "EchoShort", "echoes a short")
    assert model.return_type == "short"
    assert model.name == "EchoShort"
    assert model.description == "echoes a short"
    assert model.volatile is False
    assert model.time is False
    assert model.threadsafe is False
    assert model.help_id == ""
    assert model.asynchronous is False
    assert model.macro_sheet is False
    assert model.cluster_safe is False
    assert model.number_of_args() == 0


def test_add_arguments_in_order():
    model = FunctionModel("double", "Add", "adds")
    model.add_argument("double", "x", "first")
    model.add_argument("double", "y", "second")
    assert model.number_of_args() == 2
    assert model.arguments == [
        ModelArgument("double", "x", "first"),
        ModelArgument("double", "y", "second"),
    ]
    assert [arg.name for arg in model.arguments] == ["x", "y"]


def test_flags_given_explicitly():
    model = FunctionModel(
        "double", "F", "d", volatile=True, threadsafe=True, help_id="42",
        macro_sheet=True, cluster_safe=True,
    )
    assert model.volatile and model.threadsafe and model.macro_sheet and model.cluster_safe
    assert model.help_id == "42"


def test_time_can_be_changed():
    model = FunctionModel("double", "F", "d")
    model.time = True
    assert model.time is True


def test_argument_lists_not_shared():
    first = FunctionModel("double", "A", "a")
    second = FunctionModel("double", "B", "b")
    first.add_argument("double", "x", "desc")
    assert second.number_of_args() == 0
    assert first.number_of_args() == 1