from stormdsl.errors import ValidationError


def test_single_error_text():
    assert str(ValidationError(["boom"])) == "1 error occurred:\n\t* boom\n\n"


def test_several_errors_text():
    text = str(ValidationError(["a", "b"]))
    assert text == "2 errors occurred:\n\t* a\n\t* b\n\n"


def test_nested_errors_are_flattened():
    inner = ValidationError(["a", "b"])
    outer = ValidationError([inner, "c"])
    assert outer.errors == ("a", "b", "c")
    assert str(outer).startswith("3 errors occurred:")


def test_exceptions_become_messages():
    error = ValidationError([KeyError("x"), ValueError("bad value")])
    assert error.errors == ("'x'", "bad value")


def test_wrapping_keeps_inner_text_in_message():
    inner = ValidationError(["missing"])
    outer = ValidationError([f"model User: {inner}"])
    assert len(outer.errors) == 1
    assert outer.errors[0].startswith("model User: 1 error occurred:")


def test_is_a_value_error_carrying_its_messages():
    error = ValidationError(["oops"])
    assert isinstance(error, ValueError)
    assert error.errors == ("oops",)
    assert str(error) == "1 error occurred:\n\t* oops\n\n"