"""Tests for the Rich console factory."""

from fieldctl.output.console import create_console, get_output, style_for_value_type


def test_console_renders_to_buffer() -> None:
    console = create_console(no_color=True)
    console.print("hello")
    assert get_output(console) == "hello\n"


def test_width_override() -> None:
    assert create_console(width=40).width == 40


def test_value_type_styles() -> None:
    assert style_for_value_type("value_set") == "fc.type.value_set"
    assert style_for_value_type("unknown") == ""
