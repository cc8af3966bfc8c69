import dataclasses
import pytest
import state
from state import FormatConfig, get_format_config

def test_defaults():
    c = FormatConfig()
    assert c.label_column == 0
    assert c.instruction_column == 9
    assert c.operand_column == 18
    assert c.comment_column == 40
    assert c.uppercase_instructions
    assert c.uppercase_directives
    assert c.space_after_comma

def test_config_is_frozen():
    c = FormatConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.comment_column = 20

def test_with_changes_makes_a_copy():
    c = FormatConfig()
    d = c.with_changes(comment_column=32)
    assert d.comment_column == 32
    assert c.comment_column == 40

def test_empty_settings_give_defaults():
    assert get_format_config({}) == state.default_config

def test_settings_are_read():
    settings = {
        "format.instructionColumn": 8,
        "format.commentColumn": 32,
        "format.uppercaseDirectives": False,
    }
    c = get_format_config(settings)
    assert c.instruction_column == 8
    assert c.comment_column == 32
    assert not c.uppercase_directives
    assert c.uppercase_instructions

def test_string_settings_are_converted():
    settings = {
        "format.commentColumn": "36",
        "format.spaceAfterComma": "false",
        "format.uppercaseInstructions": "true",
    }
    c = get_format_config(settings)
    assert c.comment_column == 36
    assert not c.space_after_comma
    assert c.uppercase_instructions

def test_bad_settings_fall_back_to_defaults(capsys):
    settings = {
        "format.commentColumn": "wide",
        "format.labelColumn": -1,
        "format.spaceAfterComma": "maybe",
    }
    assert get_format_config(settings) == state.default_config
    err = capsys.readouterr().err
    assert "format.commentColumn" in err
    assert "format.labelColumn" in err
    assert "format.spaceAfterComma" in err

def test_settings_round_trip():
    c = FormatConfig(comment_column=30, space_after_comma=False)
    assert get_format_config(state.config_to_settings(c)) == c

@pytest.mark.parametrize("x, expected", [
    (True, True), (False, False), (1, True), (0, False),
    ("true", True), ("False", False), ("yes", True), ("off", False),
])
def test_to_bool(x, expected):
    assert state.to_bool(x) is expected

def test_to_column():
    assert state.to_column("12") == 12
    with pytest.raises(ValueError):
        state.to_column("-3")
    with pytest.raises(ValueError):
        state.to_column(True)
