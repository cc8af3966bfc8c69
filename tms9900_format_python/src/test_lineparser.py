import pytest
from lineparser import parse_line, is_full_line_comment
from state import ParsedLine

def fields(s):
    return (s.label, s.instruction, s.operands, s.comment)

def test_label_instruction_operands_comment():
    s = parse_line("loop mov r1,r2 ;copy")
    assert fields(s) == ("loop", "mov", "r1,r2", ";copy")
    assert s.src_line == "loop mov r1,r2 ;copy"

def test_instruction_without_label():
    assert fields(parse_line("A R1,R2")) == ("", "A", "R1,R2", "")
    assert fields(parse_line("       li   r0,>1234")) == ("", "li", "r0,>1234", "")

def test_directive_without_label():
    assert fields(parse_line("  DATA 1, 2, 3")) == ("", "DATA", "1, 2, 3", "")

def test_dot_directive_is_not_a_label():
    assert fields(parse_line(".ifdef DEBUG")) == ("", ".ifdef", "DEBUG", "")

def test_bare_label():
    assert fields(parse_line("START")) == ("START", "", "", "")
    assert fields(parse_line("   start   ")) == ("start", "", "", "")

def test_bare_label_with_comment():
    assert fields(parse_line("START ; entry point")) == ("START", "", "", "; entry point")

def test_single_operation():
    assert fields(parse_line("   RTWP")) == ("", "RTWP", "", "")

@pytest.mark.parametrize("line", ["* full comment", "   * full comment", "; note", "\t;note"])
def test_full_line_comment(line):
    s = parse_line(line)
    assert fields(s) == ("", "", "", line.lstrip())
    assert is_full_line_comment(line)

def test_star_inside_operands_is_not_a_comment():
    assert fields(parse_line("  mov *r1+,r2")) == ("", "mov", "*r1+,r2", "")

def test_only_first_semicolon_starts_the_comment():
    s = parse_line("LOOP  JMP  LOOP  ; again ; and again")
    assert fields(s) == ("LOOP", "JMP", "LOOP", "; again ; and again")

def test_operands_are_joined_with_single_spaces():
    s = parse_line("tab  text  'HELLO   WORLD'")
    assert fields(s) == ("tab", "text", "'HELLO WORLD'", "")

def test_tabs_separate_fields():
    assert fields(parse_line("loop\tmov\tr1,r2")) == ("loop", "mov", "r1,r2", "")

def test_unknown_first_token_is_a_label():
    assert fields(parse_line("loop frob r1,r2")) == ("loop", "frob", "r1,r2", "")

@pytest.mark.parametrize("line", ["", "   ", "\t \t"])
def test_blank_line(line):
    s = parse_line(line)
    assert fields(s) == ("", "", "", "")
    assert not s.has_code()
    assert not s.is_comment_only()

def test_parsed_line_defaults():
    s = ParsedLine()
    assert fields(s) == ("", "", "", "")
    assert s.src_line == ""
