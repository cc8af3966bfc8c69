import pytest
import common
import main

source = "* test\nloop mov r1,r2 ;copy\n  data 1,2\n"
formatted = "* test\n" + "loop     MOV r1, r2".ljust(40) + ";copy\n" + "         DATA 1, 2\n"

@pytest.fixture
def asm_file(tmp_path):
    p = tmp_path / "prog.a99"
    p.write_text(source)
    return p

def test_format_prints_result(asm_file, capsys):
    assert main.main(["format", str(asm_file)]) == main.EXIT_OK
    assert capsys.readouterr().out == formatted
    assert asm_file.read_text() == source

def test_format_in_place(asm_file, capsys):
    assert main.main(["format", "--in-place", str(asm_file)]) == main.EXIT_OK
    assert asm_file.read_text() == formatted
    assert "2 lines changed" in capsys.readouterr().out

def test_format_range(asm_file, capsys):
    assert main.main(["format", "--range", "3", "3", str(asm_file)]) == main.EXIT_OK
    out = capsys.readouterr().out
    assert out == "* test\nloop mov r1,r2 ;copy\n         DATA 1, 2\n"

def test_format_bad_range(asm_file, capsys):
    assert main.main(["format", "--range", "3", "1", str(asm_file)]) == main.EXIT_ERROR
    assert "Invalid line range" in capsys.readouterr().err

def test_format_options(asm_file, capsys):
    args = ["format", "--comment-column", "24", "--no-uppercase-directives",
            "--no-space-after-comma", str(asm_file)]
    assert main.main(args) == main.EXIT_OK
    out = capsys.readouterr().out
    assert out == "* test\n" + "loop     MOV r1,r2".ljust(24) + ";copy\n" + "         data 1,2\n"

def test_negative_column_is_rejected(asm_file):
    with pytest.raises(SystemExit):
        main.main(["format", "--comment-column", "-4", str(asm_file)])

def test_check_reports_lines(asm_file, capsys):
    assert main.main(["check", str(asm_file)]) == main.EXIT_CHANGES
    out = capsys.readouterr().out
    assert f"{asm_file}:2: would reformat" in out
    assert f"{asm_file}:3: would reformat" in out
    assert ":1:" not in out

def test_check_formatted_file(tmp_path, capsys):
    p = tmp_path / "ok.a99"
    p.write_text(formatted)
    assert main.main(["check", str(p)]) == main.EXIT_OK
    assert capsys.readouterr().out == ""

def test_missing_file(tmp_path, capsys):
    assert main.main(["check", str(tmp_path / "nope.a99")]) == main.EXIT_ERROR
    assert "File not found" in capsys.readouterr().err

def test_verbose_traces_to_stderr(asm_file, capsys):
    main.main(["format", "--verbose", str(asm_file)])
    captured = capsys.readouterr()
    assert captured.out == formatted
    assert "render_line" in captured.err
    assert not common.mode.trace

def test_no_command_prints_help(capsys):
    assert main.main([]) == main.EXIT_OK
    assert "usage" in capsys.readouterr().out

def test_in_place_keeps_crlf_line_endings(tmp_path, capsys):
    p = tmp_path / "dos.a99"
    p.write_bytes(source.replace("\n", "\r\n").encode())
    assert main.main(["format", "--in-place", str(p)]) == main.EXIT_OK
    assert p.read_bytes() == formatted.replace("\n", "\r\n").encode()

def test_in_place_leaves_formatted_crlf_file_alone(tmp_path, capsys):
    p = tmp_path / "dos.a99"
    data = formatted.replace("\n", "\r\n").encode()
    p.write_bytes(data)
    assert main.main(["format", "--in-place", str(p)]) == main.EXIT_OK
    assert p.read_bytes() == data
    assert capsys.readouterr().out == ""
