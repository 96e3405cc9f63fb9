import os
import stat
from pathlib import Path

import pytest

from drillrunner.exercise import (
    CompilationError,
    ContextLine,
    Exercise,
    Mode,
    State,
    load_exercises,
    temp_file,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"
PENDING_TEST = "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n"


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def _fake_tool(tmp_path, monkeypatch, name, body):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir(exist_ok=True)
    script = bin_dir / name
    script.write_text("#!/bin/sh\n" + body, encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    monkeypatch.setenv("PATH", str(bin_dir) + os.pathsep + os.environ.get("PATH", ""))


WRITE_BINARY = """out=""
while [ $# -gt 0 ]; do
  if [ "$1" = "-o" ]; then out="$2"; fi
  shift
done
printf '#!/bin/sh\\n%s\\n' "$BINARY_BODY" > "$out"
chmod +x "$out"
"""


def test_pending_state(tmp_path):
    exercise = Exercise("pending_exercise", _write(tmp_path / "p.rs", PENDING), Mode.COMPILE, "")
    expected = (
        ContextLine("// fake_exercise", 1, False),
        ContextLine("", 2, False),
        ContextLine("// I AM NOT DONE", 3, True),
        ContextLine("", 4, False),
        ContextLine("fn main() {", 5, False),
    )
    assert exercise.state() == State(expected)
    assert not exercise.looks_done()


def test_finished_exercise(tmp_path):
    exercise = Exercise("finished_exercise", _write(tmp_path / "f.rs", FINISHED), Mode.COMPILE, "")
    assert exercise.state() == State()
    assert exercise.looks_done()


def test_pending_marker_on_first_line(tmp_path):
    exercise = Exercise("t", _write(tmp_path / "t.rs", PENDING_TEST), Mode.TEST, "")
    state = exercise.state()
    assert [line.number for line in state.context] == [1, 2, 3]
    assert [line.important for line in state.context] == [True, False, False]
    assert state.context[2].line == "#[test]"


def test_marker_with_doc_comment_and_spacing(tmp_path):
    exercise = Exercise("d", _write(tmp_path / "d.rs", "fn x() {}\n  ///   I  AM NOT   DONE\r\n"), Mode.COMPILE, "")
    state = exercise.state()
    assert state.context[-1] == ContextLine("  ///   I  AM NOT   DONE", 2, True)


def test_display_is_path(tmp_path):
    path = tmp_path / "x.rs"
    assert str(Exercise("x", path, Mode.COMPILE, "")) == str(path)


def test_load_exercises():
    text = """
[[exercises]]
name = "intro1"
path = "exercises/intro/intro1.rs"
mode = "compile"
hint = "Remove the comment."

[[exercises]]
name = "tests1"
path = "exercises/tests/tests1.rs"
mode = "test"
hint = ""
"""
    exercises = load_exercises(text)
    assert [e.name for e in exercises] == ["intro1", "tests1"]
    assert exercises[0].path == Path("exercises/intro/intro1.rs")
    assert exercises[1].mode is Mode.TEST
    assert exercises[0].hint == "Remove the comment."


def test_load_exercises_missing_field():
    with pytest.raises(ValueError):
        load_exercises('[[exercises]]\nname = "a"\npath = "a.rs"\nmode = "test"\n')


def test_load_exercises_bad_mode():
    with pytest.raises(ValueError):
        load_exercises('[[exercises]]\nname = "a"\npath = "a.rs"\nmode = "lint"\nhint = ""\n')


def test_clean(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _fake_tool(tmp_path, monkeypatch, "rustc", "exit 0\n")
    Path(temp_file()).touch()
    exercise = Exercise("example", _write(tmp_path / "p.rs", PENDING), Mode.COMPILE, "")
    compiled = exercise.compile()
    compiled.close()
    assert not Path(temp_file()).exists()


def test_context_manager_cleans(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _fake_tool(tmp_path, monkeypatch, "rustc", "exit 0\n")
    exercise = Exercise("example", _write(tmp_path / "p.rs", PENDING), Mode.COMPILE, "")
    with exercise.compile():
        Path(temp_file()).touch()
    assert not Path(temp_file()).exists()


def test_exercise_with_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BINARY_BODY", 'echo "THIS TEST TOO SHALL PASS $1"')
    _fake_tool(tmp_path, monkeypatch, "rustc", WRITE_BINARY)
    exercise = Exercise("exercise_with_output", _write(tmp_path / "t.rs", "#[test]\nfn passing() {}\n"), Mode.TEST, "")
    with exercise.compile() as compiled:
        out = compiled.run()
    assert out.success
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert "--show-output" in out.stdout


def test_failing_run_reports_failure(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BINARY_BODY", "echo broken >&2; exit 3")
    _fake_tool(tmp_path, monkeypatch, "rustc", WRITE_BINARY)
    exercise = Exercise("bad", _write(tmp_path / "b.rs", FINISHED), Mode.COMPILE, "")
    with exercise.compile() as compiled:
        out = compiled.run()
    assert not out.success
    assert "broken" in out.stderr


def test_compilation_failure(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _fake_tool(tmp_path, monkeypatch, "rustc", "echo 'error: expected pattern' >&2\nexit 1\n")
    Path(temp_file()).touch()
    exercise = Exercise("compFailure", _write(tmp_path / "c.rs", "fn main() {\n    let\n}\n"), Mode.COMPILE, "")
    with pytest.raises(CompilationError) as info:
        exercise.compile()
    assert "error: expected pattern" in info.value.output.stderr
    assert info.value.output.success is False
    assert not Path(temp_file()).exists()