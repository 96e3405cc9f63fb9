"""Exercise descriptions, their completion state, compilation and running."""

from __future__ import annotations

import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Sequence

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring a missing file."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(str, Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """One line of source shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


@dataclass
class ExerciseOutput:
    """Captured output of a compiler or exercise binary."""

    stdout: str
    stderr: str
    success: bool = True


class CompilationError(Exception):
    """Raised when an exercise fails to compile."""

    def __init__(self, output: ExerciseOutput):
        super().__init__(output.stderr)
        self.output = output


def _capture(args: Sequence[str]) -> subprocess.CompletedProcess:
    return subprocess.run(list(args), capture_output=True)


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


@dataclass
class Exercise:
    """An exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def _clippy(self, target: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as exc:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if "NO_EMOJI" in os.environ
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise OSError(message) from exc
        # Build an executable too, so clippy exercises can be run afterwards.
        _capture(["rustc", str(self.path), "-o", target, *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS])
        # A clean is needed for clippy to report every lint.
        _capture(["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS])
        return _capture(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ]
        )

    def compile(self) -> "CompiledExercise":
        """Compile the exercise; raise CompilationError on failure."""
        target = temp_file()
        path = str(self.path)
        if self.mode is Mode.COMPILE:
            result = _capture(["rustc", path, "-o", target, *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS])
        elif self.mode is Mode.TEST:
            result = _capture(
                ["rustc", "--test", path, "-o", target, *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS]
            )
        else:
            result = self._clippy(target)

        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompilationError(
            ExerciseOutput(_decode(result.stdout), _decode(result.stderr), success=False)
        )

    def state(self) -> State:
        """Return the completion state read from the exercise file."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()

        lines = _lines(source)
        matched = next(
            (index for index, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError(f"no line of {self.path} holds the pending marker")

        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=index + 1, important=index == matched)
                for index, line in enumerate(lines[low : high + 1], start=low)
            )
        )

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed from the file."""
        return self.state().done


class CompiledExercise:
    """A successfully compiled exercise; removes its binary when closed."""

    def __init__(self, exercise: Exercise):
        self.exercise = exercise

    def run(self) -> ExerciseOutput:
        """Run the compiled binary and capture its output."""
        arg = "--show-output" if self.exercise.mode is Mode.TEST else ""
        result = subprocess.run([temp_file(), arg], capture_output=True)
        return ExerciseOutput(
            stdout=_decode(result.stdout),
            stderr=_decode(result.stderr),
            success=result.returncode == 0,
        )

    def close(self) -> None:
        """Remove the compiled binary."""
        clean()

    def __enter__(self) -> "CompiledExercise":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def load_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from info.toml contents."""
    data = tomllib.loads(text)
    entries = data.get("exercises")
    if not isinstance(entries, list):
        raise ValueError("missing field `exercises`")
    exercises = []
    for entry in entries:
        try:
            exercises.append(
                Exercise(
                    name=entry["name"],
                    path=Path(entry["path"]),
                    mode=Mode(entry["mode"]),
                    hint=entry["hint"],
                )
            )
        except KeyError as exc:
            raise ValueError(f"missing field `{exc.args[0]}`") from exc
    return exercises