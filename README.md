# drillrunner

A library for working with a course of small Rust exercises. Each exercise is
a `.rs` file with a compile error, a failing test or a lint to fix. An
exercise counts as pending while its file holds an `// I AM NOT DONE`
comment. `drillrunner` reads the exercise list, tells which exercises are
done, compiles and runs them with `rustc`, and writes a `rust-project.json`
so that rust-analyzer can see the exercise files.

It has no dependencies outside the standard library.

## Requirements

- Python 3.11 or later
- To compile and run exercises: a Rust toolchain with `rustc` on your `PATH`.
  Clippy exercises also need `cargo` and `clippy`.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Exercises: `drillrunner.exercise`

The exercise list is TOML with an `exercises` array. Each entry has a `name`,
a `path`, a `mode` (`compile`, `test` or `clippy`) and a `hint`:

```python
from drillrunner.exercise import load_exercises

with open("info.toml", encoding="utf-8") as fh:
    exercises = load_exercises(fh.read())

pending = [e for e in exercises if not e.looks_done()]
```

`load_exercises` raises `ValueError` when a field is missing.

`Exercise.state()` reads the exercise file and returns a `State`. Its `done`
is true when the file has no `I AM NOT DONE` marker. Otherwise `context`
holds `ContextLine` items (`line`, 1-based `number`, `important`) for up to
two lines on either side of the marker. The marker line itself is flagged as
important.

`Exercise.compile()` builds the exercise into a temporary binary in the
current directory and returns a `CompiledExercise`. Test exercises are built
with `--test`. Clippy exercises get a `Cargo.toml` written to
`./exercises/clippy/` and are linted with `-D warnings`. If the build fails,
`compile()` raises `CompilationError`, whose `output` holds the compiler's
`stdout` and `stderr`. `CompiledExercise.run()` returns an `ExerciseOutput`
with `stdout`, `stderr` and `success`. Use it as a context manager, or call
`close()`, to remove the binary afterwards:

```python
from drillrunner.exercise import CompilationError

try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except CompilationError as exc:
    print(exc.output.stderr)
```

## rust-analyzer: `drillrunner.project`

```python
from drillrunner.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # RUST_SRC_PATH, or asks rustc for its sysroot
project.exercises_to_json("exercises")
project.write_to_disk()            # ./rust-project.json by default
```

Every `.rs` file under the given directory becomes a crate (edition 2021, with
`cfg` set to `test`). `to_json()` returns the same JSON as a string.

## Terminal output: `drillrunner.ui`

`warn(message)` prints a red warning line and `success(message)` prints a
green success line. `bold(text)` and `blue(text)` return styled text. Styling
is used only when standard output is a terminal. `NO_COLOR` turns it off and
`CLICOLOR_FORCE` turns it on. Set `NO_EMOJI` to print plain-text markers in
place of emoji.

## Worked drills: `drillrunner.drills`

The `drillrunner.drills` subpackage holds worked Python versions of the
exercise topics:

- `quizzes`: apple prices, a string transformer, report cards
- `basics`: sale prices, `bigger`, `foo_if_fizz`, `maybe_icecream`, a generic `Wrapper`
- `conversions`: averages, byte and character counts, parsing a `Person`
- `colors`: building a `Color` from three integers with range checks
- `errors`: name tags, token costs, positive nonzero integers
- `messages`: messages that change a small `State`
- `baskets`: fruit baskets and a football scores table
- `iteration`: capitalising words, exact division, factorials, counting progress
- `text`: trimming, composing and replacing strings, doubling lists
- `pointers`: cons lists and a clone-on-write sequence
- `concurrency`: per-offset sums in threads, timed workers, two senders on one queue
- `structures`: orders from a template, packages with fees
- `traits`: shared behaviour through base classes and single dispatch

## What this package does not do

There is no command-line program. The package installs no command, so there is
no `watch`, `verify`, `run`, `hint`, `reset` or `list` to type in a shell. It
does not work through the exercises in order, re-check them when files change,
show progress bars or restore exercise files. You call the pieces above from
your own code.