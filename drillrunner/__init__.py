"""Exercise lists, completion state, compiling and running of small Rust exercises."""

__version__ = "5.4.1"