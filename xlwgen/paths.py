"""Helpers for file names and writing generated files."""

from __future__ import annotations

from .tokenizer import GeneratorError


def _last_separator(path: str) -> int:
    return max(path.rfind("/"), path.rfind("\\"))


def strip_path(path: str) -> str:
    """Return the part of a path after its last separator (a leading one is ignored)."""
    pos = _last_separator(path)
    return path[pos + 1:] if pos > 0 else path


def get_dir(path: str) -> str:
    """Return the part of a path before its last separator, or '' if there is none."""
    pos = _last_separator(path)
    return path[:pos] if pos > 0 else ""


def write_output_file(path: str, text: str) -> None:
    """Write generated text to a file."""
    try:
        with open(path, "w", encoding="utf-8") as output:
            output.write(text)
    except OSError as exc:
        raise GeneratorError("output file not created") from exc