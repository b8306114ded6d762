"""Whole-file reading: every line trimmed, nothing streamed."""

import os


def get_lines(filepath: str) -> list[str]:
    """Read *filepath* fully and return its lines, stripped of surrounding whitespace.

    Raises FileNotFoundError if the path is not a regular file.
    """
    if not os.path.isfile(filepath):
        raise FileNotFoundError(f"File not found: {filepath}")
    with open(filepath, "r", encoding="utf-8", errors="replace") as f:
        content = f.read()
    return [line.strip() for line in content.split("\n")]
