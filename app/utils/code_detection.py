# code_detection.py

"""
Cheap heuristic that decides whether a note reads like source code.
Used only to choose between the plain text editor and the
syntax-highlighted code editor on a note card.
"""

from __future__ import annotations

# A trimmed line starting with one of these is treated as code
CODE_LEAD_CHARS = frozenset("{}[]().;")

# Substrings that mark a line as code; keyword variants keep their
# trailing space so that e.g. "classic" does not match "class "
CODE_MARKERS = ("=>", "function", "const ", "let ", "var ", "class ")

INDENT = "  "


def is_code_line(line: str) -> bool:
    """
    Return True if a single line carries any code signal:
      - starts with at least two spaces (and has content after them)
      - trimmed line opens with a bracket, paren, dot or semicolon
      - trimmed line contains an arrow or a declaration keyword
    """
    stripped = line.strip()
    if not stripped:
        # Whitespace-only lines never count as code
        return False

    if line.startswith(INDENT):
        return True
    if stripped[0] in CODE_LEAD_CHARS:
        return True
    return any(marker in stripped for marker in CODE_MARKERS)


def is_code_like(text: str | None) -> bool:
    """
    Classify a block of text as code when strictly more than half of its
    lines are code lines. Empty text and single lines are never code.
    """
    if not text:
        return False

    lines = text.split("\n")
    if len(lines) < 2:
        return False

    code_lines = sum(1 for line in lines if is_code_line(line))
    return code_lines > len(lines) / 2


def editor_kind(text: str | None) -> str:
    """
    Return "code" or "text", the editor widget a note card should render.
    """
    return "code" if is_code_like(text) else "text"
