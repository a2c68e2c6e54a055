"""Selector helpers: identifier escaping and class-level rewriting.

Selectors are handled as strings. A light scanner locates class simple
selectors while skipping quoted strings and attribute selectors, and edits
are applied back-to-front against the offsets found by the scan.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

_HEX = "0123456789abcdefABCDEF"
_IDENT_RE = re.compile(r"[A-Za-z0-9_-]")


def escape_class_name(name: str) -> str:
    """Serialize *name* as a CSS identifier (CSSOM ``CSS.escape`` rules)."""
    out: list[str] = []
    for index, char in enumerate(name):
        code = ord(char)
        if code == 0:
            out.append("\ufffd")
        elif (
            0x01 <= code <= 0x1F
            or code == 0x7F
            or (index == 0 and char.isdigit() and char.isascii())
            or (index == 1 and char.isdigit() and char.isascii() and name[0] == "-")
        ):
            out.append(f"\\{code:x} ")
        elif index == 0 and char == "-" and len(name) == 1:
            out.append("\\-")
        elif code >= 0x80 or _IDENT_RE.match(char):
            out.append(char)
        else:
            out.append(f"\\{char}")
    return "".join(out)


def unescape_identifier(raw: str) -> str:
    """Inverse of :func:`escape_class_name` for a single identifier."""
    out: list[str] = []
    i = 0
    while i < len(raw):
        char = raw[i]
        if char != "\\" or i + 1 >= len(raw):
            out.append(char)
            i += 1
            continue
        j = i + 1
        while j < len(raw) and j - i <= 6 and raw[j] in _HEX:
            j += 1
        if j > i + 1:
            out.append(chr(int(raw[i + 1:j], 16)))
            if j < len(raw) and raw[j] in " \t\n":
                j += 1
            i = j
        else:
            out.append(raw[i + 1])
            i += 2
    return "".join(out)


def class_selector(name: str) -> str:
    """``.`` followed by the escaped class name."""
    return f".{escape_class_name(name)}"


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ClassToken:
    """A class simple selector found in a selector string."""

    start: int  # offset of the leading "."
    end: int
    name: str  # unescaped class name
    depth: int  # parenthesis nesting, 0 for top level
    group: int  # index within the comma-separated selector list


def _read_identifier(selector: str, i: int) -> int:
    """Return the offset just past the identifier starting at *i*."""
    while i < len(selector):
        char = selector[i]
        if char == "\\":
            j = i + 1
            while j < len(selector) and j - i <= 6 and selector[j] in _HEX:
                j += 1
            if j > i + 1:
                if j < len(selector) and selector[j] in " \t\n":
                    j += 1
                i = j
            else:
                i += 2
        elif ord(char) >= 0x80 or _IDENT_RE.match(char):
            i += 1
        else:
            break
    return min(i, len(selector))


def _skip_quoted(selector: str, i: int) -> int:
    quote = selector[i]
    i += 1
    while i < len(selector) and selector[i] != quote:
        i += 2 if selector[i] == "\\" else 1
    return i + 1


def _skip_attribute(selector: str, i: int) -> int:
    i += 1
    while i < len(selector) and selector[i] != "]":
        if selector[i] in "\"'":
            i = _skip_quoted(selector, i)
        else:
            i += 2 if selector[i] == "\\" else 1
    return i + 1


def scan_classes(selector: str) -> list[ClassToken]:
    """Locate every class simple selector in *selector*."""
    tokens: list[ClassToken] = []
    depth = 0
    group = 0
    i = 0
    while i < len(selector):
        char = selector[i]
        if char in "\"'":
            i = _skip_quoted(selector, i)
        elif char == "[":
            i = _skip_attribute(selector, i)
        elif char == "\\":
            i += 2
        elif char == "(":
            depth += 1
            i += 1
        elif char == ")":
            depth -= 1
            i += 1
        elif char == "," and depth == 0:
            group += 1
            i += 1
        elif char == ".":
            end = _read_identifier(selector, i + 1)
            if end > i + 1:
                name = unescape_identifier(selector[i + 1:end])
                tokens.append(ClassToken(start=i, end=end, name=name, depth=depth, group=group))
                i = end
            else:
                i += 1
        else:
            i += 1
    return tokens


def split_selector_list(selector: str) -> list[str]:
    """Split a selector list on top-level commas."""
    parts: list[str] = []
    depth = 0
    start = 0
    i = 0
    while i < len(selector):
        char = selector[i]
        if char in "\"'":
            i = _skip_quoted(selector, i)
            continue
        if char == "[":
            i = _skip_attribute(selector, i)
            continue
        if char == "\\":
            i += 2
            continue
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "," and depth == 0:
            parts.append(selector[start:i].strip())
            start = i + 1
        i += 1
    parts.append(selector[start:].strip())
    return parts


def _pseudo_class_run_end(selector: str, i: int) -> int:
    """Skip the pseudo-classes directly following offset *i*.

    Stops before pseudo-elements (``::``) so an inserted pseudo-class stays
    in front of them.
    """
    while i < len(selector) and selector[i] == ":" and selector[i + 1:i + 2] != ":":
        j = _read_identifier(selector, i + 1)
        if j == i + 1:
            break
        if j < len(selector) and selector[j] == "(":
            depth = 0
            while j < len(selector):
                if selector[j] == "(":
                    depth += 1
                elif selector[j] == ")":
                    depth -= 1
                    if depth == 0:
                        j += 1
                        break
                j += 1
        i = j
    return i


# ---------------------------------------------------------------------------
# Rewriting
# ---------------------------------------------------------------------------


def rewrite_classes(
    selector: str,
    update: Callable[[str], str],
    *,
    pseudo: str | None = None,
    last_only: bool = False,
    target: str | None = None,
) -> str | None:
    """Rename class selectors through *update*.

    With ``last_only`` only the last top-level class of each selector in the
    list is renamed. With *pseudo*, ``:pseudo`` is attached to every renamed
    class after its existing pseudo-classes. With *target*, only classes whose
    unescaped name equals it are considered, so ancestor classes added by
    earlier variants are left alone.

    Returns None when the selector has no class to rewrite.
    """
    tokens = scan_classes(selector)
    if target is not None:
        tokens = [token for token in tokens if token.name == target]
    if last_only:
        last: dict[int, ClassToken] = {}
        for token in tokens:
            if token.depth == 0:
                last[token.group] = token
        tokens = list(last.values())
    if not tokens:
        return None

    edits: list[tuple[int, int, str]] = []
    for token in tokens:
        edits.append((token.start, token.end, class_selector(update(token.name))))
        if pseudo is not None:
            at = _pseudo_class_run_end(selector, token.end)
            edits.append((at, at, f":{pseudo}"))

    result = selector
    for start, end, text in sorted(edits, key=lambda e: (e[0], e[1]), reverse=True):
        result = result[:start] + text + result[end:]
    return result


def update_all_classes(selector: str, update: Callable[[str], str]) -> str | None:
    """Rename every class in *selector*; None when there is none."""
    return rewrite_classes(selector, update)


def update_last_classes(selector: str, update: Callable[[str], str]) -> str | None:
    """Rename the innermost trailing class of each selector; None when there is none."""
    return rewrite_classes(selector, update, last_only=True)


def prepend_ancestor(selector: str, ancestor: str) -> str:
    """Scope each selector in the list under *ancestor* with a descendant combinator."""
    return ", ".join(f"{ancestor} {part}" for part in split_selector_list(selector))
