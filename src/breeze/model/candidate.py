"""Candidate grammar: variant chain, prefix, sign, arbitrary value and opacity."""

from __future__ import annotations

from dataclasses import dataclass

WILDCARD = "*"


@dataclass(frozen=True)
class ParsedCandidate:
    """A candidate token split into its variant chain and base utility.

    Attributes:
        raw: The candidate exactly as extracted.
        variants: Variant names, outermost first.
        base: The trailing token as written (sign and prefix included); the
            generated class name is derived from it.
        name: The utility name with sign and prefix removed, e.g.
            ``text-red-500/50`` or ``w-[10px]``.
        negative: Whether the base carried a leading ``-``.
    """

    raw: str
    variants: tuple[str, ...]
    base: str
    name: str
    negative: bool = False

    @property
    def is_wildcard(self) -> bool:
        return self.raw == WILDCARD


def split_outside_brackets(text: str, separator: str) -> list[str] | None:
    """Split *text* on *separator*, ignoring occurrences inside ``[...]``.

    Returns None when the brackets are unbalanced.
    """
    parts: list[str] = []
    depth = 0
    start = 0
    i = 0
    while i < len(text):
        char = text[i]
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth < 0:
                return None
        elif depth == 0 and text.startswith(separator, i):
            parts.append(text[start:i])
            i += len(separator)
            start = i
            continue
        i += 1
    if depth != 0:
        return None
    parts.append(text[start:])
    return parts


def parse_candidate(candidate: str, separator: str = ":", prefix: str = "") -> ParsedCandidate | None:
    """Parse a raw candidate, or return None when it cannot name a utility."""
    if candidate == WILDCARD:
        return ParsedCandidate(raw=candidate, variants=(), base=WILDCARD, name=WILDCARD)

    parts = split_outside_brackets(candidate, separator)
    if not parts or any(not part for part in parts):
        return None
    *variants, base = parts

    name = base
    negative = name.startswith("-")
    if negative:
        name = name[1:]
    if prefix:
        if not name.startswith(prefix):
            return None
        name = name[len(prefix):]
    if not name:
        return None

    return ParsedCandidate(
        raw=candidate,
        variants=tuple(variants),
        base=base,
        name=name,
        negative=negative,
    )


def split_opacity(name: str) -> tuple[str, str | None]:
    """Split a trailing ``/modifier`` outside brackets: ``red-500/50`` -> (``red-500``, ``50``)."""
    depth = 0
    for i in range(len(name) - 1, -1, -1):
        char = name[i]
        if char == "]":
            depth += 1
        elif char == "[":
            depth -= 1
        elif char == "/" and depth == 0:
            modifier = name[i + 1:]
            if not modifier or i == 0:
                return name, None
            return name[:i], modifier
    return name, None


def split_arbitrary(name: str) -> tuple[str, str] | None:
    """Split ``root-[value]`` into (``root``, ``value``).

    Underscores in the value stand for spaces.
    """
    if not name.endswith("]"):
        return None
    marker = name.find("-[")
    if marker <= 0:
        return None
    value = name[marker + 2:-1]
    if not value:
        return None
    return name[:marker], value.replace("_", " ")


def arbitrary_value(modifier: str) -> str | None:
    """Return the inner text of a ``[value]`` modifier, or None."""
    if len(modifier) > 2 and modifier.startswith("[") and modifier.endswith("]"):
        return modifier[1:-1].replace("_", " ")
    return None
