"""Utility registry: static, dynamic and global utilities with layer and order."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from breeze.model.candidate import WILDCARD, ParsedCandidate, arbitrary_value, split_arbitrary, split_opacity
from breeze.model.rule import Layer, RuleFragment

Build = Callable[[str], "dict[str, str] | None"]

_NUMERIC_RE = re.compile(r"^\d*\.?\d+[a-zA-Z%]*$")
_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class UtilityMatch:
    """A resolved utility: fragments with ``&`` standing for the class selector."""

    fragments: tuple[RuleFragment, ...]
    layer: Layer
    order: int
    variants: frozenset[str] | None = None

    def allows(self, variant_names: Iterable[str]) -> bool:
        """Whether every variant in the chain is supported by this utility."""
        if self.variants is None:
            return True
        return all(name in self.variants for name in variant_names)


@dataclass(frozen=True)
class StaticUtility:
    """A fixed name mapped to fixed fragments."""

    name: str
    fragments: tuple[RuleFragment, ...]
    layer: Layer
    order: int
    variants: frozenset[str] | None = None

    def match(self) -> UtilityMatch:
        return UtilityMatch(self.fragments, self.layer, self.order, self.variants)


@dataclass(frozen=True)
class DynamicUtility:
    """A root (``p``, ``text``) whose value comes from a theme scale.

    Occupies ``len(values) + 1`` registration ordinals: one per theme value
    in theme order, then one shared by arbitrary values.
    """

    root: str
    values: dict[str, str]
    build: Build
    layer: Layer
    order: int
    variants: frozenset[str] | None = None
    negative: bool = False
    arbitrary: bool = True
    color: bool = False
    opacity: dict[str, str] | None = None

    def resolve(
        self,
        key: str | None,
        arbitrary: str | None,
        negative: bool = False,
        alpha: str | None = None,
    ) -> UtilityMatch | None:
        if negative and not self.negative:
            return None
        if alpha is not None and not self.color:
            return None

        if arbitrary is not None:
            if not self.arbitrary:
                return None
            value = arbitrary
            order = self.order + len(self.values)
        else:
            if key is None or key not in self.values:
                return None
            value = self.values[key]
            order = self.order + list(self.values).index(key)

        if negative:
            negated = negate_value(value)
            if negated is None:
                return None
            value = negated
        if alpha is not None:
            alpha_value = arbitrary_value(alpha) or (self.opacity or {}).get(alpha)
            if alpha_value is None:
                return None
            colored = with_alpha(value, alpha_value)
            if colored is None:
                return None
            value = colored

        declarations = self.build(value)
        if not declarations:
            return None
        return UtilityMatch(
            fragments=(RuleFragment.create("&", declarations),),
            layer=self.layer,
            order=order,
            variants=self.variants,
        )


class UtilityRegistry:
    """Name -> declarations lookup with a layer and registration order per entry."""

    def __init__(self) -> None:
        self._static: dict[str, list[StaticUtility]] = {}
        self._dynamic: dict[str, list[DynamicUtility]] = {}
        self._next_order = 0

    def _reserve(self, count: int = 1) -> int:
        order = self._next_order
        self._next_order += count
        return order

    # --- registration ---------------------------------------------------------

    def add_static(
        self,
        name: str,
        rules: dict[str, str] | Sequence[RuleFragment],
        *,
        layer: Layer = Layer.UTILITIES,
        variants: Iterable[str] | None = None,
    ) -> StaticUtility:
        """Register a fixed utility.

        *rules* is either a declaration mapping (applied to the class itself)
        or a sequence of fragments whose selectors use ``&`` for the class.
        """
        if isinstance(rules, dict):
            fragments: tuple[RuleFragment, ...] = (RuleFragment.create("&", rules),)
        else:
            fragments = tuple(rules)
        utility = StaticUtility(
            name=name,
            fragments=fragments,
            layer=layer,
            order=self._reserve(),
            variants=frozenset(variants) if variants is not None else None,
        )
        self._static.setdefault(name, []).append(utility)
        return utility

    def add_utilities(
        self,
        utilities: dict[str, dict[str, str]],
        *,
        layer: Layer = Layer.UTILITIES,
        variants: Iterable[str] | None = None,
    ) -> None:
        """Register several fixed utilities in mapping order."""
        for name, declarations in utilities.items():
            self.add_static(name, declarations, layer=layer, variants=variants)

    def add_global(self, fragments: Sequence[RuleFragment], *, layer: Layer = Layer.BASE) -> StaticUtility:
        """Register fragments emitted for every build through the ``*`` sentinel."""
        return self.add_static(WILDCARD, fragments, layer=layer, variants=())

    def add_dynamic(
        self,
        root: str,
        values: dict[str, str],
        build: Build,
        *,
        layer: Layer = Layer.UTILITIES,
        variants: Iterable[str] | None = None,
        negative: bool = False,
        arbitrary: bool = True,
        color: bool = False,
        opacity: dict[str, str] | None = None,
    ) -> DynamicUtility:
        """Register a utility family addressed as ``root-<key>`` or ``root-[value]``.

        The ``DEFAULT`` key is addressed by the bare root. Colour utilities
        accept a ``/<opacity>`` modifier resolved against *opacity*.
        """
        utility = DynamicUtility(
            root=root,
            values=dict(values),
            build=build,
            layer=layer,
            order=self._reserve(len(values) + 1),
            variants=frozenset(variants) if variants is not None else None,
            negative=negative,
            arbitrary=arbitrary,
            color=color,
            opacity=dict(opacity) if opacity is not None else None,
        )
        self._dynamic.setdefault(root, []).append(utility)
        return utility

    # --- lookup ---------------------------------------------------------------

    def resolve(self, parsed: ParsedCandidate) -> list[UtilityMatch]:
        """Every utility the candidate's base token names; empty when none."""
        if parsed.is_wildcard:
            return [utility.match() for utility in self._static.get(WILDCARD, [])]

        matches: list[UtilityMatch] = []
        if not parsed.negative:
            matches.extend(utility.match() for utility in self._static.get(parsed.name, []))
        matches.extend(self._resolve_dynamic(parsed.name, parsed.negative, None))
        if not matches:
            name, alpha = split_opacity(parsed.name)
            if alpha is not None:
                matches.extend(self._resolve_dynamic(name, parsed.negative, alpha))
        return matches

    def _resolve_dynamic(self, name: str, negative: bool, alpha: str | None) -> list[UtilityMatch]:
        matches: list[UtilityMatch] = []
        arbitrary = split_arbitrary(name)
        if arbitrary is not None:
            root, value = arbitrary
            for utility in self._dynamic.get(root, []):
                match = utility.resolve(None, value, negative, alpha)
                if match is not None:
                    matches.append(match)
            return matches

        for root, key in _root_candidates(name):
            for utility in self._dynamic.get(root, []):
                match = utility.resolve(key, None, negative, alpha)
                if match is not None:
                    matches.append(match)
            if matches:
                break
        return matches

    def __contains__(self, name: str) -> bool:
        return name in self._static or name in self._dynamic

    def __len__(self) -> int:
        return sum(len(v) for v in self._static.values()) + sum(
            len(v) for v in self._dynamic.values()
        )


def _root_candidates(name: str) -> list[tuple[str, str]]:
    """``shadow-md`` -> [(``shadow-md``, ``DEFAULT``), (``shadow``, ``md``)]."""
    pairs = [(name, "DEFAULT")]
    index = name.rfind("-")
    while index > 0:
        pairs.append((name[:index], name[index + 1:]))
        index = name.rfind("-", 0, index)
    return pairs


def negate_value(value: str) -> str | None:
    """Negate a length; None when the value has no negative form."""
    value = value.strip()
    if value in ("0", "0px", "0rem"):
        return value
    if value.startswith("-"):
        return value[1:]
    if _NUMERIC_RE.match(value):
        return f"-{value}"
    if value.startswith(("calc(", "var(")):
        return f"calc({value} * -1)"
    return None


def with_alpha(color: str, alpha: str) -> str | None:
    """Apply an alpha channel to a hex colour; None for colours it cannot adjust."""
    if not _HEX_COLOR_RE.match(color):
        return None
    digits = color[1:]
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    red, green, blue = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return f"rgba({red}, {green}, {blue}, {alpha})"
