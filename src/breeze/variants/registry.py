"""Variant registry: registration order, lookup and ranking."""

from __future__ import annotations

from dataclasses import dataclass

from breeze.variants.base import Variant


@dataclass(frozen=True)
class RegisteredVariant:
    """A variant paired with its registration order."""

    variant: Variant
    order: int

    @property
    def name(self) -> str:
        return self.variant.name

    @property
    def rank(self) -> tuple[int, int]:
        """Sort weight: category first, then registration order."""
        return (int(self.variant.category), self.order)


class VariantRegistry:
    """Registry of named variants.

    Latest wins on name collision; a re-registered variant receives a new
    registration order.
    """

    def __init__(self) -> None:
        self._variants: dict[str, RegisteredVariant] = {}
        self._next_order = 0

    def register(self, variant: Variant) -> RegisteredVariant:
        """Register a variant and return its registry entry."""
        entry = RegisteredVariant(variant=variant, order=self._next_order)
        self._next_order += 1
        self._variants.pop(variant.name, None)
        self._variants[variant.name] = entry
        return entry

    def get(self, name: str) -> RegisteredVariant | None:
        """Look up a registered variant by name."""
        return self._variants.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._variants

    def __len__(self) -> int:
        return len(self._variants)

    def names(self) -> list[str]:
        """Return all variant names in registration order."""
        return list(self._variants.keys())
