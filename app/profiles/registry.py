"""
Profile variant registry.

Variants are registered at import time by :mod:`app.profiles`.  Lookup is
by ``variant_id``, which equals the account role.
"""

from __future__ import annotations

from typing import Optional

from app.profiles.base import ProfileVariant


class VariantRegistry:
    """Registry of available profile variants."""

    _variants: dict[str, ProfileVariant] = {}

    @classmethod
    def register(cls, variant: ProfileVariant) -> None:
        """Register a variant.

        Raises :class:`ValueError` if ``variant_id`` is already taken.
        """
        if variant.variant_id in cls._variants:
            raise ValueError(f"Profile variant '{variant.variant_id}' already registered")
        cls._variants[variant.variant_id] = variant

    @classmethod
    def get(cls, variant_id: str) -> Optional[ProfileVariant]:
        return cls._variants.get(variant_id)

    @classmethod
    def get_or_raise(cls, variant_id: str) -> ProfileVariant:
        """Get a variant by *variant_id*.

        Raises :class:`KeyError` if not found.
        """
        variant = cls._variants.get(variant_id)
        if not variant:
            raise KeyError(
                f"Profile variant '{variant_id}' not registered. "
                f"Available: {list(cls._variants.keys())}"
            )
        return variant

    @classmethod
    def available_variant_ids(cls) -> list[str]:
        return sorted(cls._variants.keys())
