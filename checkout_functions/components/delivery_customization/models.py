"""
Delivery customization component models.
"""

from __future__ import annotations

from dataclasses import dataclass

from checkout_functions.domain.entities import DeliveryOption


@dataclass(frozen=True)
class RenameMatch:
    """A delivery option selected by the rule and the title it should get."""

    option: DeliveryOption
    title: str
