"""
Delivery customization component - Rename delivery options by postal code.

Every delivery option in a group shipping to the configured postal code gets
the configured message appended to its title.

Pure function - no I/O operations.
"""

from __future__ import annotations

from checkout_functions.components.configuration import (
    DeliveryConfiguration,
    load_configuration,
)
from checkout_functions.domain.entities import (
    DeliveryCart,
    DeliveryCustomizationInput,
    DeliveryGroup,
    DeliveryOption,
)
from checkout_functions.domain.operations import (
    NO_CHANGES,
    FunctionResult,
    RenameOperation,
)
from .models import RenameMatch
from .ports import DiagnosticsPort

TITLE_SEPARATOR = " - "


def group_matches_zip(group: DeliveryGroup, zip_code: str) -> bool:
    """Exact, case-sensitive postal code match. No address or zip never matches."""
    address = group.delivery_address
    if address is None or address.zip is None:
        return False
    return address.zip == zip_code


def compute_title(option: DeliveryOption, message: str) -> str:
    if option.title is not None:
        return f"{option.title}{TITLE_SEPARATOR}{message}"
    return message


def find_renames(config: DeliveryConfiguration, cart: DeliveryCart) -> list[RenameMatch]:
    """
    Select delivery options to rename, in snapshot order.

    Options are not deduplicated across groups: an option listed under two
    matching groups yields two matches.
    """
    return [
        RenameMatch(option=option, title=compute_title(option, config.message))
        for group in cart.delivery_groups
        if group_matches_zip(group, config.zip)
        for option in group.delivery_options
    ]


def project_renames(matches: list[RenameMatch]) -> FunctionResult:
    return FunctionResult(
        operations=tuple(
            RenameOperation(
                delivery_option_handle=match.option.handle,
                title=match.title,
            )
            for match in matches
        )
    )


def run(
    inp: DeliveryCustomizationInput,
    *,
    diagnostics: DiagnosticsPort | None = None,
) -> FunctionResult:
    """
    Main entry point for the delivery customization function.

    Args:
        inp: Host input snapshot.
        diagnostics: Optional diagnostics stream.

    Returns:
        FunctionResult with one rename per matched delivery option.

    Raises:
        ConfigurationMalformedError: configuration metafield is unusable.
    """
    metafield = inp.delivery_customization.metafield
    config = load_configuration(
        metafield.value if metafield is not None else None,
        DeliveryConfiguration,
    )
    if config is None:
        if diagnostics is not None:
            diagnostics.emit("No configuration metafield, no delivery options to rename.")
        return NO_CHANGES

    return project_renames(find_renames(config, inp.cart))
