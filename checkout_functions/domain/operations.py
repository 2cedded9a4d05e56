"""
Function output operations.

An operation is exactly one of rename, hide or move. Each variant is its
own model and ``Operation`` is their union, so an instance can never carry
more than one. The host expects an envelope with all three keys present and
only one populated; ``to_wire`` builds that envelope at the boundary.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

OperationKind = Literal["rename", "hide", "move"]

ENVELOPE_KEYS: tuple[OperationKind, ...] = ("rename", "hide", "move")


class _OperationModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class RenameOperation(_OperationModel):
    """Rename a delivery option."""

    kind: Literal["rename"] = "rename"
    delivery_option_handle: str
    title: str


class HideOperation(_OperationModel):
    """Hide a payment method."""

    kind: Literal["hide"] = "hide"
    payment_method_id: str


class MoveOperation(_OperationModel):
    """Move a checkout element to a new index. Not produced by current rules."""

    kind: Literal["move"] = "move"
    target_id: str
    index: int


Operation = Annotated[
    RenameOperation | HideOperation | MoveOperation,
    Field(discriminator="kind"),
]


class FunctionResult(BaseModel):
    """Ordered operations produced by one invocation."""

    model_config = ConfigDict(frozen=True)

    operations: tuple[Operation, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.operations


NO_CHANGES = FunctionResult()


def operation_to_wire(operation: Operation) -> dict[str, Any]:
    """Render one operation as the host envelope."""
    envelope: dict[str, Any] = dict.fromkeys(ENVELOPE_KEYS)
    envelope[operation.kind] = operation.model_dump(by_alias=True, exclude={"kind"})
    return envelope


def to_wire(result: FunctionResult) -> dict[str, Any]:
    """Render a result in the shape the host consumes."""
    return {"operations": [operation_to_wire(op) for op in result.operations]}
