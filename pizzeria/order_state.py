"""
Order lifecycle state machine. Forks on fulfillment mode after PREPARING and rejoins at INVOICED.
"""
from enum import Enum


class FulfillmentMode(str, Enum):
    PICKUP = "PICKUP"
    DELIVERY = "DELIVERY"


class Stage(str, Enum):
    PLACED = "PLACED"
    PREPARING = "PREPARING"
    OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY"
    READY_FOR_PICKUP = "READY_FOR_PICKUP"
    DELIVERED = "DELIVERED"
    PICKUP_COMPLETED = "PICKUP_COMPLETED"
    INVOICED = "INVOICED"
    FEEDBACK = "FEEDBACK"


INITIAL_STAGE = Stage.PLACED
TERMINAL_STAGE = Stage.FEEDBACK

# A transition target is a Stage, a per-mode mapping, or None (boundary no-op)
StageTarget = Stage | dict[FulfillmentMode, Stage] | None

# Current stage -> stage after advance()
NEXT_STAGE: dict[Stage, StageTarget] = {
    Stage.PLACED: Stage.PREPARING,
    Stage.PREPARING: {
        FulfillmentMode.PICKUP: Stage.READY_FOR_PICKUP,
        FulfillmentMode.DELIVERY: Stage.OUT_FOR_DELIVERY,
    },
    Stage.OUT_FOR_DELIVERY: Stage.DELIVERED,
    Stage.READY_FOR_PICKUP: Stage.PICKUP_COMPLETED,
    Stage.DELIVERED: Stage.INVOICED,
    Stage.PICKUP_COMPLETED: Stage.INVOICED,
    Stage.INVOICED: Stage.FEEDBACK,
    Stage.FEEDBACK: None,  # terminal
}

# Current stage -> stage after retreat()
PREVIOUS_STAGE: dict[Stage, StageTarget] = {
    Stage.PLACED: None,  # initial
    Stage.PREPARING: Stage.PLACED,
    Stage.OUT_FOR_DELIVERY: Stage.PREPARING,
    Stage.READY_FOR_PICKUP: Stage.PREPARING,
    Stage.DELIVERED: Stage.OUT_FOR_DELIVERY,
    Stage.PICKUP_COMPLETED: Stage.READY_FOR_PICKUP,
    Stage.INVOICED: {
        FulfillmentMode.PICKUP: Stage.PICKUP_COMPLETED,
        FulfillmentMode.DELIVERY: Stage.DELIVERED,
    },
    Stage.FEEDBACK: Stage.INVOICED,
}

STATUS_TEXT: dict[Stage, str] = {
    Stage.PLACED: "Order placed and awaiting preparation.",
    Stage.PREPARING: "Order is being prepared.",
    Stage.OUT_FOR_DELIVERY: "Order is out for delivery.",
    Stage.READY_FOR_PICKUP: "Order is ready for pickup.",
    Stage.DELIVERED: "Order delivered successfully.",
    Stage.PICKUP_COMPLETED: "Pickup completed. Enjoy your meal!",
    Stage.INVOICED: "Invoice generated. Thank you for your order!",
    Stage.FEEDBACK: "Please provide feedback for your order.",
}

ALREADY_COMPLETE_NOTICE = "Order process is complete. Thank you!"
ALREADY_INITIAL_NOTICE = "Order is already in the initial state."


def _resolve(target: StageTarget, mode: FulfillmentMode) -> Stage | None:
    if isinstance(target, dict):
        return target[mode]
    return target


def next_stage(stage: Stage, mode: FulfillmentMode) -> Stage | None:
    """Stage reached by advancing from stage, or None at the terminal stage."""
    return _resolve(NEXT_STAGE[stage], mode)


def previous_stage(stage: Stage, mode: FulfillmentMode) -> Stage | None:
    """Stage reached by retreating from stage, or None at the initial stage."""
    return _resolve(PREVIOUS_STAGE[stage], mode)


def status_text(stage: Stage) -> str:
    return STATUS_TEXT[stage]
