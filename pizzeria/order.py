"""
Order entity: fixed fulfillment mode plus the current lifecycle stage.
Stage changes only through advance() / retreat(); hitting either end of the lifecycle is reported, not raised.
"""
import logging

from pizzeria.metrics import order_boundary_noops_total, order_transitions_total, orders_placed_total
from pizzeria.order_state import (
    ALREADY_COMPLETE_NOTICE,
    ALREADY_INITIAL_NOTICE,
    INITIAL_STAGE,
    TERMINAL_STAGE,
    FulfillmentMode,
    Stage,
    next_stage,
    previous_stage,
    status_text,
)

logger = logging.getLogger(__name__)


class InvalidFulfillmentModeError(ValueError):
    """Raised when an Order is created with something other than PICKUP or DELIVERY."""


class Order:
    def __init__(self, fulfillment_mode: FulfillmentMode | str) -> None:
        try:
            self._fulfillment_mode = FulfillmentMode(fulfillment_mode)
        except ValueError:
            raise InvalidFulfillmentModeError(
                f"fulfillment mode must be one of {[m.value for m in FulfillmentMode]}, got {fulfillment_mode!r}"
            ) from None
        self.stage: Stage = INITIAL_STAGE
        # Message from the last boundary no-op; cleared by any real transition
        self.notice: str | None = None
        orders_placed_total.labels(fulfillment_mode=self._fulfillment_mode.value).inc()

    @property
    def fulfillment_mode(self) -> FulfillmentMode:
        return self._fulfillment_mode

    @property
    def is_complete(self) -> bool:
        return self.stage is TERMINAL_STAGE

    def advance(self) -> None:
        target = next_stage(self.stage, self._fulfillment_mode)
        if target is None:
            self._report_boundary("advance", ALREADY_COMPLETE_NOTICE)
            return
        self._move("advance", target)

    def retreat(self) -> None:
        target = previous_stage(self.stage, self._fulfillment_mode)
        if target is None:
            self._report_boundary("retreat", ALREADY_INITIAL_NOTICE)
            return
        self._move("retreat", target)

    def status_text(self) -> str:
        return status_text(self.stage)

    def _move(self, direction: str, target: Stage) -> None:
        logger.debug("Order %s: %s -> %s (%s)", direction, self.stage.value, target.value, self._fulfillment_mode.value)
        order_transitions_total.labels(
            direction=direction, from_stage=self.stage.value, to_stage=target.value
        ).inc()
        self.stage = target
        self.notice = None

    def _report_boundary(self, direction: str, notice: str) -> None:
        logger.info("Order %s at %s ignored: %s", direction, self.stage.value, notice)
        order_boundary_noops_total.labels(direction=direction, stage=self.stage.value).inc()
        self.notice = notice

    def __repr__(self) -> str:
        return f"Order(fulfillment_mode={self._fulfillment_mode.value}, stage={self.stage.value})"
