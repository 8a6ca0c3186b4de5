"""
Prometheus metrics: orders placed, stage transitions and boundary no-ops, payments, notifications.
"""
import logging

from prometheus_client import Counter, start_http_server

logger = logging.getLogger(__name__)

orders_placed_total = Counter(
    "orders_placed_total",
    "Total orders created, by fulfillment mode",
    ["fulfillment_mode"],
)

# Order lifecycle: direction is "advance" or "retreat"
order_transitions_total = Counter(
    "order_transitions_total",
    "Total order stage transitions",
    ["direction", "from_stage", "to_stage"],
)
order_boundary_noops_total = Counter(
    "order_boundary_noops_total",
    "Total advance/retreat calls that hit the terminal or initial stage",
    ["direction", "stage"],
)

payments_total = Counter(
    "payments_total",
    "Total payments taken, by method",
    ["method"],
)
notifications_sent_total = Counter(
    "notifications_sent_total",
    "Total status notifications delivered to listeners",
)


def start_metrics_server(port: int) -> None:
    """Serve /metrics on port from a daemon thread."""
    start_http_server(port)
    logger.info("Metrics server listening on port %s", port)
