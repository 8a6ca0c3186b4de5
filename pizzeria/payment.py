"""
Payment strategies. No real payment integration: pay() records the payment and returns the confirmation line.
"""
import logging

from pizzeria.config import settings
from pizzeria.metrics import payments_total

logger = logging.getLogger(__name__)


class PaymentStrategy:
    method = ""

    def pay(self, amount: float) -> str:
        payments_total.labels(method=self.method).inc()
        logger.info("Payment of %.2f taken via %s", amount, self.method)
        return f"Paid {settings.currency} {amount:.2f} using {self.method}."


class CreditCardPayment(PaymentStrategy):
    method = "Credit Card"


class PayPalPayment(PaymentStrategy):
    method = "PayPal"


# Console menu choice -> strategy
PAYMENT_CHOICES: dict[str, type[PaymentStrategy]] = {
    "1": CreditCardPayment,
    "2": PayPalPayment,
}


def get_payment_strategy(choice: str) -> PaymentStrategy:
    try:
        return PAYMENT_CHOICES[choice.strip()]()
    except KeyError:
        raise ValueError(f"unknown payment choice: {choice!r}") from None
