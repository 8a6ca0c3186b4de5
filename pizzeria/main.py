"""
Console session: menu loop, order placement and order processing.
Each placed purchase gets its own Order, driven through every stage with each status pushed to the tracker.
Run: python -m pizzeria.main
"""
import argparse
import logging
import sys
from enum import Enum

from pizzeria.config import settings
from pizzeria.invoice import format_invoice
from pizzeria.metrics import start_metrics_server
from pizzeria.order import Order
from pizzeria.order_state import FulfillmentMode, Stage
from pizzeria.payment import get_payment_strategy
from pizzeria.pizza import AddOn, Crust, Pizza, PizzaBuilder, Sauce, Topping, discounted_price, final_price
from pizzeria.profile import UserProfile
from pizzeria.tracker import Customer, OrderTracker

logger = logging.getLogger(__name__)

MAIN_MENU = "\nPlease choose an option:\n1. Place an Order\n2. View Profile\n3. Exit"


class SessionEnded(Exception):
    """Input stream closed (EOF / Ctrl-C) mid-session."""


class ConsoleSession:
    def __init__(self, profile: UserProfile, input_fn=input, output_fn=print) -> None:
        self.profile = profile
        self._input = input_fn
        self._output = output_fn
        self.tracker = OrderTracker()
        self.tracker.register(Customer(profile.name, output_fn=output_fn))

    # -------------------- input helpers --------------------

    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt).strip()
        except (EOFError, KeyboardInterrupt):
            raise SessionEnded from None

    def _ask_yes_no(self, prompt: str) -> bool:
        return self._ask(f"{prompt} (yes/no): ").lower() in ("yes", "y")

    def _ask_number(self, prompt: str, low: int, high: int) -> int:
        while True:
            raw = self._ask(prompt)
            try:
                value = int(raw)
                if not low <= value <= high:
                    raise ValueError(f"{value} out of range {low}-{high}")
                return value
            except ValueError as e:
                logger.info("Rejected input %r: %s", raw, e)
                self._output(f"Please enter a number between {low} and {high}.")

    def _ask_mode(self) -> FulfillmentMode:
        self._output("Is this order for:\n1. Delivery\n2. Take Away")
        if self._ask_number("Your choice: ", 1, 2) == 1:
            return FulfillmentMode.DELIVERY
        return FulfillmentMode.PICKUP

    def _choose(self, title: str, options: type[Enum]):
        members = list(options)
        self._output(title)
        for i, member in enumerate(members, start=1):
            self._output(f"{i}. {member.value}")
        return members[self._ask_number("Your choice: ", 1, len(members)) - 1]

    def _ask_toppings(self) -> list[Topping]:
        members = list(Topping)
        self._output("\nChoose toppings (type numbers separated by commas, blank for none):")
        for i, topping in enumerate(members, start=1):
            self._output(f"{i}. {topping.value} ({settings.currency} {settings.topping_price})")
        while True:
            raw = self._ask("Your choice: ")
            try:
                indexes = [int(part) for part in raw.split(",") if part.strip()]
                if any(not 1 <= i <= len(members) for i in indexes):
                    raise ValueError("topping number out of range")
                return [members[i - 1] for i in indexes]
            except ValueError as e:
                logger.info("Rejected toppings %r: %s", raw, e)
                self._output(f"Please enter numbers between 1 and {len(members)} separated by commas.")

    # -------------------- flows --------------------

    def run(self) -> None:
        self._output("=== Welcome to the Pizza Ordering System ===")
        try:
            while True:
                self._output(MAIN_MENU)
                choice = self._ask("Your choice: ")
                if choice == "1":
                    self.place_order()
                elif choice == "2":
                    self.view_profile()
                elif choice == "3":
                    break
                else:
                    self._output("\nInvalid choice. Please try again.")
        except SessionEnded:
            self._output("")
        self._output("\nThank you for using the Pizza Ordering System! Goodbye!")

    def place_order(self) -> None:
        self._output("\n=== Place Your Order ===")
        mode = self._ask_mode()

        self._output("\n--- Customize Your Pizza ---")
        crust = self._choose("Choose crust:", Crust)
        sauce = self._choose("\nChoose sauce:", Sauce)
        toppings = self._ask_toppings()
        pizza = PizzaBuilder().crust(crust).sauce(sauce).toppings(toppings).build()
        self._output(f"\nYour Pizza: {pizza}")
        self._output(
            f"Seasonal Offer Applied! Final Price: {settings.currency} {discounted_price(pizza):.2f}"
        )

        if self._ask_yes_no(f"\nWould you like Extra Cheese for {settings.currency} {settings.extra_cheese_price}?"):
            pizza = pizza.with_add_on(AddOn.EXTRA_CHEESE)
        if self._ask_yes_no(f"\nNeed Special Packaging for {settings.currency} {settings.special_packaging_price}?"):
            pizza = pizza.with_add_on(AddOn.SPECIAL_PACKAGING)

        self.checkout(pizza, mode, offer_favorite=True)

    def checkout(self, pizza: Pizza, mode: FulfillmentMode, offer_favorite: bool = False) -> Order:
        self._output(f"\n--- Final Total: {settings.currency} {final_price(pizza):.2f} ---")
        self._output("How would you like to pay?\n1. Credit Card\n2. PayPal")
        strategy = get_payment_strategy(str(self._ask_number("Your choice: ", 1, 2)))
        self._output(strategy.pay(final_price(pizza)))

        if offer_favorite and self._ask_yes_no("\nSave this pizza as a favorite?"):
            self.profile.add_favorite(pizza)
            self._output("Pizza saved to favorites!")

        return self.process_order(pizza, mode)

    def process_order(self, pizza: Pizza, mode: FulfillmentMode) -> Order:
        order = Order(mode)
        logger.info("Processing %r", order)
        self._report(order)
        while not order.is_complete:
            order.advance()
            self._report(order)
            if order.stage is Stage.INVOICED:
                self._output("\n" + format_invoice(self.profile.name, pizza))

        rating = self._ask_number("\nPlease rate your experience (1-5): ", 1, 5)
        self._output(f"You rated us: {rating} stars. Thanks for your feedback!")
        points = self.profile.award_order_points()
        self._output(f"\nYou have earned {settings.loyalty_points_per_order} points for this order! Balance: {points}")
        return order

    def _report(self, order: Order) -> None:
        status = order.status_text()
        self._output(f"\n{status}")
        self.tracker.notify(status)

    def view_profile(self) -> None:
        self._output("\n=== Your Profile ===")
        self._output(f"Name: {self.profile.name}")
        self._output(f"Loyalty Points: {self.profile.loyalty_points}")
        if not self.profile.favorites:
            self._output("No favorite pizzas yet.")
            return
        self._output("\nFavorite Pizzas:")
        for i, pizza in enumerate(self.profile.favorites, start=1):
            self._output(f"{i}. {pizza}")
        if not self._ask_yes_no("\nWould you like to reorder a favorite pizza?"):
            return
        index = self._ask_number("Select a favorite pizza to reorder by number: ", 1, len(self.profile.favorites))
        pizza = self.profile.reorder_favorite(index - 1)
        if pizza is None:
            return
        self._output(f"\nReordered Pizza: {pizza}")
        mode = self._ask_mode()
        self.checkout(pizza, mode)


def setup_logging(level: str | None = None) -> None:
    level = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stdout,
    )


def run(input_fn=input, output_fn=print) -> ConsoleSession:
    session = ConsoleSession(UserProfile(settings.customer_name), input_fn=input_fn, output_fn=output_fn)
    session.run()
    return session


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pizzeria", description="Pizza ordering console")
    parser.add_argument("--log-level", default=None, help="Overrides the LOG_LEVEL setting")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    if settings.metrics_port:
        start_metrics_server(settings.metrics_port)
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
