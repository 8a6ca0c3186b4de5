"""
Pizza composition and pricing: menu enums, the Pizza model, a fluent builder and the add-ons applied on top.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from pizzeria.config import settings


class Crust(str, Enum):
    THIN = "THIN"
    THICK = "THICK"
    STUFFED = "STUFFED"


class Sauce(str, Enum):
    TOMATO = "TOMATO"
    GARLIC = "GARLIC"
    PESTO = "PESTO"


class Topping(str, Enum):
    PEPPERONI = "PEPPERONI"
    MUSHROOMS = "MUSHROOMS"
    ONIONS = "ONIONS"
    EXTRA_CHEESE = "EXTRA_CHEESE"
    OLIVES = "OLIVES"


class AddOn(str, Enum):
    EXTRA_CHEESE = "EXTRA_CHEESE"
    SPECIAL_PACKAGING = "SPECIAL_PACKAGING"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def price(self) -> float:
        if self is AddOn.EXTRA_CHEESE:
            return settings.extra_cheese_price
        return settings.special_packaging_price


class Pizza(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(default="Custom Pizza")
    crust: Crust
    sauce: Sauce
    toppings: tuple[Topping, ...] = ()
    add_ons: tuple[AddOn, ...] = ()
    price: float = Field(..., ge=0, description="Base + toppings, before discount and add-ons")

    def with_add_on(self, add_on: AddOn) -> "Pizza":
        return self.model_copy(update={"add_ons": self.add_ons + (add_on,)})

    def has_add_on(self, add_on: AddOn) -> bool:
        return add_on in self.add_ons

    def __str__(self) -> str:
        toppings = ", ".join(t.value for t in self.toppings)
        text = (
            f"Pizza{{name='{self.name}', crust={self.crust.value}, sauce={self.sauce.value}, "
            f"toppings=[{toppings}], price={self.price}}}"
        )
        return text + "".join(f" + {a.label}" for a in self.add_ons)


class PizzaBuilder:
    """Fluent builder; build() raises pydantic.ValidationError if crust or sauce was never set."""

    def __init__(self) -> None:
        self._crust: Crust | None = None
        self._sauce: Sauce | None = None
        self._toppings: list[Topping] = []
        self._name = "Custom Pizza"
        self._price: float | None = None

    def crust(self, crust: Crust) -> "PizzaBuilder":
        self._crust = crust
        return self

    def sauce(self, sauce: Sauce) -> "PizzaBuilder":
        self._sauce = sauce
        return self

    def add_topping(self, topping: Topping) -> "PizzaBuilder":
        self._toppings.append(topping)
        return self

    def toppings(self, toppings: list[Topping]) -> "PizzaBuilder":
        self._toppings.extend(toppings)
        return self

    def name(self, name: str) -> "PizzaBuilder":
        self._name = name
        return self

    def price(self, price: float) -> "PizzaBuilder":
        self._price = price
        return self

    def build(self) -> Pizza:
        price = self._price if self._price is not None else base_price(len(self._toppings))
        return Pizza(
            name=self._name,
            crust=self._crust,
            sauce=self._sauce,
            toppings=tuple(self._toppings),
            price=price,
        )


def base_price(topping_count: int) -> float:
    return settings.base_price + topping_count * settings.topping_price


def discounted_price(pizza: Pizza) -> float:
    return pizza.price * (1 - settings.seasonal_discount)


def final_price(pizza: Pizza) -> float:
    """Seasonal discount on base + toppings, add-ons charged in full on top."""
    return discounted_price(pizza) + sum(a.price for a in pizza.add_ons)
