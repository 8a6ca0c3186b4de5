from pizzeria.config import settings
from pizzeria.pizza import AddOn, final_price


def format_invoice(customer_name: str, pizza) -> str:
    cur = settings.currency
    lines = [
        "____Your Invoice____",
        f"Customer: {customer_name}",
        f"Base Price: {cur} {settings.base_price:.2f}",
        f"Toppings ({len(pizza.toppings)}): {cur} {len(pizza.toppings) * settings.topping_price:.2f}",
    ]
    for add_on in AddOn:
        if pizza.has_add_on(add_on):
            lines.append(f"{add_on.label}: {cur} {add_on.price:.2f}")
    lines.append(f"Seasonal Offer: {settings.seasonal_discount:.0%} Discount")
    lines.append(f"Total Amount: {cur} {final_price(pizza):.2f}")
    lines.append("=========================")
    return "\n".join(lines)
