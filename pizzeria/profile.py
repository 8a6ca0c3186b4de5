"""
User profile: favorite pizzas and loyalty points. In-memory for the lifetime of one console session.
"""
import logging

from pizzeria.config import settings
from pizzeria.pizza import Pizza

logger = logging.getLogger(__name__)


class UserProfile:
    def __init__(self, name: str) -> None:
        self.name = name
        self.favorites: list[Pizza] = []
        self.loyalty_points = 0

    def add_favorite(self, pizza: Pizza) -> None:
        self.favorites.append(pizza)
        logger.info("Saved favorite #%d for %s", len(self.favorites), self.name)

    def award_order_points(self) -> int:
        """Credit points for one completed order; returns the new balance."""
        self.loyalty_points += settings.loyalty_points_per_order
        return self.loyalty_points

    def reorder_favorite(self, index: int) -> Pizza | None:
        """Zero-based lookup; None for an out-of-range index."""
        if 0 <= index < len(self.favorites):
            return self.favorites[index]
        logger.warning("Invalid favorite selection %d (have %d)", index + 1, len(self.favorites))
        return None

    def __str__(self) -> str:
        lines = [f"UserProfile{{name='{self.name}', loyaltyPoints={self.loyalty_points}, favoritePizzas=["]
        lines += [f" {i}. {pizza}" for i, pizza in enumerate(self.favorites, start=1)]
        return "\n".join(lines) + "\n]}"
