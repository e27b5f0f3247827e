"""
Pizza Factory - decides which pizza to build for an item name
Each regional style has its own factory; callers pick one by style key.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from pizza_products import NYStyleCheesePizza, Pizza

logger = logging.getLogger("pizza_factory")


class PizzaFactory(ABC):
    """
    Abstract base class for pizza factories.

    A store holds one factory and asks it for pizzas by item name.
    Unknown items are not an error: the factory just returns None.
    """

    style = ""

    @abstractmethod
    def create(self, item: str) -> Optional[Pizza]:
        """
        Build a new pizza for the given item.

        Args:
            item: Item name as the customer said it (exact, case-sensitive)

        Returns:
            A fresh Pizza, or None if this factory doesn't make that item
        """
        pass


class NYPizzaFactory(PizzaFactory):
    style = "ny"

    def create(self, item: str) -> Optional[Pizza]:
        if item == "cheese":
            return NYStyleCheesePizza()

        logger.debug(f"No {self.style} pizza for item {item!r}")
        return None


# Style key -> factory class
FACTORIES = {
    NYPizzaFactory.style: NYPizzaFactory,
}


def available_styles() -> list[str]:
    return sorted(FACTORIES)


def get_factory(style: str) -> Optional[PizzaFactory]:
    """Get a new factory for a style key, or None if the style is unknown"""
    factory_cls = FACTORIES.get((style or "").strip().lower())
    if factory_cls is None:
        return None
    return factory_cls()


def require_factory(style: str) -> PizzaFactory:
    """Like get_factory, but raises ValueError for an unknown style"""
    factory = get_factory(style)
    if factory is None:
        raise ValueError(
            f"Unknown pizza style: {style!r} (available: {', '.join(available_styles())})"
        )
    return factory
