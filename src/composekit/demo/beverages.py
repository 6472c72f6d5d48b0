"""Coffee shop beverages priced through wrapper chains."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from composekit.core.wrapper import Wrapper


class Beverage:
    """Concrete base component."""

    label = "Unknown Beverage"
    price = Decimal("0.00")

    def description(self) -> str:
        return self.label

    def cost(self) -> Decimal:
        return self.price


class Espresso(Beverage):
    label = "Espresso"
    price = Decimal("1.99")


class HouseBlend(Beverage):
    label = "House Blend Coffee"
    price = Decimal("0.89")


class DarkRoast(Beverage):
    label = "Dark Roast Coffee"
    price = Decimal("0.99")


class Decaf(Beverage):
    label = "Decaf Coffee"
    price = Decimal("1.05")


class Condiment(Wrapper[Beverage]):
    """Layer adding its price and name to the wrapped beverage.

    Adjacent condiments are folded in a loop rather than by recursing into
    ``inner``, so a chain at the maximum depth can still be priced.
    """

    label = "Condiment"
    price = Decimal("0.00")

    def description(self) -> str:
        labels = []
        node: Any = self
        while isinstance(node, Condiment):
            labels.append(node.label)
            node = node.inner
        return ", ".join([node.description(), *reversed(labels)])

    def cost(self) -> Decimal:
        total = Decimal("0.00")
        node: Any = self
        while isinstance(node, Condiment):
            total += node.price
            node = node.inner
        return node.cost() + total


class Milk(Condiment):
    label = "Milk"
    price = Decimal("0.10")


class Mocha(Condiment):
    label = "Mocha"
    price = Decimal("0.20")


class Soy(Condiment):
    label = "Soy"
    price = Decimal("0.15")


class Whip(Condiment):
    label = "Whip"
    price = Decimal("0.10")
