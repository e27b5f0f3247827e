"""
Pizza products
The concrete things a pizza factory knows how to build
"""


class Pizza:
    """Base pizza product"""

    name = "Pizza"
    style = ""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class NYStyleCheesePizza(Pizza):
    name = "NY Style Cheese Pizza"
    style = "ny"
