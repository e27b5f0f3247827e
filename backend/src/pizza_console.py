import logging
import sys

import pizza_config
from pizza_factory import PizzaFactory, require_factory

logger = logging.getLogger("pizza_console")

EXIT_COMMANDS = {"quit", "exit", "q"}


def run_console(factory: PizzaFactory) -> int:
    """Read item names until the user quits. Returns how many pizzas were made."""
    print(f"[Store] Welcome to the {factory.style.upper()} pizza store! What pizza would you like?")
    print("To exit at any time: type 'quit', 'exit', 'q' or press Enter on an empty line.")

    made = 0
    while True:
        try:
            line = input('[Customer] ')
        except (EOFError, KeyboardInterrupt):
            print('\n[Store] Goodbye!')
            break

        item = line.strip()
        if item == '' or item.lower() in EXIT_COMMANDS:
            print('[Store] Goodbye!')
            break

        pizza = factory.create(item)
        if pizza is None:
            print(f"[Store] Sorry, we don't make '{item}' pizza.")
            continue

        made += 1
        logger.info(f"Made {pizza.name} for item {item!r}")
        print(f"[Store] Here's your {pizza.name}!")

    logger.info(f"Console closed, {made} pizza(s) made")
    return made


def main() -> int:
    # getLevelName gives back a str for names it doesn't know
    level = logging.getLevelName(pizza_config.LOG_LEVEL)
    if not isinstance(level, int):
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Unknown LOG_LEVEL {pizza_config.LOG_LEVEL!r}")
        return 1

    logging.basicConfig(level=level)

    try:
        factory = require_factory(pizza_config.PIZZA_STYLE)
    except ValueError as e:
        logger.error(f"Bad PIZZA_STYLE: {e}")
        return 1

    run_console(factory)
    return 0


if __name__ == '__main__':
    sys.exit(main())
