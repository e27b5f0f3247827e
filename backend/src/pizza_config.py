import os

from dotenv import load_dotenv

load_dotenv(".env.local")

# Which regional factory the store uses
PIZZA_STYLE = os.getenv("PIZZA_STYLE", "ny")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
