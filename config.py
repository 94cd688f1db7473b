import os

# Project-relative paths so receipts land next to the code regardless of cwd.
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
RECEIPTS_DIR = os.environ.get("CHECKOUT_RECEIPTS_DIR") or os.path.join(BASE_DIR, "receipts")

# Flat fee charged whenever the cart has anything with weight to ship
SHIPPING_FEE = 30
GRAMS_PER_KG = 1000

ORDER_PREFIX = "QS"
STORE_NAME = "Quick Shop"
STORE_ADDRESS = "12 Market St., Downtown"
