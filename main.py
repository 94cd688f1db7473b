import argparse
import sys
from datetime import datetime

import catalog
from errors import CheckoutError
from models import Cart
from receipt import ReceiptGenerator
from services import CheckoutService


def _amount(text):
    value = float(text)
    return int(value) if value.is_integer() else value


def run_demo(today=None, balance=1000, png=False, out=print):
    products = catalog.seed(today)
    customer = catalog.demo_customer(balance)

    cart = Cart()
    cart.add(products['cheese'], 2)
    cart.add(products['biscuits'], 1)
    cart.add(products['scratch_card'], 1)

    receipt = CheckoutService(out=out, today=today).checkout(customer, cart)
    if png:
        out(f"Receipt image saved to {ReceiptGenerator.generate(receipt)}")
    return receipt


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the demo checkout")
    parser.add_argument('--today', type=lambda s: datetime.strptime(s, "%Y-%m-%d").date(),
                        help='Date used for expiry checks (YYYY-MM-DD)')
    parser.add_argument('--balance', type=_amount, default=1000, help='Starting customer balance')
    parser.add_argument('--png', action='store_true', help='Also render the receipt as a PNG')
    args = parser.parse_args(argv)

    try:
        run_demo(today=args.today, balance=args.balance, png=args.png)
    except CheckoutError as e:
        print("ERROR:", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
