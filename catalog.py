from datetime import date, timedelta

from models import Customer, Product


def seed(today=None):
    """Build the demo catalog, keyed by a short lowercase handle.

    Perishables get expiry dates relative to `today` so the demo stays sellable.
    """
    today = today or date.today()
    best_before = today + timedelta(days=30)
    return {
        'cheese': Product.perishable("Cheese", 100, 5, best_before, weight=200),
        'biscuits': Product.perishable("Biscuits", 150, 2, best_before, weight=700),
        'tv': Product.shippable("TV", 300, 10, 10000),
        'scratch_card': Product("Scratch Card", 50, 10),
    }


def demo_customer(balance=1000):
    return Customer("Ali", balance)
