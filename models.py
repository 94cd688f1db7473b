from datetime import date, datetime
from enum import Enum

from errors import InsufficientBalanceError, InsufficientStockError, OutOfStockError


class ProductKind(Enum):
    PLAIN = "plain"
    PERISHABLE = "perishable"
    SHIPPABLE = "shippable"


def _as_date(value):
    if value is None or isinstance(value, date) and not isinstance(value, datetime):
        return value
    if isinstance(value, datetime):
        return value.date()
    return datetime.strptime(str(value), "%Y-%m-%d").date()


#product model
class Product:
    """A purchasable item.

    What a product can do is decided by its kind rather than by subclassing:
    perishable products expire and ship, shippable products only ship, and
    plain products (scratch cards, vouchers) do neither and weigh nothing.
    """

    def __init__(self, name, price, quantity, kind=ProductKind.PLAIN, expiry_date=None, weight=0):
        if price <= 0:
            raise ValueError(f"Price for {name} must be positive")
        if not isinstance(quantity, int) or quantity < 0:
            raise ValueError(f"Quantity for {name} must be a non-negative integer")
        if weight < 0:
            raise ValueError(f"Weight for {name} cannot be negative")
        if kind is ProductKind.PERISHABLE and expiry_date is None:
            raise ValueError(f"Perishable product {name} needs an expiry date")

        self.name = name
        self.price = price
        self.quantity = quantity
        self.kind = kind
        self.expiry_date = _as_date(expiry_date)
        self.weight = weight

    @classmethod
    def perishable(cls, name, price, quantity, expiry_date, weight=0):
        return cls(name, price, quantity, ProductKind.PERISHABLE, expiry_date=expiry_date, weight=weight)

    @classmethod
    def shippable(cls, name, price, quantity, weight):
        return cls(name, price, quantity, ProductKind.SHIPPABLE, weight=weight)

    def get_name(self):
        return self.name

    def is_expired(self, today=None):
        if self.kind is not ProductKind.PERISHABLE:
            return False
        today = _as_date(today) or date.today()
        return self.expiry_date <= today

    def is_shippable(self):
        return self.kind in (ProductKind.PERISHABLE, ProductKind.SHIPPABLE)

    def get_weight(self):
        # grams
        return self.weight if self.is_shippable() else 0

    def reduce_quantity(self, qty):
        if self.quantity < qty:
            raise OutOfStockError(f"{self.name} is out of stock")
        self.quantity -= qty

    def __repr__(self):
        return f"Product({self.name!r}, {self.price!r}, {self.quantity!r}, {self.kind.value})"


#cart item model
class CartItem:
    def __init__(self, product, quantity):
        self.product = product
        self.quantity = quantity

    def get_total_price(self):
        return self.product.price * self.quantity

    def get_product_name(self):
        return self.product.get_name()

    def get_weight(self):
        return self.product.get_weight() * self.quantity

    def is_shippable(self):
        return self.product.is_shippable()

    def is_expired(self, today=None):
        return self.product.is_expired(today)


#cart model
class Cart:
    def __init__(self):
        self.items = []

    def add(self, product, quantity=1):
        # Stock is only checked here, it gets reserved at checkout.
        if quantity <= 0:
            raise ValueError(f"Quantity for {product.name} must be positive")
        if quantity > product.quantity:
            raise InsufficientStockError(f"Cannot add more than available stock for {product.name}")

        self.items.append(CartItem(product, quantity))

    def clear(self):
        self.items = []

    def is_empty(self):
        return len(self.items) == 0

    def get_items(self):
        return list(self.items)

    def get_subtotal(self):
        return sum(item.get_total_price() for item in self.items)

    def get_shippable_items(self):
        return [item for item in self.items if item.is_shippable()]

    def get_total_weight(self):
        return sum(item.get_weight() for item in self.get_shippable_items())


#customer model
class Customer:
    def __init__(self, name, balance):
        if balance < 0:
            raise ValueError(f"Balance for {name} cannot be negative")
        self.name = name
        self.balance = balance

    def pay(self, amount):
        if self.balance < amount:
            raise InsufficientBalanceError(
                f"Insufficient balance. Required: {amount}, Available: {self.balance}"
            )
        self.balance -= amount

    def get_balance(self):
        return self.balance
