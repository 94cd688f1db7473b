#checkout failures
class CheckoutError(Exception):
    """Base class for everything that can abort a checkout."""


class EmptyCartError(CheckoutError):
    pass


class ExpiredProductError(CheckoutError):
    pass


class OutOfStockError(CheckoutError):
    pass


class InsufficientStockError(CheckoutError):
    pass


class InsufficientBalanceError(CheckoutError):
    pass
