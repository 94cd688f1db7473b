from datetime import datetime

import config
from errors import EmptyCartError, ExpiredProductError
from receipt import Receipt, ReceiptLine
from shipping import ShippingService


#Check-out service
class CheckoutService:
    """Validates, charges, ships and reports a single cart for a customer.

    Steps run in a fixed order and the first failure propagates to the caller.
    Nothing already applied is rolled back: stock reduced for earlier items
    stays reduced when a later item is expired or out of stock, and all stock
    is reduced before the customer is charged.
    """

    def __init__(self, shipping=None, out=print, today=None):
        self.out = out
        self.shipping = shipping or ShippingService(out=out)
        # None means "whatever the date is when checkout runs"
        self.today = today

    def shipping_fee_for(self, cart):
        return config.SHIPPING_FEE if cart.get_total_weight() > 0 else 0

    def checkout(self, customer, cart):
        if cart.is_empty():
            raise EmptyCartError("Cart is empty")

        for item in cart.get_items():
            if item.is_expired(self.today):
                raise ExpiredProductError(f"{item.get_product_name()} is expired")
            item.product.reduce_quantity(item.quantity)

        subtotal = cart.get_subtotal()
        shipping_fee = self.shipping_fee_for(cart)
        total = subtotal + shipping_fee

        customer.pay(total)

        shipment = None
        shippable_items = cart.get_shippable_items()
        if shippable_items:
            shipment = self.shipping.ship(shippable_items)

        now = datetime.now()
        receipt = Receipt(
            order_number=f"{config.ORDER_PREFIX}-{now.strftime('%Y%m%d')}-{int(now.timestamp() * 1000)}",
            order_datetime=now,
            lines=[ReceiptLine.from_cart_item(item) for item in cart.get_items()],
            subtotal=subtotal,
            shipping_fee=shipping_fee,
            total=total,
            customer_name=customer.name,
            customer_balance=customer.get_balance(),
            shipment=shipment,
        )
        receipt.print_to(self.out)
        return receipt


def checkout(customer, cart, out=print, today=None):
    return CheckoutService(out=out, today=today).checkout(customer, cart)
