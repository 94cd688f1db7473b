import config


class ShipmentNotice:
    def __init__(self, items):
        self.items = list(items)
        self.total_weight = sum(item.get_weight() for item in self.items)

    @property
    def total_weight_kg(self):
        return self.total_weight / config.GRAMS_PER_KG

    def lines(self):
        lines = ["", "** Shipment notice **"]
        for item in self.items:
            lines.append(f"{item.quantity}x {item.get_product_name()} \t {item.get_weight()}g")
        lines.append(f"Total package weight {self.total_weight_kg:.1f}kg")
        return lines


class ShippingService:
    """Reports what goes into the package.

    Callers pass only the shippable cart items; nothing is filtered here.
    """

    def __init__(self, out=print):
        self.out = out

    def ship(self, items):
        notice = ShipmentNotice(items)
        for line in notice.lines():
            self.out(line)
        return notice
