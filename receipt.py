from PIL import Image, ImageDraw, ImageFont
import qrcode
import os

import config


class ReceiptLine:
    def __init__(self, name, quantity, unit_price, line_total):
        self.name = name
        self.quantity = quantity
        self.unit_price = unit_price
        self.line_total = line_total

    @classmethod
    def from_cart_item(cls, item):
        return cls(item.get_product_name(), item.quantity, item.product.price, item.get_total_price())


class Receipt:
    def __init__(self, order_number, order_datetime, lines, subtotal, shipping_fee, total,
                 customer_name, customer_balance, shipment=None):
        self.order_number = order_number
        self.order_datetime = order_datetime
        self.lines = lines
        self.subtotal = subtotal
        self.shipping_fee = shipping_fee
        self.total = total
        self.customer_name = customer_name
        self.customer_balance = customer_balance
        self.shipment = shipment

    def text_lines(self):
        """The console receipt block, one string per printed line."""
        out = ["", "** Checkout receipt **"]
        for ln in self.lines:
            out.append(f"{ln.quantity}x {ln.name} \t {ln.line_total}")
        out.append("----------------------")
        out.append(f"Subtotal \t {self.subtotal}")
        out.append(f"Shipping \t {self.shipping_fee}")
        out.append(f"Amount \t\t {self.total}")
        out.append(f"Customer Balance \t {self.customer_balance}")
        return out

    def print_to(self, out=print):
        for line in self.text_lines():
            out(line)


def _fit(draw, text, font, max_w):
    if draw.textlength(text, font=font) <= max_w:
        return text
    while text and draw.textlength(text + "..", font=font) > max_w:
        text = text[:-1]
    return text + ".."


class ReceiptGenerator:
    """Renders a Receipt as a narrow till-roll PNG.

    Every row is a (label, amount) pair, label on the left and amount right
    aligned; None rows are dashed separators. The order number is printed as
    a QR code at the foot of the roll.
    """

    WIDTH = 384
    MARGIN = 16
    ROW_H = 18
    QR_SIZE = 160

    @staticmethod
    def rows(receipt):
        rows = [
            (config.STORE_NAME, ""),
            (f"Order {receipt.order_number}", ""),
            (f"{receipt.order_datetime:%Y-%m-%d %H:%M}", ""),
            (f"Customer {receipt.customer_name}", ""),
            None,
        ]
        for ln in receipt.lines:
            rows.append((f"{ln.quantity}x {ln.name}", f"{ln.line_total:.2f}"))
        rows.append(None)
        if receipt.shipment is not None:
            rows.append(("Package weight", f"{receipt.shipment.total_weight_kg:.1f}kg"))
        rows.append(("Subtotal", f"{receipt.subtotal:.2f}"))
        rows.append(("Shipping", f"{receipt.shipping_fee:.2f}"))
        rows.append(("Amount", f"{receipt.total:.2f}"))
        rows.append(("Customer Balance", f"{receipt.customer_balance:.2f}"))
        return rows

    @staticmethod
    def _qr_image(order_number, size):
        qr = qrcode.QRCode(box_size=4, border=2)
        qr.add_data(order_number)
        qr.make(fit=True)
        img = qr.make_image(fill_color="black", back_color="white").convert('RGB')
        return img.resize((size, size), Image.NEAREST)

    @classmethod
    def generate(cls, receipt, out_dir=None):
        """Write `<order_number>.png` into `out_dir` (config.RECEIPTS_DIR by default) and return its path."""
        out_dir = out_dir or config.RECEIPTS_DIR
        os.makedirs(out_dir, exist_ok=True)
        png_path = os.path.join(out_dir, f"{receipt.order_number}.png")

        rows = cls.rows(receipt)
        height = cls.MARGIN * 3 + len(rows) * cls.ROW_H + cls.QR_SIZE
        img = Image.new('RGB', (cls.WIDTH, height), color=(255, 255, 255))
        draw = ImageDraw.Draw(img)
        font = ImageFont.load_default()

        left = cls.MARGIN
        right = cls.WIDTH - cls.MARGIN
        y = cls.MARGIN
        for row in rows:
            if row is None:
                mid = y + cls.ROW_H // 2
                for dash_x in range(left, right, 8):
                    draw.line((dash_x, mid, min(dash_x + 4, right), mid), fill=(120, 120, 120))
            else:
                label, amount = row
                amount_w = draw.textlength(amount, font=font)
                label = _fit(draw, label, font, right - left - amount_w - 8)
                draw.text((left, y), label, font=font, fill=(0, 0, 0))
                if amount:
                    draw.text((right - amount_w, y), amount, font=font, fill=(0, 0, 0))
            y += cls.ROW_H

        qr = cls._qr_image(receipt.order_number, cls.QR_SIZE)
        img.paste(qr, ((cls.WIDTH - cls.QR_SIZE) // 2, y + cls.MARGIN))

        img.save(png_path)
        return png_path
