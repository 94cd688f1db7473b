import os
import shutil
import tempfile
import unittest
import sys
from datetime import datetime
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from PIL import Image

import config
from models import CartItem, Product
from receipt import Receipt, ReceiptGenerator, ReceiptLine
from shipping import ShipmentNotice


def make_receipt(lines, order_number='unittest-1'):
    subtotal = sum(ln.line_total for ln in lines)
    return Receipt(
        order_number=order_number,
        order_datetime=datetime(2026, 3, 1, 12, 0, 0),
        lines=lines,
        subtotal=subtotal,
        shipping_fee=30,
        total=subtotal + 30,
        customer_name="Ali",
        customer_balance=1000 - subtotal - 30,
    )


class ReceiptTextTests(unittest.TestCase):
    def test_text_lines(self):
        receipt = make_receipt([ReceiptLine("TV", 1, 300, 300)])
        self.assertEqual(receipt.text_lines(), [
            "",
            "** Checkout receipt **",
            "1x TV \t 300",
            "----------------------",
            "Subtotal \t 300",
            "Shipping \t 30",
            "Amount \t\t 330",
            "Customer Balance \t 670",
        ])

    def test_print_to_sink(self):
        out = []
        make_receipt([]).print_to(out.append)
        self.assertEqual(out[1], "** Checkout receipt **")


class ReceiptImageTests(unittest.TestCase):
    def setUp(self):
        self.out_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.out_dir, ignore_errors=True)

    def test_generate_receipt_creates_file(self):
        receipt = make_receipt([ReceiptLine("Cheese", 2, 100, 200), ReceiptLine("Scratch Card", 1, 50, 50)])
        png = ReceiptGenerator.generate(receipt, out_dir=self.out_dir)
        self.assertEqual(png, os.path.join(self.out_dir, 'unittest-1.png'))
        self.assertTrue(os.path.exists(png))
        with Image.open(png) as img:
            self.assertEqual(img.width, ReceiptGenerator.WIDTH)

    def test_generate_creates_missing_directory(self):
        target = os.path.join(self.out_dir, 'nested', 'receipts')
        png = ReceiptGenerator.generate(make_receipt([], order_number='empty'), out_dir=target)
        self.assertTrue(os.path.exists(png))

    def test_image_grows_with_item_count(self):
        short = ReceiptGenerator.generate(make_receipt([ReceiptLine("Tea", 1, 5, 5)], 'short'), out_dir=self.out_dir)
        many = [ReceiptLine('LongName ' * 40, 2, 123.45, 246.90) for _ in range(8)]
        tall = ReceiptGenerator.generate(make_receipt(many, 'tall'), out_dir=self.out_dir)
        with Image.open(short) as a, Image.open(tall) as b:
            self.assertEqual(a.width, ReceiptGenerator.WIDTH)
            self.assertEqual(b.height - a.height, 7 * ReceiptGenerator.ROW_H)


class ReceiptRowsTests(unittest.TestCase):
    def test_rows_without_shipment(self):
        rows = ReceiptGenerator.rows(make_receipt([ReceiptLine("Scratch Card", 1, 50, 50)]))
        self.assertIn(("1x Scratch Card", "50.00"), rows)
        self.assertEqual(rows[-4:], [
            ("Subtotal", "50.00"),
            ("Shipping", "30.00"),
            ("Amount", "80.00"),
            ("Customer Balance", "920.00"),
        ])
        self.assertNotIn("Package weight", [r[0] for r in rows if r])

    def test_rows_include_package_weight(self):
        cheese = Product.perishable("Cheese", 100, 5, "2026-08-01", weight=200)
        receipt = make_receipt([ReceiptLine("Cheese", 2, 100, 200)])
        receipt.shipment = ShipmentNotice([CartItem(cheese, 2)])
        rows = ReceiptGenerator.rows(receipt)
        self.assertIn(("Package weight", "0.4kg"), rows)
        self.assertEqual(rows[0], (config.STORE_NAME, ""))


if __name__ == '__main__':
    unittest.main()
