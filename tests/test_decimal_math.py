import unittest
from decimal import Decimal

from tests._test_path import SRC  # noqa: F401

from imagerules.core import decimal_math


class TestDivide(unittest.TestCase):
    def test_truncates_instead_of_rounding(self):
        self.assertEqual(decimal_math.divide(2, 3, 12), Decimal("0.666666666666"))
        self.assertEqual(decimal_math.divide(4, 3, 12), Decimal("1.333333333333"))

    def test_exact_result_keeps_scale(self):
        self.assertEqual(str(decimal_math.divide(3, 4, 12)), "0.750000000000")

    def test_zero_numerator(self):
        self.assertEqual(decimal_math.divide(0, 7, 12), Decimal(0))

    def test_zero_denominator(self):
        with self.assertRaises(ZeroDivisionError):
            decimal_math.divide(1, 0, 12)

    def test_large_operands(self):
        self.assertEqual(decimal_math.divide(10**20, 3, 2), Decimal("33333333333333333333.33"))


class TestCompare(unittest.TestCase):
    def test_equal_on_truncated_digits(self):
        self.assertEqual(decimal_math.compare("0.123456789012", "0.123456789099", 10), 0)

    def test_difference_inside_scale(self):
        self.assertEqual(decimal_math.compare("0.75", "0.7500000001", 10), -1)
        self.assertEqual(decimal_math.compare("0.7500000001", "0.75", 10), 1)

    def test_decimal_literal_vs_ratio(self):
        self.assertEqual(decimal_math.compare("0.75", decimal_math.divide(300, 400, 12), 10), 0)

    def test_truncate(self):
        self.assertEqual(decimal_math.truncate("1.99999", 2), Decimal("1.99"))
        self.assertEqual(decimal_math.truncate("-1.99999", 2), Decimal("-1.99"))
