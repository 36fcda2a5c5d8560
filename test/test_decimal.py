import decimal
import logging
import unittest

from bigfrac import Rational
import bigfrac


class TestDecimalValue(unittest.TestCase):

    def test_decimal_value(self):
        q = bigfrac.parse("-1234.5678")
        self.assertEqual(q.decimal_value(), decimal.Decimal("-1234.5678"))
        self.assertEqual(q.to_decimal_string(), "-1234.5678")

    def test_periodic(self):
        q = Rational("1", "7")
        expected = "0." + "142857" * 20
        self.assertTrue(q.to_decimal_string().startswith(expected))
        self.assertTrue(q.to_plain_string().startswith(expected))

    def test_default_precision(self):
        q = Rational(1, 7)
        digits = q.to_decimal_string()[2:]
        self.assertEqual(len(digits), 500)
        # 500 digits of 142857... end in "14", the next digit 2 rounds down
        self.assertTrue(digits.endswith("142857" * 5 + "14"))

    def test_precision_and_rounding(self):
        q = bigfrac.parse("8/9")
        self.assertEqual(q.to_decimal_string(10, decimal.ROUND_DOWN),
                         "0.8888888888")
        self.assertEqual(q.to_decimal_string(10, decimal.ROUND_HALF_UP),
                         "0.8888888889")
        self.assertEqual(q.decimal_value(precision=3), decimal.Decimal("0.889"))
        q = Rational(-2, 3)
        self.assertEqual(q.to_decimal_string(4, decimal.ROUND_FLOOR), "-0.6667")
        self.assertEqual(q.to_decimal_string(4, decimal.ROUND_CEILING), "-0.6666")

    def test_half_up(self):
        self.assertEqual(Rational(5, 2).to_decimal_string(1), "3")
        self.assertEqual(Rational(-5, 2).to_decimal_string(1), "-3")
        self.assertEqual(
            Rational(5, 2).to_decimal_string(1, decimal.ROUND_HALF_EVEN), "2")

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            Rational(1, 3).decimal_value(precision=0)
        with self.assertRaises(ValueError):
            Rational(1, 3).decimal_value(rounding="ROUND_SIDEWAYS")

    def test_plain_notation(self):
        self.assertEqual(Rational(3, 4).to_plain_string(), "0.75")
        self.assertEqual(Rational(-3, 4).to_plain_string(), "-0.75")
        self.assertEqual(Rational(8, 4).to_plain_string(), "2")
        self.assertEqual(Rational(-8, 4).to_plain_string(), "-2")
        self.assertEqual(Rational.ZERO.to_plain_string(), "0")
        self.assertEqual(Rational(10**20).to_plain_string(), "1" + "0" * 20)
        self.assertEqual(Rational(1, 10**20).to_plain_string(),
                         "0." + "0" * 19 + "1")
        self.assertEqual(Rational(123456789, 10000).to_plain_string(),
                         "12345.6789")

    def test_rounded_plain_notation(self):
        self.assertEqual(Rational(123456, 1).to_decimal_string(2), "120000")

    def test_memoized(self):
        q = Rational(22, 7)
        first = q.decimal_value()
        self.assertIs(q.decimal_value(), first)
        self.assertIsNot(q.decimal_value(precision=5), first)
        self.assertIs(q.decimal_value(), first)

    def test_not_used_for_equality(self):
        a = Rational(1, 3)
        b = Rational(10**600 + 1, 3 * 10**600)
        self.assertEqual(a.decimal_value(), b.decimal_value())
        self.assertNotEqual(a, b)


class TestNumericConversion(unittest.TestCase):

    def test_int(self):
        self.assertEqual(int(Rational(3, 5)), 0)
        self.assertEqual(int(Rational(-6, 5)), -1)
        self.assertEqual(int(Rational(26, 5)), 5)
        self.assertEqual(int(Rational(-24, 5)), -4)
        self.assertEqual(int(Rational(10**40, 3)), 10**40 // 3)

    def test_float(self):
        self.assertAlmostEqual(float(Rational(26, 8)), 3.25)
        self.assertAlmostEqual(float(Rational(-23, 8)), -2.875)
        self.assertEqual(float(Rational(1, 10)), 0.1)
        self.assertEqual(float(Rational.ZERO), 0.0)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    unittest.main()
