"""
Unit tests for calculator arithmetic and number/text conversion.

Run (with venv activated):
  python -m unittest tests.calculator.test_arithmetic -v
  pytest tests/calculator/ -v
"""
import math
import unittest

from app.projects.calculator.core.arithmetic import (
    UnknownOperatorError,
    apply_operator,
    format_number,
    parse_display,
)


class TestApplyOperator(unittest.TestCase):

    def test_add(self):
        self.assertEqual(apply_operator("+", 7, 3), 10)

    def test_subtract(self):
        self.assertEqual(apply_operator("-", 3, 7), -4)

    def test_multiply(self):
        self.assertEqual(apply_operator("×", 1.5, 2), 3)

    def test_divide(self):
        self.assertEqual(apply_operator("÷", 15, 4), 3.75)

    def test_divide_by_zero_is_zero(self):
        self.assertEqual(apply_operator("÷", 8, 0), 0)
        self.assertEqual(apply_operator("÷", -8, 0.0), 0)

    def test_unknown_operator_raises(self):
        with self.assertRaises(UnknownOperatorError):
            apply_operator("^", 2, 3)


class TestFormatNumber(unittest.TestCase):

    def test_integral_values_have_no_fraction(self):
        self.assertEqual(format_number(10.0), "10")
        self.assertEqual(format_number(-5.0), "-5")

    def test_zero_and_negative_zero(self):
        self.assertEqual(format_number(0.0), "0")
        self.assertEqual(format_number(-0.0), "0")

    def test_rounding_artifacts_are_kept(self):
        self.assertEqual(format_number(0.1 + 0.2), "0.30000000000000004")

    def test_plain_fraction(self):
        self.assertEqual(format_number(3.75), "3.75")
        self.assertEqual(format_number(0.5), "0.5")

    def test_small_values(self):
        self.assertEqual(format_number(0.000001), "0.000001")
        self.assertEqual(format_number(1e-7), "1e-7")
        self.assertEqual(format_number(1.5e-10), "1.5e-10")

    def test_large_values(self):
        self.assertEqual(format_number(1e20), "100000000000000000000")
        self.assertEqual(format_number(1e21), "1e+21")
        self.assertEqual(format_number(-1.25e22), "-1.25e+22")

    def test_non_finite(self):
        self.assertEqual(format_number(math.inf), "Infinity")
        self.assertEqual(format_number(-math.inf), "-Infinity")
        self.assertEqual(format_number(math.nan), "NaN")


class TestParseDisplay(unittest.TestCase):

    def test_plain_numbers(self):
        self.assertEqual(parse_display("0"), 0)
        self.assertEqual(parse_display("42"), 42)
        self.assertEqual(parse_display("-5"), -5)
        self.assertEqual(parse_display("1.5"), 1.5)

    def test_trailing_point(self):
        self.assertEqual(parse_display("0."), 0)
        self.assertEqual(parse_display("7."), 7)

    def test_exponent_forms(self):
        self.assertEqual(parse_display("1e+21"), 1e21)
        self.assertEqual(parse_display("1e-7"), 1e-7)

    def test_infinity(self):
        self.assertEqual(parse_display("Infinity"), math.inf)
        self.assertEqual(parse_display("-Infinity"), -math.inf)

    def test_leading_prefix_only(self):
        self.assertEqual(parse_display("12abc"), 12)

    def test_garbage_is_nan(self):
        self.assertTrue(math.isnan(parse_display("NaN")))
        self.assertTrue(math.isnan(parse_display("")))
        self.assertTrue(math.isnan(parse_display(".")))

    def test_formatted_values_parse_back(self):
        for value in (10.0, 0.30000000000000004, 1e21, 1e-7, -3.5):
            self.assertEqual(parse_display(format_number(value)), value)
