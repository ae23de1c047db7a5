"""Unit tests for infix to postfix conversion."""

import unittest

from intcalc_pkg.lexer import tokenize
from intcalc_pkg.parser import to_postfix
from intcalc_pkg.types import InvalidExpressionError


def _postfix(expression):
    return " ".join(t.text for t in to_postfix(tokenize(expression)))


class TestToPostfix(unittest.TestCase):
    """Test shunting-yard ordering."""

    def test_precedence(self):
        self.assertEqual(_postfix("1 + 2 * 3"), "1 2 3 * +")
        self.assertEqual(_postfix("1 * 2 + 3"), "1 2 * 3 +")
        self.assertEqual(_postfix("2 * 3 ^ 2"), "2 3 2 ^ *")

    def test_left_associativity(self):
        self.assertEqual(_postfix("2 - 3 - 1"), "2 3 - 1 -")
        self.assertEqual(_postfix("8 / 4 / 2"), "8 4 / 2 /")
        self.assertEqual(_postfix("2^3^2"), "2 3 ^ 2 ^")

    def test_parentheses(self):
        self.assertEqual(_postfix("2 - (3 - 1)"), "2 3 1 - -")
        self.assertEqual(_postfix("((a))"), "a")
        self.assertEqual(_postfix("(1 + 2) * 3"), "1 2 + 3 *")

    def test_unary_sign(self):
        self.assertEqual(_postfix("- 5"), "5 -")
        # the sign pops the pending multiplication, leaving it an operand short
        self.assertEqual(_postfix("3 * -2"), "3 * 2 -")

    def test_empty(self):
        self.assertEqual(to_postfix([]), [])

    def test_unbalanced_open(self):
        with self.assertRaises(InvalidExpressionError):
            to_postfix(tokenize("(2 + 3"))

    def test_unbalanced_close(self):
        with self.assertRaises(InvalidExpressionError):
            to_postfix(tokenize("2 + 3)"))
        with self.assertRaises(InvalidExpressionError):
            to_postfix(tokenize(")("))


if __name__ == "__main__":
    unittest.main()
