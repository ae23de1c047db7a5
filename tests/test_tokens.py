"""Unit tests for the token model."""

import unittest

from intcalc_pkg.tokens import (
    Token,
    TokenCategory,
    cannot_merge,
    classify,
    is_group,
    is_operator,
    is_value_or_variable,
    merge,
)
from intcalc_pkg.types import InvalidExpressionError

C = TokenCategory


class TestCategories(unittest.TestCase):
    """Test category predicates and precedence."""

    def test_precedence(self):
        self.assertEqual(C.ADD.precedence, 1)
        self.assertEqual(C.SUBTRACT.precedence, 1)
        self.assertEqual(C.MULTIPLY.precedence, 2)
        self.assertEqual(C.DIVIDE.precedence, 2)
        self.assertEqual(C.POWER.precedence, 3)
        for category in (C.NONE, C.INTEGER, C.VARIABLE, C.GROUP_OPEN, C.GROUP_CLOSE):
            self.assertLess(category.precedence, C.ADD.precedence)

    def test_predicates(self):
        self.assertTrue(is_value_or_variable(C.INTEGER))
        self.assertTrue(is_value_or_variable(C.VARIABLE))
        self.assertFalse(is_value_or_variable(C.ADD))
        for category in (C.ADD, C.SUBTRACT, C.MULTIPLY, C.DIVIDE, C.POWER):
            self.assertTrue(is_operator(category))
        self.assertFalse(is_operator(C.GROUP_OPEN))
        self.assertTrue(is_group(C.GROUP_OPEN))
        self.assertTrue(is_group(C.GROUP_CLOSE))
        self.assertFalse(is_group(C.INTEGER))

    def test_classify(self):
        self.assertIs(classify("7"), C.INTEGER)
        self.assertIs(classify("q"), C.VARIABLE)
        self.assertIs(classify("Q"), C.VARIABLE)
        self.assertIs(classify("^"), C.POWER)
        self.assertIs(classify(")"), C.GROUP_CLOSE)
        self.assertIs(classify(" "), C.NONE)
        self.assertIs(classify("%"), C.NONE)
        self.assertIs(classify("é"), C.NONE)
        self.assertIs(classify("٣"), C.NONE)

    def test_token_helpers(self):
        token = Token("*", C.MULTIPLY)
        self.assertTrue(token.is_operator())
        self.assertEqual(token.precedence, 2)
        self.assertIn("MULTIPLY", repr(token))


class TestMergeRules(unittest.TestCase):
    """Test sign-run merge eligibility and results."""

    def test_groups_never_merge(self):
        self.assertTrue(cannot_merge(C.GROUP_OPEN, C.GROUP_OPEN))
        self.assertTrue(cannot_merge(C.ADD, C.GROUP_CLOSE))
        self.assertTrue(cannot_merge(C.GROUP_CLOSE, C.INTEGER))

    def test_signs_always_merge(self):
        self.assertFalse(cannot_merge(C.ADD, C.SUBTRACT))
        self.assertFalse(cannot_merge(C.SUBTRACT, C.SUBTRACT))
        self.assertFalse(cannot_merge(C.SUBTRACT, C.ADD))

    def test_same_category_merges(self):
        self.assertFalse(cannot_merge(C.INTEGER, C.INTEGER))
        self.assertFalse(cannot_merge(C.VARIABLE, C.VARIABLE))
        self.assertFalse(cannot_merge(C.MULTIPLY, C.MULTIPLY))

    def test_different_categories_split(self):
        self.assertTrue(cannot_merge(C.NONE, C.INTEGER))
        self.assertTrue(cannot_merge(C.INTEGER, C.VARIABLE))
        self.assertTrue(cannot_merge(C.SUBTRACT, C.INTEGER))
        self.assertTrue(cannot_merge(C.MULTIPLY, C.DIVIDE))

    def test_merge_results(self):
        self.assertIs(merge(C.SUBTRACT, C.SUBTRACT), C.ADD)
        self.assertIs(merge(C.ADD, C.SUBTRACT), C.SUBTRACT)
        self.assertIs(merge(C.SUBTRACT, C.ADD), C.SUBTRACT)
        self.assertIs(merge(C.ADD, C.ADD), C.ADD)
        self.assertIs(merge(C.INTEGER, C.INTEGER), C.INTEGER)
        self.assertIs(merge(C.VARIABLE, C.VARIABLE), C.VARIABLE)

    def test_merge_rejects_repeated_operators(self):
        for category in (C.MULTIPLY, C.DIVIDE, C.POWER):
            with self.assertRaises(InvalidExpressionError):
                merge(category, category)


if __name__ == "__main__":
    unittest.main()
