"""
Columns module behavioral tests (padding, gutters, continuation lines).

Scope
- Validate the token column width is the widest token of the section.
- Validate continuation lines and empty descriptions keep their padding.
- Validate indentation/gutter faults at construction.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from helmsman import ConfigurationError, FaultCode
from helmsman.columns import ColumnTable


class TestColumnTable(TestCase):
    """Behavioral tests for ColumnTable."""

    def testSingleRow(self):
        table = ColumnTable(2, 4)
        self.assertEqual(table.format([("outer", ["Help text   for the outer   command"])]), [
            "  outer    Help text   for the outer   command",
        ])

    def testRowsAlignOnWidestToken(self):
        table = ColumnTable(1, 2)
        self.assertEqual(table.format([("a", ["x"]), ("bbb", ["y", "z"])]), [
            " a    x",
            " bbb  y",
            "      z",
        ])

    def testContinuationLinesArePadded(self):
        table = ColumnTable(2, 4)
        lines = ["Help", "for ", " the", "option"]
        self.assertEqual(table.format([("-a, --aaa", lines)]), [
            "  -a, --aaa    Help",
            "               for ",
            "                the",
            "               option",
        ])

    def testEmptyDescriptionKeepsGutter(self):
        table = ColumnTable(2, 4)
        self.assertEqual(table.format([("<outer-args>", [""]), ("<inner-args>", [""])]), [
            "  <outer-args>    ",
            "  <inner-args>    ",
        ])

    def testMissingDescriptionLinesCountAsOneEmptyLine(self):
        self.assertEqual(ColumnTable(0, 2).format([("tok", [])]), ["tok  "])

    def testEmptyTokensStillReserveGutter(self):
        self.assertEqual(ColumnTable(0, 3).format([("", ["a"]), ("", ["b"])]), ["   a", "   b"])

    def testOrderAndDuplicatesArePreserved(self):
        rows = [("b", ["2"]), ("a", ["1"]), ("b", ["2"])]
        self.assertEqual(ColumnTable(0, 1).format(rows), ["b 2", "a 1", "b 2"])

    def testNoRows(self):
        self.assertEqual(ColumnTable(2, 4).format([]), [])

    def testWideCharactersAreMeasuredInCells(self):
        table = ColumnTable(0, 1)
        self.assertEqual(table.measure(["日本"]), 4)
        self.assertEqual(table.format([("日本", ["x"]), ("ab", ["y"])]), ["日本 x", "ab   y"])

    def testOffset(self):
        table = ColumnTable(2, 4)
        self.assertEqual(table.offset(["-a, --aaa", "-b"]), 2 + 9 + 4)
        self.assertEqual(table.offset([]), 6)

    def testNegativeIndentationFails(self):
        with self.assertRaises(ConfigurationError) as context:
            ColumnTable(-1, 4)
        self.assertEqual(context.exception.code, FaultCode.NEGATIVE_INDENTATION)

    def testNegativeGutterFails(self):
        with self.assertRaises(ConfigurationError) as context:
            ColumnTable(2, -4)
        self.assertEqual(context.exception.code, FaultCode.NEGATIVE_GUTTER)

    def testNonIntegerSpacingFails(self):
        for indentation, gutter in ((2.5, 4), (2, "4"), (True, 4)):
            with self.assertRaises(ConfigurationError):
                ColumnTable(indentation, gutter)


if __name__ == "__main__":
    unittest.main()
