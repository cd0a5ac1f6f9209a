#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from intstack.result import Ok, Err, push, pop
from intstack.stack import Stack, CapacityExceeded, StackEmpty


class TestResult(unittest.TestCase):
    def setUp(self):
        self.stack = Stack(3)

    def test_result_scenario(self):
        self.assertEqual(Ok(None), push(self.stack, 5))
        self.assertEqual(Ok(None), push(self.stack, 6))
        self.assertEqual(Ok(None), push(self.stack, 7))

        result = push(self.stack, 8)
        self.assertIsInstance(result, Err)
        self.assertIsInstance(result.error, CapacityExceeded)

        self.assertEqual(Ok(7), pop(self.stack))
        self.assertEqual(Ok(6), pop(self.stack))
        self.assertEqual(Ok(5), pop(self.stack))

        result = pop(self.stack)
        self.assertIsInstance(result, Err)
        self.assertIsInstance(result.error, StackEmpty)

    def test_result_zero_capacity(self):
        stack = Stack(0)
        self.assertIsInstance(push(stack, 1).error, CapacityExceeded)
        self.assertIsInstance(pop(stack).error, StackEmpty)

    def test_result_failed_pop_has_no_value(self):
        push(self.stack, 5)
        pop(self.stack)
        result = pop(self.stack)
        self.assertFalse(hasattr(result, "value"))

    def test_result_type_errors_still_raised(self):
        self.assertRaises(TypeError, push, self.stack, "5")
