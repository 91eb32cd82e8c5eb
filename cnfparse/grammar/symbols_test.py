# coding=utf-8
# Copyright 2018 The Google AI Language Team Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for symbols."""

from absl.testing import absltest
from absl.testing import parameterized

from cnfparse.grammar import symbols


class SymbolsTest(parameterized.TestCase):

  def test_terminal_is_lower_cased(self):
    self.assertEqual(symbols.Terminal("A"), symbols.Terminal("a"))
    self.assertEqual(str(symbols.Terminal("A")), "a")
    self.assertTrue(symbols.Terminal("a").is_terminal())

  def test_variable_is_upper_cased(self):
    self.assertEqual(symbols.Variable("b"), symbols.Variable("B"))
    self.assertEqual(str(symbols.Variable("b")), "B")
    self.assertFalse(symbols.Variable("B").is_terminal())

  def test_variable_subscript(self):
    a3 = symbols.Variable("A3")
    self.assertEqual(a3.tag, "A")
    self.assertEqual(a3.subscript, 3)
    self.assertEqual(a3, symbols.Variable("a", 3))
    self.assertEqual(str(a3), "A₃")
    self.assertNotEqual(a3, symbols.Variable("A"))
    self.assertNotEqual(a3, symbols.Variable("A4"))

  def test_terminal_and_variable_differ(self):
    self.assertNotEqual(symbols.Terminal("0"), symbols.Variable("0"))
    self.assertLen({symbols.Terminal("0"), symbols.Variable("0")}, 2)

  def test_hashing(self):
    pool = {symbols.Variable("A0"), symbols.Variable("a0"),
            symbols.Terminal("x"), symbols.Terminal("X")}
    self.assertLen(pool, 2)

  @parameterized.named_parameters(
      ("epsilon", "ε"),
      ("empty", ""),
      ("two_chars", "ab"),
  )
  def test_invalid_terminal(self, tag):
    with self.assertRaises(ValueError):
      symbols.Terminal(tag)

  @parameterized.named_parameters(
      ("epsilon", "ε"),
      ("three_chars", "A12"),
      ("non_digit_subscript", "Ax"),
      ("empty", ""),
  )
  def test_invalid_variable(self, tag):
    with self.assertRaises(ValueError):
      symbols.Variable(tag)

  @parameterized.named_parameters(
      ("variable", symbols.Variable, "ε"),
      ("subscripted_variable", symbols.Variable, "ε1"),
      ("terminal_from_capital_epsilon", symbols.Terminal, "Ε"),
  )
  def test_epsilon_rejected_regardless_of_case(self, symbol_cls, tag):
    with self.assertRaisesRegex(ValueError, "ε|normalize"):
      symbol_cls(tag)

  def test_symbol_is_abstract(self):
    with self.assertRaises(TypeError):
      symbols.Symbol("a")

  def test_invalid_subscript(self):
    with self.assertRaises(ValueError):
      symbols.Variable("A", 10)
    with self.assertRaises(ValueError):
      symbols.Variable("A1", 2)

  def test_subscripted_variables(self):
    variables = symbols.subscripted_variables("s", 3)
    self.assertEqual(variables, [
        symbols.Variable("S0"),
        symbols.Variable("S1"),
        symbols.Variable("S2"),
    ])
    self.assertLen(symbols.subscripted_variables("S", 10), 10)

  @parameterized.parameters(0, 11)
  def test_subscripted_variables_bad_count(self, n):
    with self.assertRaises(ValueError):
      symbols.subscripted_variables("S", n)

  def test_symbol_from_char(self):
    self.assertEqual(symbols.symbol_from_char("Q"), symbols.Variable("Q"))
    self.assertEqual(symbols.symbol_from_char("q"), symbols.Terminal("q"))
    self.assertEqual(symbols.symbol_from_char("+"), symbols.Terminal("+"))


if __name__ == "__main__":
  absltest.main()
