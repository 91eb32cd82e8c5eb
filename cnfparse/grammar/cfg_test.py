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
"""Tests for cfg."""

from absl.testing import absltest
from absl.testing import parameterized

from cnfparse.grammar import cfg
from cnfparse.grammar import sample_grammars
from cnfparse.grammar import symbols
from cnfparse.grammar import word as word_lib

S = symbols.Variable("S")
A = symbols.Variable("A")
B = symbols.Variable("B")


def _rule(variable, text):
  return cfg.Rule(variable, word_lib.word_from_string(text))


def _grammar(*rules):
  return cfg.ContextFreeGrammar.from_rules(rules)


class CfgTest(parameterized.TestCase):

  def test_rule_str(self):
    self.assertEqual(str(_rule(A, "AB")), "A → AB")
    self.assertEqual(str(_rule(S, "")), "S → ε")

  def test_rule_equality(self):
    self.assertEqual(_rule(A, "0"), cfg.Rule(A, word_lib.word_of(
        symbols.Terminal("0"))))
    self.assertNotEqual(_rule(A, "0"), _rule(B, "0"))

  def test_from_rules(self):
    grammar = _grammar(_rule(S, "AB"), _rule(A, "0"), _rule(B, "1"))
    self.assertEqual(grammar.start_variable, S)
    self.assertEqual(grammar.variables, {S, A, B})
    self.assertEqual(grammar.terminals,
                     {symbols.Terminal("0"), symbols.Terminal("1")})

  def test_from_rules_matches_explicit_grammar(self):
    grammar = sample_grammars.simple_cnf()
    self.assertEqual(cfg.ContextFreeGrammar.from_rules(grammar.rules), grammar)

  def test_from_no_rules(self):
    with self.assertRaises(ValueError):
      cfg.ContextFreeGrammar.from_rules([])

  def test_rules_for(self):
    grammar = sample_grammars.simple_cnf()
    a0 = symbols.Variable("A0")
    self.assertEqual(
        [str(rule) for rule in grammar.rules_for(a0)],
        ["A₀ → ε", "A₀ → ZY", "A₀ → ZB"])
    self.assertEqual(grammar.rules_by_variable()[a0], grammar.rules_for(a0))

  def test_sample_grammars_are_cnf(self):
    self.assertTrue(sample_grammars.simple_cnf().is_in_chomsky_normal_form())
    self.assertTrue(
        sample_grammars.arithmetic_cnf().is_in_chomsky_normal_form())

  def test_unit_production_is_not_cnf(self):
    grammar = sample_grammars.simple_cnf()
    rules = grammar.rules + (_rule(A, "B"),)
    grammar = cfg.ContextFreeGrammar(grammar.variables, grammar.terminals,
                                     rules, grammar.start_variable)
    self.assertFalse(grammar.is_in_chomsky_normal_form())

  @parameterized.named_parameters(
      ("terminal", "0", True),
      ("two_variables", "AB", True),
      ("start_epsilon", None, True),
      ("three_variables", "ABA", False),
      ("unit", "B", False),
      ("terminal_first", "0B", False),
      ("terminal_second", "A0", False),
      ("two_terminals", "01", False),
      ("start_on_left", "SA", False),
      ("start_on_right", "AS", False),
  )
  def test_is_in_chomsky_normal_form(self, expansion, expected):
    if expansion is None:
      rule = _rule(S, "")
    else:
      rule = _rule(A, expansion)
    grammar = _grammar(_rule(S, "AB"), _rule(A, "0"), _rule(B, "1"), rule)
    self.assertEqual(grammar.is_in_chomsky_normal_form(), expected)

  def test_non_start_epsilon_is_not_cnf(self):
    grammar = _grammar(_rule(S, "AB"), _rule(A, ""), _rule(B, "1"))
    self.assertFalse(grammar.is_in_chomsky_normal_form())

  def test_str(self):
    grammar = _grammar(_rule(S, "AB"), _rule(A, "0"))
    self.assertEqual(str(grammar), "S → AB\nA → 0")


if __name__ == "__main__":
  absltest.main()
