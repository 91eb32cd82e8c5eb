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
"""Small CNF grammars used in tests and examples."""

from cnfparse.grammar import cfg
from cnfparse.grammar import symbols
from cnfparse.grammar import word as word_lib


def _rule(variable, *expansion):
  return cfg.Rule(variable, word_lib.Word(expansion))


def simple_cnf():
  """Returns a grammar for 0^n 1^n (n >= 0) with start variable A0."""
  a0 = symbols.Variable("A0")
  a = symbols.Variable("A")
  b = symbols.Variable("B")
  z = symbols.Variable("Z")
  y = symbols.Variable("Y")
  zero = symbols.Terminal("0")
  one = symbols.Terminal("1")

  rules = [
      _rule(a0),
      _rule(a0, z, y),
      _rule(a0, z, b),
      _rule(a, z, y),
      _rule(a, z, b),
      _rule(b, a, y),
      _rule(z, zero),
      _rule(y, one),
  ]
  return cfg.ContextFreeGrammar({a0, a, b, z, y}, {zero, one}, rules, a0)


def arithmetic_cnf():
  """Returns a grammar for bracketed `+`/`*` expressions over 0, 1 and x.

  The grammar is the CNF form of

    S → S+T | T
    T → T*F | F
    F → (S) | 0 | 1 | x

  and does not generate the empty word.
  """
  a0, a1, a2, a3 = symbols.subscripted_variables("A", 4)
  s = symbols.Variable("S")
  s1, s2, s3 = symbols.subscripted_variables("S", 4)[1:]
  t = symbols.Variable("T")
  t1, t2 = symbols.subscripted_variables("T", 3)[1:]
  f = symbols.Variable("F")
  f1 = symbols.Variable("F1")
  l = symbols.Variable("L")
  a = symbols.Variable("A")
  m = symbols.Variable("M")
  r = symbols.Variable("R")

  plus = symbols.Terminal("+")
  times = symbols.Terminal("*")
  open_bracket = symbols.Terminal("(")
  close_bracket = symbols.Terminal(")")
  one = symbols.Terminal("1")
  zero = symbols.Terminal("0")
  x = symbols.Terminal("x")
  atoms = (one, zero, x)

  rules = [_rule(a0, s, a1), _rule(a0, t, a2), _rule(a0, l, a3)]
  rules.extend(_rule(a0, atom) for atom in atoms)
  rules.extend([_rule(a1, a, t), _rule(a2, m, f), _rule(a3, s, r)])
  rules.extend([_rule(s, s, s1), _rule(s, t, s2), _rule(s, l, s3)])
  rules.extend(_rule(s, atom) for atom in atoms)
  rules.extend([_rule(s1, a, t), _rule(s2, m, f), _rule(s3, s, r)])
  rules.extend([_rule(t, t, t1), _rule(t, l, t2)])
  rules.extend(_rule(t, atom) for atom in atoms)
  rules.extend([_rule(t1, m, f), _rule(t2, s, r)])
  rules.append(_rule(f, l, f1))
  rules.extend(_rule(f, atom) for atom in atoms)
  rules.append(_rule(f1, s, r))
  rules.extend([
      _rule(l, open_bracket),
      _rule(a, plus),
      _rule(m, times),
      _rule(r, close_bracket),
  ])

  variables = {rule.variable for rule in rules}
  terminals = {plus, times, open_bracket, close_bracket, one, zero, x}
  return cfg.ContextFreeGrammar(variables, terminals, rules, a0)
