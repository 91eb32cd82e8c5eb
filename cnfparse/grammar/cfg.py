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
"""Data structures for context-free grammars and the CNF conformance check.

A grammar is a set of variables, a set of terminals, an ordered tuple of rules
and a start variable. Rule order matters in two places: `from_rules` takes the
first rule's variable as the start variable, and the membership search
branches over rules in grammar order.
"""

import collections
from dataclasses import dataclass  # pylint: disable=g-importing-member
import typing

from absl import logging

from cnfparse.grammar import symbols as symbols_lib
from cnfparse.grammar import word as word_lib

ARROW = "→"


@dataclass(frozen=True)
class Rule:
  """Class for a rule `variable → expansion`."""
  variable: symbols_lib.Variable
  expansion: word_lib.Word

  def __str__(self):
    return "%s %s %s" % (self.variable, ARROW, self.expansion)

  def __repr__(self):
    return str(self)


@dataclass(frozen=True)
class ContextFreeGrammar:
  """Class for a context-free grammar."""
  variables: typing.FrozenSet[symbols_lib.Variable]
  terminals: typing.FrozenSet[symbols_lib.Terminal]
  rules: typing.Tuple[Rule, Ellipsis]
  start_variable: symbols_lib.Variable

  def __post_init__(self):
    object.__setattr__(self, "variables", frozenset(self.variables))
    object.__setattr__(self, "terminals", frozenset(self.terminals))
    object.__setattr__(self, "rules", tuple(self.rules))

  @classmethod
  def from_rules(cls, rules):
    """Builds a grammar whose start variable is the first rule's variable."""
    rules = tuple(rules)
    if not rules:
      raise ValueError("Cannot infer a start variable without rules.")
    variables = {rule.variable for rule in rules}
    terminals = {
        symbol for rule in rules for symbol in rule.expansion
        if symbol.is_terminal()
    }
    return cls(variables, terminals, rules, rules[0].variable)

  def rules_for(self, variable):
    return [rule for rule in self.rules if rule.variable == variable]

  def rules_by_variable(self):
    """Returns a map from variable to its rules, in grammar order."""
    variables_to_rules = collections.defaultdict(list)
    for rule in self.rules:
      variables_to_rules[rule.variable].append(rule)
    return variables_to_rules

  def is_in_chomsky_normal_form(self):
    """Returns True if every rule is `A → BC`, `A → a` or `S → ε`."""
    for rule in self.rules:
      if not _is_cnf_rule(rule, self.start_variable):
        logging.info("Rule is not in Chomsky normal form: %s", rule)
        return False
    return True

  def __str__(self):
    return "\n".join(str(rule) for rule in self.rules)

  def __repr__(self):
    return str(self)


def _is_cnf_rule(rule, start_variable):
  """Checks a single rule against start variable `start_variable`."""
  expansion = rule.expansion
  # S → ε is always allowed.
  if not expansion.symbols:
    return rule.variable == start_variable
  if expansion.is_terminal():
    return True
  if len(expansion) == 2:
    return all(not symbol.is_terminal() and symbol != start_variable
               for symbol in expansion)
  # Either a unit production or an expansion longer than 2.
  return False
