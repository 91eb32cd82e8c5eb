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
"""Implements CKY parsing for grammars in Chomsky normal form.

This is the dynamic-programming counterpart of `derivation_search.py`. It
decides membership in O(n^3 |G|) time and returns one parse tree. When the
grammar is ambiguous the tree can differ from the one built from the canonical
leftmost derivation, but both have the input as their yield.

Each chart cell keeps a single entry per variable: the first tree found,
trying rules in grammar order and split points from left to right.
"""

import collections

from absl import logging

from cnfparse.grammar import cfg
from cnfparse.grammar import word as word_lib
from cnfparse.parsetree import parse_tree


class Chart(object):
  """Represents parse chart state."""

  def __init__(self):
    # Map from (span_begin, span_end, variable) to ParseTreeNode.
    self.key_map = {}
    # Variables with an entry, indexed by (span_begin, span_end).
    self.span_map = collections.defaultdict(list)

  def add(self, span_begin, span_end, variable, node):
    """Add an entry to the chart unless the cell already has one."""
    key = (span_begin, span_end, variable)
    if key in self.key_map:
      return False
    self.key_map[key] = node
    self.span_map[(span_begin, span_end)].append(variable)
    return True

  def get(self, span_begin, span_end, variable):
    return self.key_map.get((span_begin, span_end, variable))

  def get_variables(self, span_begin, span_end):
    return self.span_map[(span_begin, span_end)]


def _split_rules(grammar):
  """Returns (terminal rules, binary rules) of `grammar`."""
  terminal_rules = []
  binary_rules = []
  for rule in grammar.rules:
    if rule.expansion.is_terminal():
      terminal_rules.append(rule)
    elif len(rule.expansion) == 2:
      binary_rules.append(rule)
  return terminal_rules, binary_rules


def parse(grammar, word, verbose=False):
  """Run bottom up parser.

  Args:
    grammar: A ContextFreeGrammar in Chomsky normal form. Rules of any other
      shape, other than S → ε, are ignored.
    word: Target Word.
    verbose: Log populated chart cells if True.

  Returns:
    The root ParseTreeNode of a parse of `word`, or None.
  """
  start_variable = grammar.start_variable
  input_len = len(word)

  if not input_len:
    if cfg.Rule(start_variable, word_lib.EMPTY_WORD) in grammar.rules:
      return parse_tree.empty_parse_tree(start_variable)
    return None

  for symbol in word:
    if not symbol.is_terminal() or symbol not in grammar.terminals:
      if verbose:
        logging.info("Input symbol does not appear in grammar: %s", symbol)
      return None

  terminal_rules, binary_rules = _split_rules(grammar)
  chart = Chart()

  # Spans of length 1.
  for idx, symbol in enumerate(word):
    for rule in terminal_rules:
      if rule.expansion[0] == symbol:
        chart.add(idx, idx + 1, rule.variable,
                  parse_tree.ParseTreeNode(rule.variable,
                                           parse_tree.ParseTreeNode(symbol)))

  # Longer spans, combining two adjacent sub-spans.
  for span_len in range(2, input_len + 1):
    for span_begin in range(0, input_len - span_len + 1):
      span_end = span_begin + span_len
      for rule in binary_rules:
        left_variable, right_variable = rule.expansion
        for split in range(span_begin + 1, span_end):
          left = chart.get(span_begin, split, left_variable)
          if left is None:
            continue
          right = chart.get(split, span_end, right_variable)
          if right is None:
            continue
          chart.add(span_begin, span_end, rule.variable,
                    parse_tree.ParseTreeNode(rule.variable, left, right))
          break

  if verbose:
    for (span_begin, span_end), variables in sorted(chart.span_map.items()):
      logging.info("Populated (%s,%s): %s", span_begin, span_end, variables)

  return chart.get(0, input_len, start_variable)


def can_parse(grammar, word, verbose=False):
  """Returns True if there exists >=1 parse of `word` given `grammar`."""
  return parse(grammar, word, verbose=verbose) is not None
