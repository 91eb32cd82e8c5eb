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
"""Builds parse trees from derivations and derivations from parse trees.

Trees are built bottom-up by walking a derivation from its newest step back to
the start symbol. There are two ways to decide which subtree a variable in a
rule expansion refers to:

- By position (the default). The nodes built so far are kept aligned with the
  word at the current step, and each step's index says exactly which nodes its
  rule produced. Repeated variables are never confused.
- By symbol. Each expansion symbol is bound to the first subtree built so far
  whose root carries that symbol. Subtrees are never removed from the pool, so
  when a variable occurs several times a parent can be bound to the subtree of
  another occurrence. The result is still a tree over the right symbols, but
  its yield can differ from the derived word.

Both strategies consume rule steps newest first, in the derivation's own
iteration order, so a binary rule's children exist before the rule's node is
built.
"""

from cnfparse.derivation import derivation as derivation_lib
from cnfparse.grammar import cfg
from cnfparse.grammar import word as word_lib
from cnfparse.parsetree import parse_tree


def _rule_steps_newest_first(derivation):
  for step in derivation:
    if step.is_start_symbol():
      break
    yield step


def _is_empty_derivation(derivation):
  if derivation.num_rule_steps() == 0:
    return True
  return (derivation.num_rule_steps() == 1 and
          not derivation.latest_word().symbols)


def synthesize_by_position(derivation):
  """Builds the tree for `derivation` using each step's rewrite index."""
  nodes = [
      parse_tree.ParseTreeNode(symbol) for symbol in derivation.latest_word()
  ]
  for step in _rule_steps_newest_first(derivation):
    variable = step.rule.variable
    expansion_len = len(step.rule.expansion)
    if not expansion_len:
      nodes.insert(step.index, parse_tree.empty_parse_tree(variable))
      continue
    children = nodes[step.index:step.index + expansion_len]
    nodes[step.index:step.index + expansion_len] = [
        parse_tree.ParseTreeNode(variable, *children)
    ]
  if len(nodes) != 1:
    raise ValueError("Derivation does not start from a single symbol: %s" %
                     derivation)
  return nodes[0]


def _first_with_symbol(pool, symbol):
  for node in pool:
    if node.symbol == symbol:
      return node
  raise ValueError("No subtree for %s among %s" % (symbol, pool))


def synthesize_by_symbol(derivation):
  """Builds the tree for `derivation` by first-match subtree lookup."""
  pool = []
  for step in _rule_steps_newest_first(derivation):
    variable = step.rule.variable
    expansion = step.rule.expansion
    if not expansion.symbols:
      pool.append(parse_tree.empty_parse_tree(variable))
    elif expansion.is_terminal():
      pool.append(
          parse_tree.ParseTreeNode(variable,
                                   parse_tree.ParseTreeNode(expansion[0])))
    else:
      children = [_first_with_symbol(pool, symbol) for symbol in expansion]
      pool.append(parse_tree.ParseTreeNode(variable, *children))
  return pool[-1]


def synthesize_tree(derivation, bind_by_position=True):
  """Returns the parse tree witnessed by a complete derivation.

  Args:
    derivation: A Derivation from the start variable to a word of terminals.
    bind_by_position: Bind expansion symbols to subtrees by derivation position
      if True, otherwise by first matching symbol.

  Returns:
    The root ParseTreeNode. A derivation without rule steps, or consisting of
    the single step S → ε, gives the tree S → ε.
  """
  if _is_empty_derivation(derivation):
    return parse_tree.empty_parse_tree(derivation.start_word()[0])
  if bind_by_position:
    return synthesize_by_position(derivation)
  return synthesize_by_symbol(derivation)


def leftmost_derivation(tree):
  """Returns the leftmost derivation whose parse tree is `tree`."""
  derivation = derivation_lib.Derivation(word_lib.Word((tree.symbol,)))

  def expand(node):
    if node.is_leaf():
      return
    expansion = word_lib.Word(
        tuple(child.symbol for child in node.children
              if not child.is_empty_leaf()))
    current_word = derivation.latest_word()
    index = current_word.index_of_first_variable()
    derivation.add_step(
        current_word.replace(index, expansion), cfg.Rule(node.symbol,
                                                         expansion), index)
    for child in node.children:
      expand(child)

  expand(tree)
  return derivation
