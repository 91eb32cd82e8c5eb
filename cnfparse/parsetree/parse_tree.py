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
"""Parse tree nodes for CNF grammars.

Every node has at most two children, since a CNF rule expands a variable into
at most two symbols. A node with symbol None is the empty-word leaf, which
only appears under the start variable in the tree for the empty word:

  A0
  |
  ε
"""

from cnfparse.grammar import symbols as symbols_lib
from cnfparse.grammar import word as word_lib

# The maximum number of children of a node.
MAX_CHILDREN = 2


class ParseTreeNode(object):
  """Represents a node in a parse tree, and the tree rooted at it."""

  def __init__(self, symbol, *children):
    if len(children) > MAX_CHILDREN:
      raise ValueError(
          "Only binary trees are supported, got %d children for %s. A grammar "
          "in Chomsky normal form never needs more than %d." %
          (len(children), symbol, MAX_CHILDREN))
    for child in children:
      if not isinstance(child, ParseTreeNode):
        raise TypeError("Children must be ParseTreeNodes, got %r." % (child,))
    self.symbol = symbol
    self.children = tuple(children)

  def is_leaf(self):
    return not self.children

  def is_empty_leaf(self):
    return self.symbol is None and not self.children

  def symbol_string(self):
    if self.symbol is None:
      return symbols_lib.EPSILON
    return str(self.symbol)

  def leaves(self):
    """Yields leaf nodes from left to right."""
    stack = [self]
    while stack:
      node = stack.pop()
      if node.is_leaf():
        yield node
      else:
        stack.extend(reversed(node.children))

  def yield_word(self):
    """Returns the word spelled out by the leaves of this tree."""
    return word_lib.Word(
        tuple(leaf.symbol for leaf in self.leaves() if leaf.symbol is not None))

  def __eq__(self, other):
    if not isinstance(other, ParseTreeNode):
      return NotImplemented
    return self.symbol == other.symbol and self.children == other.children

  def __hash__(self):
    return hash((self.symbol, self.children))

  def __str__(self):
    if self.is_leaf():
      return self.symbol_string()
    return "(%s %s)" % (self.symbol_string(), " ".join(
        str(child) for child in self.children))

  def __repr__(self):
    return str(self)


def empty_parse_tree(variable):
  """Returns the tree `variable → ε` used for the empty word."""
  return ParseTreeNode(variable, ParseTreeNode(None))
