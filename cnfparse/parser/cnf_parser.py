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
"""Membership testing and parse tree generation for CNF grammars.

There are two equivalent backends. The default enumerates leftmost derivations
of the exact length a CNF derivation must have, see `derivation_search.py`.
With `use_chart` set in the config, a CKY chart parser is used instead, which
is much faster for longer inputs; its witness derivation is then read back
off the parse tree.

Words may be given as `Word` instances or in the compact string notation of
`word.word_from_string`.
"""

from absl import logging

from cnfparse.grammar import word as word_lib
from cnfparse.parser import chart_parser
from cnfparse.parser import derivation_search
from cnfparse.parser import parser_config
from cnfparse.parser import tree_synthesis


def _as_word(word):
  if isinstance(word, str):
    return word_lib.word_from_string(word)
  return word


def is_in_language(grammar, word, config=None, verbose=False):
  """Returns a MembershipResult, truthy iff `word` is in the language.

  Args:
    grammar: A ContextFreeGrammar in Chomsky normal form.
    word: A Word or a string in compact notation.
    config: Optional ParserConfig or dict of overrides.
    verbose: Log search progress if True.

  Returns:
    A MembershipResult whose `witness` is the canonical derivation of `word`,
    or None if `word` is not in the language.
  """
  word = _as_word(word)
  config = parser_config.get_config(config)
  if config.use_chart:
    tree = chart_parser.parse(grammar, word, verbose=verbose)
    if tree is None:
      return derivation_search.MembershipResult(word)
    return derivation_search.MembershipResult(
        word, tree_synthesis.leftmost_derivation(tree))
  return derivation_search.is_in_language(
      grammar, word, config=config, verbose=verbose)


def generate_parse_tree(grammar, word, config=None, verbose=False):
  """Returns a parse tree for `word`, or None if it is not in the language."""
  word = _as_word(word)
  config = parser_config.get_config(config)
  if config.use_chart:
    return chart_parser.parse(grammar, word, verbose=verbose)
  result = derivation_search.is_in_language(
      grammar, word, config=config, verbose=verbose)
  if not result:
    return None
  tree = tree_synthesis.synthesize_tree(
      result.witness, bind_by_position=config.bind_by_position)
  if verbose:
    logging.info("Parse tree for %s: %s", word, tree)
  return tree
