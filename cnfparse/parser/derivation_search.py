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
"""Breadth-first search over leftmost derivations of a fixed length.

For a grammar in Chomsky normal form, every derivation of a word of length
n >= 1 takes exactly 2n - 1 steps: n steps introduce terminals and n - 1 steps
expand a variable into two variables. The empty word takes the single step
S → ε. The search therefore only needs breadth at one fixed depth.

The search is level-synchronous. At each round every in-flight derivation is
extended by rewriting the leftmost variable of its latest word with each rule
for that variable, in grammar order. Derivations whose latest word has no
variable left cannot be extended and are dropped. After the last round, the
derivations whose word equals the target are witnesses, and the first one in
discovery order is the canonical witness.

The number of in-flight derivations grows exponentially with the length of
the target, so this is only suitable for small grammars and inputs. See
`chart_parser.py` for a polynomial alternative.
"""

from absl import logging

from cnfparse.derivation import derivation as derivation_lib
from cnfparse.grammar import word as word_lib
from cnfparse.parser import parser_config


class MembershipResult(object):
  """The outcome of a membership test.

  Truthy iff the word is in the language, in which case `witness` holds the
  canonical derivation of the word.
  """

  def __init__(self, word, witness=None):
    self.word = word
    self.witness = witness

  @property
  def is_member(self):
    return self.witness is not None

  def __bool__(self):
    return self.is_member

  def __str__(self):
    if self.witness is None:
      return "%s: not in language" % (self.word,)
    return "%s: %s" % (self.word, self.witness)

  def __repr__(self):
    return str(self)


def get_num_steps(word):
  """Returns the exact number of steps of a CNF derivation of `word`."""
  if len(word) >= 1:
    return 2 * len(word) - 1
  return 1


def expand_leftmost(derivation, variables_to_rules):
  """Returns every one-step extension of `derivation`.

  Only the leftmost variable of the latest word is rewritten. The extensions
  follow the order of `variables_to_rules`.
  """
  current_word = derivation.latest_word()
  index = current_word.index_of_first_variable()
  if index == -1:
    return []
  branches = []
  for rule in variables_to_rules.get(current_word[index], ()):
    branch = derivation.copy()
    branch.add_step(current_word.replace(index, rule.expansion), rule, index)
    branches.append(branch)
  return branches


def _is_viable(current_word, target):
  """False if no CNF rewriting of current_word can reach target."""
  if len(current_word) > len(target):
    return False
  # Symbols left of the leftmost variable are final.
  for idx, symbol in enumerate(current_word):
    if not symbol.is_terminal():
      break
    if symbol != target[idx]:
      return False
  return True


def _has_unknown_terminal(grammar, word):
  for symbol in word:
    if symbol.is_terminal() and symbol not in grammar.terminals:
      return True
  return False


def find_derivations(grammar, word, config=None, verbose=False):
  """Returns all derivations of `word` in discovery order.

  Args:
    grammar: A ContextFreeGrammar in Chomsky normal form. This is not checked;
      results for other grammars are unspecified.
    word: Target Word.
    config: Optional ParserConfig or dict of overrides.
    verbose: Log the frontier size after each round if True.

  Returns:
    A list of Derivation instances, each starting at the start variable and
    ending at `word`. Empty if `word` is not in the language.
  """
  config = parser_config.get_config(config)
  if _has_unknown_terminal(grammar, word):
    if verbose:
      logging.info("Input contains terminals outside the grammar: %s", word)
    return []

  variables_to_rules = grammar.rules_by_variable()
  num_steps = get_num_steps(word)
  frontier = [
      derivation_lib.Derivation(word_lib.Word((grammar.start_variable,)))
  ]

  for round_idx in range(num_steps):
    new_frontier = []
    for derivation in frontier:
      for branch in expand_leftmost(derivation, variables_to_rules):
        if config.prune_by_length and not _is_viable(branch.latest_word(),
                                                     word):
          continue
        new_frontier.append(branch)
    frontier = new_frontier

    if verbose:
      logging.info("Round %d/%d: %d derivations in flight.", round_idx + 1,
                   num_steps, len(frontier))
    if config.max_frontier_size and len(frontier) > config.max_frontier_size:
      logging.warning(
          "Abandoning search for %s after round %d: %d derivations exceed "
          "max_frontier_size %d.", word, round_idx + 1, len(frontier),
          config.max_frontier_size)
      return []
    if not frontier:
      break

  witnesses = []
  for derivation in frontier:
    final_word = derivation.latest_word()
    if final_word.is_all_terminals() and final_word == word:
      witnesses.append(derivation)
  return witnesses


def is_in_language(grammar, word, config=None, verbose=False):
  """Returns a MembershipResult holding the canonical witness, if any."""
  witnesses = find_derivations(grammar, word, config=config, verbose=verbose)
  if verbose:
    logging.info("Found %d derivations of %s.", len(witnesses), word)
  if witnesses:
    return MembershipResult(word, witnesses[0])
  return MembershipResult(word)
