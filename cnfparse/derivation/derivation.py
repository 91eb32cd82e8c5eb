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
"""Records the rule applications of a single derivation.

A derivation is a list of steps, each holding a word, the rule that produced
it and the index in the previous word where the rule was applied. For example,
deriving `001` from `A`:

  words:   [A,  AB,     AAB,    0AB,   00B,   001  ]
  rules:   [None, A → AB, A → AB, A → 0, A → 0, B → 1]
  indexes: [-1, 0,      0,      0,     1,     2    ]

Iterating over a `Derivation` runs backwards, from the newest step to the
start symbol, since parse trees are easiest to build bottom-up.
"""

import collections

# Index of the initial step, which carries no rule.
START_INDEX = -1


class Step(collections.namedtuple("Step", ["word", "rule", "index"])):
  """One step of a derivation."""
  __slots__ = ()

  def is_start_symbol(self):
    return self.index == START_INDEX

  def __str__(self):
    return "(%s, %s, %s)" % (self.word, self.rule, self.index)


class Derivation(object):
  """Append-only sequence of steps starting from a start word."""

  def __init__(self, word):
    self._steps = [Step(word, None, START_INDEX)]

  def copy(self):
    """Returns a branch of this derivation. Steps are shared."""
    branch = Derivation.__new__(Derivation)
    branch._steps = list(self._steps)  # pylint: disable=protected-access
    return branch

  def add_step(self, word, rule, index):
    self._steps.append(Step(word, rule, index))

  def latest_word(self):
    return self._steps[-1].word

  def start_word(self):
    return self._steps[0].word

  def steps(self):
    """Returns the steps oldest first."""
    return tuple(self._steps)

  def num_rule_steps(self):
    return len(self._steps) - 1

  def __len__(self):
    return len(self._steps)

  def __iter__(self):
    return reversed(self._steps)

  def __eq__(self, other):
    if not isinstance(other, Derivation):
      return NotImplemented
    return self._steps == other._steps  # pylint: disable=protected-access

  def __str__(self):
    return " ⇒ ".join(str(step.word) for step in self._steps)

  def __repr__(self):
    return str(self)
