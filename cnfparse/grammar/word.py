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
"""Immutable words, i.e. finite sequences of grammar symbols.

All operations return new `Word` instances. Words can be built from symbols
directly or from the compact string notation used throughout the tests, where
upper-case letters denote variables and every other character a terminal:

  word_from_string("0A1") == Word((Terminal("0"), Variable("A"), Terminal("1")))
"""

from dataclasses import dataclass  # pylint: disable=g-importing-member
import typing

from cnfparse.grammar import symbols as symbols_lib


@dataclass(frozen=True)
class Word:
  """Class for a sequence of symbols."""
  # Tuple of Symbol instances.
  symbols: typing.Tuple[symbols_lib.Symbol, Ellipsis] = ()

  def __post_init__(self):
    object.__setattr__(self, "symbols", tuple(self.symbols))
    for symbol in self.symbols:
      if not isinstance(symbol, symbols_lib.Symbol):
        raise TypeError("Words can only contain symbols, got %r." % (symbol,))

  def __len__(self):
    return len(self.symbols)

  def __iter__(self):
    return iter(self.symbols)

  def __getitem__(self, idx):
    if isinstance(idx, slice):
      return Word(self.symbols[idx])
    return self.symbols[idx]

  def __str__(self):
    if not self.symbols:
      return symbols_lib.EPSILON
    return "".join(str(symbol) for symbol in self.symbols)

  def __repr__(self):
    return str(self)

  def count(self, target):
    return sum(1 for symbol in self.symbols if symbol == target)

  def index_of_first(self, target):
    return self.index_of_nth(target, 0)

  def index_of_nth(self, target, n):
    """Returns the index of the n-th (0-based) occurrence of target, or -1."""
    seen = 0
    for idx, symbol in enumerate(self.symbols):
      if symbol == target:
        if seen == n:
          return idx
        seen += 1
    return -1

  def index_of_first_variable(self):
    """Returns the position of the leftmost variable, or -1 if none."""
    for idx, symbol in enumerate(self.symbols):
      if not symbol.is_terminal():
        return idx
    return -1

  def is_terminal(self):
    """True iff this word is exactly one terminal symbol."""
    return len(self.symbols) == 1 and self.symbols[0].is_terminal()

  def is_all_terminals(self):
    return all(symbol.is_terminal() for symbol in self.symbols)

  def replace(self, index, word):
    """Returns a copy with the symbol at `index` replaced by `word`."""
    if index < 0 or index >= len(self.symbols):
      raise IndexError("Word index %s out of range for word %s." %
                       (index, self))
    return Word(self.symbols[:index] + word.symbols +
                self.symbols[index + 1:])

  def subword(self, start, end):
    """Returns the symbols in [start, end)."""
    if start < 0 or end > len(self.symbols) or start > end:
      raise IndexError("Subword range [%s, %s) out of range for word %s." %
                       (start, end, self))
    return Word(self.symbols[start:end])

  def concatenate(self, terminal):
    """Returns a copy with `terminal` appended."""
    if not isinstance(terminal, symbols_lib.Terminal):
      raise TypeError("Can only append a terminal, got %r." % (terminal,))
    return Word(self.symbols + (terminal,))


EMPTY_WORD = Word()


def word_from_string(text):
  """Parse a word in the compact notation."""
  return Word(tuple(symbols_lib.symbol_from_char(char) for char in text))


def word_of(*symbols):
  return Word(symbols)
