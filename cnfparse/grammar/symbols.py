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
"""Data structures for the terminal and variable symbols of a grammar.

Every symbol is tagged by a single printable character. Terminals are
normalized to lower case and variables to upper case, so `Terminal("A")` is
the terminal `a`. A variable may also carry a decimal subscript, which lets a
grammar use `A0`, `A1`, ... alongside `A`.

The character `ε` is reserved for rendering the empty word and can never be
used as a symbol tag.
"""

from dataclasses import dataclass  # pylint: disable=g-importing-member
import string
import typing

# Rendering of the empty word. Never a legal symbol tag.
EPSILON = "ε"

# Unicode subscript digits used when rendering subscripted variables.
SUBSCRIPTS = "₀₁₂₃₄₅₆₇₈₉"


@dataclass(frozen=True)
class Symbol:
  """Base class for grammar symbols."""
  # A single character.
  tag: str

  def __post_init__(self):
    if type(self) is Symbol:  # pylint: disable=unidiomatic-typecheck
      raise TypeError("Symbol is abstract, use Terminal or Variable.")
    if not isinstance(self.tag, str) or len(self.tag) != 1:
      raise ValueError("Symbol tag must be a single character: %r" %
                       (self.tag,))
    # Checked before case normalization, since "ε".upper() is "Ε".
    if self.tag == EPSILON:
      raise ValueError("%s is reserved for the empty word." % EPSILON)
    tag = self.normalize(self.tag)
    if len(tag) != 1 or tag == EPSILON:
      raise ValueError("Symbol tag %r does not normalize to a single "
                       "character." % self.tag)
    object.__setattr__(self, "tag", tag)

  def normalize(self, tag):
    return tag

  def is_terminal(self):
    raise NotImplementedError

  def __str__(self):
    return self.tag

  def __repr__(self):
    return str(self)


class Terminal(Symbol):
  """A terminal symbol. Tags are normalized to lower case."""

  def normalize(self, tag):
    return tag.lower()

  def is_terminal(self):
    return True


@dataclass(frozen=True)
class Variable(Symbol):
  """A variable symbol with an optional subscript between 0 and 9.

  Variables can be built either from a letter and an explicit subscript, e.g.
  `Variable("A", 3)`, or from the compact notation `Variable("A3")`.
  """
  subscript: typing.Optional[int] = None

  def __post_init__(self):
    name = self.tag
    if isinstance(name, str) and len(name) > 1:
      if (len(name) > 2 or name[1] not in string.digits or
          self.subscript is not None):
        raise ValueError("Variables must be of the form `A` or `A1`: %r" %
                         name)
      object.__setattr__(self, "subscript", int(name[1]))
      object.__setattr__(self, "tag", name[0])
    if self.subscript is not None and (not isinstance(self.subscript, int) or
                                       not 0 <= self.subscript <= 9):
      raise ValueError("Variable subscript must be a digit: %r" %
                       (self.subscript,))
    super().__post_init__()

  def normalize(self, tag):
    return tag.upper()

  def is_terminal(self):
    return False

  def __str__(self):
    if self.subscript is None:
      return self.tag
    return self.tag + SUBSCRIPTS[self.subscript]

  def __repr__(self):
    return str(self)


def subscripted_variables(letter, n):
  """Returns `n` variables `letter0` ... `letter{n-1}`."""
  if n < 1 or n > len(SUBSCRIPTS):
    raise ValueError("Can only request between 1 and %d variables, got %s." %
                     (len(SUBSCRIPTS), n))
  return [Variable(letter, idx) for idx in range(n)]


def symbol_from_char(char):
  """Upper-case letters denote variables, anything else a terminal."""
  if "A" <= char <= "Z":
    return Variable(char)
  return Terminal(char)
