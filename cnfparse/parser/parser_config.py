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
"""Defines the parser configuration as a namedtuple.

Configurations can be given as a `ParserConfig`, as a plain dict of overrides
or loaded from a JSON file such as:

  {
      "max_frontier_size": 100000,
      "bind_by_position": true
  }

Keys that are absent keep their default value.
"""

import collections
import json


class ParserConfig(
    collections.namedtuple(
        "ParserConfig",
        [
            # Stop the membership search and report no witness once more than
            # this many derivations are in flight. 0 means no limit.
            "max_frontier_size",
            # Drop derivations whose word is longer than the target or whose
            # terminal prefix disagrees with it. Never removes a witness.
            "prune_by_length",
            # Bind subtrees by derivation position when synthesizing trees,
            # rather than by looking up the first subtree with a matching
            # symbol.
            "bind_by_position",
            # Use the chart parser instead of the derivation search.
            "use_chart",
        ])):

  def __str__(self):
    return json.dumps(self._asdict(), indent=4)


DEFAULT_CONFIG = ParserConfig(
    max_frontier_size=0,
    prune_by_length=True,
    bind_by_position=True,
    use_chart=False)


def from_dict(config_dict):
  """Returns DEFAULT_CONFIG updated with the entries of `config_dict`."""
  unknown_keys = set(config_dict) - set(ParserConfig._fields)
  if unknown_keys:
    raise ValueError("Unknown parser config keys: %s" % sorted(unknown_keys))
  config = DEFAULT_CONFIG._replace(**config_dict)
  if config.max_frontier_size < 0:
    raise ValueError("max_frontier_size must be >= 0, got %s." %
                     config.max_frontier_size)
  return config


def get_config(config):
  """Normalizes None, a dict or a ParserConfig into a ParserConfig."""
  if config is None:
    return DEFAULT_CONFIG
  if isinstance(config, ParserConfig):
    return config
  if isinstance(config, dict):
    return from_dict(config)
  raise TypeError("Unsupported config type %s" % type(config))


def load_config(filename):
  """Loads a serialized parser config into a ParserConfig object."""
  with open(filename) as infile:
    config_dict = json.load(infile)
  return from_dict(config_dict)
