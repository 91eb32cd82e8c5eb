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
"""Membership testing and parse-tree synthesis for CNF grammars.

Test modules sit beside the code and end in `_test.py`, which the default
unittest pattern does not match. `python -m unittest cnfparse` picks them up
through the load_tests protocol below.
"""

import os

from absl import flags


def load_tests(loader, standard_tests, unused_pattern):
  """Discovers every `*_test.py` module under this package."""
  # absltest reads --test_tmpdir, normally parsed by absltest.main().
  if not flags.FLAGS.is_parsed():
    flags.FLAGS.mark_as_parsed()
  package_dir = os.path.dirname(__file__)
  standard_tests.addTests(
      loader.discover(start_dir=package_dir, pattern="*_test.py"))
  return standard_tests
