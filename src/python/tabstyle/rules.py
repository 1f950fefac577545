# ==================================================================================================
# Copyright 2014 Twitter, Inc.
# --------------------------------------------------------------------------------------------------
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this work except in compliance with the License.
# You may obtain a copy of the License in the LICENSE file, or at:
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==================================================================================================

from enum import Enum

from .common import Nit


class Rule(Enum):
  """The whitespace rules, each of which can be enabled or disabled individually."""

  # Code lines never end with trailing whitespace.
  NO_TRAILING_WHITESPACE = ('S100', 'NoTrailingWhiteSpace', Nit.ERROR,
      'Line has trailing whitespace.')

  # Indentation uses tabs; spaces only for alignment with the previous line.
  INDENT_USING_TABS = ('S101', 'IndentUsingTabs', Nit.ERROR,
      'Indent using tabs; spaces may only align with the previous line.')

  # A space never comes right before a tab.
  NO_SPACES_BEFORE_TABS = ('S102', 'NoSpacesBeforeTabs', Nit.ERROR,
      'Space before tab.')

  # Indentation deepens by at most one tab per line.
  ONE_TAB_INDENT = ('S103', 'OneTabIndent', Nit.WARNING,
      'Indentation deepened by more than one tab.')

  def __init__(self, code, identifier, severity, message):
    self.code = code
    self.identifier = identifier
    self.severity = severity
    self.message = message

  @classmethod
  def from_name(cls, name):
    """Resolve a rule from its code (S101), identifier (IndentUsingTabs) or member name."""
    normalized = name.strip().lower().replace('_', '').replace('-', '')
    for rule in cls:
      if normalized in (rule.code.lower(), rule.identifier.lower(),
                        rule.name.lower().replace('_', '')):
        return rule
    raise ValueError('Unknown rule: %s' % name)

  def __str__(self):
    return self.identifier
