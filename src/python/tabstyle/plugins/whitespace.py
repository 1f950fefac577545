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

from ..common import CheckstylePlugin
from ..rules import Rule
from ..scanner import scan


class WhitespaceStyle(CheckstylePlugin):
  """Enforce tab indentation and clean line ends.

  Options:
    rules: the Rules to report, all of them by default.
    one_tab_indent: also report indentation that deepens by more than one tab.
  """

  def __init__(self, *args, **kw):
    super(WhitespaceStyle, self).__init__(*args, **kw)
    rules = self.options.get('rules')
    self._rules = frozenset(Rule) if rules is None else frozenset(rules)
    self._one_tab_indent = (
        bool(self.options.get('one_tab_indent')) and Rule.ONE_TAB_INDENT in self._rules)

  @property
  def rules(self):
    return self._rules

  def nits(self):
    for violation in scan(self.document, one_tab_indent=self._one_tab_indent):
      rule = violation.rule
      if rule not in self._rules:
        continue
      yield self.nit(rule.code, rule.severity, rule.message, violation.line_number)
