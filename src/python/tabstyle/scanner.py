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

"""
Single pass whitespace scanner over a Document's token stream.

Four independent policies are applied while walking the tokens once:

  - no whitespace right before a line terminator
  - no space right before a tab, anywhere on a line
  - indentation with tabs, allowing spaces after the tabs only to line characters
    up with the previous line (never when a new block has just been opened)
  - indentation deepens by at most one tab per line

The last one is computed but only reported when explicitly enabled: lines that
continue an expression legitimately mix tabs and spaces to align with an opening
delimiter on the previous line, e.g.

	var contacts = from entry in document.Root.Elements(AtomEntry)
	               select new {
	               	Name = entry.Element(AtomTitle).Value,
	               };

and until alignment columns are understood such lines would be flagged.
"""

from collections import namedtuple
import logging

from .rules import Rule


log = logging.getLogger(__name__)


Violation = namedtuple('Violation', ('rule', 'line_number'))


def leading_run(text, char):
  count = 0
  for ch in text:
    if ch != char:
      break
    count += 1
  return count


class ScanState(object):
  """Line-level state carried from token to token during one pass over a document."""

  __slots__ = (
    'last_token_was_whitespace',
    'last_token_was_end_of_line',
    'is_first_token',
    'previous_line_indentation',
    'previous_line_length',
    'current_line_length',
    'last_non_whitespace_token',
  )

  def __init__(self):
    self.last_token_was_whitespace = False
    self.last_token_was_end_of_line = False
    self.is_first_token = True
    self.previous_line_indentation = ''
    self.previous_line_length = 0
    self.current_line_length = 0
    self.last_non_whitespace_token = None

  @property
  def start_of_line(self):
    return self.last_token_was_end_of_line or self.is_first_token

  @property
  def after_open_brace(self):
    token = self.last_non_whitespace_token
    return token is not None and token.is_open_brace

  def advance(self, token):
    self.last_token_was_end_of_line = token.is_end_of_line
    self.last_token_was_whitespace = token.is_whitespace
    self.is_first_token = False
    if not (token.is_whitespace or token.is_end_of_line):
      self.last_non_whitespace_token = token
    if token.is_end_of_line:
      self.previous_line_length = self.current_line_length
      self.current_line_length = 0


def check_indentation(state, token, one_tab_indent=False):
  """Yield the rules broken by the leading whitespace token of a line."""
  text = token.text
  tabs_this_line = leading_run(text, '\t')
  tabs_last_line = leading_run(state.previous_line_indentation, '\t')

  if tabs_this_line > tabs_last_line + 1:
    log.debug('%d: indentation jumps from %d to %d tabs', token.line_number,
        tabs_last_line, tabs_this_line)
    if one_tab_indent:
      yield Rule.ONE_TAB_INDENT

  if ' ' in text:
    if tabs_this_line < tabs_last_line:
      # Fewer tabs than the previous line leaves nothing to align with.
      yield Rule.INDENT_USING_TABS
    else:
      # Less one for the line terminator.
      last_line_content_length = state.previous_line_length - tabs_last_line - 1
      spaces_this_line = leading_run(text[tabs_this_line:], ' ')
      if spaces_this_line > last_line_content_length:
        yield Rule.INDENT_USING_TABS
      elif state.after_open_brace:
        yield Rule.INDENT_USING_TABS


def iter_violations(document, one_tab_indent=False):
  """Yield the Violations found in document, in token order.

  Generated documents yield nothing.  With one_tab_indent, indentation that
  deepens by more than one tab is reported as well.
  """
  if document.is_generated:
    log.debug('Skipping generated document %s', document.filename)
    return

  state = ScanState()
  for token in document.tokens:
    start_of_line = state.start_of_line
    state.current_line_length += len(token.text)

    if token.is_whitespace:
      if ' \t' in token.text:
        yield Violation(Rule.NO_SPACES_BEFORE_TABS, token.line_number)

      if start_of_line:
        for rule in check_indentation(state, token, one_tab_indent=one_tab_indent):
          yield Violation(rule, token.line_number)
        state.previous_line_indentation = token.text

    if token.is_end_of_line and state.last_token_was_whitespace:
      yield Violation(Rule.NO_TRAILING_WHITESPACE, token.line_number)

    state.advance(token)


def scan(document, one_tab_indent=False, report=None):
  """Scan document and return its Violations in order.

  If report is supplied it is called as report(rule, line_number) for every violation.
  """
  violations = []
  for violation in iter_violations(document, one_tab_indent=one_tab_indent):
    if report is not None:
      report(violation.rule, violation.line_number)
    violations.append(violation)
  log.debug('%s: %d whitespace violation(s)', document.filename, len(violations))
  return violations
