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

import logging
from optparse import OptionParser
import sys

from .common import Document, Nit
from .iterators import DEFAULT_EXTENSIONS, git_iterator, path_iterator
from .plugins import list_plugins
from .rules import Rule


log = logging.getLogger(__name__)


NOQA_FILE_MARKER = '// checkstyle: noqa'


def setup_parser():
  parser = OptionParser(usage='%prog [options] PATH...')

  parser.add_option(
    '-r', '--rule',
    action='append',
    type='str',
    default=[],
    dest='rules',
    help='Only report these rules, by code (S101) or name (IndentUsingTabs).  May be repeated.')

  parser.add_option(
    '-d', '--disable',
    action='append',
    type='str',
    default=[],
    dest='disabled_rules',
    help='Do not report this rule.  May be repeated.')

  parser.add_option(
    '--diff',
    type='str',
    default=None,
    dest='diff',
    help='If specified, only checkstyle against the diff of the supplied branch, e.g. --diff=master')

  parser.add_option(
    '-s', '--severity',
    default='COMMENT',
    type='choice',
    choices=('COMMENT', 'WARNING', 'ERROR'),
    dest='severity',
    help='Only messages at this severity or higher are logged.  Options: COMMENT, WARNING, ERROR.')

  parser.add_option(
    '--strict',
    default=False,
    action='store_true',
    dest='strict',
    help='If enabled, have non-zero exit status for any nit at WARNING or higher.')

  parser.add_option(
    '--one-tab-indent',
    default=False,
    action='store_true',
    dest='one_tab_indent',
    help='Also report indentation that deepens by more than one tab.  Off by default since '
         'it misfires on lines aligned to an opening delimiter of the previous line.')

  parser.add_option(
    '--generated',
    default=False,
    action='store_true',
    dest='generated',
    help='Treat every input as generated code, which is exempt from checks.')

  parser.add_option(
    '-e', '--extension',
    action='append',
    type='str',
    default=[],
    dest='extensions',
    help='File extensions to check when given a directory.  Default: %s' % (
        ' '.join(DEFAULT_EXTENSIONS)))

  parser.add_option(
    '-v', '--verbose',
    default=False,
    action='store_true',
    dest='verbose',
    help='Log debugging output.')

  return parser


def noqa_line_filter(document, line_number):
  return 'noqa' in document[line_number]


def noqa_file_filter(document):
  return any(line.strip() == NOQA_FILE_MARKER for line in document)


def apply_filter(document, checker, line_filter, **plugin_options):
  if noqa_file_filter(document):
    return

  for nit in checker(document, **plugin_options):
    if nit._line_number is None:
      yield nit
      continue

    if noqa_line_filter(document, nit._line_number):
      continue

    if line_filter is None or not line_filter(document, nit._line_number):
      yield nit


def select_rules(options):
  rules = [Rule.from_name(name) for name in options.rules] or list(Rule)
  disabled = frozenset(Rule.from_name(name) for name in options.disabled_rules)
  return frozenset(rule for rule in rules if rule not in disabled)


def severity_from(name):
  for number, severity_name in Nit.SEVERITY.items():
    if severity_name == name:
      return number
  return Nit.COMMENT


def run(args, options, out=None):
  out = out or sys.stdout
  rules = select_rules(options)
  plugins = list_plugins()
  severity = severity_from(options.severity)

  if options.diff:
    iterator = git_iterator(args, options)
  else:
    iterator = path_iterator(args, options)

  should_fail = False
  for filename, line_filter in iterator:
    try:
      document = Document.parse(filename, is_generated=options.generated)
    except (OSError, UnicodeDecodeError) as e:
      log.warning('Skipping %s: %s', filename, e)
      continue
    for checker in plugins:
      nits = apply_filter(document, checker, line_filter,
          rules=rules, one_tab_indent=options.one_tab_indent)
      for nit in nits:
        if nit.severity >= severity:
          print(nit, file=out)
          print(file=out)
        should_fail |= nit.severity >= Nit.ERROR or (nit.severity >= Nit.WARNING and options.strict)

  return int(should_fail)


def main(argv=None):
  parser = setup_parser()
  options, args = parser.parse_args(argv)
  if not args and not options.diff:
    parser.error('Must specify at least one path, or --diff.')

  logging.basicConfig(
      level=logging.DEBUG if options.verbose else logging.WARNING,
      format='%(levelname)s %(name)s: %(message)s')

  try:
    select_rules(options)
  except ValueError as e:
    parser.error(str(e))

  return run(args, options)


if __name__ == '__main__':
  sys.exit(main())
