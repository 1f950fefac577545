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

from collections import namedtuple
from enum import Enum
import textwrap


class TokenKind(Enum):
  WHITESPACE = 'whitespace'
  END_OF_LINE = 'end_of_line'
  OPEN_BRACE = 'open_brace'
  OTHER = 'other'


class Token(namedtuple('Token', ('kind', 'text', 'line_number'))):
  """A single lexical token: its kind, its verbatim source text and its 1-based line."""

  __slots__ = ()

  @property
  def is_whitespace(self):
    return self.kind is TokenKind.WHITESPACE

  @property
  def is_end_of_line(self):
    return self.kind is TokenKind.END_OF_LINE

  @property
  def is_open_brace(self):
    return self.kind is TokenKind.OPEN_BRACE


class Document(object):
  """A tokenized source file.

  The token texts are the exact source substrings, so the original text (and
  therefore its lines) can always be rebuilt from the tokens alone.  A document
  flagged as generated is exempt from analysis.
  """

  @classmethod
  def from_text(cls, text, filename='<expr>', is_generated=False):
    from .tokenizer import tokenize
    return cls(tokenize(text), filename=filename, is_generated=is_generated)

  @classmethod
  def parse(cls, filename, is_generated=False):
    # utf-8-sig drops the byte order mark Visual Studio writes.
    with open(filename, 'r', encoding='utf-8-sig', newline='') as fp:
      text = fp.read()
    return cls.from_text(text, filename=filename, is_generated=is_generated)

  @classmethod
  def from_statement(cls, statement, is_generated=False):
    """A helper to construct a Document from a triple-quoted string, for testing.

      Document.from_statement('''
      class Foo {
      \tint bar;
      }
      ''')
    """
    lines = textwrap.dedent(statement).splitlines(True)[1:]
    return cls.from_text(''.join(lines), is_generated=is_generated)

  def __init__(self, tokens, filename='<expr>', is_generated=False):
    self._tokens = tuple(tokens)
    self._filename = filename
    self._is_generated = bool(is_generated)
    self._lines = None

  @property
  def tokens(self):
    return self._tokens

  @property
  def filename(self):
    return self._filename

  @property
  def is_generated(self):
    return self._is_generated

  @property
  def text(self):
    return ''.join(token.text for token in self._tokens)

  @property
  def lines(self):
    """The source lines, without terminators, keyed 1-based."""
    if self._lines is None:
      lines, current = [], []
      for token in self._tokens:
        if token.is_end_of_line:
          lines.append(''.join(current))
          current = []
        else:
          current.append(token.text)
      if current:
        lines.append(''.join(current))
      self._lines = lines
    return self._lines

  def __iter__(self):
    return iter(self.lines)

  def __len__(self):
    return len(self.lines)

  def __getitem__(self, line_number):
    if not isinstance(line_number, int):
      raise TypeError('Document lines are indexed by line number, got %r' % (line_number,))
    if line_number < 1 or line_number > len(self.lines):
      raise IndexError('Line number %d out of range' % line_number)
    return self.lines[line_number - 1]

  def enumerate(self):
    """Return an enumeration of line_number, line pairs."""
    return enumerate(self.lines, 1)

  def __repr__(self):
    return 'Document(%r, tokens=%d%s)' % (
        self._filename, len(self._tokens), ', generated' if self._is_generated else '')


class Nit(object):
  """Encapsulate a Style faux pas.

  The general taxonomy of nits:

  Prefix
    S => tabstyle whitespace rules

  Prefix number:
    1 => Whitespace and indentation

  Suffix number:
    The rule within the group, in declaration order.
  """

  COMMENT = 0
  WARNING = 1
  ERROR = 2

  SEVERITY = {
    COMMENT: 'COMMENT',
    WARNING: 'WARNING',
    ERROR: 'ERROR',
  }

  def __init__(self, code, severity, document, message, line_number=None):
    if severity not in self.SEVERITY:
      raise ValueError('Severity should be one of %s' % ' '.join(self.SEVERITY.values()))
    self.document = document
    self._code = code
    self._severity = severity
    self._message = message
    self._line_number = line_number

  @property
  def code(self):
    return self._code

  @property
  def severity(self):
    return self._severity

  @property
  def message(self):
    return self._message

  @property
  def line_number(self):
    if self._line_number is not None:
      return '%03d' % self._line_number

  @property
  def source_line(self):
    if self._line_number is None:
      return None
    try:
      return self.document[self._line_number]
    except IndexError:
      return None

  def __str__(self):
    location = self.document.filename
    if self._line_number is not None:
      location = '%s:%s' % (location, self.line_number)
    message = '%s %s:%s %s' % (location, self.code, self.SEVERITY[self.severity], self.message)
    source_line = self.source_line
    if source_line is not None:
      message += '\n     |%s' % source_line
    return message


class CheckstylePlugin(object):
  """Interface for checkstyle plugins."""

  def __init__(self, document, **options):
    if not isinstance(document, Document):
      raise TypeError('CheckstylePlugin takes Document objects.')
    self.document = document
    self.options = options

  def nits(self):
    """Returns an iterable of Nit pertinent to the enclosed document."""
    raise NotImplementedError

  def __iter__(self):
    for nit in self.nits():
      yield nit

  def comment(self, code, message, line_number=None):
    return Nit(code, Nit.COMMENT, self.document, message, line_number)

  def warning(self, code, message, line_number=None):
    return Nit(code, Nit.WARNING, self.document, message, line_number)

  def error(self, code, message, line_number=None):
    return Nit(code, Nit.ERROR, self.document, message, line_number)

  def nit(self, code, severity, message, line_number=None):
    return Nit(code, severity, self.document, message, line_number)
