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
A small lexical tokenizer for C-family sources (C#, C, C++, Java, JavaScript).

It only distinguishes what the whitespace rules care about: line terminators,
runs of blanks, opening braces and everything else.  Literals, comments and
preprocessor directives are kept whole so that blanks and braces inside them never
look like indentation or blocks.  Blanks trailing a comment or directive stay
whitespace tokens.

A block comment spanning lines is split at each terminator: every line of it
yields its leading blanks, its comment text and its trailing blanks separately.
"""

import re

from .common import Token, TokenKind


# Lookahead for blanks running up to the end of the line.
_LINE_END = r'(?=[ \t]*(?:\r\n|\n|\r|\Z))'

# Comment text up to and including '*/', or up to the trailing blanks of the line.
_COMMENT_TEXT = r'(?:[^*\r\n]|\*(?!/))*?(?:\*/|%s)' % _LINE_END


TOKEN_RE = re.compile(r"""
    (?P<end_of_line>\r\n|\n|\r)
  | (?P<whitespace>[ \t]+)
  | (?P<open_brace>\{)
  | (?P<line_comment>//[^\r\n]*?%(line_end)s)
  | (?P<block_comment>/\*%(comment_text)s)
  | (?P<string>"(?:\\.|[^"\\\r\n])*"?)
  | (?P<char>'(?:\\.|[^'\\\r\n])*'?)
  | (?P<other>[^ \t\r\n{"'/]+|/)
""" % dict(line_end=_LINE_END, comment_text=_COMMENT_TEXT), re.VERBOSE)


BLOCK_COMMENT_RE = re.compile(r"""
    (?P<end_of_line>\r\n|\n|\r)
  | (?P<whitespace>[ \t]+)
  | (?P<comment_text>%(comment_text)s)
""" % dict(comment_text=_COMMENT_TEXT), re.VERBOSE)


DIRECTIVE_RE = re.compile(r'(?P<directive>#[^\r\n]*?%s)' % _LINE_END)


KINDS = {
  'end_of_line': TokenKind.END_OF_LINE,
  'whitespace': TokenKind.WHITESPACE,
  'open_brace': TokenKind.OPEN_BRACE,
}


def closes_block_comment(group, text):
  if group == 'block_comment':
    # '/*/' opens a comment without closing it.
    return len(text) >= 4 and text.endswith('*/')
  return text.endswith('*/')


def iter_tokens(text):
  """Yield Tokens for text, in source order.

  The concatenated token texts always equal the input.
  """
  line_number = 1
  in_block_comment = False
  at_line_start = True
  position, end = 0, len(text)
  while position < end:
    if in_block_comment:
      match = BLOCK_COMMENT_RE.match(text, position)
    elif at_line_start and text.startswith('#', position):
      match = DIRECTIVE_RE.match(text, position)
    else:
      match = TOKEN_RE.match(text, position)

    group, token_text = match.lastgroup, match.group()
    kind = KINDS.get(group, TokenKind.OTHER)
    yield Token(kind, token_text, line_number)
    position = match.end()

    if group in ('block_comment', 'comment_text'):
      in_block_comment = not closes_block_comment(group, token_text)

    if kind is TokenKind.END_OF_LINE:
      line_number += 1
      at_line_start = True
    elif kind is not TokenKind.WHITESPACE:
      at_line_start = False


def tokenize(text):
  return list(iter_tokens(text))
