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
File iterators for determining over which files tabstyle should be run.
"""

from difflib import SequenceMatcher
import os
import re

from git import Diff, Repo


DEFAULT_EXTENSIONS = ('.cs', '.c', '.h', '.cpp', '.hpp', '.java', '.js')
DEFAULT_BASE_BRANCH = 'master'

LINE_TERMINATOR_RE = re.compile(r'\r\n|\n|\r')


def extensions_from(options):
  return tuple(getattr(options, 'extensions', None) or DEFAULT_EXTENSIONS)


def path_iterator(args, options):
  extensions = extensions_from(options)
  for path in args:
    if os.path.isdir(path):
      for root, dirs, files in os.walk(path):
        dirs[:] = sorted(d for d in dirs if not d.startswith('.'))
        for filename in sorted(files):
          if filename.endswith(extensions):
            yield os.path.join(root, filename), None
    elif os.path.isfile(path):
      yield path, None


def read_blob(blob):
  """Return the text of a blob, reading it from the working tree if it is not in the object db."""
  if blob.hexsha != Diff.NULL_HEX_SHA:
    data = blob.data_stream.read()
  else:
    with open(os.path.join(blob.repo.working_tree_dir, blob.path), 'rb') as fp:
      data = fp.read()
  if isinstance(data, bytes):
    data = data.decode('utf-8-sig', 'replace')
  return data


def split_lines(text):
  """Split text into lines without terminators, numbering them as the tokenizer does."""
  lines = LINE_TERMINATOR_RE.split(text)
  if lines[-1] == '':
    lines.pop()
  return lines


def changed_lines(old_text, new_text):
  """Yield the 1-based numbers of lines in new_text that were inserted or rewritten.

  Lines are compared without their terminators, so a file converted between CRLF
  and LF endings has no changed lines.
  """
  matcher = SequenceMatcher(None, split_lines(old_text), split_lines(new_text), autojunk=False)
  for tag, _, _, new_start, new_stop in matcher.get_opcodes():
    if tag in ('insert', 'replace'):
      for index in range(new_start, new_stop):
        yield index + 1


def diff_lines(old, new):
  return changed_lines(read_blob(old), read_blob(new))


def line_filter_from_blobs(a_blob, b_blob):
  """Filter out every line of the new blob that the change left untouched."""
  changed = frozenset(diff_lines(a_blob, b_blob))

  def line_filter(document, line_number):
    return line_number not in changed

  return line_filter


def permissive_line_filter(document, line_number):
  return False



class WorkingTreeFile(object):
  """Stands in for the blob of a file that is only changed in the working tree."""

  hexsha = Diff.NULL_HEX_SHA

  def __init__(self, repo, path):
    self.repo = repo
    self.path = path


def tuple_from_diff(diff, repo, extensions=DEFAULT_EXTENSIONS):
  """
    From GitPython:

    It contains two sides a and b of the diff, members are prefixed with
    "a" and "b" respectively to indicate that.

    There are a few cases where None has to be expected as member variable value:

        ``New File``::

            a_mode is None
            a_blob is None

        ``Deleted File``::

            b_mode is None
            b_blob is None

    Files changed only in the working tree have no b_blob either, but keep their b_path.
  """
  if diff.deleted_file or not diff.b_path:
    return None

  path = diff.b_path
  if not path.endswith(tuple(extensions)):
    return None

  # New file => check all
  if not diff.a_blob:
    return path, permissive_line_filter

  # Check diff lines between two, following renames
  return path, line_filter_from_blobs(diff.a_blob, diff.b_blob or WorkingTreeFile(repo, path))


def git_iterator(args, options):
  extensions = extensions_from(options)
  repo = Repo(os.getcwd(), search_parent_directories=True)
  diff_commit = repo.rev_parse(options.diff or repo.git.merge_base(DEFAULT_BASE_BRANCH, 'HEAD'))
  for diff in diff_commit.diff(None):
    entry = tuple_from_diff(diff, repo, extensions)
    if entry is not None:
      filename, line_filter = entry
      yield os.path.join(repo.working_tree_dir, filename), line_filter
