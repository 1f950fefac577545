from io import StringIO

from tabstyle.checker import (
    apply_filter,
    main,
    noqa_file_filter,
    noqa_line_filter,
    run,
    select_rules,
    setup_parser,
)
from tabstyle.common import CheckstylePlugin, Document
from tabstyle.rules import Rule

import pytest


class Rage(CheckstylePlugin):
  def nits(self):
    for line_no, _ in self.document.enumerate():
      yield self.error('T999', 'I hate everything!', line_no)


def parse(args):
  options, args = setup_parser().parse_args(args)
  return options, args


def test_noqa_line_filter():
  doc = Document.from_statement("""
    Console.WriteLine("This is not fine");
    Console.WriteLine("This is fine");  // noqa
  """)
  assert not noqa_line_filter(doc, 1)
  assert noqa_line_filter(doc, 2)

  nits = list(apply_filter(doc, Rage, None))
  assert len(nits) == 1, ('Actually got nits: %s' % (
      ' '.join('%s:%s' % (nit._line_number, nit) for nit in nits)))
  assert nits[0].code == 'T999'


def test_noqa_file_filter():
  doc = Document.from_statement("""
    // checkstyle: noqa
    Console.WriteLine("This is not fine");
    Console.WriteLine("This is fine");
  """)
  assert noqa_file_filter(doc)
  assert list(apply_filter(doc, Rage, None)) == []


def test_line_filter():
  doc = Document.from_statement("""
    one();
    two();
    three();
  """)

  def only_line_two(document, line_number):
    return line_number != 2

  assert [nit._line_number for nit in apply_filter(doc, Rage, only_line_two)] == [2]


def test_select_rules():
  options, _ = parse([])
  assert select_rules(options) == frozenset(Rule)

  options, _ = parse(['-r', 'S100', '-r', 'IndentUsingTabs'])
  assert select_rules(options) == frozenset([Rule.NO_TRAILING_WHITESPACE, Rule.INDENT_USING_TABS])

  options, _ = parse(['-d', 'NoSpacesBeforeTabs'])
  assert select_rules(options) == frozenset(Rule) - frozenset([Rule.NO_SPACES_BEFORE_TABS])

  options, _ = parse(['-r', 'Tabs4Ever'])
  with pytest.raises(ValueError):
    select_rules(options)


def write_sources(tmpdir):
  tmpdir.join('Clean.cs').write('class Clean {\n\tint a;\n}\n')
  tmpdir.join('Dirty.cs').write('class Dirty {\n\tint a; \n\t\t\t\tint b;\n}\n')
  tmpdir.join('notes.txt').write('trailing \n')


def test_run_clean(tmpdir):
  write_sources(tmpdir)
  out = StringIO()
  options, args = parse([tmpdir.join('Clean.cs').strpath])
  assert run(args, options, out=out) == 0
  assert out.getvalue() == ''


def test_run_directory(tmpdir):
  write_sources(tmpdir)
  out = StringIO()
  options, args = parse([tmpdir.strpath])
  assert run(args, options, out=out) == 1
  output = out.getvalue()
  assert 'Dirty.cs:002 S100:ERROR' in output
  assert 'S103' not in output
  assert 'notes.txt' not in output
  assert 'Clean.cs' not in output


def test_run_options(tmpdir):
  write_sources(tmpdir)
  dirty = tmpdir.join('Dirty.cs').strpath

  out = StringIO()
  options, args = parse(['--one-tab-indent', '-d', 'S100', dirty])
  assert run(args, options, out=out) == 0
  assert 'Dirty.cs:003 S103:WARNING' in out.getvalue()

  out = StringIO()
  options, args = parse(['--one-tab-indent', '-d', 'S100', '--strict', dirty])
  assert run(args, options, out=out) == 1

  out = StringIO()
  options, args = parse(['--one-tab-indent', '-s', 'ERROR', dirty])
  assert run(args, options, out=out) == 1
  assert 'S103' not in out.getvalue()
  assert 'S100' in out.getvalue()

  out = StringIO()
  options, args = parse(['--generated', dirty])
  assert run(args, options, out=out) == 0
  assert out.getvalue() == ''

  out = StringIO()
  options, args = parse(['-e', '.txt', tmpdir.strpath])
  assert run(args, options, out=out) == 1
  assert 'notes.txt:001 S100:ERROR' in out.getvalue()
  assert 'Dirty.cs' not in out.getvalue()


def test_run_skips_unreadable(tmpdir):
  tmpdir.join('Binary.cs').write_binary(b'\xff\xfe\x00bad')
  out = StringIO()
  options, args = parse([tmpdir.strpath])
  assert run(args, options, out=out) == 0


def test_main(tmpdir, capsys):
  write_sources(tmpdir)
  assert main([tmpdir.join('Dirty.cs').strpath]) == 1
  assert 'S100:ERROR' in capsys.readouterr().out

  with pytest.raises(SystemExit):
    main([])

  with pytest.raises(SystemExit):
    main(['-r', 'Tabs4Ever', tmpdir.strpath])


def test_every_plugin_runs(tmpdir):
  write_sources(tmpdir)
  with pytest.raises(SystemExit):
    parse(['-p', 'Whitespace', tmpdir.join('Dirty.cs').strpath])

  out = StringIO()
  options, args = parse([tmpdir.join('Dirty.cs').strpath])
  assert run(args, options, out=out) == 1
  assert 'Dirty.cs:002 S100:ERROR' in out.getvalue()
