from tabstyle.common import Nit
from tabstyle.rules import Rule

import pytest


def test_rules_are_closed():
  assert [rule.identifier for rule in Rule] == [
    'NoTrailingWhiteSpace',
    'IndentUsingTabs',
    'NoSpacesBeforeTabs',
    'OneTabIndent',
  ]
  assert len(set(rule.code for rule in Rule)) == 4


def test_rule_severity():
  assert Rule.ONE_TAB_INDENT.severity == Nit.WARNING
  assert all(rule.severity == Nit.ERROR for rule in Rule if rule is not Rule.ONE_TAB_INDENT)


def test_rule_from_name():
  assert Rule.from_name('S101') is Rule.INDENT_USING_TABS
  assert Rule.from_name('s101') is Rule.INDENT_USING_TABS
  assert Rule.from_name('IndentUsingTabs') is Rule.INDENT_USING_TABS
  assert Rule.from_name('INDENT_USING_TABS') is Rule.INDENT_USING_TABS
  assert Rule.from_name('indent-using-tabs') is Rule.INDENT_USING_TABS
  assert Rule.from_name('NoTrailingWhitespace') is Rule.NO_TRAILING_WHITESPACE
  assert Rule.from_name(' OneTabIndent ') is Rule.ONE_TAB_INDENT

  with pytest.raises(ValueError):
    Rule.from_name('NoTabsAtAll')


def test_rule_str():
  assert str(Rule.NO_SPACES_BEFORE_TABS) == 'NoSpacesBeforeTabs'
