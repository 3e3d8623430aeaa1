"""Shared SCSS-shaped trees for the DazzleQuery test suite.

The trees mimic what an SCSS parser produces for small stylesheets, using
the default ``{type, value}`` node shape. Whitespace between top-level
statements is kept as ``space`` nodes, so sibling positions match what a
real parser would report.
"""

import pytest

from dazzlequery.testing import make_node as n


def space(text=' '):
    return n('space', text)


def ident(name):
    return n('identifier', name)


def class_(*parts):
    """``.name`` selector part; ``parts`` are names or prebuilt nodes."""
    return n('class', [ident(p) if isinstance(p, str) else p for p in parts])


def interpolation(*value):
    return n('interpolation', list(value))


def declaration(prop, *value):
    """``prop: value`` where ``value`` follows a single space."""
    return n('declaration', [
        n('property', [ident(prop)]),
        n('punctuation', ':'),
        n('value', [space(), *value]),
    ])


def variable_declaration(name, *value):
    """``$name: value``"""
    return n('declaration', [
        n('property', [n('variable', name)]),
        n('punctuation', ':'),
        n('value', [space(), *value]),
    ])


def dimension(number, unit='px'):
    return [n('number', number), ident(unit)]


def rule(selector, *block):
    """``selector { block }``; ``selector`` is a class name or a list of classes."""
    classes = [class_(selector)] if isinstance(selector, str) else selector
    parts = []
    for c in classes:
        parts.extend([c, space()])
    return n('rule', [
        n('selector', parts),
        n('block', [space(), *block, space()] if block else []),
    ])


def color_rule(name, *value):
    """``.name { color: value; }``"""
    return rule(name, declaration('color', *value), n('punctuation', ';'))


def stylesheet(*statements):
    """Top-level statements separated (and surrounded) by whitespace."""
    children = [space('\n')]
    for statement in statements:
        children.extend([statement, space('\n')])
    return n('stylesheet', children)


def border(name, a, b, c):
    """``$name: Apx Bpx Cpx;``"""
    value = dimension(a) + [space()] + dimension(b) + [space()] + dimension(c)
    return variable_declaration(name, *value)


@pytest.fixture
def rgb_tree():
    """.r { color: $_r; }  .g { color: $_g; }  .b { color: $_b; }"""
    return stylesheet(
        color_rule('r', n('variable', '_r')),
        color_rule('g', n('variable', '_g')),
        color_rule('b', n('variable', '_b')),
    )


@pytest.fixture
def rgb_interpolated_tree():
    """.r { color: $_r; }  .g { color: #{$_g}; }  .b { color: $_b; }"""
    return stylesheet(
        color_rule('r', n('variable', '_r')),
        color_rule('g', interpolation(n('variable', '_g'))),
        color_rule('b', n('variable', '_b')),
    )


@pytest.fixture
def border_tree():
    """$border: 1px 2px 3px;"""
    return stylesheet(border('border', '1', '2', '3'))


@pytest.fixture
def two_borders_tree():
    """$borderA: 1px 2px 3px;  $borderB: 4px 5px 6px;"""
    return stylesheet(
        border('borderA', '1', '2', '3'),
        border('borderB', '4', '5', '6'),
    )


@pytest.fixture
def background_tree():
    """$background: #fff #ccc #000;"""
    return stylesheet(variable_declaration(
        'background',
        n('color_hex', 'fff'), space(),
        n('color_hex', 'ccc'), space(),
        n('color_hex', '000'),
    ))


@pytest.fixture
def nested_tree():
    """.r { .g { .b {} } }  .c .m .y .k { }"""
    return stylesheet(
        rule('r', rule('g', rule('b'))),
        rule([class_('c'), class_('m'), class_('y'), class_('k')]),
    )


@pytest.fixture
def mixin_tree():
    """@mixin myMixin ($a) {}  followed by the three color rules."""
    mixin = n('atrule', [
        n('atkeyword', 'mixin'),
        space(),
        ident('myMixin'),
        space(),
        n('arguments', [n('variable', 'a')]),
        space(),
        n('block', []),
    ])
    return stylesheet(
        mixin,
        color_rule('r', n('variable', '_r')),
        color_rule('g', n('variable', '_g')),
        color_rule('b', n('variable', '_b')),
    )


@pytest.fixture
def make_rule():
    """Factory for standalone ``.name { color: $_name; }`` rules."""
    def _make(name):
        return color_rule(name, n('variable', f'_{name}'))
    return _make

