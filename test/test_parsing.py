# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


import sys
import os

if all(os.path.isdir(x) for x in ('lineyaml', 'test')):
    sys.path.insert(0, '.')

import lineyaml.parsing as mdl
import lineyaml.erring as err
from lineyaml.tokens import Token

import pytest


def value_of(s, **kwargs):
    tokens = mdl.Parser(**kwargs).parse('key: ' + s)
    assert(len(tokens) == 1)
    return tokens[0].value


def test_parser_options():
    p = mdl.Parser()
    assert(p.indent == 2)
    assert(p.newline is None)
    assert(mdl.Parser(indent=1).indent == 1)
    assert(mdl.Parser(indent=4, newline='\r\n').newline == '\r\n')

    with pytest.raises(err.InvalidConfigurationError):
        mdl.Parser(indent=0)
    with pytest.raises(ValueError):
        mdl.Parser(indent=-2)
    with pytest.raises(err.InvalidConfigurationError):
        mdl.Parser(newline='\n\n')
    with pytest.raises(TypeError):
        mdl.Parser(2)
    with pytest.raises(TypeError):
        mdl.Parser(indent='2')
    with pytest.raises(TypeError):
        mdl.Parser(indent=True)
    with pytest.raises(TypeError):
        mdl.Parser(indentation=2)


def test_parse_nested_blocks():
    tokens = mdl.Parser().parse('services:\n  router:\n    class: App\\Routing\\Router\n')
    assert(tokens == [Token(name='services'),
                      Token(indent=2, name='router'),
                      Token(indent=4, name='class', value='App\\Routing\\Router')])


def test_parse_crlf():
    tokens = mdl.Parser().parse('services:\r\n  router:\r\n    class: x\r\n')
    assert(tokens == [Token(name='services'),
                      Token(indent=2, name='router'),
                      Token(indent=4, name='class', value='x')])


def test_parse_explicit_newline():
    assert(len(mdl.Parser(newline='\r').parse('a: 1\rb: 2\r')) == 2)
    tokens = mdl.Parser(newline='\n').parse('a:\r\n  b: 1\r\n')
    assert(tokens == [Token(name='a'), Token(indent=2, name='b', value=1)])


def test_parse_empty():
    assert(mdl.Parser().parse('') == [])
    assert(mdl.Parser().parse('\n') == [Token()])
    assert(mdl.Parser().parse(b'a: 1') == [Token(name='a', value=1)])
    with pytest.raises(err.SourceDecodeError):
        mdl.Parser().parse(b'\xff')


def test_parse_siblings():
    tokens = mdl.Parser().parse('a:\n  b: 1\n  c: 2\nd: 3\n')
    assert(tokens == [Token(name='a'),
                      Token(indent=2, name='b', value=1),
                      Token(indent=2, name='c', value=2),
                      Token(name='d', value=3)])

    tokens = mdl.Parser().parse('a:\n  b:\n    c: 1\n  d: 2\n')
    assert([t.indent for t in tokens] == [0, 2, 4, 2])


def test_parse_indent_width():
    tokens = mdl.Parser(indent=4).parse('a:\n    b:\n        c: 1\n')
    assert([t.indent for t in tokens] == [0, 4, 8])
    with pytest.raises(err.UnexpectedIndentationError):
        mdl.Parser(indent=4).parse('a:\n  b: 1\n')
    tokens = mdl.Parser(indent=1).parse('a:\n b:\n  - x\n')
    assert(tokens[2] == Token(indent=2, prefix='-', value='x'))


def test_unexpected_indentation():
    with pytest.raises(err.UnexpectedIndentationError) as e:
        mdl.Parser().parse('services:\r\n  router:\r\n      class: App\\Routing\\Router')
    assert(e.value.lineno == 3)
    assert(e.value.source_name is None)
    assert(str(e.value) == 'Unexpected indentation at line 3')

    with pytest.raises(err.UnexpectedIndentationError):
        mdl.Parser().parse(' a: 1')
    with pytest.raises(err.UnexpectedIndentationError):
        mdl.Parser().parse('  a: 1')
    with pytest.raises(err.UnexpectedIndentationError) as e:
        mdl.Parser().parse('a:\n   b: 1')
    assert(e.value.lineno == 2)


def test_list_item_indentation():
    with pytest.raises(err.ListItemIndentationError) as e:
        mdl.Parser().parse('sequence:\r\n  - item\r\n    - item')
    assert(e.value.lineno == 3)
    assert(str(e.value) == 'Invalid list item indent at line 3')

    with pytest.raises(err.ListItemIndentationError):
        mdl.Parser().parse('- item')
    with pytest.raises(err.ListItemIndentationError):
        mdl.Parser().parse('sequence:\n- item')
    with pytest.raises(err.ListItemIndentationError):
        mdl.Parser().parse('sequence:\n   - item')


def test_parse_sequences():
    tokens = mdl.Parser().parse('list:\n  - 1\n  - 2.5\n  - true\n  - "q"\n  - [a, b]\n  - k: v\n')
    assert(tokens[0] == Token(name='list'))
    assert([t.value for t in tokens[1:]] == [1, 2.5, True, 'q', ['a', 'b'], {'k': 'v'}])
    assert(all(t.is_sequence and t.indent == 2 and t.name is None for t in tokens[1:]))

    tokens = mdl.Parser().parse('a:\n  - x\n  b:\n    - y\n  - z\n')
    assert(tokens[4] == Token(indent=2, prefix='-', value='z'))

    tokens = mdl.Parser().parse('a:\n  -\n')
    assert(tokens[1] == Token(indent=2, prefix='-', value=''))


def test_scopes_resolved_by_position():
    tokens = mdl.Parser().parse('x:\n  x:\n    - item\n')
    assert(tokens[2] == Token(indent=4, prefix='-', value='item'))

    tokens = mdl.Parser().parse('a:\n  x:\n    b: 1\nc:\n  x:\n    d: 2\n')
    assert(tokens[5] == Token(indent=4, name='d', value=2))


def test_parse_comments_and_blank_lines():
    tokens = mdl.Parser().parse('# top\na: 1 # note\n\nb: x#y\n')
    assert(tokens == [Token(comment='top'),
                      Token(name='a', value=1, comment='note'),
                      Token(),
                      Token(name='b', value='x', comment='y')])

    tokens = mdl.Parser().parse("a: 'x # y' # z")
    assert(tokens == [Token(name='a', value='x # y', comment='z')])
    tokens = mdl.Parser().parse('a: "x # y"')
    assert(tokens == [Token(name='a', value='x # y')])

    tokens = mdl.Parser().parse('a:\n  b: 1\n    # deep\n# shallow\n  c: 2\n')
    assert(tokens[2] == Token(indent=4, comment='deep'))
    assert(tokens[4] == Token(indent=2, name='c', value=2))

    with pytest.raises(err.UnexpectedIndentationError):
        mdl.Parser().parse('a:\n   # odd\n')


def test_indented_comment_lines_follow_scope():
    tokens = mdl.Parser().parse('a:\n  b:\n    c: 1\n      # inside c\n  # back in a\nd: 2\n')
    assert(tokens[3] == Token(indent=6, comment='inside c'))
    assert(tokens[4] == Token(indent=2, comment='back in a'))
    assert(tokens[5] == Token(name='d', value=2))
    for s in ('a: 1\n      # x', '  # x', 'a:\n  - 1\n    # x\n'):
        with pytest.raises(err.UnexpectedIndentationError) as e:
            mdl.Parser().parse(s)
        assert(e.value.lineno == s.count('\n', 0, s.index('#')) + 1)


def test_tabs():
    with pytest.raises(err.TabIndentationError) as e:
        mdl.Parser().parse('\t')
    assert(e.value.lineno == 0)
    assert(str(e.value) == 'A YAML file cannot contain tabs as indentation')
    with pytest.raises(err.TabIndentationError):
        mdl.Parser().parse('a: 1\nb: "x\ty"\n')
    with pytest.raises(err.TabIndentationError):
        mdl.Parser().parse('a: 1 #\t')


def test_unexpected_character():
    with pytest.raises(err.UnexpectedCharacterError) as e:
        mdl.Parser().parse('Services:')
    assert(e.value.character == 'S')
    assert(e.value.lineno == 1)
    assert(str(e.value) == 'Unexpected character "S" at line 1')
    with pytest.raises(err.UnexpectedCharacterError) as e:
        mdl.Parser().parse('a: 1\n@b: 2')
    assert(e.value.lineno == 2)
    for s in ('"a": 1', '[a]', '{a: 1}', '.a: 1'):
        with pytest.raises(err.UnexpectedCharacterError):
            mdl.Parser().parse(s)
    for s in ('a: 1', '_a: 1', '9: 1', '# c', ' '):
        mdl.Parser().parse(s)


def test_value_scalars():
    assert(value_of('1') == 1 and isinstance(value_of('1'), int))
    assert(value_of('-5') == -5)
    assert(value_of('+3') == 3)
    assert(value_of('007') == 7)
    assert(value_of('1.5') == 1.5 and isinstance(value_of('1.5'), float))
    assert(value_of('.5') == 0.5)
    assert(value_of('2.') == 2.0 and isinstance(value_of('2.'), float))
    assert(value_of('1.2.3') == '1.2.3')
    assert(value_of('1e5') == '1e5')
    assert(value_of('true') is True)
    assert(value_of('false') is False)
    assert(value_of('True') == 'True')
    assert(value_of('plain text') == 'plain text')
    assert(value_of('App\\Routing\\Router') == 'App\\Routing\\Router')


def test_value_quoted():
    assert(value_of("'abc'") == 'abc')
    assert(value_of('"abc"') == 'abc')
    assert(value_of("''") == '')
    assert(value_of("'1'") == '1')
    assert(value_of("'true'") == 'true')
    assert(value_of("'a: b'") == 'a: b')
    assert(value_of('"it\'s"') == "it's")
    assert(value_of("'a\\'") == 'a\\')

    with pytest.raises(err.MissingClosingQuoteError) as e:
        value_of("'abc")
    assert(e.value.lineno == 1)
    assert(str(e.value) == 'Missing closing quote at line 1')
    with pytest.raises(err.MissingClosingQuoteError):
        value_of('"abc\'')
    with pytest.raises(err.MissingClosingQuoteError):
        value_of("'")
    with pytest.raises(err.MissingClosingQuoteError):
        mdl.Parser().parse("a:\n  - 'x")


def test_value_inline_list():
    assert(value_of('[a, b, c]') == ['a', 'b', 'c'])
    assert(value_of('[ 1, 2.5, true, "x" ]') == [1, 2.5, True, 'x'])
    assert(value_of('[]') == [])
    assert(value_of('[ ]') == [])
    assert(value_of('[a]') == ['a'])
    assert(value_of('[{a: 1, b: 2}, {c: 3}]') == [{'a': 1, 'b': 2}, {'c': 3}])
    assert(value_of('[ {a: 1},{b: 2} ]') == [{'a': 1}, {'b': 2}])
    assert(value_of('[a: 1, b: 2]') == [{'a': 1}, {'b': 2}])

    with pytest.raises(err.MissingClosingBracketError) as e:
        value_of('[a, b')
    assert(str(e.value) == 'Missing closing bracket at line 1')
    with pytest.raises(err.MissingClosingBracketError):
        value_of('[')
    with pytest.raises(err.MissingClosingQuoteError):
        value_of("['a, b]")


def test_value_inline_dict():
    assert(value_of('{x: 1, y: two}') == {'x': 1, 'y': 'two'})
    assert(list(value_of('{z: 1, a: 2, m: 3}')) == ['z', 'a', 'm'])
    assert(value_of('{x: 1, x: 2}') == {'x': 2})
    assert(value_of('{}') == {})
    assert(value_of('{ }') == {})
    assert(value_of('{a}') == {'a': ''})
    assert(value_of('{a: [1], b: [2]}') == {'a': [1], 'b': [2]})
    assert(value_of('{a: {b: c}}') == {'a': {'b': 'c'}})

    with pytest.raises(err.MissingClosingBracketError):
        value_of('{x: 1')
    with pytest.raises(err.MissingClosingBracketError):
        value_of('{a: [1}')


def test_value_nested_pair():
    assert(value_of('b: c') == {'b': 'c'})
    assert(value_of('b: 1') == {'b': 1})
    assert(value_of('b: c: d') == {'b': {'c': 'd'}})
    assert(value_of('http://example.com') == {'http': '//example.com'})


def test_parse_plain_line():
    assert(mdl.Parser().parse('orphan') == [Token()])


def test_parser_reuse():
    p = mdl.Parser()
    first = p.parse('a:\n  b: 1\n')
    with pytest.raises(err.UnexpectedIndentationError):
        p.parse('  b: 1\n')
    second = p.parse('a:\n  b: 1\n')
    assert(first == second)
    assert(first is not second)
    assert(p.parse('c: 2') == [Token(name='c', value=2)])


def test_parse_file(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_bytes(b'services:\r\n  router:\r\n    class: App\\Routing\\Router\r\n')
    tokens = mdl.Parser().parse_file(str(path))
    assert(tokens == [Token(name='services'),
                      Token(indent=2, name='router'),
                      Token(indent=4, name='class', value='App\\Routing\\Router')])


def test_parse_file_errors(tmp_path):
    missing = str(tmp_path / 'foobar.yaml')
    with pytest.raises(err.SourceFileNotFoundError) as e:
        mdl.Parser().parse_file(missing)
    assert(e.value.source_name == missing)
    assert(str(e.value) == 'File does not exist in "{0}"'.format(missing))

    with pytest.raises(err.SourceFileNotFoundError):
        mdl.Parser().parse_file(str(tmp_path))

    undecodable = tmp_path / 'binary.yaml'
    undecodable.write_bytes(b'a: \xff\n')
    with pytest.raises(err.SourceFileUnreadableError) as e:
        mdl.Parser().parse_file(str(undecodable))
    assert(e.value.source_name == str(undecodable))

    invalid = tmp_path / 'invalid.yaml'
    invalid.write_bytes(b'a:\n  b: 1\n     c: 2\n')
    with pytest.raises(err.UnexpectedIndentationError) as e:
        mdl.Parser().parse_file(str(invalid))
    assert(e.value.lineno == 3)
    assert(e.value.source_name == str(invalid))
    assert(str(e.value) == 'Unexpected indentation in "{0}" at line 3'.format(invalid))

    tabs = tmp_path / 'tabs.yaml'
    tabs.write_bytes(b'a:\n\tb: 1\n')
    with pytest.raises(err.TabIndentationError) as e:
        mdl.Parser().parse_file(str(tabs))
    assert(str(e.value) == 'A YAML file cannot contain tabs as indentation in "{0}"'.format(tabs))


def test_errors_are_parse_errors():
    for exc in (err.SourceFileNotFoundError, err.SourceFileUnreadableError,
                err.TabIndentationError, err.UnexpectedCharacterError,
                err.UnexpectedIndentationError, err.ListItemIndentationError,
                err.MissingClosingQuoteError, err.MissingClosingBracketError):
        assert(issubclass(exc, err.ParseError))
        assert(issubclass(exc, err.LineYAMLException))
