# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Token records.  A parse produces exactly one token per source line.
'''


from . import grammar


LIST_ITEM = grammar.LIT_GRAMMAR['list_item']




class Token(object):
    '''
    Structural record for one source line.

    indent:   Number of leading spaces.

    prefix:   The list item marker for sequence items, otherwise `None`.

    name:     Key name for lines of the form `name: value` or `name:`.

    value:    Decoded value (`None`, `bool`, `int`, `float`, `str`, `list`,
              or `dict`), or `None` when the line carries no value.

    comment:  Trailing comment text with the comment delimiter and
              surrounding whitespace removed.

    Tokens are immutable once created.
    '''
    __slots__ = ['_indent', '_prefix', '_name', '_value', '_comment']

    def __init__(self, indent=0, prefix=None, name=None, value=None, comment=None):
        if not isinstance(indent, int) or isinstance(indent, bool):
            raise TypeError('indent must be an integer')
        if indent < 0:
            raise ValueError('indent must be >= 0')
        if not all(x is None or isinstance(x, str) for x in (prefix, name, comment)):
            raise TypeError('prefix, name and comment must be strings or None')
        object.__setattr__(self, '_indent', indent)
        object.__setattr__(self, '_prefix', prefix)
        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_value', value)
        object.__setattr__(self, '_comment', comment)

    def __setattr__(self, name, value):
        raise AttributeError('Token objects are immutable')

    def __delattr__(self, name):
        raise AttributeError('Token objects are immutable')

    indent = property(lambda self: self._indent)
    prefix = property(lambda self: self._prefix)
    name = property(lambda self: self._name)
    value = property(lambda self: self._value)
    comment = property(lambda self: self._comment)

    @property
    def is_empty(self):
        '''
        Blank or comment-only line.
        '''
        return not self._name and self._value is None

    @property
    def is_block(self):
        return bool(self._name)

    @property
    def is_sequence(self):
        return self._prefix == LIST_ITEM

    def _astuple(self):
        return (self._indent, self._prefix, self._name, self._value, self._comment)

    def __reduce__(self):
        # Copies and pickles are rebuilt through __init__
        return (Token, self._astuple())

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self._astuple() == other._astuple()

    def __ne__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self._astuple() != other._astuple()

    def __hash__(self):
        # Raises TypeError for list and dict values, like a tuple would
        return hash(self._astuple())

    def __repr__(self):
        return 'Token(indent={0!r}, prefix={1!r}, name={2!r}, value={3!r}, comment={4!r})'.format(*self._astuple())
