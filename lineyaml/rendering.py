# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


# pylint:  disable = C0301


import re

from . import erring
from . import grammar
from . import tooling


# Dump flags
DUMP_EMPTY_LINES = 1
DUMP_COMMENTS = 2
_ALL_FLAGS = DUMP_EMPTY_LINES | DUMP_COMMENTS

SPACE = grammar.LIT_GRAMMAR['space']
NEWLINE = grammar.LIT_GRAMMAR['newline']
NEWLINE_SEQ = grammar.LIT_GRAMMAR['newline_seq']
COMMENT_DELIM = grammar.LIT_GRAMMAR['comment_delim']
LIST_ITEM = grammar.LIT_GRAMMAR['list_item']
ASSIGN_KEY_VAL = grammar.LIT_GRAMMAR['assign_key_val']
INLINE_ELEMENT_SEPARATOR = grammar.LIT_GRAMMAR['inline_element_separator']
START_INLINE_LIST = grammar.LIT_GRAMMAR['start_inline_list']
END_INLINE_LIST = grammar.LIT_GRAMMAR['end_inline_list']
START_INLINE_DICT = grammar.LIT_GRAMMAR['start_inline_dict']
END_INLINE_DICT = grammar.LIT_GRAMMAR['end_inline_dict']
SINGLEQUOTE_DELIM = grammar.LIT_GRAMMAR['singlequote_delim']




class Dumper(object):
    '''
    Render a list of tokens as line-based YAML.

    newline:  Line terminator written after each line.
    '''
    DUMP_EMPTY_LINES = DUMP_EMPTY_LINES
    DUMP_COMMENTS = DUMP_COMMENTS

    def __init__(self, *args, **kwargs):
        if args:
            raise TypeError('Explicit keyword arguments are required')
        newline = kwargs.pop('newline', NEWLINE)
        if kwargs:
            raise TypeError('Unexpected keyword argument(s) {0}'.format(', '.join('"{0}"'.format(k) for k in kwargs)))
        if newline not in NEWLINE_SEQ:
            raise erring.InvalidConfigurationError('newline must be one of {0}'.format(', '.join(repr(x) for x in NEWLINE_SEQ)))
        self.newline = newline

        self._unquoted_str_re = re.compile(grammar.RE_GRAMMAR['unquoted_string'])

        render_funcs = {type(None): self._render_none,
                        type(True): self._render_bool,
                        type(1): self._render_int,
                        type(1.0): self._render_float,
                        type('a'): self._render_str,
                        type([]): self._render_list,
                        type({}): self._render_dict}
        # A subclass of a supported type is resolved to the function for its
        # base type the first time it is seen
        def render_func_factory(t, issubclass=issubclass):
            for base_t in (dict, list, str, float, int):
                if issubclass(t, base_t):
                    return render_funcs[base_t]
            raise TypeError('Unsupported type {0}'.format(t))
        self._render_funcs = tooling.keydefaultdict(render_func_factory)
        self._render_funcs.update(render_funcs)


    def dump(self, tokens, flags=0,
             space=SPACE, comment_delim=COMMENT_DELIM, list_item=LIST_ITEM,
             assign_key_val=ASSIGN_KEY_VAL):
        '''
        Render tokens as a string.  `flags` combines `DUMP_EMPTY_LINES` and
        `DUMP_COMMENTS`; without them, blank lines and comments are omitted.
        '''
        if not isinstance(flags, int) or isinstance(flags, bool):
            raise TypeError('flags must be an integer')
        if flags & ~_ALL_FLAGS:
            raise erring.InvalidConfigurationError('Unknown dump flag(s) {0}'.format(flags & ~_ALL_FLAGS))
        newline = self.newline
        buffer = []
        for token in tokens:
            indent = space*token.indent
            comment = token.comment
            if token.is_empty:
                if comment is None:
                    if flags & DUMP_EMPTY_LINES:
                        buffer.append(newline)
                elif flags & DUMP_COMMENTS:
                    buffer.append(indent + comment_delim + space + comment + newline)
                continue
            buffer.append(indent)
            if token.is_sequence:
                buffer.append(list_item + space + self.render_value(token.value))
            if token.is_block:
                buffer.append(token.name + assign_key_val)
                if token.value is not None:
                    buffer.append(space + self.render_value(token.value))
            if comment is not None and flags & DUMP_COMMENTS:
                buffer.append(space + comment_delim + space + comment)
            buffer.append(newline)
        return ''.join(buffer)


    def render_value(self, obj):
        '''
        Render a value in the form the parser reads back.
        '''
        return self._render_funcs[type(obj)](obj)


    def _render_none(self, obj):
        return ''


    def _render_bool(self, obj,
                     bool_true=grammar.LIT_GRAMMAR['bool_true'],
                     bool_false=grammar.LIT_GRAMMAR['bool_false']):
        return bool_true if obj else bool_false


    def _render_int(self, obj):
        return str(int(obj))


    def _render_float(self, obj):
        return str(float(obj))


    def _render_str(self, obj, singlequote_delim=SINGLEQUOTE_DELIM):
        if self._unquoted_str_re.fullmatch(obj) is not None:
            return obj
        return '{0}{1}{0}'.format(singlequote_delim, obj.replace(singlequote_delim, '\\' + singlequote_delim))


    def _render_list(self, obj,
                     space=SPACE,
                     separator=INLINE_ELEMENT_SEPARATOR+SPACE,
                     start_inline_list=START_INLINE_LIST,
                     end_inline_list=END_INLINE_LIST):
        if not obj:
            return start_inline_list + space + end_inline_list
        # Dicts inside a list are always braced so that the list can be split
        # between its elements when it is parsed again
        elements = (self._render_dict(x, braced=True) if isinstance(x, dict) else self.render_value(x) for x in obj)
        return start_inline_list + space + separator.join(elements) + space + end_inline_list


    def _render_dict(self, obj, braced=False,
                     space=SPACE,
                     separator=INLINE_ELEMENT_SEPARATOR+SPACE,
                     assign_key_val=ASSIGN_KEY_VAL,
                     start_inline_dict=START_INLINE_DICT,
                     end_inline_dict=END_INLINE_DICT):
        if not obj:
            return start_inline_dict + space + end_inline_dict
        rendered = separator.join('{0}{1}{2}{3}'.format(k, assign_key_val, space, self.render_value(v)) for k, v in obj.items())
        # A single pair is written bare at the top of a value; the parser
        # reads a bare `key: value` fragment back as a one-entry dict
        if len(obj) == 1 and not braced:
            return rendered
        return start_inline_dict + space + rendered + space + end_inline_dict
