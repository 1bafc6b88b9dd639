# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


# pylint: disable=C0301, C0330

import re




# Non-textual general parameters
PARAMS = {'indent_width': 2}




# Assemble literal grammar
_RAW_LIT_GRAMMAR = [# Whitespace
                    ('tab', '\t'),
                    ('space', '\x20'),
                    ('newline', '\n'),
                    ('carriage_return', '\r'),
                    ('crlf', '{carriage_return}{newline}'),
                    # Keywords
                    ('bool_true', 'true'),
                    ('bool_false', 'false'),
                    # Character classes
                    ('lowercase', 'abcdefghijklmnopqrstuvwxyz'),
                    ('digit', '0123456789'),
                    ('underscore', '_'),
                    ('decimal_point', '.'),
                    ('sign', '+-')]

_RAW_LIT_SPECIAL = [# Special code points
                    ('comment_delim', '#'),
                    ('list_item', '-'),
                    ('assign_key_val', ':'),
                    ('inline_element_separator', ','),
                    ('start_inline_list', '['),
                    ('end_inline_list', ']'),
                    ('start_inline_dict', '{'),
                    ('end_inline_dict', '}'),
                    ('singlequote_delim', "'"),
                    ('doublequote_delim', '"'),
                    # Combinations
                    ('quote_delims', '{singlequote_delim}{doublequote_delim}'),
                    ('line_start', '{lowercase}{digit}{underscore}{comment_delim}{list_item}{space}')]
_RAW_LIT_GRAMMAR.extend(_RAW_LIT_SPECIAL)

LIT_GRAMMAR = {}
for k, v in _RAW_LIT_GRAMMAR:
    if k in ('start_inline_dict', 'end_inline_dict'):
        LIT_GRAMMAR[k] = v
    else:
        LIT_GRAMMAR[k] = v.format(**LIT_GRAMMAR)
# Add a few elements that couldn't conveniently be created with the grammar
# definition format
LIT_GRAMMAR['newline_seq'] = (LIT_GRAMMAR['newline'], LIT_GRAMMAR['crlf'], LIT_GRAMMAR['carriage_return'])
LIT_GRAMMAR['line_start_set'] = frozenset(LIT_GRAMMAR['line_start'])
LIT_GRAMMAR['quote_delims_set'] = frozenset(LIT_GRAMMAR['quote_delims'])
LIT_GRAMMAR['bool_words'] = {LIT_GRAMMAR['bool_true']: True,
                             LIT_GRAMMAR['bool_false']: False}




# Assemble regex grammar
_RAW_RE_GRAMMAR = [('digit', '[0-9]'),
                   ('word_char_ascii', '[A-Za-z0-9_]'),
                   ('whitespace', '\\s')]

# Special characters
_raw_re_special = [(k, re.escape(LIT_GRAMMAR[k])) for k, v in _RAW_LIT_SPECIAL if len(LIT_GRAMMAR[k]) == 1]
_raw_re_special.append(('sign', '[{0}]'.format(re.escape(LIT_GRAMMAR['sign']))))
_raw_re_special.append(('decimal_point', re.escape(LIT_GRAMMAR['decimal_point'])))
_RAW_RE_GRAMMAR.extend(_raw_re_special)

# Compound patterns
_RAW_RE_COMPOUND = [# Optionally signed decimal number, with at most one
                    # decimal point and at least one digit
                    ('number', '{sign}?(?:{digit}+(?:{decimal_point}{digit}*)?|{decimal_point}{digit}+)'),
                    # Strings that can be dumped without quotes
                    ('unquoted_string', '{word_char_ascii}+'),
                    # Separator between inline dicts within an inline list
                    ('inline_dict_separator', '{inline_element_separator}(?={whitespace}*{start_inline_dict})')]
_RAW_RE_GRAMMAR.extend(_RAW_RE_COMPOUND)

_raw_key_not_formatted = set(k for k, v in _raw_re_special)

RE_GRAMMAR = {}
for k, v in _RAW_RE_GRAMMAR:
    if k in _raw_key_not_formatted:
        RE_GRAMMAR[k] = v
    else:
        RE_GRAMMAR[k] = v.format(**RE_GRAMMAR)
