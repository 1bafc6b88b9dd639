# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


# pylint: disable=C0301


import os
import re

from . import erring
from . import grammar
from .tokens import Token


INDENT_WIDTH = grammar.PARAMS['indent_width']

TAB = grammar.LIT_GRAMMAR['tab']
SPACE = grammar.LIT_GRAMMAR['space']
NEWLINE = grammar.LIT_GRAMMAR['newline']
CRLF = grammar.LIT_GRAMMAR['crlf']
NEWLINE_SEQ = grammar.LIT_GRAMMAR['newline_seq']
LINE_START_SET = grammar.LIT_GRAMMAR['line_start_set']

COMMENT_DELIM = grammar.LIT_GRAMMAR['comment_delim']
LIST_ITEM = grammar.LIT_GRAMMAR['list_item']
ASSIGN_KEY_VAL = grammar.LIT_GRAMMAR['assign_key_val']
INLINE_ELEMENT_SEPARATOR = grammar.LIT_GRAMMAR['inline_element_separator']
START_INLINE_LIST = grammar.LIT_GRAMMAR['start_inline_list']
END_INLINE_LIST = grammar.LIT_GRAMMAR['end_inline_list']
START_INLINE_DICT = grammar.LIT_GRAMMAR['start_inline_dict']
END_INLINE_DICT = grammar.LIT_GRAMMAR['end_inline_dict']
QUOTE_DELIMS_SET = grammar.LIT_GRAMMAR['quote_delims_set']
DECIMAL_POINT = grammar.LIT_GRAMMAR['decimal_point']
BOOL_WORDS = grammar.LIT_GRAMMAR['bool_words']




class State(object):
    '''
    Keep track of a data source and all state associated with a single
    parse:  the source lines, the current line number, the tokens created so
    far, and the stack of open scopes.

    Each scope is an `(index, name)` pair, where `index` locates the block
    key's token in `tokens`.  Scopes are always resolved by index, since
    sibling and nested keys may share a name.
    '''
    __slots__ = ['source_name', 'source_lines', 'lineno', 'tokens', 'scopes']
    def __init__(self, source_lines, source_name=None):
        self.source_name = source_name
        self.source_lines = source_lines
        self.lineno = 0
        self.tokens = []
        self.scopes = []

    def scope_token(self):
        '''
        Token of the innermost open scope, or `None` at top level.
        '''
        if not self.scopes:
            return None
        return self.tokens[self.scopes[-1][0]]

    def last_token(self):
        if not self.tokens:
            return None
        return self.tokens[-1]




class Parser(object):
    '''
    Parse line-based YAML into a list of tokens, one per line.

    indent:   Number of spaces per indentation level.

    newline:  Line terminator used to split sources.  With the default
              `None`, each source is split on `\\r\\n` if it contains one
              and on `\\n` otherwise.
    '''
    __slots__ = ['indent', 'newline', '_number_re', '_inline_dict_separator_re']
    def __init__(self, *args, **kwargs):
        if args:
            raise TypeError('Explicit keyword arguments are required')
        indent = kwargs.pop('indent', INDENT_WIDTH)
        newline = kwargs.pop('newline', None)
        if kwargs:
            raise TypeError('Unexpected keyword argument(s) {0}'.format(', '.join('"{0}"'.format(k) for k in kwargs)))
        if not isinstance(indent, int) or isinstance(indent, bool):
            raise TypeError('indent must be an integer')
        if indent < 1:
            raise erring.InvalidConfigurationError('Indentation must be greater than zero')
        if newline is not None and newline not in NEWLINE_SEQ:
            raise erring.InvalidConfigurationError('newline must be None or one of {0}'.format(', '.join(repr(x) for x in NEWLINE_SEQ)))
        self.indent = indent
        self.newline = newline

        self._number_re = re.compile(grammar.RE_GRAMMAR['number'])
        self._inline_dict_separator_re = re.compile(grammar.RE_GRAMMAR['inline_dict_separator'])


    @staticmethod
    def _as_unicode_string(unicode_string_or_bytes):
        '''
        Take an object that may be a Unicode string or bytes, and return
        a Unicode string.
        '''
        if isinstance(unicode_string_or_bytes, str):
            unicode_string = unicode_string_or_bytes
        else:
            try:
                unicode_string = unicode_string_or_bytes.decode('utf8')
            except Exception as e:
                raise erring.SourceDecodeError(e)
        return unicode_string


    def _split_lines(self, unicode_string):
        '''
        Split a source into lines.  A final line terminator does not start
        an additional empty line.
        '''
        newline = self.newline
        if newline is None:
            newline = CRLF if CRLF in unicode_string else NEWLINE
        lines = unicode_string.split(newline)
        if lines[-1] == '':
            lines.pop()
        return lines


    def parse(self, unicode_string_or_bytes, source_name=None):
        '''
        Parse a Unicode string or byte string into a list of tokens.
        '''
        unicode_string = self._as_unicode_string(unicode_string_or_bytes)
        if TAB in unicode_string:
            raise erring.TabIndentationError(source_name)
        state = State(self._split_lines(unicode_string), source_name)
        self._parse_lines(state)
        return state.tokens


    def parse_file(self, path):
        '''
        Parse the contents of a file into a list of tokens.  The path is
        attached to any error.
        '''
        if not os.path.isfile(path):
            raise erring.SourceFileNotFoundError(path)
        if not os.access(path, os.R_OK):
            raise erring.SourceFileUnreadableError(path)
        try:
            # Newlines are left untranslated so that the source is parsed
            # exactly as stored
            with open(path, 'r', encoding='utf8', newline='') as f:
                unicode_string = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise erring.SourceFileUnreadableError(path, e)
        return self.parse(unicode_string, source_name=path)


    def _parse_lines(self, state):
        '''
        Process source lines into tokens, one token per line.
        '''
        for lineno, line in enumerate(state.source_lines, 1):
            state.lineno = lineno
            state.tokens.append(self._parse_line(line.rstrip(), state))


    def _parse_line(self, line, state,
                    line_start_set=LINE_START_SET, space=SPACE,
                    list_item=LIST_ITEM, assign_key_val=ASSIGN_KEY_VAL):
        '''
        Create the token for a single line, with trailing whitespace already
        removed.
        '''
        if line and line[0] not in line_start_set:
            raise erring.UnexpectedCharacterError(line[0], state.lineno, state.source_name)

        content = line.lstrip(space)
        indent = len(line) - len(content)
        prefix = list_item if content[:1] == list_item else None
        content, comment = self._split_comment(content)

        if not content and prefix is None:
            # Blank and comment-only lines never open or close scopes
            if indent > 0:
                parent = self._find_parent_scope(indent, state)
                if indent % self.indent != 0 or parent is None or indent > parent.indent + self.indent:
                    raise erring.UnexpectedIndentationError(state.lineno, state.source_name)
            return Token(indent=indent, comment=comment)

        self._rewind_to_parent_scope(indent, state)
        parent = state.scope_token()

        if prefix is not None:
            reference = parent if parent is not None else state.last_token()
            if reference is None or indent != reference.indent + self.indent:
                raise erring.ListItemIndentationError(state.lineno, state.source_name)
            return Token(indent=indent, prefix=prefix,
                         value=self._parse_sequence(content, state),
                         comment=comment)

        if indent % self.indent != 0 or (indent > 0 and (parent is None or indent != parent.indent + self.indent)):
            raise erring.UnexpectedIndentationError(state.lineno, state.source_name)

        if assign_key_val in content:
            name, _, fragment = content.partition(assign_key_val)
            name = name.strip()
            fragment = fragment.strip()
            if fragment:
                value = self._parse_value(fragment, state)
            else:
                value = None
            # The token is appended at this index once the line is complete
            state.scopes.append((len(state.tokens), name))
            return Token(indent=indent, name=name, value=value, comment=comment)

        return Token(indent=indent, comment=comment)


    def _rewind_to_parent_scope(self, indent, state):
        '''
        Close all scopes that are not shallower than the current line.
        '''
        scopes = state.scopes
        tokens = state.tokens
        while scopes and tokens[scopes[-1][0]].indent >= indent:
            scopes.pop()


    def _find_parent_scope(self, indent, state):
        '''
        Token of the innermost open scope shallower than `indent`, or `None`.
        Unlike `_rewind_to_parent_scope()`, no scopes are closed.
        '''
        tokens = state.tokens
        for index, _ in reversed(state.scopes):
            if tokens[index].indent < indent:
                return tokens[index]
        return None


    @staticmethod
    def _split_comment(content,
                       comment_delim=COMMENT_DELIM, quote_delims_set=QUOTE_DELIMS_SET):
        '''
        Split content into `(content, comment)`.  A comment starts at the
        first comment delimiter outside a quoted string; `comment` is `None`
        if there is no comment.
        '''
        quote = None
        for index, c in enumerate(content):
            if quote is not None:
                if c == quote:
                    quote = None
            elif c in quote_delims_set:
                quote = c
            elif c == comment_delim:
                return content[:index].rstrip(), content[index+1:].strip()
        return content, None


    def _parse_sequence(self, content, state):
        '''
        Parse the value of a sequence item.  `content` still starts with the
        list item marker.
        '''
        return self._parse_value(content[1:], state)


    def _parse_block(self, fragment, state, assign_key_val=ASSIGN_KEY_VAL):
        '''
        Split `name: value` at the first separator and parse the value.
        '''
        name, _, value = fragment.partition(assign_key_val)
        return name.strip(), self._parse_value(value, state)


    def _parse_value(self, fragment, state,
                     decimal_point=DECIMAL_POINT, bool_words=BOOL_WORDS,
                     quote_delims_set=QUOTE_DELIMS_SET,
                     start_inline_list=START_INLINE_LIST, end_inline_list=END_INLINE_LIST,
                     start_inline_dict=START_INLINE_DICT, end_inline_dict=END_INLINE_DICT,
                     inline_element_separator=INLINE_ELEMENT_SEPARATOR,
                     assign_key_val=ASSIGN_KEY_VAL):
        '''
        Parse a text fragment into a value.

        Closing quotes and brackets are only checked at the end of the
        fragment.  Unbalanced delimiters inside a fragment are not detected.
        '''
        fragment = fragment.strip()

        if self._number_re.fullmatch(fragment):
            if decimal_point in fragment:
                return float(fragment)
            return int(fragment)

        if fragment in bool_words:
            return bool_words[fragment]

        first_char = fragment[:1]

        if first_char in quote_delims_set:
            if len(fragment) < 2 or fragment[-1] != first_char:
                raise erring.MissingClosingQuoteError(state.lineno, state.source_name)
            return fragment[1:-1]

        if first_char == start_inline_list:
            if fragment[-1] != end_inline_list:
                raise erring.MissingClosingBracketError(state.lineno, state.source_name)
            interior = fragment[1:-1].strip()
            if not interior:
                return []
            if interior[:1] == start_inline_dict:
                # Only split between dicts, not within them
                elements = self._inline_dict_separator_re.split(interior)
            else:
                elements = interior.split(inline_element_separator)
            return [self._parse_value(element, state) for element in elements]

        if first_char == start_inline_dict:
            if fragment[-1] != end_inline_dict:
                raise erring.MissingClosingBracketError(state.lineno, state.source_name)
            interior = fragment[1:-1].strip()
            result = {}
            if interior:
                for segment in interior.split(inline_element_separator):
                    name, value = self._parse_block(segment, state)
                    result[name] = value
            return result

        if assign_key_val in fragment:
            name, value = self._parse_block(fragment, state)
            return {name: value}

        return fragment
