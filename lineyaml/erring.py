# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

# pylint:  disable=C0301




class LineYAMLException(Exception):
    '''
    Base LineYAML exception.
    '''
    pass


class InvalidConfigurationError(LineYAMLException, ValueError):
    '''
    Invalid option passed to a parser or dumper.
    '''
    pass


class SourceDecodeError(LineYAMLException):
    '''
    Error during decoding of binary source.
    '''
    def __init__(self, err_msg):
        self.err_msg = err_msg
    def __str__(self):
        return 'Could not decode binary source, or received a non-Unicode, non-bytes object:\n  {0}'.format(self.err_msg)


class ParseError(LineYAMLException):
    '''
    General error during parsing.

    `lineno` is 1-indexed; 0 means the error is not tied to a single line.
    `source_name` is the path of the file being parsed, if any.
    '''
    def __init__(self, msg, lineno=0, source_name=None):
        self.msg = msg
        self.lineno = lineno
        self.source_name = source_name
    def fmt_msg_with_location(self, msg):
        if self.source_name is not None:
            msg += ' in "{0}"'.format(self.source_name)
        if self.lineno > 0:
            msg += ' at line {0}'.format(self.lineno)
        return msg
    def __str__(self):
        return self.fmt_msg_with_location(self.msg)


class SourceFileNotFoundError(ParseError):
    '''
    Path does not name an existing file.
    '''
    def __init__(self, source_name):
        ParseError.__init__(self, 'File does not exist', 0, source_name)


class SourceFileUnreadableError(ParseError):
    '''
    File exists but cannot be read.
    '''
    def __init__(self, source_name, reason=None):
        ParseError.__init__(self, 'File cannot be read', 0, source_name)
        self.reason = reason
    def __str__(self):
        if self.reason is None:
            return self.fmt_msg_with_location(self.msg)
        return '{0}:\n  {1}'.format(self.fmt_msg_with_location(self.msg), self.reason)


class TabIndentationError(ParseError):
    '''
    Tab anywhere in the source.  Tabs are never valid indentation, so the
    whole source is rejected before any line is processed.
    '''
    def __init__(self, source_name=None):
        ParseError.__init__(self, 'A YAML file cannot contain tabs as indentation', 0, source_name)


class UnexpectedCharacterError(ParseError):
    '''
    Line starts with a character outside the allowed set.
    '''
    def __init__(self, character, lineno, source_name=None):
        ParseError.__init__(self, 'Unexpected character "{0}"'.format(character), lineno, source_name)
        self.character = character


class UnexpectedIndentationError(ParseError):
    '''
    Error in relative indentation of a block key
    '''
    def __init__(self, lineno, source_name=None):
        ParseError.__init__(self, 'Unexpected indentation', lineno, source_name)


class ListItemIndentationError(ParseError):
    '''
    List item is not exactly one level deeper than its owner.
    '''
    def __init__(self, lineno, source_name=None):
        ParseError.__init__(self, 'Invalid list item indent', lineno, source_name)


class MissingClosingQuoteError(ParseError):
    def __init__(self, lineno, source_name=None):
        ParseError.__init__(self, 'Missing closing quote', lineno, source_name)


class MissingClosingBracketError(ParseError):
    def __init__(self, lineno, source_name=None):
        ParseError.__init__(self, 'Missing closing bracket', lineno, source_name)
