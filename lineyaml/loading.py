# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


from .parsing import Parser


# A parser is created for every call, so options such as `indent` are never
# shared between callers.


def parse(s, cls=None, **kwargs):
    '''
    Parse a Unicode or byte string into a list of tokens.
    '''
    if cls is None:
        return Parser(**kwargs).parse(s)
    return cls(**kwargs).parse(s)


def parse_file(path, cls=None, **kwargs):
    '''
    Parse a file into a list of tokens.
    '''
    if cls is None:
        return Parser(**kwargs).parse_file(path)
    return cls(**kwargs).parse_file(path)
