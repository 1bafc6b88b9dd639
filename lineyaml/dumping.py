# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


from .rendering import Dumper




def dump(tokens, flags=0, cls=None, **kwargs):
    '''
    Dump tokens to a Unicode string.
    '''
    if cls is None:
        return Dumper(**kwargs).dump(tokens, flags)
    return cls(**kwargs).dump(tokens, flags)


def dump_file(path, tokens, flags=0, cls=None, **kwargs):
    '''
    Dump tokens to a file.  Returns the number of characters written.
    '''
    s = dump(tokens, flags, cls=cls, **kwargs)
    # Newlines are written untranslated, as chosen by the dumper
    with open(path, 'w', encoding='utf8', newline='') as f:
        return f.write(s)
