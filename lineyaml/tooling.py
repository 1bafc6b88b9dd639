# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


import collections


class keydefaultdict(collections.defaultdict):
    '''
    Default dict that passes the missing key to the factory function and
    stores the result under that key.  Used for type-keyed dispatch tables,
    where the factory resolves a type the table has not seen yet.
    '''
    def __missing__(self, k):
        if self.default_factory is None:
            raise KeyError(k)
        v = self.default_factory(k)
        self[k] = v
        return v
