# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


from .version import __version__, __version_info__


from .loading import parse, parse_file
from .dumping import dump, dump_file
from .tokens import Token
from .parsing import Parser
from .rendering import Dumper, DUMP_EMPTY_LINES, DUMP_COMMENTS
from .erring import (LineYAMLException, ParseError,
                     InvalidConfigurationError)
