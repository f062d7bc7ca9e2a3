# -*- coding: utf-8 -*-

import sys
if sys.version_info[0:2] < (3, 7):
	raise Exception("libotpgen requires Python >=3.7")
del sys

import libotpgen.algorithm
import libotpgen.counter
import libotpgen.exception
import libotpgen.factor
import libotpgen.generator
import libotpgen.hmacbackend
import libotpgen.secret
import libotpgen.truncate
import libotpgen.util
import libotpgen.validate
import libotpgen.version

from libotpgen.algorithm import *
from libotpgen.exception import *
from libotpgen.factor import *
from libotpgen.generator import *
from libotpgen.secret import *
from libotpgen.version import *

__version__ = VERSION_STRING
