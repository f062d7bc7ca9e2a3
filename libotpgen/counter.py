# -*- coding: utf-8 -*-
"""
# HOTP/TOTP counter derivation
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.exception import *
from libotpgen.factor import *
from libotpgen.validate import *

import math

__all__ = [
	"counterAt",
]

def counterAt(factor, timeInterval):
	"""Calculate the counter value needed to generate the password
	for the target time.
	factor: The Counter() or Timer() moving factor.
	timeInterval: The target time, as seconds since the Unix epoch.
	              Ignored for Counter() factors.
	Returns the unsigned 64 bit counter integer.
	Raises InvalidTimeError or InvalidPeriodError.
	"""
	if isinstance(factor, Counter):
		return factor.value
	if isinstance(factor, Timer):
		if not validTime(timeInterval):
			raise InvalidTimeError("Invalid time: %r" % (timeInterval,))
		if not validPeriod(factor.period):
			raise InvalidPeriodError("Invalid period: %r" % (factor.period,))
		try:
			steps = timeInterval / factor.period
			finite = math.isfinite(steps)
		except OverflowError:
			# An integer operand does not fit into a float.
			if timeInterval < factor.period:
				return 0
			finite = False
		if not finite:
			raise InvalidTimeError("Invalid time: %r" % (timeInterval,))
		counter = math.floor(steps)
		if counter > COUNTER_MAX:
			raise InvalidTimeError("Time %r is out of the counter range." % (
					       timeInterval,))
		return counter
	raise TypeError("Invalid moving factor type: %s" % type(factor))
