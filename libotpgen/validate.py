# -*- coding: utf-8 -*-
"""
# Generator parameter validation
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.factor import *

import numbers

__all__ = [
	"DIGITS_MIN",
	"DIGITS_MAX",
	"validDigits",
	"validPeriod",
	"validTime",
	"validFactor",
]

# RFC 4226 5.3: "Implementations MUST extract a 6-digit code at a minimum
# and possibly 7 and 8-digit codes."
DIGITS_MIN = 6
DIGITS_MAX = 8

def _isNumber(value):
	return isinstance(value, numbers.Real) and not isinstance(value, bool)

def validDigits(digits):
	return (isinstance(digits, int) and
		not isinstance(digits, bool) and
		DIGITS_MIN <= digits <= DIGITS_MAX)

def validPeriod(period):
	# NaN compares False.
	return _isNumber(period) and period > 0

def validTime(timeInterval):
	return _isNumber(timeInterval) and timeInterval >= 0

def validFactor(factor):
	if isinstance(factor, Counter):
		return True
	if isinstance(factor, Timer):
		return validPeriod(factor.period)
	return False
