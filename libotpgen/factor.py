# -*- coding: utf-8 -*-
"""
# HOTP/TOTP moving factor
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.exception import InvalidFactorError

from dataclasses import dataclass
from typing import Union

__all__ = [
	"COUNTER_MAX",
	"Counter",
	"Timer",
	"MovingFactor",
]

COUNTER_MAX = (2 ** 64) - 1

@dataclass(frozen=True)
class Counter:
	"""HOTP moving factor.
	value: The 8-byte counter value. After each use of the password
	       generator, the counter should be incremented to stay in sync
	       with the server.
	"""
	value		: int = 0

	def __post_init__(self):
		if (not isinstance(self.value, int) or
		    isinstance(self.value, bool) or
		    not (0 <= self.value <= COUNTER_MAX)):
			raise InvalidFactorError("Invalid counter.")

@dataclass(frozen=True)
class Timer:
	"""TOTP moving factor.
	period: The time interval in seconds. It is used as a divisor
	        for the number of seconds since the Unix epoch.
	"""
	period		: float = 30.0

MovingFactor = Union[Counter, Timer]
