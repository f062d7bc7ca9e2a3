# -*- coding: utf-8 -*-
"""
#
# HOTP/TOTP password generator
#
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
#
"""

from libotpgen.algorithm import *
from libotpgen.counter import *
from libotpgen.exception import *
from libotpgen.factor import *
from libotpgen.truncate import *
from libotpgen.validate import *

import hmac
import time
from dataclasses import dataclass, field, replace

__all__ = [
	"Generator",
]

@dataclass(frozen=True)
class Generator:
	"""All of the parameters needed to generate a one-time password.

	factor: The moving factor. Counter() for HOTP or Timer() for TOTP.
	secret: The secret bytes shared between the client and server.
	        The generator keeps its own immutable copy.
	algorithm: The Algorithm() hash function.
	           A hash name string, such as "SHA256", is accepted, too.
	digits: The number of digits in the password. Can be 6 to 8.

	Raises a ConstructionError subclass, if the parameters
	don't describe a valid generator.
	Generators are immutable. Two generators are equal,
	if all of their parameters are equal.
	"""
	factor		: MovingFactor
	secret		: bytes = field(repr=False)
	algorithm	: Algorithm = Algorithm.SHA1
	digits		: int = 6

	def __post_init__(self):
		if not validFactor(self.factor):
			raise InvalidFactorError("Invalid moving factor: %r" % (self.factor,))
		if not validDigits(self.digits):
			raise InvalidDigitsError("Invalid number of digits: %r" % (self.digits,))
		if not isinstance(self.secret, (bytes, bytearray, memoryview)):
			raise ConstructionError("Invalid secret type: %s" % type(self.secret))
		algorithm = self.algorithm
		if isinstance(algorithm, str):
			try:
				algorithm = Algorithm.fromName(algorithm)
			except AlgorithmError as e:
				raise ConstructionError(str(e))
		if not isinstance(algorithm, Algorithm):
			raise ConstructionError("Invalid algorithm: %r" % (algorithm,))
		object.__setattr__(self, "secret", bytes(self.secret))
		object.__setattr__(self, "algorithm", algorithm)

	def passwordAt(self, timeInterval):
		"""Generate the password for the given point in time.
		timeInterval: The target time, as seconds since the Unix epoch.
		              Counter based generators ignore the time.
		Returns the password string of exactly 'digits' decimal digits.
		Raises InvalidTimeError or InvalidPeriodError.
		"""
		counter = counterAt(self.factor, timeInterval)
		return truncatedPassword(algorithm=self.algorithm,
					 secret=self.secret,
					 counter=counter,
					 digits=self.digits)

	def passwordNow(self, clock=time.time):
		"""Generate the password for the current time.
		clock: Callable returning the seconds since the Unix epoch.
		"""
		return self.passwordAt(clock())

	def successor(self):
		"""Get the generator for the password following
		the password generated by this generator.
		A counter based generator is advanced by one. The 64 bit counter
		wraps around to zero.
		A timer based generator advances with time. It is returned unchanged.
		"""
		factor = self.factor
		if isinstance(factor, Counter):
			nextFactor = Counter((factor.value + 1) & COUNTER_MAX)
			try:
				return replace(self, factor=nextFactor)
			except ConstructionError as e:
				# Any valid generator has a valid successor.
				raise AssertionError("Invalid successor: %s" % str(e)) from e
		if isinstance(factor, Timer):
			return self
		raise TypeError("Invalid moving factor type: %s" % type(factor))

	def secretMatches(self, other):
		"""Constant time comparison of the shared secret.
		other: Another Generator() or the secret bytes.
		"""
		if isinstance(other, Generator):
			other = other.secret
		return hmac.compare_digest(self.secret, bytes(other))
