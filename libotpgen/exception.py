# -*- coding: utf-8 -*-
"""
# One-time password generator
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

__all__ = [
	"OtpGenError",
	"ConstructionError",
	"InvalidDigitsError",
	"InvalidFactorError",
	"GenerationError",
	"InvalidTimeError",
	"InvalidPeriodError",
	"AlgorithmError",
	"SecretError",
	"HmacError",
]

class OtpGenError(Exception):
	"""Main libotpgen exception.
	"""

class ConstructionError(OtpGenError):
	"""The parameters do not describe a valid generator.
	No generator instance is created.
	"""

class InvalidDigitsError(ConstructionError):
	"""The number of digits is either too short to be secure,
	or too long to compute.
	"""

class InvalidFactorError(ConstructionError):
	"""The moving factor is invalid.
	"""

class GenerationError(OtpGenError):
	"""A password could not be generated.
	"""

class InvalidTimeError(GenerationError):
	"""The requested time is before the epoch date.
	"""

class InvalidPeriodError(GenerationError):
	"""The period is not a positive number of seconds.
	"""

class AlgorithmError(OtpGenError):
	"""Unknown hash algorithm.
	"""

class SecretError(OtpGenError):
	"""The shared secret can not be decoded.
	"""

class HmacError(OtpGenError):
	"""Keyed-hash backend failure.
	"""
