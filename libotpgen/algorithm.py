# -*- coding: utf-8 -*-
"""
# HOTP/TOTP hash algorithm selection
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.exception import AlgorithmError

import enum

__all__ = [
	"Algorithm",
]

class Algorithm(enum.Enum):
	"""The cryptographic hash function used to calculate the HMAC
	from which a password is derived.
	The value is the digest size in bytes.
	"""
	SHA1	= 20
	SHA256	= 32
	SHA512	= 64

	@property
	def digestSize(self):
		return self.value

	@classmethod
	def fromName(cls, name):
		"""Get the Algorithm for a hash name string.
		Separators and case are ignored, so "sha-256", "SHA_256"
		and "Sha256" all select SHA256.
		Raises AlgorithmError, if the name is unknown.
		"""
		if isinstance(name, cls):
			return name
		if not isinstance(name, str):
			raise AlgorithmError("Invalid HMAC hash type.")
		name = name.replace("-", "")
		name = name.replace("_", "")
		name = name.replace(" ", "")
		name = name.upper().strip()
		try:
			return cls[name]
		except KeyError:
			raise AlgorithmError("Invalid HMAC hash type.")
