# -*- coding: utf-8 -*-
"""
# HOTP dynamic truncation (RFC 4226 section 5.3)
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.exception import GenerationError
from libotpgen.factor import COUNTER_MAX
from libotpgen.hmacbackend import HmacBackend

__all__ = [
	"counterBytes",
	"dynamicTruncate",
	"truncatedPassword",
]

def counterBytes(counter):
	"""Encode the counter as 8 byte big endian message.
	"""
	if not (0 <= counter <= COUNTER_MAX):
		raise GenerationError("Invalid counter.")
	return counter.to_bytes(length=8, byteorder="big", signed=False)

def dynamicTruncate(digest):
	"""Extract the 31 bit binary code from an HMAC digest.
	"""
	offset = digest[-1] & 0xF
	hSlice = int.from_bytes(digest[offset:offset+4], byteorder="big", signed=False)
	return hSlice & 0x7FFFFFFF

def truncatedPassword(algorithm, secret, counter, digits):
	"""Calculate the HOTP token string.
	algorithm: The Algorithm() hash function.
	secret: The shared secret bytes.
	counter: The unsigned 64 bit counter integer.
	digits: The number of digits to return.
	Returns the password string, left padded with zeros.
	"""
	digest = HmacBackend.get().hmac(algorithm=algorithm,
					key=secret,
					message=counterBytes(counter))
	otp = dynamicTruncate(digest) % (10 ** digits)
	fmt = "%0" + str(digits) + "d"
	return fmt % otp
