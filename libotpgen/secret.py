# -*- coding: utf-8 -*-
"""
# Shared secret decoding
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.exception import SecretError

from base64 import b32decode
import binascii

__all__ = [
	"secretFromBase32",
	"secretFromHex",
]

def secretFromBase32(text):
	"""Decode a base32 encoded shared secret.
	Case, white space and missing '=' padding are tolerated.
	Returns the raw secret bytes.
	"""
	if not isinstance(text, str):
		raise SecretError("Invalid key.")
	text = "".join(text.split()).rstrip("=")
	text += "=" * (-len(text) % 8)
	try:
		return b32decode(text.encode("UTF-8"), casefold=True)
	except (binascii.Error, UnicodeError):
		raise SecretError("Invalid key.")

def secretFromHex(text):
	if not isinstance(text, str):
		raise SecretError("Invalid key.")
	try:
		return bytes.fromhex(text)
	except ValueError:
		raise SecretError("Invalid key.")
