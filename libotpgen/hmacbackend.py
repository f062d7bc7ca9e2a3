# -*- coding: utf-8 -*-
"""
# Keyed-hash (HMAC) wrapper
# Copyright (c) 2023-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.algorithm import Algorithm
from libotpgen.exception import HmacError
from libotpgen.util import *

__all__ = [
	"HmacBackend",
]

class HmacBackend:
	"""Abstraction layer for the HMAC implementation.
	"""

	__singleton = None
	DEBUG = envBool("OTPGEN_DEBUG")

	@classmethod
	def get(cls):
		"""Get the HMAC singleton.
		"""
		if cls.__singleton is None:
			cls.__singleton = cls()
		return cls.__singleton

	def __init__(self):
		self.__cryptodome = None
		self.__hashlib = None

		cryptolib = envStr("OTPGEN_CRYPTOLIB")

		if cryptolib in ("", "cryptodome"):
			# Try to use Cryptodome
			try:
				import Cryptodome
				import Cryptodome.Hash.HMAC
				import Cryptodome.Hash.SHA1
				import Cryptodome.Hash.SHA256
				import Cryptodome.Hash.SHA512
				self.__cryptodome = Cryptodome
				if self.DEBUG:
					debugPrint("Using Cryptodome HMAC.")
				return
			except ImportError as e:
				pass

		if cryptolib == "hashlib":
			# Use the Python hmac module, but only if explicitly selected.
			import hashlib
			import hmac
			self.__hashlib = (hmac, hashlib)
			if self.DEBUG:
				debugPrint("Using hashlib HMAC.")
			return

		msg = "Python module import error."
		if cryptolib == "":
			msg += "\n'Cryptodome' (pycryptodomex) is not installed."
		else:
			msg += "\n'OTPGEN_CRYPTOLIB=%s' is not supported or not installed." % cryptolib
		raise HmacError(msg)

	def hmac(self, algorithm, key, message):
		"""Calculate the keyed hash of a message.
		algorithm: The Algorithm() hash function.
		key: The key bytes.
		message: The message bytes.
		Returns the digest bytes.
		"""

		# Check parameters.
		if not isinstance(algorithm, Algorithm):
			raise HmacError("HMAC: Invalid hash algorithm.")
		if not isinstance(key, (bytes, bytearray)):
			raise HmacError("HMAC: Invalid key.")
		if not isinstance(message, (bytes, bytearray)):
			raise HmacError("HMAC: Invalid message.")

		digest = None
		try:
			if self.__cryptodome is not None:
				# Use Cryptodome
				Hash = self.__cryptodome.Hash
				digestmod = {
					Algorithm.SHA1	: Hash.SHA1,
					Algorithm.SHA256	: Hash.SHA256,
					Algorithm.SHA512	: Hash.SHA512,
				}[algorithm]
				h = Hash.HMAC.new(key=bytes(key),
						  msg=bytes(message),
						  digestmod=digestmod)
				digest = h.digest()
			elif self.__hashlib is not None:
				# Use hashlib
				hmac, hashlib = self.__hashlib
				digestmod = {
					Algorithm.SHA1	: hashlib.sha1,
					Algorithm.SHA256	: hashlib.sha256,
					Algorithm.SHA512	: hashlib.sha512,
				}[algorithm]
				digest = hmac.new(bytes(key), bytes(message), digestmod).digest()
		except Exception as e:
			raise HmacError("HMAC error: %s: %s" % (type(e), str(e)))
		if digest is None:
			raise HmacError("HMAC not implemented.")
		if len(digest) != algorithm.digestSize:
			raise HmacError("HMAC: Invalid digest length.")
		return digest

	@classmethod
	def quickSelfTest(cls):
		"""Run a quick algorithm self test.
		"""
		inst = cls.get()
		h = inst.hmac(algorithm=Algorithm.SHA1,
			      key=b"12345678901234567890",
			      message=bytes(8))
		if h != bytes.fromhex("cc93cf18508d94934c64b65d8ba7667fb7cde4b0"):
			raise HmacError("HMAC: Quick self test failed.")
		if cls.DEBUG:
			debugPrint("HMAC quick self test passed.")
