# -*- coding: utf-8 -*-
"""
# One-time password generator
# Copyright (c) 2011-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

import os
import sys

__all__ = [
	"str2bool",
	"envStr",
	"envBool",
	"debugPrint",
]

def str2bool(string, default=False):
	s = string.lower().strip()
	if not s:
		return default
	if s in ("true", "yes", "on", "1"):
		return True
	if s in ("false", "no", "off", "0"):
		return False
	try:
		return bool(int(s))
	except ValueError:
		return default

def envStr(name, default=""):
	"""Get the normalized (lower case, stripped) value
	of the environment variable 'name'.
	"""
	return os.getenv(name, default).lower().strip()

def envBool(name, default=False):
	return str2bool(os.getenv(name, ""), default)

def debugPrint(text):
	print("libotpgen: %s" % text, file=sys.stderr)
