"""
# Search path splitting.
"""
from typing import Union

from .types import Path
from .rules import Rules
from . import codec
from . import syntax

def split_search_path(rules:Rules, source:Union[bytes, str]) -> list[Path]:
	"""
	# Split a delimited list of paths such as the value of `PATH`.

	# Empty entries are either replaced with the current directory or
	# dropped according to &Rules.search_default.
	"""
	if isinstance(source, (bytes, bytearray, memoryview)):
		source = codec.decode(bytes(source)).string
	elif not isinstance(source, str):
		raise TypeError(f"search path must be bytes or str, not {type(source).__name__!r}")

	if not source:
		return []

	current = syntax.parse(rules, rules.current + rules.separator)
	r = []
	for entry in source.split(rules.delimiter):
		if entry:
			r.append(syntax.parse(rules, entry))
		elif rules.search_default:
			r.append(current)

	return r
