"""
# Lossless conversion between path bytes and path text.

# Bytes are decoded as UTF-8. Any byte that is not part of a well-formed sequence
# is mapped to a code point in the escape band, `U+EF80` through `U+EFFF`, and
# encoding maps those code points back to the original byte. Well-formed
# sequences that would decode *into* the band are escaped byte by byte so that
# decoded text never contains a band code point that did not come from an escape.

# [ Elements ]
# /band/
	# The offset added to a raw byte to form its escape code point.
# /error_handler/
	# The name of the registered &codecs error handler performing the escapes.
"""
import re
import codecs
import logging

from .types import Text

logger = logging.getLogger(__name__)

band = 0xEF00
error_handler = 'filepaths.escape'

# Runs of escaped bytes in text.
_escapes = re.compile('([\uef80-\uefff]+)')
# UTF-8 spelling of U+EF80 through U+EFFF.
_band_sequence = re.compile(b'\xee[\xbe\xbf][\x80-\xbf]')

def escape(data:bytes) -> str:
	"""
	# Map every byte in &data into the escape band.
	"""
	return ''.join(chr(band + x) for x in data)

def unescape(string:str) -> bytes:
	"""
	# Inverse of &escape; every character of &string must be in the band.
	"""
	return bytes(ord(x) - band for x in string)

def _escape_errors(error):
	if not isinstance(error, UnicodeDecodeError):
		raise error
	return (escape(error.object[error.start:error.end]), error.end)
codecs.register_error(error_handler, _escape_errors)

def escaped(string:str) -> bool:
	"""
	# Whether &string contains escaped bytes.
	"""
	return _escapes.search(string) is not None

def decode(data:bytes) -> Text:
	"""
	# Decode &data into a &Text instance.

	# The result is marked invalid when any byte had to be escaped.
	"""
	parts = []
	add = parts.append
	position = 0

	for match in _band_sequence.finditer(data):
		add(data[position:match.start()].decode('utf-8', error_handler))
		add(escape(match.group()))
		position = match.end()
	add(data[position:].decode('utf-8', error_handler))

	string = ''.join(parts)
	if escaped(string):
		logger.debug("escaped invalid UTF-8 in %d byte path", len(data))
		return Text(string, False)

	return Text(string, True)

def encode(string:str) -> bytes:
	"""
	# Encode &string back into bytes.

	# Escaped characters are restored to their raw byte and lone surrogates are
	# encoded as three byte sequences; the conversion cannot fail.
	"""
	if not escaped(string):
		return string.encode('utf-8', 'surrogatepass')

	parts = _escapes.split(string)
	# Odd indexes are the captured escape runs.
	for i in range(1, len(parts), 2):
		parts[i] = unescape(parts[i])
	for i in range(0, len(parts), 2):
		parts[i] = parts[i].encode('utf-8', 'surrogatepass')

	return b''.join(parts)
