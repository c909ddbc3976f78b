"""
# Parsing and rendering of path strings.

# &parse accepts either &bytes or &str; bytes are first converted with
# &.codec.decode so that invalid sequences survive inside the components.
# Rendering produces the canonical spelling of a dialect: roots normalized,
# repeated separators removed, and alternate separators replaced.

# Parsing never fails. Validity is a separate property reported by &violations.
"""
from collections.abc import Iterable
from typing import Union

from .tools import cachedcalls
from .types import Path, Text, Violation, empty
from .rules import Rules
from . import codec

class InvalidPath(Exception):
	"""
	# Exception raised by &require when a path is not valid in a dialect.

	# [ Properties ]
	# /path/
		# The path that was checked.
	# /rules/
		# The dialect that the path was checked against.
	# /violations/
		# The sequence of &Violation instances that were identified.
	"""

	def __init__(self, path:Path, rules:Rules, violations:Iterable[Violation]):
		self.path = path
		self.rules = rules
		self.violations = tuple(violations)

	def __str__(self):
		lines = [f"invalid {self.rules.name} path: {render(self.rules, self.path)!r}"]
		lines.extend("- " + str(v) for v in self.violations)
		return '\n'.join(lines)

@cachedcalls(256)
def _parse_string(rules:Rules, string:str) -> Path:
	if not string:
		return empty

	root, remainder = rules.split_root(string)
	components = tuple(rules.split(remainder))

	if not components:
		# Root only, or a string consisting only of separators.
		if root is None:
			return empty
		return Path(root, (), True)

	if components[-1] in (rules.current, rules.ascent):
		directory = True
	else:
		directory = rules.issep(string[-1:])

	return Path(root, components, directory)

def parse(rules:Rules, source:Union[bytes, str]) -> Path:
	"""
	# Construct the &Path described by &source.

	# [ Parameters ]
	# /rules/
		# The dialect to interpret &source with.
	# /source/
		# The path string; &bytes are decoded with &.codec.decode.
	"""
	if isinstance(source, str):
		return _parse_string(rules, source)
	elif isinstance(source, (bytes, bytearray, memoryview)):
		return _parse_string(rules, codec.decode(bytes(source)).string)
	else:
		raise TypeError(f"path source must be bytes or str, not {type(source).__name__!r}")

def render(rules:Rules, path:Path) -> str:
	"""
	# Construct the canonical spelling of &path.

	# The string may contain escaped bytes; use &to_text to know whether it does,
	# or &encode to restore the original bytes.
	"""
	if path.root is not None:
		prefix = rules.render_root(path.root)
	else:
		prefix = ''

	if not path.components:
		if path.directory and path.root is None:
			return rules.current + rules.separator
		return prefix

	body = rules.separator.join(path.components)
	if path.directory:
		body += rules.separator

	return prefix + body

def decode(rules:Rules, data:bytes) -> Path:
	"""
	# Parse &data as path bytes.
	"""
	return parse(rules, bytes(data))

def encode(rules:Rules, path:Path) -> bytes:
	"""
	# Render &path as bytes restoring any escaped bytes.
	"""
	return codec.encode(render(rules, path))

def from_text(rules:Rules, string:str) -> Path:
	"""
	# Parse &string as path text.

	# Escape band characters in &string are interpreted as raw bytes
	# by subsequent calls to &encode.
	"""
	return parse(rules, str(string))

def to_text(rules:Rules, path:Path) -> Text:
	"""
	# Render &path as a &Text instance identifying whether it contains escaped bytes.
	"""
	string = render(rules, path)
	return Text(string, not codec.escaped(string))

def violations(rules:Rules, path:Path) -> Iterable[Violation]:
	"""
	# Identify the reasons &path is not valid in the dialect described by &rules.
	"""
	if path.root is not None:
		yield from rules.root_violations(path.root)

	for x in path.components:
		yield from rules.component_violations(x)

def valid(rules:Rules, path:Path) -> bool:
	"""
	# Whether &path has no &violations.
	"""
	for x in violations(rules, path):
		return False
	return True

def require(rules:Rules, path:Path) -> Path:
	"""
	# Return &path if it is valid; raise &InvalidPath otherwise.
	"""
	v = list(violations(rules, path))
	if v:
		raise InvalidPath(path, rules, v)
	return path
