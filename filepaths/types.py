"""
# Path model records.

# A &Path is a dialect independent value: the dialect only participates when
# the path is parsed from or rendered to a string. All records are frozen and
# every operation in &.algebra constructs new instances.

# [ Elements ]
# /empty/
	# The unique empty path; no root, no components, not directory-shaped.
"""
from typing import Optional

from .tools import record

@record
class Root(object):
	"""
	# The leading designation of an absolute path.

	# [ Properties ]
	# /type/
		# One of `'posix'`, `'drive'`, `'bare'`, or `'unc'`.
	# /label/
		# The drive letter of a `'drive'` root or the server name of a `'unc'` root.
	# /share/
		# The share name of a `'unc'` root.
	"""
	type: str
	label: str = ''
	share: str = ''

@record
class Path(object):
	"""
	# Structured path.

	# [ Properties ]
	# /root/
		# The &Root of an absolute path; &None when the path is relative.
	# /components/
		# The segments between separators. `.` and `..` are ordinary components
		# until &.algebra.collapse is applied.
	# /directory/
		# Whether the path is directory-shaped; rendered as a trailing separator.
	"""
	root: Optional[Root]
	components: tuple[str, ...]
	directory: bool = False

	@property
	def absolute(self) -> bool:
		return self.root is not None

	@property
	def relative(self) -> bool:
		return self.root is None

	@property
	def null(self) -> bool:
		return self.root is None and not self.components and not self.directory

@record
class Text(object):
	"""
	# The text view of a path.

	# &valid is &False when &string holds escaped bytes that were not
	# valid UTF-8; the original bytes can still be recovered from &string.
	"""
	string: str
	valid: bool

	def __str__(self):
		return self.string

@record
class Violation(object):
	"""
	# A validity failure reported by &.syntax.violations.

	# [ Properties ]
	# /identifier/
		# Short code for the failure: `'reserved'`, `'empty'`, or `'root'`.
	# /subject/
		# The component or root label that failed the check.
	# /reason/
		# Human readable description.
	"""
	identifier: str
	subject: str
	reason: str

	def __str__(self):
		return f"{self.identifier}: {self.subject!r} {self.reason}"

empty = Path(None, (), False)
