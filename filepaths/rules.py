"""
# Path dialects.

# &Rules instances describe the grammar of a dialect: its separators, the
# syntax of its roots, the characters it reserves, and its search path
# delimiter. Parsing and rendering in &.syntax are driven entirely by
# these descriptors; &.algebra consults them for the dot components and
# root equivalence.

# [ Elements ]
# /posix/
	# Slash separated paths with a single leading slash as the root.
# /windows/
	# Backslash separated paths with drive, UNC, and bare roots.
"""
import re
import logging
from collections.abc import Iterable
from typing import Optional

from .types import Root, Violation

logger = logging.getLogger(__name__)

class Rules(object):
	"""
	# Dialect base class.

	# Instances carry no state; the grammar is defined by class attributes and
	# the root methods overridden by subclasses.

	# [ Properties ]
	# /name/
		# Identifier of the dialect.
	# /separator/
		# The separator used when rendering.
	# /separators/
		# All characters accepted as separators when parsing.
	# /delimiter/
		# The search path delimiter.
	# /search_default/
		# Whether empty search path entries designate the current directory.
		# When &False, empty entries are dropped.
	# /reserved/
		# Characters that make a component invalid.
	# /current/
		# The component referring to the containing directory.
	# /ascent/
		# The component referring to the parent directory.
	# /extension/
		# The character separating a filename from its extension.
	"""
	__slots__ = ()

	name:str = ''
	separator:str = '/'
	separators:str = '/'
	delimiter:str = ':'
	search_default:bool = True
	reserved:frozenset = frozenset()

	current:str = '.'
	ascent:str = '..'
	extension:str = '.'

	def __repr__(self):
		return f"{__name__}.{self.name}"

	def __reduce__(self):
		# Dialects are singletons; pickles refer to the module instance.
		return self.name

	def issep(self, character:str) -> bool:
		"""
		# Whether the single &character is accepted as a separator.
		"""
		return character != '' and character in self.separators

	def split(self, string:str) -> list[str]:
		"""
		# Split &string on any of the dialect's separators dropping empty segments.
		"""
		for alternate in self.separators:
			if alternate != self.separator:
				string = string.replace(alternate, self.separator)

		return [x for x in string.split(self.separator) if x]

	def split_root(self, string:str) -> tuple[Optional[Root], str]:
		"""
		# Separate the root designation from the leading portion of &string.
		"""
		raise NotImplementedError("dialect must implement root parsing")

	def render_root(self, root:Root) -> str:
		"""
		# Construct the spelling of &root; always ends with &separator.
		"""
		raise NotImplementedError("dialect must implement root rendering")

	def equivalent(self, former:Optional[Root], latter:Optional[Root]) -> bool:
		"""
		# Whether the two roots designate the same location in this dialect.
		"""
		if former is None or latter is None:
			return former is latter

		return self.render_root(former) == self.render_root(latter)

	def component_violations(self, component:str) -> Iterable[Violation]:
		if not component:
			yield Violation('empty', component, "components must not be empty")
			return

		for x in component:
			if x in self.reserved:
				yield Violation('reserved', component, f"contains reserved character {x!r}")
				return

	def root_violations(self, root:Root) -> Iterable[Violation]:
		return ()

class Posix(Rules):
	"""
	# POSIX paths: `/` separated, rooted by a leading `/`.
	"""
	__slots__ = ()

	name = 'posix'
	separator = '/'
	separators = '/'
	delimiter = ':'
	search_default = True
	reserved = frozenset('\x00/')

	_root = Root('posix')

	def split_root(self, string):
		if string[:1] == '/':
			return self._root, string[1:]

		return None, string

	def render_root(self, root):
		# All roots collapse into the single POSIX root.
		return '/'

class Windows(Rules):
	"""
	# Windows paths: `\\` separated with `/` accepted on input.

	# Roots are recognized with the longest prefix first: a UNC `\\\\server\\share`,
	# a drive `X:\\`, and finally a bare `\\` designating the root of the current drive.
	"""
	__slots__ = ()

	name = 'windows'
	separator = '\\'
	separators = '\\/'
	delimiter = ';'
	search_default = False
	reserved = frozenset([chr(x) for x in range(0x20)] + list('/\\?*:|"<>'))

	_bare = Root('bare')
	_unc = re.compile(r'[\\/]{2}([^\\/]+)[\\/]([^\\/]+)')

	def split_root(self, string):
		issep = self.issep

		if issep(string[:1]) and issep(string[1:2]):
			m = self._unc.match(string)
			if m is not None:
				server, share = m.groups()
				return Root('unc', server, share), string[m.end():]

			logger.debug("incomplete UNC prefix in %r; using the bare root", string)
			return self._bare, string[1:]

		if len(string) >= 3 and string[1] == ':' and issep(string[2]):
			letter = string[0]
			if letter.isascii() and letter.isalpha():
				return Root('drive', letter.upper()), string[3:]

		if issep(string[:1]):
			return self._bare, string[1:]

		return None, string

	def render_root(self, root):
		if root.type == 'drive':
			return root.label.upper() + ':\\'
		elif root.type == 'unc':
			return '\\\\' + root.label + '\\' + root.share + '\\'
		else:
			return '\\'

	def equivalent(self, former, latter):
		if former is None or latter is None:
			return former is latter

		return self.render_root(former).casefold() == self.render_root(latter).casefold()

	def root_violations(self, root):
		if root.type == 'drive':
			if not (len(root.label) == 1 and root.label.isascii() and root.label.isalpha()):
				yield Violation('root', root.label, "drive designation must be a single letter")
		elif root.type == 'unc':
			for x in (root.label, root.share):
				for v in self.component_violations(x):
					yield Violation('root', x, v.reason)

posix = Posix()
windows = Windows()
