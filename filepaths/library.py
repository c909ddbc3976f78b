"""
# Public interface for parsing and manipulating paths.

# Paths are parsed with a dialect and manipulated independently of their spelling:

#!/pl/python
	from filepaths import library as lib
	p = lib.parse(lib.posix, b'/usr/lib/libc.so.6')
	lib.render(lib.posix, lib.directory(lib.posix, p)) == '/usr/lib/'

# The dialect is always given explicitly; there is no implied host dialect.

# [ Dialects ]
	# - &posix
	# - &windows

# [ Conversion ]
	# - &parse
	# - &render
	# - &decode
	# - &encode
	# - &from_text
	# - &to_text

# [ Validity ]
	# - &violations
	# - &valid
	# - &require
"""
from .types import Root, Path, Text, Violation, empty
from .rules import Rules, Posix, Windows, posix, windows
from .syntax import InvalidPath
from .syntax import parse, render, decode, encode, from_text, to_text
from .syntax import violations, valid, require
from .algebra import (
	root, directory, parent, filename, basename, dirname,
	absolute, relative, null,
	append, concat, common_prefix, collapse,
	split_extension, extension, extensions, has_extension,
	drop_extension, add_extension, replace_extension,
	split_directories, strip_prefix,
)
from .search import split_search_path
