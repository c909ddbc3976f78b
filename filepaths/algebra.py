"""
# Path algebra.

# Pure functions deriving new &Path instances from existing ones. Every function
# takes the dialect as its first parameter; the dialect supplies the dot
# components, the extension separator, and root equivalence.

# Relative directory results are anchored with the current directory
# component so that `directory(posix, "foo")` is `./` rather than the
# empty path.
"""
from collections.abc import Iterable, Sequence
from typing import Optional

from .tools import consistency
from .types import Path, Root, empty
from .rules import Rules

def _container(rules:Rules, root:Optional[Root], points:Sequence[str]) -> Path:
	# Directory-shaped path anchored at the current directory when relative.
	points = tuple(points)
	if root is None:
		if not points or points[0] not in (rules.current, rules.ascent):
			points = (rules.current,) + points

	return Path(root, points, True)

def _dot(rules:Rules, component:str) -> bool:
	return component == rules.current or component == rules.ascent

def root(rules:Rules, path:Path) -> Path:
	"""
	# The root of &path as a path with no components.
	"""
	if path.root is None:
		return empty

	return Path(path.root, (), True)

def directory(rules:Rules, path:Path) -> Path:
	"""
	# The directory containing the file identified by &path, or &path itself
	# when it is directory-shaped.
	"""
	if path.directory:
		points = path.components
	else:
		points = path.components[:-1]

	return _container(rules, path.root, points)

def parent(rules:Rules, path:Path) -> Path:
	"""
	# The directory containing the final component of &path.

	# The parent of a root is the root and the parent of the current or
	# parent directory reference is the current directory.
	"""
	return _container(rules, path.root, path.components[:-1])

def filename(rules:Rules, path:Path) -> Path:
	"""
	# The final component of &path as a relative path.
	# Empty when &path is directory-shaped.
	"""
	if path.directory or not path.components:
		return empty

	return Path(None, path.components[-1:], False)

def basename(rules:Rules, path:Path) -> Path:
	"""
	# The &filename of &path without its extension.
	"""
	return split_extension(rules, filename(rules, path))[0]

def dirname(rules:Rules, path:Path) -> Path:
	"""
	# The name of the directory containing the file identified by &path.
	"""
	points = directory(rules, path).components
	if not points or _dot(rules, points[-1]):
		return empty

	return Path(None, points[-1:], True)

def absolute(rules:Rules, path:Path) -> bool:
	return path.absolute

def relative(rules:Rules, path:Path) -> bool:
	return path.relative

def null(rules:Rules, path:Path) -> bool:
	return path == empty

def append(rules:Rules, former:Path, latter:Path) -> Path:
	"""
	# Join &latter onto &former.

	# An absolute &latter replaces &former entirely, and joining the empty path
	# makes &former directory-shaped.
	"""
	if latter.root is not None or former == empty:
		return latter

	if not latter.components:
		return Path(former.root, former.components, True)

	return Path(former.root, former.components + latter.components, latter.directory)

def concat(rules:Rules, paths:Iterable[Path]) -> Path:
	"""
	# Join all the &paths from left to right.
	"""
	r = empty
	for x in paths:
		r = append(rules, r, x)
	return r

def common_prefix(rules:Rules, paths:Sequence[Path]) -> Path:
	"""
	# The longest path leading all of the given &paths.

	# Directory components are compared literally. When all the paths share
	# their directories and have a filename, the leading dot-separated parts
	# of the filenames that are shared are retained.
	"""
	paths = list(paths)
	if not paths:
		return empty

	first = paths[0]
	for x in paths[1:]:
		if not rules.equivalent(first.root, x.root):
			return empty

	dirs = [x.components if x.directory else x.components[:-1] for x in paths]
	files = [None if (x.directory or not x.components) else x.components[-1] for x in paths]

	shared = dirs[0][:consistency(*dirs)]
	if all(len(x) == len(shared) for x in dirs) and None not in files:
		parts = [x.split(rules.extension) for x in files]
		n = consistency(*parts)
		name = rules.extension.join(parts[0][:n])
		if name and not _dot(rules, name):
			return Path(first.root, shared + (name,), False)

	if first.root is None and not shared:
		return empty

	return Path(first.root, shared, True)

def split_extension(rules:Rules, path:Path) -> tuple[Path, Optional[str]]:
	"""
	# Separate the extension from the filename of &path.

	# A leading `.` does not start an extension and directory-shaped paths
	# have no extension.
	"""
	if path.directory or not path.components:
		return (path, None)

	name = path.components[-1]
	i = name.rfind(rules.extension)
	if i <= 0:
		return (path, None)

	stem = name[:i]
	if _dot(rules, stem):
		return (path, None)

	return (Path(path.root, path.components[:-1] + (stem,), False), name[i+1:])

def extension(rules:Rules, path:Path) -> Optional[str]:
	return split_extension(rules, path)[1]

def extensions(rules:Rules, path:Path) -> list[str]:
	"""
	# All of the extensions of the filename of &path in order.
	"""
	r = []
	ext = extension(rules, path)
	while ext is not None:
		r.append(ext)
		path = drop_extension(rules, path)
		ext = extension(rules, path)
	r.reverse()
	return r

def has_extension(rules:Rules, path:Path, ext:str) -> bool:
	return extension(rules, path) == ext

def drop_extension(rules:Rules, path:Path) -> Path:
	return split_extension(rules, path)[0]

def add_extension(rules:Rules, path:Path, ext:str) -> Path:
	"""
	# Append &ext to the filename of &path.

	# When &path has no filename, a component consisting of the extension is added.
	"""
	suffix = rules.extension + ext
	if path.directory or not path.components:
		return Path(path.root, path.components + (suffix,), False)

	return Path(path.root, path.components[:-1] + (path.components[-1] + suffix,), False)

def replace_extension(rules:Rules, path:Path, ext:str) -> Path:
	return add_extension(rules, drop_extension(rules, path), ext)

def collapse(rules:Rules, path:Path) -> Path:
	"""
	# Remove `.` components and resolve `..` components against their predecessor.

	# A `..` is retained when there is no preceding component to remove, so
	# relative paths may keep leading ascents and absolute paths never
	# leave their root.
	"""
	points = []
	for x in path.components:
		if x == rules.current:
			continue
		elif x == rules.ascent and points and points[-1] != rules.ascent:
			del points[-1]
		else:
			points.append(x)

	if path.root is None and not points:
		if path.components:
			return _container(rules, None, ())
		return empty

	return Path(path.root, tuple(points), path.directory or not points)

def split_directories(rules:Rules, path:Path) -> list[Path]:
	"""
	# Separate &path into its root, its directories, and its filename.
	"""
	r = []
	if path.root is not None:
		r.append(root(rules, path))

	for i, x in enumerate(path.components):
		final = i == len(path.components) - 1
		r.append(Path(None, (x,), path.directory or not final))

	return r

def strip_prefix(rules:Rules, prefix:Path, path:Path) -> Optional[Path]:
	"""
	# The portion of &path following &prefix or &None if &prefix does not lead &path.

	# &prefix is interpreted as a directory regardless of its trailing separator.
	"""
	if not rules.equivalent(prefix.root, path.root):
		return None

	n = len(prefix.components)
	if path.components[:n] != prefix.components:
		return None

	remainder = path.components[n:]
	if not remainder:
		return empty

	return Path(None, remainder, path.directory)
