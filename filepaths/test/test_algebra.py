"""
# Check the path algebra in &.algebra using POSIX spellings unless noted.
"""
from .. import algebra as module
from .. import library as lib

posix = lib.posix
windows = lib.windows

def p(x):
	return lib.parse(posix, x)

def s(x):
	return lib.render(posix, x)

def w(x):
	return lib.parse(windows, x)

def ws(x):
	return lib.render(windows, x)

def test_null(test):
	test/module.null(posix, lib.empty) == True
	test/module.null(posix, p("./")) == False
	test/s(lib.empty) == ""
	test/ws(lib.empty) == ""

def test_root(test):
	t = lambda x, y: (test/s(module.root(posix, p(x))) == y)
	t("", "")
	t("/", "/")
	t("foo", "")
	t("/foo", "/")

	test/ws(module.root(windows, w("c:\\foo\\bar"))) == "C:\\"
	test/ws(module.root(windows, w("\\\\srv\\share\\a"))) == "\\\\srv\\share\\"

def test_directory(test):
	t = lambda x, y: (test/s(module.directory(posix, p(x))) == y)
	t("", "./")
	t("/", "/")
	t("/foo/bar", "/foo/")
	t("/foo/bar/", "/foo/bar/")
	t(".", "./")
	t("..", "../")
	t("../foo", "../")
	t("../foo/", "../foo/")
	t("foo", "./")
	t("foo/bar", "./foo/")

	test/ws(module.directory(windows, w("c:\\foo\\bar"))) == "C:\\foo\\"

def test_directory_reparse(test):
	"""
	# Directory results render to strings that parse back to the same value.
	"""
	for x in ["", "foo", "foo/bar", "/foo/bar", "../foo"]:
		d = module.directory(posix, p(x))
		test/p(s(d)) == d

def test_parent(test):
	t = lambda x, y: (test/s(module.parent(posix, p(x))) == y)
	t("", "./")
	t("/", "/")
	t("/foo/bar", "/foo/")
	t("/foo/bar/", "/foo/")
	t(".", "./")
	t("..", "./")
	t("../foo/bar", "../foo/")
	t("foo", "./")
	t("foo/bar", "./foo/")

def test_filename(test):
	t = lambda x, y: (test/s(module.filename(posix, p(x))) == y)
	t("", "")
	t("/", "")
	t("/foo/", "")
	t("/foo/bar", "bar")
	t("/foo/bar.txt", "bar.txt")

	test/module.filename(posix, p("/foo/bar")).relative == True

def test_basename(test):
	tp = lambda x, y: (test/s(module.basename(posix, p(x))) == y)
	tw = lambda x, y: (test/ws(module.basename(windows, w(x))) == y)

	tp("/foo/bar", "bar")
	tp("/foo/bar.txt", "bar")
	tp(".", "")
	tp("..", "")

	tw("c:\\foo\\bar", "bar")
	tw("c:\\foo\\bar.txt", "bar")
	tw(".", "")
	tw("..", "")

def test_dirname(test):
	t = lambda x, y: (test/s(module.dirname(posix, p(x))) == y)
	t("/foo/bar", "foo/")
	t("/foo/bar/", "bar/")
	t("foo", "")
	t("/", "")
	t("", "")
	t("../x", "")

def test_absolute_relative(test):
	for x in ["/", "/foo/bar"]:
		test/module.absolute(posix, p(x)) == True
		test/module.relative(posix, p(x)) == False

	for x in ["", "foo/bar"]:
		test/module.absolute(posix, p(x)) == False
		test/module.relative(posix, p(x)) == True

	test/module.absolute(windows, w("\\a")) == True
	test/module.absolute(windows, w("c:a")) == False

def test_append(test):
	t = lambda x, y, z: (test/s(module.append(posix, p(x), p(y))) == z)
	t("", "", "")
	t("", "b/", "b/")

	# Relative to a directory
	t("a/", "", "a/")
	t("a/", "b/", "a/b/")
	t("a/", "b.txt", "a/b.txt")
	t("a.txt", "b.txt", "a.txt/b.txt")
	t(".", "a", "./a")

	# Relative to a file
	t("a", "", "a/")
	t("a", "b/", "a/b/")
	t("a/b", "c", "a/b/c")

	# Absolute
	t("/a/", "", "/a/")
	t("/a/", "b", "/a/b")
	t("/a/", "b/", "/a/b/")

	# Second parameter is absolute
	t("/a/", "/", "/")
	t("/a/", "/b", "/b")
	t("/a/", "/b/", "/b/")

def test_append_absolute_identity(test):
	b = w("d:\\x\\y")
	test/(module.append(windows, w("c:\\a"), b) is b) == True

	b = p("/b/c")
	test/(module.append(posix, p("a/"), b) is b) == True

def test_append_windows(test):
	test/ws(module.append(windows, w("c:\\a"), w("b\\c"))) == "C:\\a\\b\\c"
	test/ws(module.append(windows, w("\\\\s\\h"), w("x"))) == "\\\\s\\h\\x"

def test_concat(test):
	test/s(module.concat(posix, [p("a"), p("b/"), p("c.txt")])) == "a/b/c.txt"
	test/s(module.concat(posix, [p("a"), p("/b"), p("c")])) == "/b/c"
	test/module.concat(posix, []) == lib.empty

def test_common_prefix(test):
	t = lambda xs, y: (test/s(module.common_prefix(posix, [p(x) for x in xs])) == y)
	t(["", ""], "")
	t(["/", ""], "")
	t(["/", "/"], "/")
	t(["foo/", "/foo/"], "")
	t(["/foo", "/foo/"], "/")
	t(["/foo/", "/foo/"], "/foo/")
	t(["/foo/bar/baz.txt.gz", "/foo/bar/baz.txt.gz.bar"], "/foo/bar/baz.txt.gz")
	t(["/foo/bar/baz.txt", "/foo/bar/bazz.txt"], "/foo/bar/")
	t(["a/b/c", "a/b/d", "a/x"], "a/")
	t(["a/b", "c/d"], "")
	t([], "")

def test_common_prefix_identity(test):
	for x in ["", "/", "./", "a", "a/b.c", "/a/b/", "../x.y.z"]:
		test/module.common_prefix(posix, [p(x), p(x)]) == p(x)

def test_common_prefix_windows_roots(test):
	"""
	# UNC names are compared without case.
	"""
	r = module.common_prefix(windows, [w("\\\\SRV\\Share\\a\\b"), w("\\\\srv\\share\\a\\c")])
	test/r.components == ('a',)
	test/r.directory == True

	r = module.common_prefix(windows, [w("c:\\a"), w("d:\\a")])
	test/r == lib.empty

def test_split_extension(test):
	def t(x, y):
		base, ext = module.split_extension(posix, p(x))
		test/(s(base), ext) == y

	t("", ("", None))
	t("foo", ("foo", None))
	t("foo.", ("foo", ""))
	t("foo.a", ("foo", "a"))
	t("foo.a/", ("foo.a/", None))
	t("foo.a/bar", ("foo.a/bar", None))
	t("foo.a/bar.b", ("foo.a/bar", "b"))
	t("foo.a/bar.b.c", ("foo.a/bar.b", "c"))
	t(".bashrc", (".bashrc", None))
	t("...", ("...", None))
	t("..", ("../", None))

def test_extensions(test):
	test/module.extension(posix, p("a.tar.gz")) == "gz"
	test/module.extension(posix, p("a")) == None
	test/module.extensions(posix, p("a.tar.gz")) == ["tar", "gz"]
	test/module.extensions(posix, p(".bashrc")) == []
	test/module.extensions(posix, p("dir.d/")) == []
	test/module.has_extension(posix, p("x.txt"), "txt") == True
	test/module.has_extension(posix, p("x.txt"), "md") == False

def test_extension_modification(test):
	test/s(module.drop_extension(posix, p("/a/b.tar.gz"))) == "/a/b.tar"
	test/s(module.add_extension(posix, p("/a/b.tar"), "gz")) == "/a/b.tar.gz"
	test/s(module.add_extension(posix, p("/a/"), "conf")) == "/a/.conf"
	test/s(module.replace_extension(posix, p("/a/b.txt"), "md")) == "/a/b.md"
	test/s(module.replace_extension(posix, p("b"), "md")) == "b.md"

def test_collapse(test):
	t = lambda x, y: (test/s(module.collapse(posix, p(x))) == y)
	t("./", "./")
	t("././", "./")
	t("../", "../")
	t(".././", "../")
	t("./../", "../")
	t("parent/foo/../bar", "parent/bar")
	t("parent/foo/..", "parent/")
	t("", "")
	t("a/..", "./")
	t("../../a/../b", "../../b")
	t("/..", "/../")
	t("/a/./b/../c/", "/a/c/")
	t("/a/..", "/")

def test_collapse_idempotent(test):
	for x in ["./", "a/../..", "../a/./b/..", "/x/../../y", "a/b/c/../../d", ""]:
		once = module.collapse(posix, p(x))
		test/module.collapse(posix, once) == once
		test/p(s(once)) == once

def test_split_directories(test):
	t = lambda x, y: (test/[s(z) for z in module.split_directories(posix, p(x))] == y)
	t("/foo/bar/baz.txt", ["/", "foo/", "bar/", "baz.txt"])
	t("foo/bar/", ["foo/", "bar/"])
	t("", [])
	t("/", ["/"])

def test_strip_prefix(test):
	r = module.strip_prefix(posix, p("/a/"), p("/a/b/c"))
	test/s(r) == "b/c"

	r = module.strip_prefix(posix, p("/a"), p("/a/b/"))
	test/s(r) == "b/"

	test/module.strip_prefix(posix, p("/a/"), p("/a/")) == lib.empty
	test/module.strip_prefix(posix, p("/a/"), p("/b/c")) == None
	test/module.strip_prefix(posix, p("a/"), p("/a/b")) == None

	r = module.strip_prefix(windows, w("C:\\x"), w("c:\\x\\y"))
	test/ws(r) == "y"

if __name__ == '__main__':
	import sys; from . import library as libtest
	libtest.execute(sys.modules[__name__])
