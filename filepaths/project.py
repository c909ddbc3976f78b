#: Project name.
name = 'filepaths'
abstract = 'dialect aware filesystem path parsing, rendering, and manipulation'
icon = '🗂'

#: Version tuple: (major, minor, patch)
version_info = (0, 4, 0)

#: The version string.
version = '.'.join(map(str, version_info))
