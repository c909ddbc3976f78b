"""
# Dialect aware path manipulation.

# Paths are parsed from bytes or text into a structured &.types.Path and rendered
# back using a dialect: &.rules.posix or &.rules.windows. No operation in the
# package consults the filesystem or the environment.

# &.library is the intended entry point.
"""
