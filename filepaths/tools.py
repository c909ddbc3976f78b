"""
# Function and record tools used by the path modules.
"""
import functools
import itertools
import dataclasses

cachedcalls = functools.lru_cache
partial = functools.partial

# Immutable records; slots are only available on 3.10 and later.
try:
	dataclasses.dataclass(slots=True)
except TypeError:
	record = partial(dataclasses.dataclass, eq=True, frozen=True)
else:
	record = partial(dataclasses.dataclass, slots=True, eq=True, frozen=True)

def consistency(*iterables,
		takewhile=itertools.takewhile,
		zip=zip, sum=sum, len=len, set=set
	) -> int:
	"""
	# Return the level of consistency among the elements produced by the given &iterables.
	# The counting stops when an element is not equal to the others at the same index.

	# More commonly, the common prefix depth or length of all the given iterables.
	# Elements must be hashable; equality is indirectly performed by forming a set.
	"""
	return sum(
		takewhile(
			(1).__eq__,
			(len(set(x)) for x in zip(*iterables))
		)
	)
