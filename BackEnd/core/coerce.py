"""Lenient conversion of user-entered numbers.

Form fields hand us strings, None, or junk; none of it should ever raise.
"""

def to_int(value, default=0):
	"""Return value as an int, or default when it isn't numeric."""
	if isinstance(value, bool):
		return int(value)
	try:
		return int(float(value))
	except (TypeError, ValueError, OverflowError):
		return default

def to_float(value, default=0.0):
	if isinstance(value, bool):
		return float(value)
	try:
		result = float(value)
	except (TypeError, ValueError):
		return default
	# NaN never compares equal to itself
	if result != result or result in (float("inf"), float("-inf")):
		return default
	return result

def clamp(value, low, high):
	return max(low, min(high, value))

def non_negative_int(value, default=0):
	"""to_int, with negatives floored at 0."""
	return max(0, to_int(value, default))
