"""YAML rendering for resolved chords, scales, keys and rule listings."""

import typing

import yaml


def dump (data: typing.Any) -> str:

	"""
	Render data as block-style YAML, keeping insertion order.
	"""

	return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)


def dump_names (names: typing.Iterable[str]) -> str:

	"""Render a list of rule names as a YAML sequence.

	Example:
		```python
		dump_names(music_theory.scale_modes.names())
		# - Default (Major)
		# - Minor
		# ...
		```
	"""

	return dump(list(names))
