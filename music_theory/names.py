"""Name tokenizer.

Splits a free-form name such as ``"Cm nondominant -5 679"`` into its root
note, a minor-quality flag, and the modifier text that the rule chains match
against. The modifier text is not split any further: rules do their own
substring matching, so several rules can fire on the same characters
(``"679"`` fires three separate "Add" rules).
"""

import dataclasses
import re

import music_theory.pitch_class


# A lowercase m/min/minor directly after the root, not the start of a longer word ("maj").
MINOR_MARKER = re.compile(r"^(minor|min|m)(?![a-z])")

# A standalone uppercase M means major ("CM7"), as opposed to "Cm7" or the M of "MINOR".
MAJOR_MARKER = re.compile(r"(?<![A-Za-z])M(?![A-Za-z])")


@dataclasses.dataclass(frozen=True)
class ParsedName:

	"""
	A tokenized name: root pitch class, minor flag and normalized modifier text.
	"""

	root: music_theory.pitch_class.PitchClass
	minor: bool
	text: str


def tokenize (name: str) -> ParsedName:

	"""Split a name into root, minor flag and modifier text.

	The modifier text is lower-cased so rules can match it case-insensitively.
	Before lower-casing, a standalone ``M`` is rewritten to ``maj`` so that the
	major/minor distinction between ``CM7`` and ``Cm7`` survives.

	Parameters:
		name: Chord, scale or key name, e.g. ``"Cm nondominant -5 679"``.

	Returns:
		A ``ParsedName``.

	Raises:
		InvalidRootError: If the name does not begin with a note letter.

	Example:
		```python
		tokenize("Cm nondominant -5 679")
		# ParsedName(root=C, minor=True, text="m nondominant -5 679")

		tokenize("DbM7")
		# ParsedName(root=Db, minor=False, text="maj7")
		```
	"""

	root, remainder = music_theory.pitch_class.parse_root(name)

	minor = MINOR_MARKER.match(remainder) is not None
	text = MAJOR_MARKER.sub("maj", remainder).strip().lower()

	return ParsedName(root=root, minor=minor, text=text)
