"""Scale modes.

Each mode is a named, ascending list of semitone offsets from the root plus a
keyword pattern. ``select_mode`` picks the mode a scale name refers to:

- every mode whose keyword occurs in the modifier text is a candidate,
- the candidate with the longest matched keyword wins, so
  ``"melodic minor descend"`` selects "Melodic Minor Descend" rather than
  "Minor",
- candidates with equally long matches go to the mode registered first,
- with no candidate, "Default (Major)" is selected.

The registration order of ``SCALE_MODES`` is also the listing order.
"""

import dataclasses
import re
import typing

import music_theory.rules


MINOR = r"(?:minor|min|m)(?![a-z])"
MAJOR = r"(?:major|maj)(?![a-z])"

MAJOR_INTERVALS = (0, 2, 4, 5, 7, 9, 11)
NATURAL_MINOR_INTERVALS = (0, 2, 3, 5, 7, 8, 10)


class UnknownModeError (ValueError):

	"""Raised when an explicitly named mode is not registered."""

	pass


@dataclasses.dataclass(frozen=True)
class ScaleMode:

	"""
	A named scale: its keyword pattern and its intervals above the root.
	"""

	name: str
	pattern: typing.Optional[str]
	intervals: typing.Tuple[int, ...]
	minor: bool = False


	def match_length (self, text: str) -> typing.Optional[int]:

		"""Return the length of the longest keyword match in ``text``.

		Returns ``None`` when the keyword does not occur. A mode with no
		pattern matches everything with length 0.
		"""

		if self.pattern is None:
			return 0

		spans = [m.end() - m.start() for m in re.finditer(self.pattern, text or "", re.IGNORECASE)]

		return max(spans) if spans else None


	@property
	def rule (self) -> music_theory.rules.Rule:

		"""
		Return this mode as a rule that replaces the tone set with its degrees.
		"""

		trigger = music_theory.rules.matches(self.pattern) if self.pattern is not None else music_theory.rules.always

		return music_theory.rules.Rule(self.name, trigger, music_theory.rules.replace(self.intervals))


def _keyword (pattern: str) -> str:

	return r"(?<![a-z])" + pattern


SCALE_MODES: typing.Tuple[ScaleMode, ...] = (
	ScaleMode("Default (Major)", None, MAJOR_INTERVALS),
	ScaleMode("Minor", _keyword(MINOR), NATURAL_MINOR_INTERVALS, minor=True),
	ScaleMode("Major", _keyword(MAJOR), MAJOR_INTERVALS),
	ScaleMode("Natural Minor", _keyword(r"natural\s*" + MINOR), NATURAL_MINOR_INTERVALS, minor=True),
	ScaleMode("Diminished", _keyword(r"(?:diminished|dim)(?![a-z])") + "|°", (0, 2, 3, 5, 6, 8, 9, 11)),
	ScaleMode("Augmented", _keyword(r"(?:augmented|aug)(?![a-z])") + r"|\+", (0, 3, 4, 7, 8, 11)),
	ScaleMode("Melodic Minor Ascend", _keyword(r"melodic\s*" + MINOR + r"(?:\s*(?:ascending|ascend|asc)(?![a-z]))?"), (0, 2, 3, 5, 7, 9, 11), minor=True),
	ScaleMode("Melodic Minor Descend", _keyword(r"melodic\s*" + MINOR + r"\s*(?:descending|descend|desc)(?![a-z])"), (0, 2, 3, 5, 7, 8, 10), minor=True),
	ScaleMode("Harmonic Minor", _keyword(r"harmonic\s*" + MINOR), (0, 2, 3, 5, 7, 8, 11), minor=True),
	ScaleMode("Ionian", _keyword(r"ionian(?![a-z])"), MAJOR_INTERVALS),
	ScaleMode("Dorian", _keyword(r"dorian(?![a-z])"), (0, 2, 3, 5, 7, 9, 10)),
	ScaleMode("Phrygian", _keyword(r"phrygian(?![a-z])"), (0, 1, 3, 5, 7, 8, 10)),
	ScaleMode("Lydian", _keyword(r"lydian(?![a-z])"), (0, 2, 4, 6, 7, 9, 11)),
	ScaleMode("Mixolydian", _keyword(r"mixolydian(?![a-z])"), (0, 2, 4, 5, 7, 9, 10)),
	ScaleMode("Aeolian", _keyword(r"aeolian(?![a-z])"), NATURAL_MINOR_INTERVALS, minor=True),
	ScaleMode("Locrian", _keyword(r"locrian(?![a-z])"), (0, 1, 3, 5, 6, 8, 10)),
)

DEFAULT_MODE = SCALE_MODES[0]


def select_mode (text: str) -> ScaleMode:

	"""Pick the mode named by a scale's modifier text.

	Parameters:
		text: Lower-cased modifier text, e.g. ``"melodic minor descend"``.

	Returns:
		The registered ``ScaleMode`` with the longest keyword match; the first
		registered on a tie; ``DEFAULT_MODE`` when nothing matches.

	Example:
		```python
		select_mode("aug").name                    # "Augmented"
		select_mode("harmonic minor").name         # "Harmonic Minor"
		select_mode("").name                       # "Default (Major)"
		select_mode("major minor").name            # "Minor" (tie, registered first)
		```
	"""

	best = DEFAULT_MODE
	best_length = 0

	for mode in SCALE_MODES:

		length = mode.match_length(text)

		if length is not None and length > best_length:
			best = mode
			best_length = length

	return best


def mode_named (name: str) -> ScaleMode:

	"""Look up a mode by its registered name (case-insensitive).

	Raises:
		UnknownModeError: If no mode has that name.
	"""

	for mode in SCALE_MODES:
		if mode.name.lower() == name.strip().lower():
			return mode

	available = ", ".join(names())
	raise UnknownModeError(f"Unknown mode: {name!r}. Available: {available}")


def names () -> typing.List[str]:

	"""
	Return the names of all scale modes in registration order.
	"""

	return [mode.name for mode in SCALE_MODES]
