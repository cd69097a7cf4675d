"""Pitch classes and note-name spelling.

This module provides the 12-tone equal-temperament alphabet used by every
resolver in the package, and the `PitchClass` value type.

Module-level constants:
- `LETTER_TO_PC`: Maps natural note letters (``"C"`` … ``"B"``) to pitch classes (0-11)
- `ACCIDENTAL_OFFSETS`: Maps accidental symbols to a semitone offset
- `SHARP_NAMES` / `FLAT_NAMES`: Canonical spellings of the 12 pitch classes

Module-level helpers:
- `parse_root(text)`: Read the leading note name from a string and return the
  pitch class together with the unparsed remainder. Raises `InvalidRootError`
  when the text does not start with a note letter.
- `parse_note_name(name)`: Like `parse_root`, but the whole string must be a note name.
- `semitones_from_c(name)`: Unwrapped offset of a note name from C, for octave arithmetic.
- `transpose(pc, semitones)`: Modulo-12 transposition, keeping the spelling.
"""

import dataclasses
import typing


LETTER_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"D": 2,
	"E": 4,
	"F": 5,
	"G": 7,
	"A": 9,
	"B": 11,
}

ACCIDENTAL_OFFSETS: typing.Dict[str, int] = {
	"#": 1,
	"♯": 1,
	"b": -1,
	"♭": -1,
}

FLAT_ACCIDENTALS = frozenset(("b", "♭"))

SHARP_NAMES: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]

FLAT_NAMES: typing.List[str] = [
	"C",
	"Db",
	"D",
	"Eb",
	"E",
	"F",
	"Gb",
	"G",
	"Ab",
	"A",
	"Bb",
	"B",
]


class InvalidRootError (ValueError):

	"""Raised when a name does not begin with a recognisable note letter."""

	pass


@dataclasses.dataclass(frozen=True)
class PitchClass:

	"""
	One of the 12 equal-tempered tones, independent of octave.

	Two pitch classes compare equal when they sound the same, so ``C#`` and
	``Db`` are equal; ``flat`` only changes how the value is spelled.
	"""

	value: int
	flat: bool = dataclasses.field(default=False, compare=False)


	def __post_init__ (self) -> None:

		if not 0 <= self.value <= 11:
			raise ValueError(f"Pitch class out of range: {self.value}")


	@property
	def name (self) -> str:

		"""
		Return the canonical spelling, sharps unless flat spelling is preferred.
		"""

		return FLAT_NAMES[self.value] if self.flat else SHARP_NAMES[self.value]


	def transpose (self, semitones: int) -> "PitchClass":

		"""
		Return the pitch class ``semitones`` above this one, keeping the spelling.
		"""

		return transpose(self, semitones)


	def spelled (self, flat: bool) -> "PitchClass":

		"""
		Return the same pitch class with the given spelling preference.
		"""

		return PitchClass(self.value, flat=flat)


	def __str__ (self) -> str:

		return self.name


def transpose (pc: PitchClass, semitones: int) -> PitchClass:

	"""Transpose a pitch class by a number of semitones.

	Parameters:
		pc: Pitch class to move.
		semitones: Offset in semitones; negative values move down.

	Returns:
		A new ``PitchClass`` with ``(pc + semitones) mod 12``, spelled like ``pc``.

	Example:
		```python
		transpose(PitchClass(0), 4)    # E
		transpose(PitchClass(1, flat=True), -3)  # Bb
		```
	"""

	return PitchClass((pc.value + semitones) % 12, flat=pc.flat)


def parse_root (text: str) -> typing.Tuple[PitchClass, str]:

	"""Read the leading note name from ``text``.

	The longest valid prefix is consumed: one letter A-G (upper or lower
	case) followed by at most one accidental (``#``, ``♯``, ``b`` or ``♭``).
	A lowercase ``b`` right after the letter is always read as a flat.

	Parameters:
		text: A chord, scale or key name such as ``"Dbm7"`` or ``"C aug"``.

	Returns:
		A ``(PitchClass, remainder)`` tuple. The pitch class is flat-spelled
		when the root was written with a flat.

	Raises:
		InvalidRootError: If the text does not begin with a note letter.

	Example:
		```python
		parse_root("C#m")    # (PitchClass(1), "m")
		parse_root("Db")     # (PitchClass(1, flat=True), "")
		```
	"""

	stripped = text.lstrip()

	if not stripped or stripped[0].upper() not in LETTER_TO_PC:
		raise InvalidRootError(
			f"Invalid root in {text!r}. Expected a note letter A-G, e.g. 'C', 'F#', 'Bb'."
		)

	value = LETTER_TO_PC[stripped[0].upper()]
	accidental = stripped[1:2]

	if accidental in ACCIDENTAL_OFFSETS:
		pc = PitchClass((value + ACCIDENTAL_OFFSETS[accidental]) % 12, flat=accidental in FLAT_ACCIDENTALS)
		return pc, stripped[2:]

	return PitchClass(value), stripped[1:]


def parse_note_name (note_name: str) -> PitchClass:

	"""Parse a bare note name such as ``"F#"`` or ``"Bb"``.

	Unlike ``parse_root`` the whole string must be consumed.

	Raises:
		InvalidRootError: If ``note_name`` is not exactly a note name.

	Example:
		```python
		parse_note_name("F#").value  # → 6
		parse_note_name("Bb").name   # → "Bb"
		```
	"""

	pc, remainder = parse_root(note_name)

	if remainder.strip():
		raise InvalidRootError(f"Unknown note name: {note_name!r}")

	return pc


def semitones_from_c (note_name: str) -> int:

	"""Return how many semitones a bare note name lies above C of its own octave.

	Unlike ``parse_note_name(...).value`` the result is not wrapped, so an
	accidental may cross the octave boundary: ``"Cb"`` is -1 and ``"B#"`` is 12.

	Raises:
		InvalidRootError: If ``note_name`` is not exactly a note name.
	"""

	parse_note_name(note_name)

	stripped = note_name.strip()

	return LETTER_TO_PC[stripped[0].upper()] + ACCIDENTAL_OFFSETS.get(stripped[1:2], 0)
