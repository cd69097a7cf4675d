"""Note frequencies in twelve-tone equal temperament.

Octaves follow scientific pitch notation, where C4 is middle C (MIDI note 60)
and A4 (MIDI note 69) sounds at the tuning frequency, 440 Hz by default:

	f = tuning * 2 ** ((n - 69) / 12)

where ``n`` is the MIDI note number of the note.
"""

import re
import typing

import music_theory.pitch_class


DEFAULT_TUNING = 440
DEFAULT_OCTAVE = 4

A4_MIDI_NOTE = 69

OCTAVE_SUFFIX = re.compile(r"^(.*?)(-?\d+)$")


class InvalidPitchInputError (ValueError):

	"""Raised for a malformed note name, octave or tuning frequency."""

	pass


def midi_note (pc: int, octave: int) -> int:

	"""Return the MIDI note number for a pitch class in an octave (C4 = 60).

	``pc`` may lie outside 0-11 when an accidental crosses the octave, e.g. -1 for ``Cb``.
	"""

	return 12 * (octave + 1) + pc


def frequency (note_number: int, tuning: float = DEFAULT_TUNING) -> float:

	"""Return the frequency in Hz of a MIDI note number.

	Example:
		```python
		frequency(69)          # 440.0
		frequency(60)          # 261.6255653005986
		frequency(69, 432)     # 432.0
		```
	"""

	return tuning * 2 ** ((note_number - A4_MIDI_NOTE) / 12)


def of_class_and_octave (name: str, octave: typing.Union[int, str], tuning: float = DEFAULT_TUNING) -> float:

	"""Return the frequency of a pitch class in a given octave.

	Parameters:
		name: Note name without octave, e.g. ``"A"``, ``"C#"``, ``"Bb"``.
		octave: Octave number (``int`` or numeric string); 4 is the octave of middle C.
		tuning: Frequency of A4 in Hz.

	Raises:
		InvalidPitchInputError: If any argument is malformed.

	Example:
		```python
		of_class_and_octave("A", 4)        # 440.0
		of_class_and_octave("C", "4")      # 261.6255653005986
		```
	"""

	_validate_tuning(tuning)

	try:
		semitones = music_theory.pitch_class.semitones_from_c(name)
	except music_theory.pitch_class.InvalidRootError as exc:
		raise InvalidPitchInputError(f"Invalid note name: {name!r}") from exc

	try:
		octave_number = int(octave)
	except (TypeError, ValueError) as exc:
		raise InvalidPitchInputError(f"Invalid octave: {octave!r}") from exc

	return frequency(midi_note(semitones, octave_number), tuning)


def of_note (note: str, tuning: float = DEFAULT_TUNING) -> float:

	"""Return the frequency of a note in international pitch notation.

	The octave suffix is optional and defaults to 4.

	Parameters:
		note: Note such as ``"A4"``, ``"C#5"``, ``"Eb-1"`` or ``"G"``.
		tuning: Frequency of A4 in Hz.

	Raises:
		InvalidPitchInputError: If the note or tuning is malformed.

	Example:
		```python
		of_note("A4")              # 440.0
		of_note("A5", tuning=432)  # 864.0
		```
	"""

	match = OCTAVE_SUFFIX.match(note.strip())

	if match:
		return of_class_and_octave(match.group(1), match.group(2), tuning)

	return of_class_and_octave(note, DEFAULT_OCTAVE, tuning)


def _validate_tuning (tuning: float) -> None:

	if isinstance(tuning, bool) or not isinstance(tuning, (int, float)) or tuning <= 0:
		raise InvalidPitchInputError(f"Invalid tuning: {tuning!r}. Expected a positive frequency in Hz.")
