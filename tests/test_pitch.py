import pytest

import music_theory.pitch


def test_a4_is_tuning () -> None:

	"""A4 sounds at the tuning frequency."""

	assert music_theory.pitch.of_note("A4") == 440.0
	assert music_theory.pitch.of_class_and_octave("A", 4) == 440.0


def test_octaves_double () -> None:

	"""Each octave doubles the frequency."""

	assert music_theory.pitch.of_note("A5") == 880.0
	assert music_theory.pitch.of_note("A3") == 220.0


def test_middle_c () -> None:

	"""C4 is middle C."""

	assert music_theory.pitch.of_note("C4") == pytest.approx(261.6256, abs=1e-4)


def test_accidentals () -> None:

	"""Enharmonic spellings give the same frequency."""

	assert music_theory.pitch.of_note("Bb3") == pytest.approx(233.0819, abs=1e-4)
	assert music_theory.pitch.of_note("A#3") == music_theory.pitch.of_note("Bb3")


def test_negative_octave () -> None:

	"""Octave -1 holds MIDI note 0."""

	assert music_theory.pitch.of_note("C-1") == pytest.approx(8.1758, abs=1e-4)


def test_default_octave () -> None:

	"""A note without an octave is in octave 4."""

	assert music_theory.pitch.of_note("A") == 440.0


def test_tuning () -> None:

	"""A custom tuning scales every note."""

	assert music_theory.pitch.of_note("A4", tuning=432) == 432.0
	assert music_theory.pitch.of_class_and_octave("A", "5", tuning=432) == 864.0


def test_midi_note () -> None:

	"""C4 is MIDI note 60 and A4 is 69."""

	assert music_theory.pitch.midi_note(0, 4) == 60
	assert music_theory.pitch.midi_note(9, 4) == 69


@pytest.mark.parametrize("note", ["", "H4", "4", "A#b4", "A4.5"])
def test_invalid_note (note: str) -> None:

	"""Malformed note names are rejected."""

	with pytest.raises(music_theory.pitch.InvalidPitchInputError):
		music_theory.pitch.of_note(note)


@pytest.mark.parametrize("octave", ["x", "", None, "4.5"])
def test_invalid_octave (octave: str) -> None:

	"""Non-integer octaves are rejected."""

	with pytest.raises(music_theory.pitch.InvalidPitchInputError):
		music_theory.pitch.of_class_and_octave("A", octave)


@pytest.mark.parametrize("tuning", [0, -440, "440", True])
def test_invalid_tuning (tuning: float) -> None:

	"""Tunings must be positive numbers."""

	with pytest.raises(music_theory.pitch.InvalidPitchInputError):
		music_theory.pitch.of_note("A4", tuning=tuning)


def test_errors_are_value_errors () -> None:

	"""Pitch errors are caught by the command line's ValueError handler."""

	assert issubclass(music_theory.pitch.InvalidPitchInputError, ValueError)


def test_accidentals_cross_the_octave () -> None:

	"""Cb4 is B3 and B#4 is C5: the octave belongs to the letter, not the sounding pitch class."""

	assert music_theory.pitch.of_class_and_octave("Cb", 4) == music_theory.pitch.of_note("B3")
	assert music_theory.pitch.of_note("Cb4") == pytest.approx(246.9417, abs=1e-4)
	assert music_theory.pitch.of_note("B#4") == music_theory.pitch.of_note("C5")
	assert music_theory.pitch.of_note("B#4") == pytest.approx(523.2511, abs=1e-4)
	assert music_theory.pitch.of_note("E#4") == music_theory.pitch.of_note("F4")
