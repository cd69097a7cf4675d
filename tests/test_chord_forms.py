import pytest

import music_theory.chord_forms


EXPECTED_NAMES = [
	"Basic",
	"Nondominant",
	"Major Triad",
	"Minor Triad",
	"Augmented Triad",
	"Diminished Triad",
	"Suspended Triad",
	"Omit Fifth",
	"Flat Fifth",
	"Add Sixth",
	"Augmented Sixth",
	"Omit Sixth",
	"Add Seventh",
	"Dominant Seventh",
	"Major Seventh",
	"Minor Seventh",
	"Diminished Seventh",
	"Half Diminished Seventh",
	"Diminished Major Seventh",
	"Augmented Major Seventh",
	"Augmented Minor Seventh",
	"Harmonic Seventh",
	"Omit Seventh",
	"Add Ninth",
	"Dominant Ninth",
	"Major Ninth",
	"Minor Ninth",
	"Sharp Ninth",
	"Omit Ninth",
	"Add Eleventh",
	"Dominant Eleventh",
	"Major Eleventh",
	"Minor Eleventh",
	"Omit Eleventh",
	"Add Thirteenth",
	"Dominant Thirteenth",
	"Major Thirteenth",
	"Minor Thirteenth",
]


def _fired (text: str) -> list:

	return [form.name for form in music_theory.chord_forms.CHORD_FORMS if form.matches(text)]


def test_names_in_registration_order () -> None:

	"""The listing follows registration order, which is also precedence."""

	assert music_theory.chord_forms.names() == EXPECTED_NAMES


def test_names_are_unique () -> None:

	"""No two chord forms share a name."""

	assert len(set(music_theory.chord_forms.names())) == len(EXPECTED_NAMES)


@pytest.mark.parametrize("text", ["", " ", "???", "ø°♭♯", "-" * 50, "9" * 100])
def test_triggers_never_raise (text: str) -> None:

	"""Every trigger is a total predicate over arbitrary text."""

	for form in music_theory.chord_forms.CHORD_FORMS:
		form.matches(text)


def test_only_basic_fires_on_empty_text () -> None:

	"""A bare root fires nothing but the always-on rule."""

	assert _fired("") == ["Basic"]


def test_documented_example_fires () -> None:

	"""``679`` is consumed digit by digit by three independent rules."""

	assert _fired("m nondominant -5 679") == [
		"Basic",
		"Nondominant",
		"Minor Triad",
		"Omit Fifth",
		"Add Sixth",
		"Add Seventh",
		"Add Ninth",
	]


def test_maj_is_not_minor () -> None:

	"""The ``m`` of ``maj`` is not read as a minor marker."""

	fired = _fired("maj7")

	assert "Major Triad" in fired
	assert "Major Seventh" in fired
	assert "Minor Triad" not in fired
	assert "Minor Seventh" not in fired


def test_dim7_is_not_minor_seventh () -> None:

	"""The ``m7`` inside ``dim7`` is not a minor seventh."""

	fired = _fired("dim7")

	assert "Diminished Seventh" in fired
	assert "Minor Seventh" not in fired


def test_eleven_and_thirteen_are_whole_numbers () -> None:

	"""``11`` fires eleventh rules only; ``113`` fires neither."""

	assert "Add Eleventh" in _fired("11")
	assert "Add Thirteenth" not in _fired("11")
	assert "Add Eleventh" not in _fired("113")
	assert "Add Thirteenth" not in _fired("113")


def test_leading_digit_is_dominant () -> None:

	"""A number straight after the root implies a dominant chord."""

	assert "Dominant Seventh" in _fired("7")
	assert "Dominant Seventh" not in _fired("m7")
	assert "Dominant Ninth" in _fired("dom9")


def test_omit_variants () -> None:

	"""Every omit spelling removes the fifth."""

	for text in ("-5", "omit5", "no5", "omit 5"):
		assert "Omit Fifth" in _fired(text), text


def test_flat_fifth_variants () -> None:

	"""Flat fifth spellings fire, but a dash means omit."""

	for text in ("b5", "♭5", "flat5"):
		assert "Flat Fifth" in _fired(text), text

	assert "Flat Fifth" not in _fired("-5")


def test_major_with_space_before_number () -> None:

	"""Whitespace between the major quality and its number still fires the major form."""

	assert "Major Seventh" in _fired("maj 7")
	assert "Major Seventh" in _fired("major 7")
	assert "Major Ninth" in _fired("major  9")
	assert "Major Eleventh" in _fired("maj 11")
	assert "Major Thirteenth" in _fired("maj 13")
	assert "Major Seventh" not in _fired("major 679")
