import pytest

import music_theory.names
import music_theory.pitch_class


def test_tokenize_documented_example () -> None:

	"""Root, minor marker and the untouched modifier text."""

	parsed = music_theory.names.tokenize("Cm nondominant -5 679")

	assert parsed.root.value == 0
	assert parsed.minor is True
	assert parsed.text == "m nondominant -5 679"


def test_tokenize_bare_root () -> None:

	"""A bare root leaves no modifier text."""

	parsed = music_theory.names.tokenize("C")

	assert parsed.root.value == 0
	assert parsed.minor is False
	assert parsed.text == ""


@pytest.mark.parametrize("name", ["Cm", "Cm7", "Cmin", "Cminor", "Cm 679"])
def test_minor_marker (name: str) -> None:

	"""Every spelling of the minor marker right after the root sets the flag."""

	assert music_theory.names.tokenize(name).minor is True


@pytest.mark.parametrize("name", ["Cmaj7", "CM7", "C", "C aug", "Cmajor", "C m"])
def test_not_minor (name: str) -> None:

	"""``maj`` is not a minor marker and the marker must follow the root directly."""

	assert music_theory.names.tokenize(name).minor is False


def test_uppercase_m_means_major () -> None:

	"""A standalone ``M`` is rewritten so lower-casing keeps it distinct from ``m``."""

	assert music_theory.names.tokenize("CM7").text == "maj7"
	assert music_theory.names.tokenize("C+M7").text == "+maj7"
	assert music_theory.names.tokenize("Cm7").text == "m7"


def test_text_is_lower_cased_and_stripped () -> None:

	"""Modifier text is normalized for case-insensitive matching."""

	assert music_theory.names.tokenize("Bb  Melodic Minor Descend ").text == "melodic minor descend"


def test_flat_root_kept () -> None:

	"""The flat spelling of the root survives tokenizing."""

	parsed = music_theory.names.tokenize("Dbm679-5")

	assert parsed.root.name == "Db"
	assert parsed.minor is True
	assert parsed.text == "m679-5"


def test_invalid_root () -> None:

	"""Text without a leading note letter is rejected."""

	with pytest.raises(music_theory.pitch_class.InvalidRootError):
		music_theory.names.tokenize("xyz")


@pytest.mark.parametrize("name, text", [
	("A MINOR", "minor"),
	("C MAJOR", "major"),
	("CMAJ7", "maj7"),
	("CM7", "maj7"),
	("C M", "maj"),
])
def test_upper_case_words_are_not_rewritten (name: str, text: str) -> None:

	"""Only an ``M`` with no letter on either side is rewritten to ``maj``."""

	assert music_theory.names.tokenize(name).text == text
