"""Key resolution.

A key is a root and a mode, Major or Minor, together with its relative key:
the key of the opposite mode that shares its pitch set. The relative of a
major key is a minor third below; the relative of a minor key is a minor
third above. A relative key carries no relative of its own.

Natural roots are spelled by key signature, so G minor has a relative of
Bb major rather than A# major. A root written with an accidental keeps that
spelling (``"Db"`` stays flat, ``"C#"`` stays sharp).
"""

import dataclasses
import typing

import music_theory.names
import music_theory.pitch_class
import music_theory.scale_modes
import music_theory.yaml_output


MAJOR = "Major"
MINOR = "Minor"

# Major-key tonics whose signatures use flats: F, Bb, Eb, Ab, Db, Gb.
FLAT_MAJOR_TONICS = frozenset((5, 10, 3, 8, 1, 6))

NATURAL_PCS = frozenset(music_theory.pitch_class.LETTER_TO_PC.values())


@dataclasses.dataclass(frozen=True)
class Key:

	"""
	A resolved key: root, mode name and (for the top-level key only) its relative key.
	"""

	root: music_theory.pitch_class.PitchClass
	mode: str
	relative: typing.Optional["Key"] = None


	@classmethod
	def of (cls, name: str) -> "Key":

		"""Resolve a key name.

		The key is Minor when the root carries a minor marker (``"Am"``) or the
		text selects a minor scale mode (``"A minor"``, ``"A harmonic minor"``);
		otherwise it is Major.

		Raises:
			InvalidRootError: If the name does not begin with a note letter.

		Example:
			```python
			key = Key.of("Db")
			key.root.name            # "Db"
			key.mode                 # "Major"
			key.relative.root.name   # "Bb"
			key.relative.mode        # "Minor"
			```
		"""

		parsed = music_theory.names.tokenize(name)
		minor = parsed.minor or music_theory.scale_modes.select_mode(parsed.text).minor
		mode = MINOR if minor else MAJOR

		root = parsed.root.spelled(_prefers_flats(parsed.root, minor))

		return cls(root=root, mode=mode, relative=relative_of(root, mode))


	def to_dict (self) -> typing.Dict[str, typing.Any]:

		data: typing.Dict[str, typing.Any] = {"root": self.root.name, "mode": self.mode}

		if self.relative is not None:
			data["relative"] = self.relative.to_dict()

		return data


	def to_yaml (self) -> str:

		return music_theory.yaml_output.dump(self.to_dict())


def relative_of (root: music_theory.pitch_class.PitchClass, mode: str) -> Key:

	"""Return the relative key of ``root``/``mode``.

	Parameters:
		root: Root of the key.
		mode: ``"Major"`` or ``"Minor"``.

	Returns:
		A ``Key`` in the opposite mode, a minor third away, with no relative.

	Example:
		```python
		relative_of(PitchClass(0), "Major")   # A Minor
		relative_of(PitchClass(9), "Minor")   # C Major
		```
	"""

	if mode == MAJOR:
		return Key(root=root.transpose(-3), mode=MINOR)

	if mode == MINOR:
		return Key(root=root.transpose(3), mode=MAJOR)

	raise ValueError(f"Unknown key mode: {mode!r}. Expected {MAJOR!r} or {MINOR!r}.")


def _prefers_flats (root: music_theory.pitch_class.PitchClass, minor: bool) -> bool:

	if root.flat:
		return True

	if root.value not in NATURAL_PCS:
		return False

	major_tonic = (root.value + 3) % 12 if minor else root.value

	return major_tonic in FLAT_MAJOR_TONICS
