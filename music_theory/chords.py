"""Chord resolution.

A chord is a root plus a mapping of degrees to pitch classes, built by
running the chord rule chain against the chord's name:

```python
import music_theory.chords

chord = music_theory.chords.Chord.of("Cm nondominant -5 679")
chord.names()    # {3: "D#", 6: "A", 7: "A#", 9: "D"}
print(chord.to_yaml())
```
"""

import dataclasses
import types
import typing

import music_theory.chord_forms
import music_theory.names
import music_theory.pitch_class
import music_theory.rules
import music_theory.yaml_output


@dataclasses.dataclass(frozen=True)
class Chord:

	"""
	A resolved chord: root pitch class and its tones, keyed by degree.
	"""

	root: music_theory.pitch_class.PitchClass
	tones: typing.Mapping[int, music_theory.pitch_class.PitchClass]


	@classmethod
	def of (cls, name: str) -> "Chord":

		"""Resolve a chord name.

		Parameters:
			name: Chord name, e.g. ``"C"``, ``"Cm7"``, ``"D♭m679-5"``.

		Returns:
			A ``Chord`` whose tones are ordered by ascending degree.

		Raises:
			InvalidRootError: If the name does not begin with a note letter.

		Example:
			```python
			Chord.of("C").names()    # {1: "C", 3: "E", 5: "G"}
			Chord.of("Cm").names()   # {1: "C", 3: "D#", 5: "G"}
			```
		"""

		parsed = music_theory.names.tokenize(name)
		tones = music_theory.rules.run_chain(music_theory.chord_forms.CHORD_FORMS, parsed.root, parsed.text)

		return cls(root=parsed.root, tones=types.MappingProxyType(dict(sorted(tones.items()))))


	def names (self) -> typing.Dict[int, str]:

		"""
		Return the tones as ``{degree: note name}``.
		"""

		return {degree: pc.name for degree, pc in self.tones.items()}


	def pitch_classes (self) -> typing.List[int]:

		"""
		Return the tone pitch classes (0-11) in degree order.
		"""

		return [pc.value for pc in self.tones.values()]


	def to_dict (self) -> typing.Dict[str, typing.Any]:

		return {"root": self.root.name, "tones": self.names()}


	def to_yaml (self) -> str:

		return music_theory.yaml_output.dump(self.to_dict())
