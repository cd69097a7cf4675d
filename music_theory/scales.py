"""Scale resolution.

A scale name is a root plus an optional mode keyword (``"C aug"``,
``"A harmonic minor"``, ``"D dorian"``). The keyword selects one registered
mode (see ``music_theory.scale_modes.select_mode``), whose intervals are then
laid out from the root as degrees 1..N.
"""

import dataclasses
import types
import typing

import music_theory.names
import music_theory.pitch_class
import music_theory.rules
import music_theory.scale_modes
import music_theory.yaml_output


@dataclasses.dataclass(frozen=True)
class Scale:

	"""
	A resolved scale: root, selected mode name and tones keyed by degree.
	"""

	root: music_theory.pitch_class.PitchClass
	mode: str
	tones: typing.Mapping[int, music_theory.pitch_class.PitchClass]


	@classmethod
	def of (cls, name: str) -> "Scale":

		"""Resolve a scale name.

		Text that names no registered mode resolves to "Default (Major)".

		Parameters:
			name: Scale name, e.g. ``"C"``, ``"C aug"``, ``"Bb melodic minor descend"``.

		Raises:
			InvalidRootError: If the name does not begin with a note letter.

		Example:
			```python
			Scale.of("C aug").names()
			# {1: "C", 2: "D#", 3: "E", 4: "G", 5: "G#", 6: "B"}
			```
		"""

		parsed = music_theory.names.tokenize(name)
		mode = music_theory.scale_modes.select_mode(parsed.text)

		return cls._build(parsed.root, mode)


	@classmethod
	def of_mode (cls, root_name: str, mode_name: str) -> "Scale":

		"""Build a scale from a root note and an exact registered mode name.

		Raises:
			InvalidRootError: If ``root_name`` is not a note name.
			UnknownModeError: If ``mode_name`` is not registered.

		Example:
			```python
			Scale.of_mode("D", "Dorian").names()
			# {1: "D", 2: "E", 3: "F", 4: "G", 5: "A", 6: "B", 7: "C"}
			```
		"""

		root = music_theory.pitch_class.parse_note_name(root_name)
		mode = music_theory.scale_modes.mode_named(mode_name)

		return cls._build(root, mode)


	@classmethod
	def _build (cls, root: music_theory.pitch_class.PitchClass, mode: music_theory.scale_modes.ScaleMode) -> "Scale":

		tones = music_theory.rules.apply_rules([mode.rule], root)

		return cls(root=root, mode=mode.name, tones=types.MappingProxyType(dict(sorted(tones.items()))))


	def names (self) -> typing.Dict[int, str]:

		"""
		Return the tones as ``{degree: note name}``.
		"""

		return {degree: pc.name for degree, pc in self.tones.items()}


	def pitch_classes (self) -> typing.List[int]:

		return [pc.value for pc in self.tones.values()]


	def to_dict (self) -> typing.Dict[str, typing.Any]:

		return {"root": self.root.name, "mode": self.mode, "tones": self.names()}


	def to_yaml (self) -> str:

		return music_theory.yaml_output.dump(self.to_dict())
