"""Rules and the rule-chain executor.

A rule pairs a *trigger* (a predicate over the lower-cased modifier text of a
name) with an *effect* (a pure function from the root and the current tone
set to the next tone set). A chain is an ordered tuple of rules. Running a
chain walks it once, in order, feeding the output of each matching rule into
the next, so later rules overwrite degrees written by earlier ones.

Tone sets are plain ``{degree: PitchClass}`` dictionaries while a chain runs.
Effects never mutate their input; each returns a fresh dictionary.

Effect builders:
- `set_degrees(intervals)`: write degrees at semitone offsets from the root
- `omit(*degrees)`: remove degrees
- `alter(degree, offset)`: move an existing degree by a fixed offset
- `replace(intervals)`: discard the set and write degrees 1..N (scale modes)
- `combine(*effects)`: apply several effects in order

Trigger builders:
- `always`: matches any text
- `matches(pattern)`: case-insensitive regex search; never raises
"""

import dataclasses
import logging
import re
import typing

import music_theory.pitch_class


logger = logging.getLogger(__name__)

PitchClass = music_theory.pitch_class.PitchClass
ToneSet = typing.Dict[int, PitchClass]
Trigger = typing.Callable[[str], bool]
Effect = typing.Callable[[PitchClass, ToneSet], ToneSet]

# Interval above the root that each degree takes when nothing has set it yet.
DEFAULT_INTERVALS: typing.Dict[int, int] = {
	1: 0,
	2: 2,
	3: 4,
	4: 5,
	5: 7,
	6: 9,
	7: 10,
	9: 14,
	11: 17,
	13: 21,
}


@dataclasses.dataclass(frozen=True)
class Rule:

	"""
	A named transformation, applied when its trigger matches the modifier text.
	"""

	name: str
	trigger: Trigger
	effect: Effect


	def matches (self, text: str) -> bool:

		"""
		Return True if this rule fires for the given modifier text.
		"""

		return self.trigger(text)


	def apply (self, root: PitchClass, tones: ToneSet) -> ToneSet:

		"""
		Return the tone set produced by this rule's effect.
		"""

		return self.effect(root, tones)


# ---------------------------------------------------------------------------
# Triggers
# ---------------------------------------------------------------------------

def always (text: str) -> bool:

	"""Match any modifier text, including the empty string."""

	return True


def matches (pattern: str) -> Trigger:

	"""Build a trigger that searches the text for a regular expression.

	Parameters:
		pattern: Regular expression, compiled case-insensitively.

	Returns:
		A predicate that returns True when ``pattern`` occurs anywhere in the text.
	"""

	compiled = re.compile(pattern, re.IGNORECASE)

	def trigger (text: str) -> bool:
		return compiled.search(text or "") is not None

	return trigger


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------

def set_degrees (intervals: typing.Mapping[int, int]) -> Effect:

	"""Build an effect that writes degrees at fixed semitone offsets from the root.

	Existing entries at the same degrees are overwritten.

	Example:
		```python
		major_triad = set_degrees({1: 0, 3: 4, 5: 7})
		```
	"""

	items = tuple(intervals.items())

	def effect (root: PitchClass, tones: ToneSet) -> ToneSet:
		result = dict(tones)
		for degree, semitones in items:
			result[degree] = root.transpose(semitones)
		return result

	return effect


def omit (*degrees: int) -> Effect:

	"""Build an effect that removes degrees, whichever rule placed them."""

	def effect (root: PitchClass, tones: ToneSet) -> ToneSet:
		return {degree: pc for degree, pc in tones.items() if degree not in degrees}

	return effect


def alter (degree: int, offset: int) -> Effect:

	"""Build an effect that moves one degree by a fixed number of semitones.

	If the degree is absent, it is first placed at its default interval
	(see ``DEFAULT_INTERVALS``) so the effect always runs.
	"""

	def effect (root: PitchClass, tones: ToneSet) -> ToneSet:
		result = dict(tones)
		current = result.get(degree, root.transpose(DEFAULT_INTERVALS[degree]))
		result[degree] = current.transpose(offset)
		return result

	return effect


def replace (intervals: typing.Sequence[int]) -> Effect:

	"""Build an effect that replaces the whole set with degrees 1..N.

	Used by scale modes, whose intervals are an ascending list of semitone
	offsets from the root.
	"""

	steps = tuple(intervals)

	def effect (root: PitchClass, tones: ToneSet) -> ToneSet:
		return {i + 1: root.transpose(semitones) for i, semitones in enumerate(steps)}

	return effect


def combine (*effects: Effect) -> Effect:

	"""Build an effect that applies several effects in order."""

	def effect (root: PitchClass, tones: ToneSet) -> ToneSet:
		for step in effects:
			tones = step(root, tones)
		return tones

	return effect


# ---------------------------------------------------------------------------
# Executor
# ---------------------------------------------------------------------------

def apply_rules (rules: typing.Iterable[Rule], root: PitchClass, tones: typing.Optional[ToneSet] = None) -> ToneSet:

	"""Apply rules unconditionally, in order, starting from ``tones`` (or an empty set).

	Parameters:
		rules: Rules to apply.
		root: Root pitch class every interval is measured from.
		tones: Starting tone set; defaults to empty.

	Returns:
		The tone set produced by the last rule.
	"""

	result: ToneSet = dict(tones) if tones else {}

	for rule in rules:
		result = rule.apply(root, result)
		logger.debug(f"{rule.name} → {_describe(result)}")

	return result


def run_chain (chain: typing.Sequence[Rule], root: PitchClass, text: str) -> ToneSet:

	"""Run a rule chain against the modifier text of a name.

	The chain is walked exactly once. Every rule whose trigger matches ``text``
	is applied to the output of the previous one; rules that do not match are
	skipped. Precedence is registration order only.

	Parameters:
		chain: Ordered rules, e.g. ``music_theory.chord_forms.CHORD_FORMS``.
		root: Root pitch class.
		text: Lower-cased modifier text from ``music_theory.names.tokenize``.

	Returns:
		The final ``{degree: PitchClass}`` mapping.

	Example:
		```python
		parsed = music_theory.names.tokenize("Cm7")
		run_chain(music_theory.chord_forms.CHORD_FORMS, parsed.root, parsed.text)
		# {1: C, 3: D#, 5: G, 7: A#}
		```
	"""

	return apply_rules([rule for rule in chain if rule.matches(text)], root)


def _describe (tones: ToneSet) -> str:

	return ", ".join(f"{degree}:{pc.name}" for degree, pc in sorted(tones.items()))
