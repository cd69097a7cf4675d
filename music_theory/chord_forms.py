"""Chord-building rules.

A chord is built by running ``CHORD_FORMS`` against the modifier text of its
name. The chain always starts with "Basic" (a major triad on the root), and
every later form that matches overwrites, adds or removes degrees. Order is
precedence: "Major Seventh" comes after "Add Seventh" so that ``maj7`` ends
with a major seventh, and the "Omit" forms come after the forms they undo.

Triggers run on lower-cased text in which a standalone ``M`` has already
been rewritten to ``maj`` (see ``music_theory.names.tokenize``).
"""

import typing

import music_theory.rules


Rule = music_theory.rules.Rule
matches = music_theory.rules.matches
set_degrees = music_theory.rules.set_degrees
omit = music_theory.rules.omit
alter = music_theory.rules.alter
combine = music_theory.rules.combine

MAJOR = r"(?:major|maj)"
MINOR = r"(?:minor|min|m)"
AUGMENTED = r"(?:augmented|aug|\+)"
DIMINISHED = r"(?:diminished|dim|°)"
SUSPENDED = r"(?:suspended|sus)"
NONDOMINANT = r"(?<![a-z])(?:nondominant|non|nd)(?![a-z])"
DOMINANT = r"(?:^|dominant|dom)"
OMIT = r"(?:(?<![a-z])(?:omit|no)\s*|-)"
FLAT = r"(?:flat|b|♭)"
SHARP = r"(?:sharp|#|♯)"
HALF = r"(?:half[\s-]*)"

# Standalone minor marker: "m7" but not the "m7" inside "dim7".
STANDALONE_MINOR = r"(?<![a-z])" + MINOR

ELEVEN = r"(?<!\d)11(?!\d)"
THIRTEEN = r"(?<!\d)13(?!\d)"


CHORD_FORMS: typing.Tuple[Rule, ...] = (

	# Basic

	Rule("Basic", music_theory.rules.always, set_degrees({1: 0, 3: 4, 5: 7})),
	Rule("Nondominant", matches(NONDOMINANT), omit(1)),

	# Triads

	Rule("Major Triad", matches("^" + MAJOR), set_degrees({3: 4, 5: 7})),
	Rule("Minor Triad", matches("^" + MINOR + r"(?![a-z])"), set_degrees({3: 3})),
	Rule("Augmented Triad", matches("^" + AUGMENTED), set_degrees({3: 4, 5: 8})),
	Rule("Diminished Triad", matches("^" + DIMINISHED), set_degrees({3: 3, 5: 6})),
	Rule("Suspended Triad", matches(SUSPENDED), combine(omit(3), set_degrees({4: 5}))),

	# Fifth

	Rule("Omit Fifth", matches(OMIT + "5"), omit(5)),
	Rule("Flat Fifth", matches(FLAT + "5"), alter(5, -1)),

	# Sixth

	Rule("Add Sixth", matches("6"), set_degrees({6: 9})),
	Rule("Augmented Sixth", matches(AUGMENTED + "6"), set_degrees({6: 10})),
	Rule("Omit Sixth", matches(OMIT + "6"), omit(6)),

	# Seventh

	Rule("Add Seventh", matches("7"), set_degrees({7: 10})),
	Rule("Dominant Seventh", matches(DOMINANT + "7"), set_degrees({7: 10})),
	Rule("Major Seventh", matches(MAJOR + r"\s*7"), set_degrees({7: 11})),
	Rule("Minor Seventh", matches(STANDALONE_MINOR + "7"), set_degrees({3: 3, 7: 10})),
	Rule("Diminished Seventh", matches(DIMINISHED + "7"), set_degrees({3: 3, 5: 6, 7: 9})),
	Rule("Half Diminished Seventh", matches(HALF + DIMINISHED + "7?|ø"), set_degrees({3: 3, 5: 6, 7: 10})),
	Rule("Diminished Major Seventh", matches(DIMINISHED + MAJOR + "7"), set_degrees({3: 3, 5: 6, 7: 11})),
	Rule("Augmented Major Seventh", matches(AUGMENTED + MAJOR + "7"), set_degrees({3: 4, 5: 8, 7: 11})),
	Rule("Augmented Minor Seventh", matches(AUGMENTED + MINOR + "7"), set_degrees({3: 4, 5: 8, 7: 10})),
	Rule("Harmonic Seventh", matches(r"harmonic\s*7"), set_degrees({7: 10})),
	Rule("Omit Seventh", matches(OMIT + "7"), omit(7)),

	# Ninth

	Rule("Add Ninth", matches("9"), set_degrees({9: 14})),
	Rule("Dominant Ninth", matches(DOMINANT + "9"), set_degrees({7: 10, 9: 14})),
	Rule("Major Ninth", matches(MAJOR + r"\s*9"), set_degrees({7: 11, 9: 14})),
	Rule("Minor Ninth", matches(STANDALONE_MINOR + "9"), set_degrees({3: 3, 7: 10, 9: 14})),
	Rule("Sharp Ninth", matches(SHARP + "9"), set_degrees({9: 15})),
	Rule("Omit Ninth", matches(OMIT + "9"), omit(9)),

	# Eleventh

	Rule("Add Eleventh", matches(ELEVEN), set_degrees({11: 17})),
	Rule("Dominant Eleventh", matches(DOMINANT + ELEVEN), set_degrees({7: 10, 9: 14, 11: 17})),
	Rule("Major Eleventh", matches(MAJOR + r"\s*" + ELEVEN), set_degrees({7: 11, 9: 14, 11: 17})),
	Rule("Minor Eleventh", matches(STANDALONE_MINOR + ELEVEN), set_degrees({3: 3, 7: 10, 9: 14, 11: 17})),
	Rule("Omit Eleventh", matches(OMIT + ELEVEN), omit(11)),

	# Thirteenth

	Rule("Add Thirteenth", matches(THIRTEEN), set_degrees({13: 21})),
	Rule("Dominant Thirteenth", matches(DOMINANT + THIRTEEN), set_degrees({7: 10, 9: 14, 11: 17, 13: 21})),
	Rule("Major Thirteenth", matches(MAJOR + r"\s*" + THIRTEEN), set_degrees({7: 11, 9: 14, 11: 17, 13: 21})),
	Rule("Minor Thirteenth", matches(STANDALONE_MINOR + THIRTEEN), set_degrees({3: 3, 7: 10, 9: 14, 11: 17, 13: 21})),
)


def names () -> typing.List[str]:

	"""
	Return the names of all chord forms in registration order.
	"""

	return [form.name for form in CHORD_FORMS]
