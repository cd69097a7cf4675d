
"""
music-theory - notes, keys, chords and scales from their names.

Resolves human-readable names into structured pitch data:

- **Chords.** ``Chord.of("Cm nondominant -5 679")`` runs the name through an
  ordered chain of chord-building rules ("Basic", "Minor Triad",
  "Omit Fifth", "Add Sixth" ...) and returns the root and a
  ``{degree: pitch class}`` mapping.
- **Scales.** ``Scale.of("C aug")`` picks a registered mode by keyword and
  lays its intervals out from the root as degrees 1..N.
- **Keys.** ``Key.of("Db")`` returns the key's mode and its relative
  major/minor.
- **Pitches.** ``pitch.of_note("A4")`` returns a frequency in Hz in
  twelve-tone equal temperament.

Output is purely symbolic: there is no audio or MIDI engine.

Minimal example:

    ```python
    import music_theory

    chord = music_theory.Chord.of("Cm7")
    chord.names()        # {1: "C", 3: "D#", 5: "G", 7: "A#"}

    print(music_theory.Key.of("Db").to_yaml())
    ```

Command line: ``music-theory chord "Cm nondominant -5 679"``, ``music-theory
chords``, ``music-theory scale "C aug"``, ``music-theory scales``,
``music-theory key Db``, ``music-theory pitch A 4``.

Package-level exports: ``Chord``, ``Scale``, ``Key``, ``InvalidRootError``,
``UnknownModeError``, ``InvalidPitchInputError``.
"""

import music_theory.chords
import music_theory.keys
import music_theory.pitch
import music_theory.pitch_class
import music_theory.scale_modes
import music_theory.scales


__version__ = "0.1.0"

Chord = music_theory.chords.Chord
Scale = music_theory.scales.Scale
Key = music_theory.keys.Key
InvalidRootError = music_theory.pitch_class.InvalidRootError
UnknownModeError = music_theory.scale_modes.UnknownModeError
InvalidPitchInputError = music_theory.pitch.InvalidPitchInputError
