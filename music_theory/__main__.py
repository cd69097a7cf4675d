"""Command-line interface.

Usage::

    music-theory chord "Cm nondominant -5 679"
    music-theory chords
    music-theory scale "C aug"
    music-theory scales
    music-theory key Db
    music-theory pitch A 4 --tuning 432

``python -m music_theory`` works the same way. Results are printed as YAML.
Settings are read from an optional YAML config file (``--config``, default
``music-theory.yaml``)::

    pitch:
      tuning: 440
    logging:
      level: WARNING
"""

import argparse
import logging
import os
import typing

import yaml

import music_theory
import music_theory.chord_forms
import music_theory.pitch
import music_theory.scale_modes
import music_theory.yaml_output


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "music-theory.yaml"


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def build_parser () -> typing.Tuple[argparse.ArgumentParser, typing.Dict[str, argparse.ArgumentParser]]:

	"""Build the argument parser.

	Returns:
		The top-level parser and a map of command name to subcommand parser,
		used to print a command's help when its argument is missing.
	"""

	parser = argparse.ArgumentParser(prog="music-theory", description="Notes, Keys, Chords and Scales")
	parser.add_argument("--version", action="version", version=f"%(prog)s {music_theory.__version__}")
	parser.add_argument("--config", default=None, help=f"YAML config file (default: {DEFAULT_CONFIG_PATH}, if present)")

	subparsers = parser.add_subparsers(dest="command")
	commands: typing.Dict[str, argparse.ArgumentParser] = {}

	commands["chord"] = subparsers.add_parser(
		"chord",
		aliases=["c"],
		help="build a Chord",
		description="Chord is a named harmonic set of three or more pitch classes specified by a name, e.g. C or Cm6 or D♭m679-5",
	)
	commands["chord"].add_argument("name", nargs="?")

	commands["chords"] = subparsers.add_parser(
		"chords",
		help="list all known Chords",
		description="Chords are built by a sequential chain of rules, each matching text in the chord name to its musical implications from the root of the chord.",
	)

	commands["scale"] = subparsers.add_parser(
		"scale",
		aliases=["s"],
		help="build a Scale",
		description="Scale is any set of musical notes ordered by fundamental frequency or pitch specified by a name, e.g. C or C aug or A harmonic minor",
	)
	commands["scale"].add_argument("name", nargs="?")

	commands["scales"] = subparsers.add_parser(
		"scales",
		help="list all known Scales",
		description="Scales are selected by matching a mode keyword in the scale name, then laid out from the root of the scale.",
	)

	commands["key"] = subparsers.add_parser(
		"key",
		aliases=["k"],
		help="find a Key",
		description="The key of a piece is a group of pitches, or scale upon which a music composition is created.",
	)
	commands["key"].add_argument("name", nargs="?")

	commands["pitch"] = subparsers.add_parser(
		"pitch",
		aliases=["p"],
		help="find a note pitch in Hz",
		description="The pitch is note frequency described in Hz, based on standard concert pitch and twelve-tone equal temperament. Pass a note in international pitch notation.",
	)
	commands["pitch"].add_argument("name", nargs="?")
	commands["pitch"].add_argument("octave", nargs="?")
	commands["pitch"].add_argument("-t", "--tuning", type=float, default=None, help="pitch of A4 in Hz (default: 440)")

	return parser, commands


ALIASES: typing.Dict[str, str] = {"c": "chord", "s": "scale", "k": "key", "p": "pitch"}


def run (args: argparse.Namespace, commands: typing.Dict[str, argparse.ArgumentParser], config: dict) -> str:

	"""Execute a parsed command and return the text to print.

	Returns the subcommand's help text when its required name is missing.
	"""

	command = ALIASES.get(args.command, args.command)

	if command == "chords":
		return music_theory.yaml_output.dump_names(music_theory.chord_forms.names())

	if command == "scales":
		return music_theory.yaml_output.dump_names(music_theory.scale_modes.names())

	if not args.name:
		return commands[command].format_help()

	if command == "chord":
		return music_theory.Chord.of(args.name).to_yaml()

	if command == "scale":
		return music_theory.Scale.of(args.name).to_yaml()

	if command == "key":
		return music_theory.Key.of(args.name).to_yaml()

	tuning = args.tuning if args.tuning is not None else (config.get("pitch") or {}).get("tuning", music_theory.pitch.DEFAULT_TUNING)

	if args.octave is not None:
		hz = music_theory.pitch.of_class_and_octave(args.name, args.octave, tuning)
	else:
		hz = music_theory.pitch.of_note(args.name, tuning)

	return f"{hz:.2f}\n"


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the music-theory command.
	"""

	parser, commands = build_parser()
	args = parser.parse_args(argv)

	if args.config is not None:
		config = load_config(args.config)
	elif os.path.exists(DEFAULT_CONFIG_PATH):
		config = load_config(DEFAULT_CONFIG_PATH)
	else:
		config = {}

	logging.basicConfig(level=(config.get("logging") or {}).get("level", "WARNING"))

	if args.command is None:
		parser.print_help()
		return 0

	try:
		output = run(args, commands, config)
	except ValueError as exc:
		print(f"Error occurred: {exc}")
		return 1

	print(output, end="")

	return 0


if __name__ == "__main__":
	raise SystemExit(main())
