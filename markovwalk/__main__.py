"""Command line for the demo applications.

Usage::

    python -m markovwalk tweets SEED NUM_TWEETS TEXT_CORPUS [NUM_WORDS]
    python -m markovwalk snakes SEED NUM_WALKS
    python -m markovwalk --config markovwalk.yaml snakes

Values missing from the command line are taken from the ``tweets:`` or
``snakes:`` section of the YAML config file given with ``--config``.
"""

import argparse
import logging
import sys
import typing

import markovwalk.config
import markovwalk.errors
import markovwalk.random_source
import markovwalk.snakes_and_ladders
import markovwalk.tweets


logger = logging.getLogger(__name__)


def _build_parser () -> argparse.ArgumentParser:

	"""Return the argument parser for both subcommands."""

	parser = argparse.ArgumentParser(prog="markovwalk", description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument("--config",     type=str, default=None, help="YAML config file")
	parser.add_argument("--max-length", type=int, default=None, help="Most states per walk")

	commands = parser.add_subparsers(dest="command", required=True)

	tweets = commands.add_parser("tweets", help="Generate sentences from a text corpus")
	tweets.add_argument("seed",         type=int, nargs="?", default=None, help="Random seed")
	tweets.add_argument("count",        type=int, nargs="?", default=None, help="Number of tweets")
	tweets.add_argument("text_corpus",  type=str, nargs="?", default=None, help="Path to the corpus")
	tweets.add_argument("word_limit",   type=int, nargs="?", default=None, help="Words to read (default: all)")

	snakes = commands.add_parser("snakes", help="Play random games of snakes and ladders")
	snakes.add_argument("seed",  type=int, nargs="?", default=None, help="Random seed")
	snakes.add_argument("count", type=int, nargs="?", default=None, help="Number of games")

	return parser


def _resolve_settings (args: argparse.Namespace, config: dict) -> markovwalk.config.WalkSettings:

	"""Combine config file values with command-line values, which win."""

	if args.command == "tweets":
		defaults = markovwalk.config.WalkSettings(max_length=markovwalk.tweets.MAX_TWEET_LENGTH)
	else:
		defaults = markovwalk.config.WalkSettings(max_length=markovwalk.snakes_and_ladders.MAX_GENERATION_LENGTH)

	settings = markovwalk.config.settings_from_config(config, args.command, defaults)

	if args.seed is not None:
		settings.seed = args.seed

	if args.count is not None:
		settings.count = args.count

	if args.max_length is not None:
		settings.max_length = args.max_length

	if getattr(args, "word_limit", None) is not None:
		settings.word_limit = args.word_limit

	return settings


def _run_tweets (corpus_path: str, settings: markovwalk.config.WalkSettings, rng: markovwalk.random_source.RandomSource) -> int:

	"""Build a word chain from the corpus and print tweets from it."""

	with markovwalk.tweets.new_chain(rng) as chain:

		try:
			markovwalk.tweets.fill_chain(chain, markovwalk.tweets.read_corpus(corpus_path), settings.word_limit)
		except OSError:
			print(f"Error: Failed to open file {corpus_path}.")
			return 1

		markovwalk.tweets.generate_tweets(chain, settings.count, max_length=settings.max_length, rng=rng)

	return 0


def _run_snakes (settings: markovwalk.config.WalkSettings, rng: markovwalk.random_source.RandomSource) -> int:

	"""Build the board chain and print random games from cell 1."""

	with markovwalk.snakes_and_ladders.new_chain(rng) as chain:
		markovwalk.snakes_and_ladders.fill_chain(chain)
		markovwalk.snakes_and_ladders.generate_walks(chain, settings.count, max_length=settings.max_length, rng=rng)

	return 0


def run (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""Parse arguments, run the chosen application, and return an exit status."""

	parser = _build_parser()
	args = parser.parse_args(argv)

	try:
		config = markovwalk.config.load_config(args.config) if args.config else {}
		markovwalk.config.configure_logging(config)
	except ValueError as exc:
		parser.error(str(exc))

	settings = _resolve_settings(args, config)

	if settings.seed is None:
		parser.error("a seed is required (argument or config)")

	if settings.count is None or settings.count < 0:
		parser.error("a non-negative walk count is required")

	if settings.max_length is not None and settings.max_length < 1:
		parser.error("max length must be at least 1")

	corpus_path = None

	if args.command == "tweets":
		corpus_path = args.text_corpus or (config.get("tweets") or {}).get("text_corpus")

		if corpus_path is None:
			parser.error("a text corpus path is required (argument or config)")

	rng = markovwalk.random_source.seed_process(settings.seed)

	try:
		if args.command == "tweets":
			return _run_tweets(corpus_path, settings, rng)

		return _run_snakes(settings, rng)

	except markovwalk.errors.AllocationError:
		logger.exception("Allocation failure while building the chain")
		return 1

	except markovwalk.errors.EmptyRegistryError as exc:
		logger.error(f"Cannot generate walks: {exc}")
		return 1


def main () -> None:

	"""Console entry point."""

	sys.exit(run())


if __name__ == "__main__":
	main()
