"""Tweet generator: random sentences from a plain-text corpus.

Each corpus line is split on spaces and consecutive words on the same line
are linked.  A word ending in ``.`` ends a sentence, so walks stop there and
never start from one.
"""

import logging
import sys
import typing

import markovwalk.behaviors
import markovwalk.markov_chain
import markovwalk.random_source


logger = logging.getLogger(__name__)

MAX_TWEET_LENGTH = 20


def ends_with_dot (word: str) -> bool:

	"""Return True if the word closes a sentence."""

	return word.endswith(".")


def print_word (word: str) -> None:

	"""Write a word, followed by a space unless it closes the sentence."""

	sys.stdout.write(word)

	if not ends_with_dot(word):
		sys.stdout.write(" ")


def compare_words (a: str, b: str) -> int:

	"""Order words by code point."""

	return markovwalk.behaviors.compare_natural(a, b)


def copy_word (word: str) -> str:

	"""Return the word itself as the chain's copy.

	Strings are immutable, so sharing the object stands in for copying it.
	"""

	return word


def word_behaviors () -> markovwalk.behaviors.StateBehaviors[str]:

	"""Return the behaviors for a chain of corpus words."""

	return markovwalk.behaviors.StateBehaviors(
		print_state = print_word,
		compare = compare_words,
		copy = copy_word,
		is_terminal = ends_with_dot,
	)


def new_chain (rng: typing.Optional[markovwalk.random_source.RandomSource] = None) -> markovwalk.markov_chain.MarkovChain[str]:

	"""Create an empty word chain."""

	return markovwalk.markov_chain.MarkovChain(word_behaviors(), rng=rng)


def read_corpus (path: str) -> typing.Iterator[str]:

	"""Yield the lines of a text file without their line endings.

	Bytes that are not valid UTF-8 are replaced rather than rejected.
	"""

	with open(path, "r", encoding="utf-8", errors="replace") as f:
		for line in f:
			yield line.rstrip("\r\n")


def fill_chain (chain: markovwalk.markov_chain.MarkovChain[str], lines: typing.Iterable[str], word_limit: typing.Optional[int] = None) -> int:

	"""Add the words of ``lines`` to the chain and return how many were read.

	Parameters:
		chain: The chain to fill.
		lines: Corpus lines.  Words are separated by one or more spaces.
		word_limit: Stop after this many words, counted across lines.
			``None`` reads everything.
	"""

	if word_limit is not None and word_limit < 0:
		raise ValueError(f"word_limit must not be negative, got {word_limit}")

	words_read = 0

	for line in lines:

		if word_limit is not None and words_read >= word_limit:
			break

		previous = None

		for word in line.split(" "):

			if not word:
				continue

			if word_limit is not None and words_read >= word_limit:
				break

			node = chain.get_or_insert(word)

			if previous is not None:
				chain.link(previous, node)

			previous = node
			words_read += 1

	logger.info(f"Read {words_read} words, {len(chain)} distinct")

	return words_read


def generate_tweets (
	chain: markovwalk.markov_chain.MarkovChain[str],
	count: int,
	max_length: int = MAX_TWEET_LENGTH,
	rng: typing.Optional[markovwalk.random_source.RandomSource] = None
) -> typing.List[typing.List[str]]:

	"""
	Print ``count`` numbered tweets, each starting from a random word.

	Returns the words of every tweet.
	"""

	tweets: typing.List[typing.List[str]] = []

	for i in range(count):
		sys.stdout.write(f"Tweet {i + 1}: ")
		tweets.append(chain.generate_walk(max_length=max_length, rng=rng))
		sys.stdout.write("\n")

	return tweets
