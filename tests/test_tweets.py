import pytest

import markovwalk.errors
import markovwalk.random_source
import markovwalk.tweets


CORPUS = [
	"the cat sat on the mat.",
	"the dog  sat on the cat.",
	"a bird flew.",
]


@pytest.fixture
def chain ():

	"""An empty word chain, torn down afterwards."""

	chain = markovwalk.tweets.new_chain()
	yield chain
	chain.teardown()


def test_ends_with_dot () -> None:

	"""Only words ending in a dot close a sentence."""

	assert markovwalk.tweets.ends_with_dot("mat.")
	assert not markovwalk.tweets.ends_with_dot("mat")
	assert not markovwalk.tweets.ends_with_dot("e.g")


def test_print_word_spacing (capsys: pytest.CaptureFixture[str]) -> None:

	"""Words are followed by a space unless they end the sentence."""

	markovwalk.tweets.print_word("hello")
	markovwalk.tweets.print_word("world.")

	assert capsys.readouterr().out == "hello world."


def test_fill_chain_links_words_within_lines (chain) -> None:

	"""Consecutive words on a line are linked; repeated pairs add up."""

	words = markovwalk.tweets.fill_chain(chain, CORPUS)

	assert words == 15
	the = chain.find("the")
	sat = chain.find("sat")

	assert [(node.state, count) for node, count in the.transitions.entries()] == [("cat", 1), ("mat.", 1), ("dog", 1), ("cat.", 1)]
	assert [(node.state, count) for node, count in sat.transitions.entries()] == [("on", 2)]


def test_fill_chain_does_not_link_across_lines (chain) -> None:

	"""The last word of one line is not linked to the first of the next."""

	markovwalk.tweets.fill_chain(chain, ["one two", "three four"])

	assert [node.state for node, _ in chain.find("two").transitions.entries()] == []


def test_fill_chain_skips_repeated_spaces (chain) -> None:

	"""Runs of spaces do not produce empty words."""

	markovwalk.tweets.fill_chain(chain, ["  spaced   out  "])

	assert chain.states() == ["spaced", "out"]


def test_fill_chain_word_limit_spans_lines (chain) -> None:

	"""The word limit counts words across lines and stops mid-line."""

	words = markovwalk.tweets.fill_chain(chain, CORPUS, word_limit=8)

	assert words == 8
	assert chain.states() == ["the", "cat", "sat", "on", "mat.", "dog"]
	assert chain.find("dog").transitions.entries() == []


def test_fill_chain_negative_limit_raises (chain) -> None:

	"""A negative word limit is rejected."""

	with pytest.raises(ValueError):
		markovwalk.tweets.fill_chain(chain, CORPUS, word_limit=-1)


def test_read_corpus_strips_line_endings (tmp_path) -> None:

	"""Corpus lines come back without newline characters."""

	path = tmp_path / "corpus.txt"
	path.write_text("first line.\nsecond line.\n", encoding="utf-8")

	assert list(markovwalk.tweets.read_corpus(str(path))) == ["first line.", "second line."]


def test_generate_tweets_output_format (chain, capsys: pytest.CaptureFixture[str]) -> None:

	"""Each tweet is numbered, starts on a non-terminal word, and ends the line."""

	markovwalk.tweets.fill_chain(chain, CORPUS)

	tweets = markovwalk.tweets.generate_tweets(chain, 3, rng=markovwalk.random_source.RandomSource(2024))

	lines = capsys.readouterr().out.splitlines()

	assert len(tweets) == 3
	assert [line.split(":")[0] for line in lines] == ["Tweet 1", "Tweet 2", "Tweet 3"]

	for tweet, line in zip(tweets, lines):
		assert 1 <= len(tweet) <= markovwalk.tweets.MAX_TWEET_LENGTH
		assert not markovwalk.tweets.ends_with_dot(tweet[0])
		assert line.startswith("Tweet")
		assert " ".join(tweet) in line


def test_generate_tweets_is_reproducible (chain, capsys: pytest.CaptureFixture[str]) -> None:

	"""The same seed gives the same tweets."""

	markovwalk.tweets.fill_chain(chain, CORPUS)

	first = markovwalk.tweets.generate_tweets(chain, 4, rng=markovwalk.random_source.RandomSource(7))
	second = markovwalk.tweets.generate_tweets(chain, 4, rng=markovwalk.random_source.RandomSource(7))

	assert first == second


def test_generate_tweets_all_terminal_corpus_raises (chain) -> None:

	"""A corpus of only sentence-ending words has nowhere to start."""

	markovwalk.tweets.fill_chain(chain, ["end.", "stop."])

	with pytest.raises(markovwalk.errors.EmptyRegistryError):
		markovwalk.tweets.generate_tweets(chain, 1)


def test_read_corpus_replaces_invalid_utf8 (tmp_path) -> None:

	"""Undecodable bytes become replacement characters inside the word."""

	path = tmp_path / "corpus.txt"
	path.write_bytes(b"caf\xe9 au lait.\n")

	assert list(markovwalk.tweets.read_corpus(str(path))) == ["caf\ufffd au lait."]


def test_copy_word_keeps_the_word () -> None:

	"""The stored copy of a word is equal to the word read."""

	assert markovwalk.tweets.copy_word("word.") == "word."
