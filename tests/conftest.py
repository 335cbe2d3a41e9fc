import typing

import pytest

import markovwalk.behaviors
import markovwalk.markov_chain
import markovwalk.random_source


class ScriptedSource (markovwalk.random_source.RandomSource):

	"""Random source that returns a fixed list of draws, in order."""

	def __init__ (self, draws: typing.List[int]) -> None:

		"""Store the draws to hand out."""

		super().__init__(seed=0)
		self.draws = list(draws)
		self.bounds: typing.List[int] = []

	def draw_uniform (self, bound: int) -> int:

		"""Return the next scripted draw, checking it fits the bound."""

		self.bounds.append(bound)
		draw = self.draws.pop(0)
		assert 0 <= draw < bound, f"scripted draw {draw} outside [0, {bound})"
		return draw


class RecordingBehaviors:

	"""Word behaviors that record every print, copy, and free."""

	def __init__ (self) -> None:

		"""Start with empty records."""

		self.printed: typing.List[str] = []
		self.copied: typing.List[str] = []
		self.freed: typing.List[str] = []

	def print_state (self, state: str) -> None:

		"""Record a printed state."""

		self.printed.append(state)

	def copy (self, state: str) -> str:

		"""Record and return a fresh copy."""

		self.copied.append(state)
		return "".join(list(state))

	def free (self, state: str) -> None:

		"""Record a released copy."""

		self.freed.append(state)

	def behaviors (self) -> markovwalk.behaviors.StateBehaviors[str]:

		"""Bundle the recorders into a StateBehaviors."""

		return markovwalk.behaviors.StateBehaviors(
			print_state = self.print_state,
			copy = self.copy,
			free = self.free,
			is_terminal = lambda word: word.endswith("."),
		)


@pytest.fixture
def recorder () -> RecordingBehaviors:

	"""Fresh recording behaviors for one test."""

	return RecordingBehaviors()


@pytest.fixture
def word_chain (recorder: RecordingBehaviors) -> typing.Iterator[markovwalk.markov_chain.MarkovChain[str]]:

	"""An empty word chain using the recording behaviors, torn down afterwards."""

	chain = markovwalk.markov_chain.MarkovChain(recorder.behaviors())
	yield chain
	chain.teardown()
