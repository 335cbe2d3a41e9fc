import logging
import typing

import markovwalk.behaviors
import markovwalk.errors
import markovwalk.random_source
import markovwalk.registry
import markovwalk.transitions
import markovwalk.walk


StateType = typing.TypeVar("StateType")

logger = logging.getLogger(__name__)


class MarkovChain (typing.Generic[StateType]):

	"""
	A weighted Markov chain built incrementally from observed states.

	Every distinct state (under the ``compare`` behavior) is stored once, as
	a private copy made with the ``copy`` behavior.  Linking two nodes counts
	one observed transition between them, and walks follow transitions in
	proportion to those counts.

	The chain owns every copy it makes.  :meth:`teardown` releases them all
	through the ``free`` behavior; using the chain afterwards raises
	:class:`~markovwalk.errors.ChainClosedError`.

	Example:
		```python
		with MarkovChain(behaviors) as chain:
			chain.add_sequence(["the", "cat", "sat."])
			chain.generate_walk(max_length=10)
		```
	"""

	def __init__ (
		self,
		behaviors: typing.Optional[markovwalk.behaviors.StateBehaviors[StateType]] = None,
		rng: typing.Optional[markovwalk.random_source.RandomSource] = None
	) -> None:

		"""
		Initialize an empty chain with the given behaviors and random source.
		"""

		self.behaviors: markovwalk.behaviors.StateBehaviors[StateType] = behaviors or markovwalk.behaviors.StateBehaviors()
		self.rng = rng
		self.nodes: markovwalk.registry.StateRegistry[StateType] = markovwalk.registry.StateRegistry()
		self._closed = False


	def __enter__ (self) -> "MarkovChain[StateType]":

		return self


	def __exit__ (self, *exc_info: typing.Any) -> None:

		self.teardown()


	def __len__ (self) -> int:

		return len(self.nodes)


	def __contains__ (self, state: StateType) -> bool:

		return self.find(state) is not None


	@property
	def is_closed (self) -> bool:

		"""Return True once the chain has been torn down."""

		return self._closed


	def ensure_open (self) -> None:

		"""Raise ChainClosedError if the chain has been torn down."""

		if self._closed:
			raise markovwalk.errors.ChainClosedError("Markov chain used after teardown")


	def states (self) -> typing.List[StateType]:

		"""
		Return the stored state copies in insertion order.
		"""

		return [node.state for node in self.nodes]


	def find (self, state: StateType) -> typing.Optional[markovwalk.registry.ChainNode[StateType]]:

		"""
		Return the node holding a state equal to ``state``, or None.
		"""

		self.ensure_open()

		return self.nodes.find(state, self.behaviors.compare)


	def get_or_insert (self, state: StateType) -> markovwalk.registry.ChainNode[StateType]:

		"""
		Return the node for ``state``, registering a copy of it if it is new.

		Calling this again with an equal state returns the same node and
		leaves the registry unchanged.

		Raises:
			AllocationError: The copy behavior failed.  Nothing is registered.
		"""

		existing = self.find(state)

		if existing is not None:
			return existing

		try:
			owned = self.behaviors.copy(state)

		except MemoryError as exc:
			raise markovwalk.errors.AllocationError(f"Failed to copy state {state!r}") from exc

		if owned is None:
			raise markovwalk.errors.AllocationError(f"Failed to copy state {state!r}")

		node = markovwalk.registry.ChainNode(owned)
		self.nodes.append(node)

		logger.debug(f"Registered state {owned!r} ({len(self.nodes)} states)")

		return node


	def link (self, from_node: markovwalk.registry.ChainNode[StateType], to_node: markovwalk.registry.ChainNode[StateType]) -> markovwalk.transitions.Transition:

		"""
		Count one transition from ``from_node`` to ``to_node``.
		"""

		self.ensure_open()

		return from_node.transitions.add_or_increment(to_node)


	def add_sequence (self, states: typing.Iterable[StateType]) -> typing.List[markovwalk.registry.ChainNode[StateType]]:

		"""
		Register each state in order and link every consecutive pair.
		"""

		nodes: typing.List[markovwalk.registry.ChainNode[StateType]] = []
		previous: typing.Optional[markovwalk.registry.ChainNode[StateType]] = None

		for state in states:
			node = self.get_or_insert(state)

			if previous is not None:
				self.link(previous, node)

			nodes.append(node)
			previous = node

		return nodes


	def random_start_node (self, rng: typing.Optional[markovwalk.random_source.RandomSource] = None) -> markovwalk.registry.ChainNode[StateType]:

		"""
		Return a uniformly drawn node whose state is not terminal.
		"""

		self.ensure_open()

		return markovwalk.walk.random_start_node(self, rng or self.rng)


	def generate_walk (
		self,
		start: typing.Optional[markovwalk.registry.ChainNode[StateType]] = None,
		max_length: typing.Optional[int] = None,
		rng: typing.Optional[markovwalk.random_source.RandomSource] = None
	) -> typing.List[StateType]:

		"""
		Print and return one random walk.  See :func:`markovwalk.walk.generate_walk`.
		"""

		return markovwalk.walk.generate_walk(self, start=start, max_length=max_length, rng=rng or self.rng)


	def teardown (self) -> None:

		"""
		Release every state copy and transition table the chain owns.

		Each copy is passed to the ``free`` behavior exactly once.  Calling
		this again is a no-op.
		"""

		if self._closed:
			return

		count = len(self.nodes)

		for node in self.nodes:
			node.transitions.clear()
			self.behaviors.free(node.state)

		self.nodes.clear()
		self._closed = True

		logger.debug(f"Tore down chain with {count} states")
