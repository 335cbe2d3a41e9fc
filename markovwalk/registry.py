import typing

import markovwalk.transitions


StateType = typing.TypeVar("StateType")


class ChainNode (typing.Generic[StateType]):

	"""
	A registered state: the chain's own copy of it plus its outgoing edges.

	Nodes use identity equality.  Two nodes are the same node only if they
	are the same object, which is what transition tables rely on.
	"""

	def __init__ (self, state: StateType) -> None:

		self.state = state
		self.transitions: markovwalk.transitions.TransitionTable["ChainNode[StateType]"] = markovwalk.transitions.TransitionTable()


	def __repr__ (self) -> str:

		return f"ChainNode({self.state!r}, transitions={len(self.transitions)})"


class StateRegistry (typing.Generic[StateType]):

	"""
	Insertion-ordered store of every node in a chain.

	Order only matters for uniform random selection by index; nodes are
	never removed individually.
	"""

	def __init__ (self) -> None:

		self._nodes: typing.List[ChainNode[StateType]] = []


	def __len__ (self) -> int:

		return len(self._nodes)


	def __iter__ (self) -> typing.Iterator[ChainNode[StateType]]:

		return iter(self._nodes)


	def __getitem__ (self, index: int) -> ChainNode[StateType]:

		return self._nodes[index]


	def append (self, node: ChainNode[StateType]) -> None:

		"""
		Add a node after every node already registered.
		"""

		self._nodes.append(node)


	def find (self, state: StateType, compare: typing.Callable[[StateType, StateType], int]) -> typing.Optional[ChainNode[StateType]]:

		"""
		Return the first node whose state compares equal to ``state``, or None.
		"""

		for node in self._nodes:
			if compare(node.state, state) == 0:
				return node

		return None


	def clear (self) -> None:

		"""
		Forget every node.
		"""

		self._nodes.clear()
