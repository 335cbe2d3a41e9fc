class MarkovChainError (Exception):

	"""Base class for errors raised by the chain engine."""

	pass


class AllocationError (MarkovChainError, MemoryError):

	"""
	A state copy or a transition table could not be created.

	The chain that raised it should be considered unusable for further
	filling, but must still be torn down to release what it already owns.
	"""

	pass


class EmptyRegistryError (MarkovChainError):

	"""The chain has no non-terminal state to start a walk from."""

	pass


class ChainClosedError (MarkovChainError):

	"""The chain was used after teardown."""

	pass
