"""Random walks over a filled chain.

A walk starts at a node (given, or drawn uniformly from the non-terminal
nodes), then repeatedly picks the next node in proportion to the observed
transition counts.  It ends after the first terminal state, at a node with
no outgoing transitions, or once ``max_length`` states have been emitted,
whichever comes first.  The start state always counts towards the length.
"""

import logging
import typing

import markovwalk.errors
import markovwalk.random_source
import markovwalk.registry


logger = logging.getLogger(__name__)


def random_start_node (chain: "markovwalk.markov_chain.MarkovChain", rng: typing.Optional[markovwalk.random_source.RandomSource] = None) -> markovwalk.registry.ChainNode:

	"""
	Draw registry positions uniformly until one holds a non-terminal state.

	Raises:
		EmptyRegistryError: No registered state can start a walk.
	"""

	rng = rng or markovwalk.random_source.default_source()
	nodes = chain.nodes
	is_terminal = chain.behaviors.is_terminal

	# Without at least one candidate the redraw loop below would never end.
	if not any(not is_terminal(node.state) for node in nodes):
		raise markovwalk.errors.EmptyRegistryError(f"No non-terminal state among {len(nodes)} registered states")

	while True:
		node = nodes[rng.draw_uniform(len(nodes))]

		if not is_terminal(node.state):
			return node


def next_node (node: markovwalk.registry.ChainNode, rng: typing.Optional[markovwalk.random_source.RandomSource] = None) -> typing.Optional[markovwalk.registry.ChainNode]:

	"""
	Choose the node that follows ``node``, or None if it has no transitions.
	"""

	table = node.transitions

	if not table:
		return None

	rng = rng or markovwalk.random_source.default_source()

	return table.select(rng.draw_uniform(table.total_weight()))


def iter_walk (
	chain: "markovwalk.markov_chain.MarkovChain",
	start: typing.Optional[markovwalk.registry.ChainNode] = None,
	max_length: typing.Optional[int] = None,
	rng: typing.Optional[markovwalk.random_source.RandomSource] = None
) -> typing.Iterator[markovwalk.registry.ChainNode]:

	"""Yield the nodes of one walk, starting node first.

	Parameters:
		chain: The chain to walk.
		start: Node to begin at.  ``None``, or a terminal node, means a random
			non-terminal start is drawn instead.
		max_length: Most nodes to yield, or ``None`` for no limit.
		rng: Source of draws; defaults to the process-wide source.
	"""

	chain.ensure_open()

	if max_length is not None and max_length < 1:
		raise ValueError(f"max_length must be at least 1, got {max_length}")

	rng = rng or markovwalk.random_source.default_source()
	is_terminal = chain.behaviors.is_terminal

	if start is not None and is_terminal(start.state):
		logger.warning(f"Start state {start.state!r} is terminal, drawing a random start instead")
		start = None

	if start is None:
		start = random_start_node(chain, rng)

	current = start
	emitted = 1
	yield current

	while max_length is None or emitted < max_length:

		following = next_node(current, rng)

		if following is None:
			logger.debug(f"Walk ended after {emitted} states: {current.state!r} has no transitions")
			return

		yield following
		emitted += 1

		if is_terminal(following.state):
			logger.debug(f"Walk ended after {emitted} states: reached terminal state {following.state!r}")
			return

		current = following

	logger.debug(f"Walk ended at the length limit of {max_length}")


def generate_walk (
	chain: "markovwalk.markov_chain.MarkovChain",
	start: typing.Optional[markovwalk.registry.ChainNode] = None,
	max_length: typing.Optional[int] = None,
	rng: typing.Optional[markovwalk.random_source.RandomSource] = None
) -> typing.List[typing.Any]:

	"""
	Run one walk, printing each state with the chain's print behavior.

	Returns the emitted states in order.  Any separator after the last state
	is left to the caller.
	"""

	emitted: typing.List[typing.Any] = []

	for node in iter_walk(chain, start=start, max_length=max_length, rng=rng):
		chain.behaviors.print_state(node.state)
		emitted.append(node.state)

	return emitted
