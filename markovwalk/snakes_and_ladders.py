"""Snakes and ladders: random games as walks over the board.

Each of the 100 cells is a state.  A cell at the foot of a ladder or the
head of a snake has a single transition to where it leads; every other cell
has one transition per die face, to each of the next six cells on the board.
Cell 100 ends the game.
"""

import dataclasses
import logging
import sys
import typing

import markovwalk.behaviors
import markovwalk.markov_chain
import markovwalk.random_source
import markovwalk.registry


logger = logging.getLogger(__name__)

BOARD_SIZE = 100
DICE_MAX = 6
MAX_GENERATION_LENGTH = 60

# (from, to) pairs: a ladder when from < to, otherwise a snake.
SHORTCUTS: typing.List[typing.Tuple[int, int]] = [
	(13, 4),
	(85, 17),
	(95, 67),
	(97, 58),
	(66, 89),
	(87, 31),
	(57, 83),
	(91, 25),
	(28, 50),
	(35, 11),
	(8, 30),
	(41, 62),
	(81, 43),
	(69, 32),
	(20, 39),
	(33, 70),
	(79, 99),
	(23, 76),
	(15, 47),
	(61, 14),
]


@dataclasses.dataclass(frozen=True)
class Cell:

	"""
	One square of the board.

	Attributes:
		number: Cell number, 1 to ``BOARD_SIZE``.
		ladder_to: Where the ladder starting here leads, if any.
		snake_to: Where the snake starting here leads, if any.
	"""

	number: int
	ladder_to: typing.Optional[int] = None
	snake_to: typing.Optional[int] = None

	@property
	def shortcut_to (self) -> typing.Optional[int]:

		"""Return the ladder or snake destination, or None."""

		if self.ladder_to is not None:
			return self.ladder_to

		return self.snake_to


def build_board (shortcuts: typing.Sequence[typing.Tuple[int, int]] = SHORTCUTS, size: int = BOARD_SIZE) -> typing.List[Cell]:

	"""Return the cells of the board in order, with ladders and snakes placed."""

	ladders: typing.Dict[int, int] = {}
	snakes: typing.Dict[int, int] = {}

	for start, end in shortcuts:

		if not (1 <= start <= size and 1 <= end <= size):
			raise ValueError(f"Shortcut {start}->{end} is off the board")

		if start < end:
			ladders[start] = end
		else:
			snakes[start] = end

	return [Cell(number=n, ladder_to=ladders.get(n), snake_to=snakes.get(n)) for n in range(1, size + 1)]


def is_last_cell (cell: Cell) -> bool:

	"""Return True for the final cell."""

	return cell.number == BOARD_SIZE


def print_cell (cell: Cell) -> None:

	"""Write a cell as ``[n]``, its shortcut if any, and an arrow unless last."""

	sys.stdout.write(f"[{cell.number}]")

	if cell.snake_to is not None:
		sys.stdout.write(f"-snake to {cell.snake_to}")

	elif cell.ladder_to is not None:
		sys.stdout.write(f"-ladder to {cell.ladder_to}")

	if not is_last_cell(cell):
		sys.stdout.write(" ->")


def compare_cells (a: Cell, b: Cell) -> int:

	"""Order cells by number."""

	return a.number - b.number


def copy_cell (cell: Cell) -> Cell:

	"""Return an independent copy of a cell."""

	return dataclasses.replace(cell)


def cell_behaviors () -> markovwalk.behaviors.StateBehaviors[Cell]:

	"""Return the behaviors for a chain of board cells."""

	return markovwalk.behaviors.StateBehaviors(
		print_state = print_cell,
		compare = compare_cells,
		copy = copy_cell,
		is_terminal = is_last_cell,
	)


def new_chain (rng: typing.Optional[markovwalk.random_source.RandomSource] = None) -> markovwalk.markov_chain.MarkovChain[Cell]:

	"""Create an empty board chain."""

	return markovwalk.markov_chain.MarkovChain(cell_behaviors(), rng=rng)


def fill_chain (chain: markovwalk.markov_chain.MarkovChain[Cell], board: typing.Optional[typing.List[Cell]] = None) -> markovwalk.markov_chain.MarkovChain[Cell]:

	"""
	Register every cell and add its transitions.
	"""

	if board is None:
		board = build_board()

	nodes = [chain.get_or_insert(cell) for cell in board]

	for index, cell in enumerate(board):

		from_node = nodes[index]

		if cell.shortcut_to is not None:
			chain.link(from_node, nodes[cell.shortcut_to - 1])
			continue

		for roll in range(1, DICE_MAX + 1):
			target = index + roll

			if target >= len(board):
				break

			chain.link(from_node, nodes[target])

	logger.info(f"Filled board chain with {len(chain)} cells")

	return chain


def generate_walks (
	chain: markovwalk.markov_chain.MarkovChain[Cell],
	count: int,
	first_node: typing.Optional[markovwalk.registry.ChainNode[Cell]] = None,
	max_length: int = MAX_GENERATION_LENGTH,
	rng: typing.Optional[markovwalk.random_source.RandomSource] = None
) -> typing.List[typing.List[Cell]]:

	"""
	Print ``count`` numbered games, all starting from ``first_node``.

	``first_node`` defaults to cell 1.  Returns the cells of every game.
	"""

	if first_node is None:
		first_node = chain.find(Cell(number=1))

	walks: typing.List[typing.List[Cell]] = []

	for i in range(count):
		sys.stdout.write(f"Random Walk {i + 1}: ")
		walks.append(chain.generate_walk(start=first_node, max_length=max_length, rng=rng))
		sys.stdout.write("\n")

	return walks
