"""Seeded source of uniform integer draws.

Walks make two kinds of draw: a registry index when picking a start state,
and a point in a node's cumulative weight range when stepping.  Both go
through :meth:`RandomSource.draw_uniform`, so a fixed seed and the same
sequence of calls always reproduce the same walks.

A program seeds the process-wide source once at startup with
:func:`seed_process`.  Library code takes a source as a parameter and only
falls back to :func:`default_source` when none is given.
"""

import random
import typing


class RandomSource:

	"""Uniform integer draws from a private, seedable generator."""

	def __init__ (self, seed: typing.Optional[int] = None) -> None:

		"""Create a source; ``seed=None`` seeds from system entropy."""

		self.seed = seed
		self._rng = random.Random(seed)


	def reseed (self, seed: typing.Optional[int]) -> None:

		"""Restart the draw sequence from ``seed``."""

		self.seed = seed
		self._rng.seed(seed)


	def draw_uniform (self, bound: int) -> int:

		"""Return an integer in ``[0, bound)``.

		Raises:
			ValueError: ``bound`` is not positive.
		"""

		if bound <= 0:
			raise ValueError(f"Bound must be positive, got {bound}")

		return self._rng.randrange(bound)


_default_source: typing.Optional[RandomSource] = None


def seed_process (seed: typing.Optional[int]) -> RandomSource:

	"""Install a freshly seeded process-wide source and return it."""

	global _default_source
	_default_source = RandomSource(seed)
	return _default_source


def default_source () -> RandomSource:

	"""Return the process-wide source, creating an unseeded one if needed."""

	global _default_source

	if _default_source is None:
		_default_source = RandomSource()

	return _default_source
