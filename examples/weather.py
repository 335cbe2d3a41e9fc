"""Weather forecast walk - using the engine with a custom state type.

Run with::

    python examples/weather.py

Observed daily weather is fed in as one long sequence.  Each walk is a
forecast that runs until a storm (a terminal state) or for a week.
"""

import dataclasses
import logging

import markovwalk


logging.basicConfig(level=logging.INFO)


@dataclasses.dataclass
class Day:

	"""One day's weather."""

	sky: str

	def __str__ (self) -> str:
		return self.sky


OBSERVED = "sun sun cloud rain rain cloud sun sun sun cloud rain storm sun cloud cloud rain sun".split()


def main () -> None:

	behaviors = markovwalk.StateBehaviors(
		print_state = lambda day: print(day, end=" "),
		compare = lambda a, b: markovwalk.behaviors.compare_natural(a.sky, b.sky),
		is_terminal = lambda day: day.sky == "storm",
	)

	with markovwalk.MarkovChain(behaviors, rng=markovwalk.RandomSource(2024)) as chain:
		chain.add_sequence(Day(sky) for sky in OBSERVED)

		start = chain.find(Day("sun"))

		for week in range(3):
			print(f"Week {week + 1}: ", end="")
			chain.generate_walk(start=start, max_length=7)
			print()


if __name__ == "__main__":
	main()
