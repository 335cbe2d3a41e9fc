import dataclasses
import typing

import markovwalk.errors


DestinationType = typing.TypeVar("DestinationType")


@dataclasses.dataclass(eq=False)
class Transition (typing.Generic[DestinationType]):

	"""
	One weighted edge: how often ``destination`` followed the owning node.
	"""

	destination: DestinationType
	count: int = 1


class TransitionTable (typing.Generic[DestinationType]):

	"""
	The outgoing edges of one node, in the order they were first seen.

	Destinations are matched by identity, not by value: they are always nodes
	owned by the same chain, so two entries can never refer to equal but
	distinct objects.  Entries are only ever appended and their counts only
	ever increased.
	"""

	def __init__ (self) -> None:

		"""
		Initialize an empty table.
		"""

		self._entries: typing.List[Transition[DestinationType]] = []


	def __len__ (self) -> int:

		return len(self._entries)


	def __iter__ (self) -> typing.Iterator[Transition[DestinationType]]:

		return iter(self._entries)


	def __bool__ (self) -> bool:

		return bool(self._entries)


	def entries (self) -> typing.List[typing.Tuple[DestinationType, int]]:

		"""
		Return (destination, count) pairs in table order.
		"""

		return [(entry.destination, entry.count) for entry in self._entries]


	def find_entry (self, destination: DestinationType) -> typing.Optional[int]:

		"""
		Return the index of the entry for ``destination``, or None.
		"""

		for index, entry in enumerate(self._entries):
			if entry.destination is destination:
				return index

		return None


	def add_or_increment (self, destination: DestinationType) -> Transition[DestinationType]:

		"""
		Count one more occurrence of ``destination`` and return its entry.

		An existing entry is incremented in place; otherwise a new entry with
		a count of 1 is appended after all existing ones.

		Raises:
			AllocationError: The table could not grow.
		"""

		index = self.find_entry(destination)

		if index is not None:
			entry = self._entries[index]
			entry.count += 1
			return entry

		try:
			entry = Transition(destination=destination)
			self._entries.append(entry)

		except MemoryError as exc:
			raise markovwalk.errors.AllocationError("Failed to grow transition table") from exc

		return entry


	def total_weight (self) -> int:

		"""
		Return the sum of all counts.
		"""

		return sum(entry.count for entry in self._entries)


	def select (self, draw: int) -> DestinationType:

		"""
		Map a draw in ``[0, total_weight)`` to a destination.

		Each entry owns a run of ``count`` consecutive values, laid out in
		table order.  For entries ``[(B, 1), (C, 3)]`` a draw of 0 selects B and
		draws 1 to 3 select C.
		"""

		if not self._entries:
			raise ValueError("Cannot select from an empty transition table")

		if draw < 0:
			raise ValueError(f"Draw must be non-negative, got {draw}")

		remaining = draw

		for entry in self._entries:
			if remaining < entry.count:
				return entry.destination
			remaining -= entry.count

		raise ValueError(f"Draw {draw} is outside the table weight {self.total_weight()}")


	def clear (self) -> None:

		"""
		Drop every entry.
		"""

		self._entries.clear()
