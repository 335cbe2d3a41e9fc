"""Caller-supplied behaviors that let the chain handle any state type.

The engine never looks inside a state.  Rendering, equality, copying,
releasing, and the end-of-walk test are all delegated to a
:class:`StateBehaviors` instance given to the chain when it is created.
"""

import copy
import dataclasses
import sys
import typing


StateType = typing.TypeVar("StateType")

PrintFunc = typing.Callable[[StateType], None]
CompareFunc = typing.Callable[[StateType, StateType], int]
CopyFunc = typing.Callable[[StateType], typing.Optional[StateType]]
FreeFunc = typing.Callable[[StateType], None]
IsTerminalFunc = typing.Callable[[StateType], bool]


def print_plain (state: typing.Any) -> None:

	"""Write a state followed by a single space to standard output."""

	sys.stdout.write(f"{state} ")


def compare_natural (a: typing.Any, b: typing.Any) -> int:

	"""Three-way comparison using the values' own ordering."""

	return (a > b) - (a < b)


def free_nothing (state: typing.Any) -> None:

	"""Release nothing; Python reclaims the copy once the chain drops it."""

	return None


def never_terminal (state: typing.Any) -> bool:

	"""Treat every state as one a walk may continue from."""

	return False


@dataclasses.dataclass
class StateBehaviors (typing.Generic[StateType]):

	"""
	The five operations a chain needs from its state type.

	Attributes:
		print_state: Render one state (no return value).
		compare: Return a negative, zero, or positive int; zero means the
			two states are the same state.
		copy: Return a new copy owned by the chain.  Returning ``None`` or
			raising ``MemoryError`` is treated as an allocation failure.
		free: Release one copy previously returned by ``copy``.
		is_terminal: Return True if a walk must stop on this state.

	Example:
		```python
		behaviors = StateBehaviors(
			print_state = lambda word: print(word, end=" "),
			compare = compare_natural,
			is_terminal = lambda word: word.endswith("."),
		)
		```
	"""

	print_state: PrintFunc = print_plain
	compare: CompareFunc = compare_natural
	copy: CopyFunc = copy.deepcopy
	free: FreeFunc = free_nothing
	is_terminal: IsTerminalFunc = never_terminal
