"""
markovwalk - weighted random walks over Markov chains of any state type.

A chain is built incrementally: each distinct state is stored once, and
every observed pair of consecutive states strengthens the transition
between them.  Walks then follow transitions in proportion to how often
they were observed, stopping at a terminal state, at a dead end, or at a
length limit.

The engine never inspects a state.  Equality, copying, release, rendering,
and the end-of-walk test are supplied per chain as ``StateBehaviors``, so
the same engine drives both bundled demos:

- **Tweets** (``markovwalk.tweets``): words from a text corpus, sentences
  end at a word ending in ``.``.
- **Snakes and ladders** (``markovwalk.snakes_and_ladders``): board cells,
  one transition per die face or a single jump along a ladder or snake.

Minimal example:

    ```python
    import markovwalk

    chain = markovwalk.MarkovChain(markovwalk.StateBehaviors(is_terminal=lambda w: w.endswith(".")))
    chain.add_sequence(["the", "cat", "sat."])
    chain.generate_walk(start=chain.find("the"), max_length=10, rng=markovwalk.RandomSource(42))
    chain.teardown()
    ```

Package-level exports: ``MarkovChain``, ``StateBehaviors``, ``RandomSource``,
``AllocationError``, ``EmptyRegistryError``, ``ChainClosedError``.
"""

import markovwalk.behaviors
import markovwalk.errors
import markovwalk.markov_chain
import markovwalk.random_source


MarkovChain = markovwalk.markov_chain.MarkovChain
StateBehaviors = markovwalk.behaviors.StateBehaviors
RandomSource = markovwalk.random_source.RandomSource
AllocationError = markovwalk.errors.AllocationError
EmptyRegistryError = markovwalk.errors.EmptyRegistryError
ChainClosedError = markovwalk.errors.ChainClosedError
