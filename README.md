# robopoker

Pure-Python building blocks for heads-up No-Limit Texas Hold'em solvers. It has
no dependencies outside the standard library.

## Modules

- `robopoker.constants`: game tree, Sinkhorn, clustering and training
  parameters (stack of 100, blinds of 1 and 2, at most 16 edges in a path,
  Sinkhorn temperature 0.025 with up to 128 iterations, and so on).
- `robopoker.odds.Odds`: a raise size as a fraction of the pot. `Odds.GRID`
  holds the ten standard sizes from 1/4 to 4/1, and `Odds.nearest(a, b)` picks
  the grid size at or just below the ratio `a / b`. `float(odds)` gives the
  ratio, and `str(odds)` gives a compact label such as `+2` or `-3`.
- `robopoker.edge.Edge` and `EdgeKind`: abstract betting edges (draw, fold,
  check, call, raise by odds, shove). `to_byte` / `from_byte` is a four-bit
  encoding whose raises are indexed into `Odds.GRID`. `to_u64` / `from_u64` is
  a tagged encoding that carries the raw odds.
- `robopoker.path.Path`: up to 16 edges packed four bits each into a 64-bit
  integer, first edge lowest. It iterates forwards and (with `reversed`)
  backwards. It has `length()`, and `raises()` counts the aggressive edges
  since the last draw. It converts to and from signed 64-bit values.
- `robopoker.turn.Turn` and `TurnKind`: terminal, chance, or a player's
  choice. They print as `XX`, `??` and `P<n>`, and `Turn.parse` reads them back.
- `robopoker.seat.Seat` and `State`: a player's stack, stake on the current
  street, total spend, betting state and cards (any value you like).
- `robopoker.settlement.Settlement` and `robopoker.showdown.Showdown`: side-pot
  settlement. A hand strength is any ordered value that the caller supplies.
- `robopoker.abstraction.Abstraction`, `AbstractionKind` and `Street`: 64-bit
  bucket labels with a street tag, a hash signature and an index. River equity
  buckets (`PERCENT`, 101 of them) convert to and from probabilities. Flop and
  turn clusters are `LEARNED`, and preflop hands are `PREFLOP`. They print as
  `R::32` and parse back with `Abstraction.parse`.
- `robopoker.histogram.Histogram`: sample counts over abstractions, with
  densities, `pdf()`, `equity()`, `distribution()`, and a text bar chart
  through `str()` for equity histograms.
- `robopoker.potential.Potential`: a value per abstraction, used as a
  log-space transport potential or a normalised distribution.
- `robopoker.pair.Pair`: the XOR of two abstractions, used as an order-free key.
- `robopoker.metric.Metric`: ground distances between abstractions, scaled so
  that the largest is 1. `emd()` uses Sinkhorn transport for learned histograms
  and the cumulative-distribution distance for equity histograms.
- `robopoker.sinkhorn.Sinkhorn`: entropy-regularised optimal transport.
- `robopoker.heuristic.Heuristic`: a greedy nearest-target transport plan.
- `robopoker.equity`: the distances `variation`, `euclidean`, `chisquare` and
  `divergent` between equity histograms.
- `robopoker.emd.EMD`: a random metric together with three random histograms,
  for exercising the transport solvers.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Settling a pot when one player is all in for less than the others:

```python
from robopoker.seat import State
from robopoker.settlement import Settlement
from robopoker.showdown import Showdown

ledger = [
    Settlement(50, State.SHOVING, 3),   # strongest hand, all in for 50
    Settlement(100, State.BETTING, 2),
    Settlement(100, State.BETTING, 1),
]
print([s.reward for s in Showdown(ledger).settle()])  # [150, 100, 0]
```

Packing a betting path:

```python
from robopoker.edge import Edge, EdgeKind
from robopoker.odds import Odds
from robopoker.path import Path

path = Path.from_edges([Edge(EdgeKind.DRAW), Edge.raise_(Odds(1, 2)), Edge(EdgeKind.CALL)])
print(path, path.length(), path.raises())  # .?.+2.* 3 1
```

The earth mover's distance between random learned histograms:

```python
from robopoker.emd import EMD

sample = EMD.random()
print(sample.sinkhorn().cost(), sample.heuristic().cost())
```

## What it does not do

There is no card model: no deck, hand evaluator or equity calculation from real
cards. There is also no game engine that deals and applies actions, no k-means
training of abstractions, and no saving or loading of lookup tables, metrics
or transitions to disk or a database. There is no solver training loop, no
command-line program and no server. Strengths, hole cards and the distances in a
`Metric` are whatever the caller supplies.