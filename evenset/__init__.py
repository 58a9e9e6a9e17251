"""
    evenset is a numpy-based library that divides a set of non-negative integers
    into two batches whose sums are as equal as possible.

    The package consists of 4 modules:
    - `division`: the `EvenSetDivision` object, holds the items and queries the batches after `calc()`
    - `knapsack`: the dynamic programming core, a 0-1 knapsack with capacity half of the total sum
    - `solvers`: classes that compute the batches, the dynamic programming one and an OR-Tools CP-SAT one
    - `exceptions`: the errors raised on invalid input, overflow and too large tables
"""

__version__ = "0.3.1"


from .knapsack import Batch
from .division import EvenSetDivision
from .solvers.utils import SolverLookup
