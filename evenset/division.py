#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## division.py
##
"""
    The `EvenSetDivision` class divides a set of numbers into two batches,
    trying to make the sums of the batches as equal as possible.

    The items are fixed when the object is created. Processing only starts
    when calc() is called, which asks a solver to label every item with its
    `Batch`; the batches can then be queried by index. calc() can be called
    again, it recomputes and overwrites the previous result.

    See the examples for basic usage, which involves:

    - creation, e.g. d = EvenSetDivision([3, 1, 4, 1, 5])
    - calculating, e.g. d.calc()
    - querying, e.g. d.selected_batch(), d.complement_batch(), d.difference()

    ===============
    List of classes
    ===============
    .. autosummary::
        :nosignatures:

        EvenSetDivision
"""
import warnings

import numpy as np

from .exceptions import InvalidInputError
from .knapsack import Batch
from .solvers.utils import SolverLookup
from .solvers.solver_interface import SolverInterface, SolverStatus, ExitStatus


class EvenSetDivision(object):
    """
    Divides non-negative integers in two batches with sums as equal as possible
    """

    def __init__(self, items, dtype=np.int64):
        """
            Arguments of constructor:

            - `items`: sequence of non-negative integers (Python ints or numpy integers)
            - `dtype`: numpy integer type used to accumulate the sums (default: np.int64),
                       calc() raises ArithmeticOverflowError if the total does not fit

            Raises InvalidInputError on negative or non-integer items.
        """
        if not np.issubdtype(np.dtype(dtype), np.integer):
            raise InvalidInputError(f"dtype must be a numpy integer type, got {dtype}")
        self.dtype = np.dtype(dtype)

        if isinstance(items, np.ndarray) and items.ndim != 1:
            raise InvalidInputError(f"items must be one-dimensional, got shape {items.shape}")
        try:
            items = list(items)
        except TypeError as e:
            raise InvalidInputError(f"items must be a sequence of integers, got {type(items).__name__}") from e

        for i, item in enumerate(items):
            if isinstance(item, (bool, np.bool_)) or not isinstance(item, (int, np.integer)):
                raise InvalidInputError(f"Item {i} is not an integer: {item!r}")
            if item < 0:
                raise InvalidInputError(f"Item {i} is negative: {item}")
        self._items = tuple(int(item) for item in items)

        self.es_status = SolverStatus("EvenSetDivision") # status of the latest calc(), will be replaced
        self._batches_map = []

    @property
    def items(self):
        """The items to divide, as a tuple of ints"""
        return self._items

    def __len__(self):
        return len(self._items)

    # solver: name of supported solver or any SolverInterface class
    def calc(self, solver=None, time_limit=None, **kwargs):
        """ Send the items to a solver and store the batch of every item

        :param solver: name of a solver to use. Run SolverLookup.supported() to find out the valid solver names on your system. (default: None = "dp")
        :type solver: None (default) or a name in SolverLookup.supported() or a SolverInterface class (Class, not object!)

        :param time_limit: optional, time limit in seconds, not supported by the "dp" solver
        :type time_limit: int or float

        Any other keyword argument is passed on to the solver's `solve()`,
        e.g. `max_table_bytes` for "dp" or CP-SAT parameters for "ortools".
        """
        # forget the previous result, also when the solver raises
        self.es_status = SolverStatus("EvenSetDivision")
        self._batches_map = []

        if isinstance(solver, type) and issubclass(solver, SolverInterface):
            # for advanced use, call its constructor with this division
            s = solver(self)
        else:
            s = SolverLookup.get(solver, self)

        has_sol = s.solve(time_limit=time_limit, **kwargs)
        # store status and result (s object has no further use)
        self.es_status = s.status()
        self._batches_map = s.batches_map()

        if not has_sol:
            warnings.warn(f"Solver {s.name} did not find a division ({self.es_status}), "
                          f"both batches are empty")

    def is_calculated(self):
        """
            Whether the latest calc() labelled every item
        """
        return len(self._batches_map) == len(self._items) and self.es_status.exitstatus != ExitStatus.NOT_RUN

    def status(self):
        """
            Returns the status of the latest calc()

            Status information includes exit status (optimality) and runtime.

        :return: an object of :class:`SolverStatus`
        """
        return self.es_status

    def batches_map(self):
        """
            Returns the batch of every item, empty before calc()

        :return: list of :class:`Batch`, index-aligned with the items
        """
        return list(self._batches_map)

    def selected_batch(self):
        """
            Indices of the items picked by the knapsack, whose sum is at most half of the total
        """
        return self._batch(Batch.SELECTED)

    def complement_batch(self):
        """
            Indices of the remaining items
        """
        return self._batch(Batch.COMPLEMENT)

    def _batch(self, batch):
        return [idx for idx, b in enumerate(self._batches_map) if b == batch]

    def batch_sums(self):
        """
            Sum of the selected batch and sum of the complement batch, (0, 0) before calc()
        """
        return (sum(self._items[idx] for idx in self.selected_batch()),
                sum(self._items[idx] for idx in self.complement_batch()))

    def difference(self):
        """
            Absolute difference between the sums of the two batches
        """
        first, second = self.batch_sums()
        return abs(first - second)

    def __repr__(self):
        if not self.is_calculated():
            return "EvenSetDivision({} items, not calculated)".format(len(self._items))
        return "EvenSetDivision({} items, batches {} | {}, difference {})".format(
            len(self._items), self.selected_batch(), self.complement_batch(), self.difference())
