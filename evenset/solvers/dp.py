#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## dp.py
##
"""
    Dynamic programming solver for the even set division

    Reduces the division to a 0-1 knapsack with capacity half of the total sum
    and solves it exactly with the table of :mod:`evenset.knapsack`.
    Runtime and memory are O(n * total_sum), so this solver is meant for
    inputs with a modest number of items and value range.

    This is the default solver: its backward walk over the table decides
    deterministically between equally good divisions.

    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        ESD_dp
"""
import logging
import time
from typing import Optional

import numpy as np

from .solver_interface import SolverInterface, SolverStatus, ExitStatus
from ..exceptions import NotSupportedError
from ..knapsack import DEFAULT_MAX_TABLE_BYTES, total_sum, knapsack_table, batches_map

logger = logging.getLogger(__name__)


class ESD_dp(SolverInterface):
    """
    Dynamic programming solver, only requires numpy

    Creates the following attributes (see parent constructor for more):
        - capacity: the knapsack capacity of the latest `solve()` (or None)
    """

    @staticmethod
    def supported():
        # numpy is a dependency of evenset itself
        return True

    @staticmethod
    def version() -> Optional[str]:
        """
        Returns the installed version of numpy, which computes the table.
        """
        return np.__version__

    def __init__(self, division=None, subsolver=None):
        """
        Constructor of the solver object

        Arguments:
        - division: EvenSetDivision, the items to divide (optional)
        - subsolver: None
        """
        assert(subsolver is None)
        self.capacity = None

        super().__init__(name="dp", division=division)

    def solve(self, time_limit=None, max_table_bytes=DEFAULT_MAX_TABLE_BYTES):
        """
            Build the knapsack table and walk it back to find the two batches

            The table is discarded once the batches are known.

            Arguments:
            - time_limit: not supported, must be None
            - max_table_bytes: refuse to build a larger table, None for no limit (default: 1 GiB)

            Raises ArithmeticOverflowError if the total sum does not fit the division's dtype,
            and ResourceExhaustedError if the table is too large.
        """
        if time_limit is not None:
            raise NotSupportedError("ESD_dp: time limits are not supported, bound the number "
                                    "and size of the items instead")

        start = time.time()

        total = total_sum(self.items, dtype=self.dtype)
        self.capacity = total // 2

        table = knapsack_table(self.items, self.capacity, dtype=self.dtype, max_table_bytes=max_table_bytes)
        self._batches_map = batches_map(self.items, table, self.capacity)
        self.objective_value_ = int(table[-1, -1])

        self.es_status = SolverStatus(self.name)
        self.es_status.runtime = time.time() - start
        self.es_status.exitstatus = ExitStatus.OPTIMAL
        logger.debug("Divided %d items with total %d in %.3f seconds, selected batch sums to %d",
                     len(self.items), total, self.es_status.runtime, self.objective_value_)

        return self._solve_return(self.es_status)
