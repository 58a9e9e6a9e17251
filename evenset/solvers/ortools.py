#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## ortools.py
##
"""
    Interface to ortools' CP-SAT Python API

    Google OR-Tools is open source software for combinatorial optimization, which seeks
    to find the best solution to a problem out of a very large set of possible solutions.
    The OR-Tools CP-SAT solver is an award-winning constraint programming solver
    that uses SAT (satisfiability) methods and lazy-clause generation.

    The division is posted as the same knapsack as the dynamic programming solver uses:
    one Boolean per item, the selected items must not exceed half of the total sum,
    and their sum is maximized. Its memory does not grow with the size of the values,
    but when several divisions are equally good, CP-SAT may return another one than
    the dynamic programming solver.

    Documentation of the solver's own Python API:
    https://google.github.io/or-tools/python/ortools/sat/python/cp_model.html

    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        ESD_ortools
"""
import sys  # for stdout checking
import warnings
from importlib.metadata import version as pkg_version, PackageNotFoundError
from typing import Optional

import numpy as np

from .solver_interface import SolverInterface, SolverStatus, ExitStatus
from ..exceptions import NotSupportedError, SolverNotInstalledError
from ..knapsack import Batch, total_sum


class ESD_ortools(SolverInterface):
    """
    Interface to the python 'ortools' CP-SAT API

    Requires that the 'ortools' python package is installed:
    $ pip install ortools

    See detailed installation instructions at:
    https://developers.google.com/optimization/install

    Creates the following attributes (see parent constructor for more):
    ort_model: the ortools.sat.python.cp_model.CpModel() holding the knapsack
    ort_solver: the ortools cp_model.CpSolver() instance used in solve()
    ort_vars: list of ortools Boolean variables, one per item (true if selected)
    capacity: the knapsack capacity, half of the total sum
    """

    @staticmethod
    def supported():
        # try to import the package
        try:
            import ortools
            return True
        except ImportError:
            return False

    @staticmethod
    def version() -> Optional[str]:
        """
        Returns the installed version of the solver's Python API.
        """
        try:
            return pkg_version("ortools")
        except PackageNotFoundError:
            return None

    def __init__(self, division=None, subsolver=None):
        """
        Constructor of the native solver object

        Creates the or-tools model and solver object (ort_model and ort_solver)
        and posts the knapsack of the given division.

        ort_model and ort_solver can both be modified externally before
        calling solve(), a prime way to use more advanced solver features

        Arguments:
        - division: EvenSetDivision, the items to divide (optional)
        - subsolver: None
        """
        if not self.supported():
            raise SolverNotInstalledError("ESD_ortools: Install the python 'ortools' package to use this solver interface")

        from ortools.sat.python import cp_model as ort

        assert(subsolver is None)

        # initialise the native solver objects
        self.ort_model = ort.CpModel()
        self.ort_solver = ort.CpSolver()
        self.ort_vars = []
        self.capacity = None

        super().__init__(name="ortools", division=division)

        self._post_knapsack()

    def _post_knapsack(self):
        """
            Post: sum of selected items <= total // 2, maximize sum of selected items
        """
        from ortools.sat.python import cp_model as ort

        total = total_sum(self.items, dtype=self.dtype)
        if total > np.iinfo(np.int64).max:
            raise NotSupportedError(f"ESD_ortools: CP-SAT only supports 64-bit integers, sum of items is {total}")
        self.capacity = total // 2

        self.ort_vars = [self.ort_model.NewBoolVar(f"x[{i}]") for i in range(len(self.items))]
        if len(self.ort_vars) == 0:
            return  # nothing to divide

        packed = ort.LinearExpr.WeightedSum(self.ort_vars, list(self.items))
        self.ort_model.Add(packed <= self.capacity)
        self.ort_model.Maximize(packed)

    def solve(self, time_limit=None, **kwargs):
        """
            Call the CP-SAT solver

            Arguments:
            - time_limit:  maximum solve time in seconds (float, optional)

            Additional keyword arguments:
            The ortools solver parameters are defined in its 'sat_parameters.proto' description:
            https://github.com/google/or-tools/blob/stable/ortools/sat/sat_parameters.proto

            You can use any of these parameters as keyword argument to `solve()` and they will
            be forwarded to the solver. Examples include:
                - num_search_workers=8          number of parallel workers
                - log_search_progress=True      to log the search process to stdout (default: False)
                - random_seed=0                 seed of the solver's random choices

            example:
            o.solve(num_search_workers=1, log_search_progress=True)

        """
        from ortools.sat.python import cp_model as ort

        # set time limit?
        if time_limit is not None:
            self.ort_solver.parameters.max_time_in_seconds = float(time_limit)

        # set additional keyword arguments in sat_parameters.proto
        for (kw, val) in kwargs.items():
            setattr(self.ort_solver.parameters, kw, val)

        if 'log_search_progress' in kwargs and hasattr(self.ort_solver, "log_callback") \
                and (sys.stdout != sys.__stdout__):
            # for IPython use, force output redirecting
            self.ort_solver.log_callback = print

        # call the solver, with parameters
        self.ort_status = self.ort_solver.Solve(self.ort_model)

        # new status, translate runtime
        self.es_status = SolverStatus(self.name)
        self.es_status.runtime = self.ort_solver.WallTime()

        # translate exit status
        if self.ort_status == ort.FEASIBLE:
            self.es_status.exitstatus = ExitStatus.FEASIBLE
            warnings.warn("ESD_ortools: stopped before proving the division optimal, "
                          "the difference between the batches may not be the smallest possible")
        elif self.ort_status == ort.OPTIMAL:
            self.es_status.exitstatus = ExitStatus.OPTIMAL
        elif self.ort_status == ort.MODEL_INVALID:
            raise Exception("OR-Tools says: model invalid:", self.ort_model.Validate())
        elif self.ort_status == ort.UNKNOWN:
            # can happen when timeout is reached...
            self.es_status.exitstatus = ExitStatus.UNKNOWN
        else:  # selecting no item is always feasible, INFEASIBLE means something is off
            raise NotImplementedError(self.ort_status)

        # True/False depending on self.es_status
        has_sol = self._solve_return(self.es_status)

        # translate the selected items
        self.objective_value_ = None
        self._batches_map = []
        if has_sol:
            self._batches_map = [Batch.SELECTED if self.ort_solver.Value(x) else Batch.COMPLEMENT
                                 for x in self.ort_vars]
            self.objective_value_ = sum(item for item, batch in zip(self.items, self._batches_map)
                                        if batch == Batch.SELECTED)

        return has_sol
