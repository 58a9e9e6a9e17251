"""
    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        SolverInterface
        SolverStatus
        ExitStatus

    ==================
    Module description
    ==================
    Contains the abstract class `SolverInterface` for defining solver interfaces,
    as well as a class `SolverStatus` that collects solver statistics,
    and the `ExitStatus` class that represents possible exist statuses.

    Each solver has its own class that inherits from `SolverInterface`.

"""
from enum import Enum

import numpy as np


class SolverInterface(object):
    """
        Abstract class for defining solver interfaces. All classes implementing
        the ``SolverInterface`` divide the items of an `EvenSetDivision` in two batches.
    """

    # REQUIRED functions:

    @staticmethod
    def supported():
        """
            Check for support in current system setup. Return True if the system
            has package installed or supports solver, else returns False.

        Returns:
            [bool]: Solver support by current system setup.
        """
        return False

    def __init__(self, name="dummy", division=None, subsolver=None):
        """
            Initalize solver interface

            - name: str: name of this solver
            - division: EvenSetDivision object, optional: the items to divide
            - subsolver: string: not used/allowed here

            Creates the following attributes:
            - name: str, name of the solver
            - items: tuple of int, the items to divide
            - dtype: numpy integer type used to accumulate sums
            - es_status: SolverStatus(), the status after a `solve()`
            - objective_value_: the sum of the selected batch after solving (or None)
            - _batches_map: list of `Batch`, one per item, empty until solved
        """
        assert(subsolver is None)

        self.name = name
        self.es_status = SolverStatus(self.name) # status of solving this division
        self.objective_value_ = None
        self._batches_map = []

        if division is not None:
            self.items = division.items
            self.dtype = division.dtype
        else:
            self.items = tuple()
            self.dtype = np.int64

    def status(self):
        return self.es_status

    def solve(self, time_limit=None, **kwargs):
        """
            Divide the items in two batches, storing the assignment for `batches_map()`

            Overwrites self.es_status

        :param time_limit: optional, time limit in seconds
        :type time_limit: int or float

        :return: Bool:
            - True      if a division is found (not necessarily optimal, e.g. could be after timeout)
            - False     if no division is found
        """
        return False

    def objective_value(self):
        """
            Returns the sum of the selected batch of the latest solver run

        :return: an integer or 'None' if it is not run
        """
        return self.objective_value_

    def batches_map(self):
        """
            Returns the batch of every item found by the latest solver run

        :return: list of `Batch`, index-aligned with the items (empty if not run)
        """
        return list(self._batches_map)

    # shared helper functions

    def _solve_return(self, es_status):
        """
            Take a SolverStatus object and return
            the proper answer (True/False)

        :param es_status: status extracted from the solver
        :type es_status: SolverStatus

        :return: Bool
            - True      if a division is found (not necessarily optimal, e.g. could be after timeout)
            - False     if no division is found
        """
        return (es_status.exitstatus == ExitStatus.OPTIMAL or \
                es_status.exitstatus == ExitStatus.FEASIBLE)

    def __repr__(self):
        return "{}({} items)".format(type(self).__name__, len(self.items))


#==============================================================================
class ExitStatus(Enum):
    """
    Exit status of the solver

    Attributes:

        `NOT_RUN`: Has not been run

        `OPTIMAL`: Division with the smallest difference found

        `FEASIBLE`: Division found, but not proven optimal (e.g. the time limit was reached)

        `ERROR`: Some error occured (solver should have thrown Exception)

        `UNKNOWN`: Outcome unknown, for example when timeout is reached before any division
    """
    NOT_RUN = 1
    OPTIMAL = 2
    FEASIBLE = 3
    ERROR = 5
    UNKNOWN = 6

#==============================================================================
class SolverStatus(object):
    """
        Status and statistics of a solver run
    """
    exitstatus: ExitStatus
    runtime: float

    def __init__(self, name):
        self.solver_name = name
        self.exitstatus = ExitStatus.NOT_RUN
        self.runtime = None

    def __repr__(self):
        return "{} ({} seconds)".format(self.exitstatus, self.runtime)
