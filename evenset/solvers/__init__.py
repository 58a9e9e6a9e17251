"""
    evenset interfaces to solvers

    Every solver takes the items of an `EvenSetDivision` and labels each item
    with the batch it belongs to.

    =========================
    List of helper submodules
    =========================
    .. autosummary::
        :nosignatures:

        solver_interface
        utils

    =========================
    List of solver submodules
    =========================
    .. autosummary::
        :nosignatures:

        dp
        ortools
"""

from .utils import SolverLookup
from .dp import ESD_dp
from .ortools import ESD_ortools
