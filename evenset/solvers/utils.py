#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## utils.py
##
"""
    Utilities for handling solvers

    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        SolverLookup
"""

from .dp import ESD_dp
from .ortools import ESD_ortools


class SolverLookup():
    @classmethod
    def base_solvers(cls):
        """
            Return ordered list of (name, class) of base evenset
            solvers

            First one is default
        """
        return [
                ("dp", ESD_dp),
                ("ortools", ESD_ortools),
               ]

    @classmethod
    def print_status(cls):
        """
            Print all evenset solvers and their installation status on this system.
        """
        for (basename, ESD_slv) in cls.base_solvers():
            if ESD_slv.supported():
                print(f"{basename}: Supported, ready to use.")
            else:
                print(f"{basename}: Not supported (missing Python package).")

    @classmethod
    def supported(cls):
        """
            Return the list of names of all solvers supported on this system.

            If a solver name is returned, it means that the solver's `.supported()` function returns True
            and it is hence ready for immediate use.

            Typical use case is to use these names in `SolverLookup.get(name)`.
        """
        return [basename for (basename, ESD_slv) in cls.base_solvers() if ESD_slv.supported()]

    @classmethod
    def get(cls, name=None, division=None, **init_kwargs):
        """
            get a specific solver (by name), with 'division' passed to its constructor

            This is the preferred way to initialise a solver from its name

            :param name: name of the solver to use
            :param division: EvenSetDivision to pass to the solver constructor
            :param init_kwargs: additional keyword arguments to pass to the solver constructor
        """
        solver_cls = cls.lookup(name=name)
        return solver_cls(division, **init_kwargs)

    @classmethod
    def lookup(cls, name=None):
        """
            lookup a solver _class_ by its name

            warning: returns a 'class', not an object!
            see get() for normal uses
        """
        if name is None:
            # first solver class
            return cls.base_solvers()[0][1]

        for (basename, ESD_slv) in cls.base_solvers():
            if basename == name:
                # found the right solver
                return ESD_slv
        raise ValueError(f"Unknown solver '{name}', choose from {[n for n, _ in cls.base_solvers()]}")

    @classmethod
    def version(cls):
        """
        Returns an overview of all solvers of evenset as a list of dicts.

        Each dict consists of:

        - "name": <base_solver>
        - "installed": install status (True/False)
        - "version": version of solver's Python library
        """
        result = []
        for (basename, ESD_slv) in cls.base_solvers():
            installed = ESD_slv.supported()
            result.append({
                    "name": basename,
                    "installed": installed,
                    "version": ESD_slv.version() if installed else None,
                })
        return result

    @classmethod
    def print_version(cls):
        """
        Prints a tabulated report on the different solvers of evenset,
        i.e. whether they are installed on the current system and if so which version.
        """
        print(f"{'Solver':<25} {'Installed':<10} {'Version':<15}")
        print("-" * 50)

        for solver_version in cls.version():
            basename, installed, version = solver_version["name"], solver_version["installed"], solver_version["version"]
            version = version if version else "Not found" if installed else "-"
            print(f"{basename:<25} {'Yes' if installed else 'No':<10} {version:<15}")
