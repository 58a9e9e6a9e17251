#!/usr/bin/python3
"""
Compares the dynamic programming solver with OR-Tools CP-SAT

Both solve the same knapsack, so the difference between the batches is the same;
when several divisions are equally good, the batches themselves may differ.
"""
import numpy as np
from evenset import EvenSetDivision, SolverLookup

# Problem data
n = 40
np.random.seed(0)
items = np.random.randint(1, 1000, n)

for name in SolverLookup.supported():
    division = EvenSetDivision(items)
    division.calc(solver=name)
    print(f"{name:<10} diff: {division.difference():<4} status: {division.status()}")
    print("  batch #1:", division.selected_batch())
