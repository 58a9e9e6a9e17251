#!/usr/bin/python3
"""
Even set division in evenset

Divides random sets of numbers in two batches with sums as equal as possible,
and prints both batches and the difference between their sums.
"""
import numpy as np
from evenset import *

# Problem data
n = 50
runs = 5
np.random.seed(1)

for run in range(runs):
    items = np.random.randint(100, 300, n)

    division = EvenSetDivision(items)
    division.calc()

    first, second = division.selected_batch(), division.complement_batch()
    sum1, sum2 = division.batch_sums()
    print("Batch #1 :", " + ".join(str(v) for v in items[first]), "=", sum1)
    print("Batch #2 :", " + ".join(str(v) for v in items[second]), "=", sum2)
    print("Diff:", division.difference())
    print(division.status())
    print()
