#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## knapsack.py
##
"""
    Dynamic programming core of the even set division.

    Dividing a set of numbers in two batches with sums as equal as possible
    is a 0-1 knapsack problem in which the weight of every item equals its
    value, and the capacity is half of the total sum (rounded down).
    The best knapsack selection is the first batch, the items that are left
    out form the second batch.

    The functions in this module form a pipeline:

    - `total_sum()`: the sum of all items, checked against the accumulator type
    - `knapsack_table()`: the (n+1) x (capacity+1) table of best packed values
    - `batches_map()`: walks the table backwards to label every item

    See https://en.wikipedia.org/wiki/Knapsack_problem for the 0-1 knapsack problem.

    ===============
    List of classes
    ===============
    .. autosummary::
        :nosignatures:

        Batch

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        total_sum
        knapsack_table
        batches_map
"""
import logging
from enum import Enum

import numpy as np

from .exceptions import InvalidInputError, ArithmeticOverflowError, ResourceExhaustedError

logger = logging.getLogger(__name__)

# largest table knapsack_table() will allocate by default: 1 GiB
DEFAULT_MAX_TABLE_BYTES = 2**30


class Batch(Enum):
    """
    The batch an item is assigned to

    Attributes:

        `SELECTED`: picked by the knapsack, its sum is at most half of the total

        `COMPLEMENT`: not picked, the remaining items
    """
    SELECTED = 1
    COMPLEMENT = 2


def total_sum(items, dtype=np.int64):
    """
        Sum of all items

        The sum is computed exactly and then checked against the largest value
        of the accumulator type `dtype`, the same type used for the knapsack table.

        :param items: sequence of non-negative integers
        :param dtype: numpy integer type of the accumulator (default: np.int64)

        :return: int, the sum of all items

        :raises ArithmeticOverflowError: if the sum does not fit `dtype`
    """
    total = sum(int(item) for item in items)

    limit = int(np.iinfo(dtype).max)
    if total > limit:
        raise ArithmeticOverflowError(f"Sum of items {total} exceeds the maximum "
                                      f"of {np.dtype(dtype).name} ({limit})")
    return total


def knapsack_table(items, capacity, dtype=np.int64, max_table_bytes=DEFAULT_MAX_TABLE_BYTES):
    """
        Builds the 0-1 knapsack table, where the weight of an item equals its value

        Cell (i, s) holds the largest sum of items with index < i that does not exceed s.
        Row 0 and column 0 are zero; for i >= 1:

            cell(i, s) = cell(i-1, s)                                           if items[i-1] > s
            cell(i, s) = max(cell(i-1, s), items[i-1] + cell(i-1, s-items[i-1]))  otherwise

        Every row only depends on the previous one, so a row is computed in one go over the capacity axis.

        :param items: sequence of non-negative integers
        :param capacity: non-negative int, the largest sum to consider
        :param dtype: numpy integer type of the table (default: np.int64)
        :param max_table_bytes: refuse to allocate a larger table, None for no limit (default: 1 GiB)

        :return: numpy array of shape (len(items)+1, capacity+1)

        :raises InvalidInputError: if capacity is negative
        :raises ResourceExhaustedError: if the table is larger than `max_table_bytes` or can not be allocated
    """
    capacity = int(capacity)
    if capacity < 0:
        raise InvalidInputError(f"Knapsack capacity must be non-negative, got {capacity}")

    shape = (len(items) + 1, capacity + 1)
    nbytes = shape[0] * shape[1] * np.dtype(dtype).itemsize
    if max_table_bytes is not None and nbytes > max_table_bytes:
        raise ResourceExhaustedError(f"Knapsack table of shape {shape} needs {nbytes} bytes, "
                                     f"more than the allowed {max_table_bytes} bytes")
    logger.debug("Allocating knapsack table of shape %s (%d bytes)", shape, nbytes)

    try:
        table = np.zeros(shape, dtype=dtype)
    except MemoryError as e:
        raise ResourceExhaustedError(f"Could not allocate knapsack table of shape {shape} ({nbytes} bytes)") from e

    for i, item in enumerate(items, start=1):
        item = int(item)
        prev, row = table[i - 1], table[i]
        row[:] = prev
        if 0 < item <= capacity:
            # column s either skips the item, or takes it on top of the best sum for s - item
            np.maximum(prev[item:], prev[:capacity + 1 - item] + item, out=row[item:])

    return table


def batches_map(items, table, capacity):
    """
        Labels every item by walking the knapsack table backwards

        Starting from the bottom-right cell, an item is selected when its row
        differs from the row above it at the current capacity; the capacity then
        drops by the value of the item. The walk stops as soon as the capacity
        reaches zero or nothing can be packed anymore with the remaining items.

        Items are visited from the last to the first, which decides between
        equally good selections: keep this order to get the same batches.

        :param items: sequence of non-negative integers, as given to `knapsack_table()`
        :param table: numpy array built by `knapsack_table()`
        :param capacity: the capacity used to build `table`

        :return: list of `Batch`, one per item
    """
    n = len(items)
    capacity = int(capacity)
    if table.shape != (n + 1, capacity + 1):
        raise InvalidInputError(f"Knapsack table of shape {table.shape} does not match "
                                f"{n} items and capacity {capacity}")

    result = [Batch.COMPLEMENT] * n

    cursor = capacity
    for i in range(n, 0, -1):
        if table[i, cursor] != table[i - 1, cursor]:
            result[i - 1] = Batch.SELECTED
            cursor -= int(items[i - 1])

        # done, the remaining items can not add anything
        if cursor < 1 or table[i - 1, cursor] == 0:
            break

    return result
