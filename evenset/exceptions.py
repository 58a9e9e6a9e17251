'''
Custom exception classes, for finer grained error handling
'''


class EvenSetException(Exception):
    '''Parent class for all our exceptions'''
    pass


class InvalidInputError(EvenSetException, ValueError):
    '''Raised when an item is negative or not an integer, or a capacity is negative'''
    pass

class ArithmeticOverflowError(EvenSetException, OverflowError):
    '''Raised when the sum of the items does not fit the accumulator's integer type'''
    pass

class ResourceExhaustedError(EvenSetException, MemoryError):
    '''Raised when the knapsack table would be larger than allowed, or can not be allocated'''
    pass

class NotSupportedError(EvenSetException):
    '''Raised when a solver does not support a certain feature'''
    pass

class SolverNotInstalledError(EvenSetException):
    '''Raised when the Python package of a solver backend is not installed'''
    pass
