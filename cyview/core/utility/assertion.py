import numbers
from collections.abc import Mapping
import numpy as np
from cyview.core.error import *

def assert_type(arg, *types, name=None):
    if isinstance(arg, tuple(types)): return
    raise ArgumentTypeError(name or 'unknown argument name', arg, types)


def assert_integer(arg, name=None):
    # bool is an Integral but never a meaningful index or delta
    if isinstance(arg, bool):
        raise ArgumentTypeError(name or 'unknown argument name', arg, (int,))
    assert_type(arg, numbers.Integral, name=name)


def assert_not_negative(arg, name=None):
    assert_integer(arg, name=name)
    if arg < 0:
        raise InvalidArgumentError(name, arg, desc='may not be negative')


def assert_range(arg, low, high, name=None):
    '''
    Check low <= arg <= high, both ends inclusive.
    '''
    assert_integer(arg, name=name)
    if arg < low:
        raise InvalidArgumentError(name, arg, desc=f'may not be less than {low}')
    if arg > high:
        raise InvalidArgumentError(name, arg, desc=f'too large, should be at most {high}')


def assert_buffer(buffer, name='buffer'):
    '''
    Accept one dimensional ndarrays and any non mapping object supporting
    len(), item reads and item writes.
    '''
    if buffer is None:
        raise InvalidArgumentError(name, buffer, desc='input buffer is None')
    if isinstance(buffer, np.ndarray):
        if buffer.ndim != 1:
            raise InvalidArgumentError(f'{name}.ndim', buffer.ndim, desc='expected a one dimensional array')
        return
    if isinstance(buffer, Mapping) or not all(
        hasattr(buffer, attr) for attr in ('__len__', '__getitem__', '__setitem__')
    ):
        raise ArgumentTypeError(name, buffer, (list, np.ndarray))
