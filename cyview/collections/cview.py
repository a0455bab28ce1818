import numbers
import logging
import numpy as np
from cyview.core.error import *
from cyview.core import utility as U

logger = logging.getLogger(__name__)


class CyclicView(object):
    '''
    Cyclic window over a caller supplied fixed size buffer.

    Logical position i maps to buffer index (start + i) % capacity. The view
    keeps start and size instead of a head/tail pair so that an empty view and
    a view covering the whole buffer stay distinguishable.

    The view holds a reference to the buffer and writes into it in place; it is
    not thread safe. Callers sharing a buffer between threads must serialize
    access themselves, e.g. one lock per buffer.
    '''

    def __init__(self, buffer, start, size):
        U.assert_buffer(buffer)
        cap = len(buffer)
        U.assert_range(start, 0, cap, name='start')
        U.assert_range(size, 0, cap, name='size')

        self._M = buffer
        self._cap = cap
        self._head = start % cap if cap > 0 else 0
        self._size = size
        logger.debug('view created, start: %d size: %d capacity: %d', self._head, size, cap)

    @property
    def buffer(self): return self._M

    @property
    def start(self): return self._head

    def __contains__(self, value):
        for x in self:
            if x == value:
                return True
        return False

    def __copy__(self):
        return CyclicView(self._M, self._head, self._size)

    def __getitem__(self, key):
        # dispatch
        if isinstance(key, numbers.Integral):
            return self.get(key)
        elif isinstance(key, slice):
            return [self._read(i) for i in range(self._size)[key]]
        elif hasattr(key, '__iter__'):
            idxes = list(key)
            for index in idxes:
                self._check_access_index(index)
            return [self._read(index) for index in idxes]
        else:
            raise ArgumentTypeError('key', key, (int, slice, list))

    def __iter__(self):
        return ViewIterator(self)

    def __len__(self):
        return self._size

    def __repr__(self):
        return f'CyclicView({self.to_list()}, start={self._head}, capacity={self._cap})'

    def __reversed__(self):
        for i in range(self._size - 1, -1, -1):
            yield self._read(i)

    def __setitem__(self, key, value):
        def _list(indexes, values):
            if len(indexes) != len(values):
                raise InvalidArgumentError(
                    'value', values,
                    desc=f'expected {len(indexes)} values, got {len(values)}'
                )
            for i, index in enumerate(indexes):
                self._write(index, values[i])

        # dispatch
        if isinstance(key, numbers.Integral):
            return self.set(key, value)
        elif isinstance(key, slice):
            return _list(list(range(self._size)[key]), list(value))
        elif hasattr(key, '__iter__'):
            idxes = list(key)
            for index in idxes:
                self._check_access_index(index)
            return _list(idxes, list(value))
        else:
            raise ArgumentTypeError('key', key, (int, slice, list))

    def __str__(self):
        return ' '.join(str(x) for x in self)

    def capacity(self):
        return self._cap

    def copy(self):
        return self.__copy__()

    def count(self, value):
        c = 0
        for v in self:
            if v != value:
                continue
            c += 1
        return c

    def get(self, index):
        self._check_access_index(index)
        return self._read(index)

    def index(self, value, start=0, stop=None):
        stop = self._size if stop is None else stop
        for i in range(self._size)[start:stop]:
            if self._read(i) == value:
                return i
        raise InvalidArgumentError('value', value, desc='not in view')

    def is_empty(self):
        return self._size == 0

    def move(self, delta):
        '''
        Move both ends of the view by delta, right for positive delta and left
        for negative. The view wraps around the buffer ends.
        '''
        U.assert_integer(delta, name='delta')
        if delta < 0:
            self._move_left(-delta)
        else:
            self._move_right(delta)

    def move_head_pointer(self, delta):
        '''
        Negative delta expands the head by -delta, positive delta contracts it.
        Expansion saturates at the full buffer, contraction at an empty view.
        '''
        U.assert_integer(delta, name='delta')
        if delta < 0:
            self._expand_head(-delta)
        else:
            self._contract_head(delta)

    def move_tail_pointer(self, delta):
        '''
        Positive delta expands the tail by delta, negative delta contracts it.
        '''
        U.assert_integer(delta, name='delta')
        if delta < 0:
            self._contract_tail(-delta)
        else:
            self._expand_tail(delta)

    def reverse(self):
        l, r = 0, self._size - 1
        while l < r:
            tmp = self._read(l)
            self._write(l, self._read(r))
            self._write(r, tmp)
            l += 1
            r -= 1

    def rotate(self, delta):
        '''
        Cyclically rotate the contents of the view by delta positions, right
        for positive delta and left for negative. Boundaries do not move.

        Whichever direction moves the smaller block is performed, so the
        scratch storage never exceeds half of the view.
        '''
        U.assert_integer(delta, name='delta')
        if delta < 0:
            self._rotate_left(-delta)
        else:
            self._rotate_right(delta)

    def set(self, index, value):
        self._check_access_index(index)
        self._write(index, value)

    def size(self):
        return self._size

    def to_list(self):
        return [self._read(i) for i in range(self._size)]

    def _check_access_index(self, index):
        U.assert_integer(index, name='index')
        if self._size == 0:
            raise EmptyViewError(index)
        if index < 0 or index >= self._size:
            raise OutOfRangeError(index, self._size)

    def _read(self, index):
        return self._M[(self._head + index) % self._cap]

    def _write(self, index, value):
        self._M[(self._head + index) % self._cap] = value

    def _expand_head(self, amount):
        U.assert_not_negative(amount, name='amount')
        actual = min(amount, self._cap - self._size)
        if actual < amount:
            logger.debug('head expansion saturated, requested: %d applied: %d', amount, actual)
        if actual == 0: return
        self._head = (self._head - actual) % self._cap
        self._size += actual

    def _contract_head(self, amount):
        U.assert_not_negative(amount, name='amount')
        actual = min(amount, self._size)
        if actual < amount:
            logger.debug('head contraction saturated, requested: %d applied: %d', amount, actual)
        if actual == 0: return
        self._head = (self._head + actual) % self._cap
        self._size -= actual

    def _expand_tail(self, amount):
        U.assert_not_negative(amount, name='amount')
        actual = min(amount, self._cap - self._size)
        if actual < amount:
            logger.debug('tail expansion saturated, requested: %d applied: %d', amount, actual)
        self._size += actual

    def _contract_tail(self, amount):
        U.assert_not_negative(amount, name='amount')
        actual = min(amount, self._size)
        if actual < amount:
            logger.debug('tail contraction saturated, requested: %d applied: %d', amount, actual)
        self._size -= actual

    def _move_left(self, steps):
        U.assert_not_negative(steps, name='steps')
        if self._cap == 0: return
        self._head = (self._head - steps % self._cap) % self._cap

    def _move_right(self, steps):
        U.assert_not_negative(steps, name='steps')
        if self._cap == 0: return
        self._head = (self._head + steps % self._cap) % self._cap

    def _rotate_left(self, steps):
        U.assert_not_negative(steps, name='steps')
        size = self._size
        # trivially rotated
        if size < 2: return

        steps %= size
        if steps == 0: return

        if steps <= size - steps:
            self._rotate_left_impl(steps)
        else:
            self._rotate_right_impl(size - steps)

    def _rotate_right(self, steps):
        U.assert_not_negative(steps, name='steps')
        size = self._size
        # trivially rotated
        if size < 2: return

        steps %= size
        if steps == 0: return

        if steps <= size - steps:
            self._rotate_right_impl(steps)
        else:
            self._rotate_left_impl(size - steps)

    def _rotate_left_impl(self, steps):
        U.assert_not_negative(steps, name='steps')
        logger.debug('rotate left, steps: %d size: %d', steps, self._size)
        size = self._size
        scratch = self._scratch(steps)

        # load the scratch
        for i in range(steps):
            scratch[i] = self._read(i)

        # shift
        for i in range(steps, size):
            self._write(i - steps, self._read(i))

        # dump the scratch
        for i in range(steps):
            self._write(size - steps + i, scratch[i])

    def _rotate_right_impl(self, steps):
        U.assert_not_negative(steps, name='steps')
        logger.debug('rotate right, steps: %d size: %d', steps, self._size)
        size = self._size
        scratch = self._scratch(steps)

        # load the scratch
        for i in range(steps):
            scratch[i] = self._read(size - steps + i)

        # shift
        for i in range(size - steps - 1, -1, -1):
            self._write(i + steps, self._read(i))

        # dump the scratch
        for i in range(steps):
            self._write(i, scratch[i])

    def _scratch(self, n):
        if isinstance(self._M, np.ndarray):
            return np.empty(n, dtype=self._M.dtype)
        return [None] * n

    def _state(self):
        return {
            'M': self._M,
            'head': self._head,
            'size': self._size
        }


class ViewIterator(object):
    '''
    Single pass iterator over the logical contents of a view. Mutating the view
    while iterating is undefined.
    '''

    def __init__(self, view):
        self._view = view
        self._index = 0
        self._left = len(view)

    def __iter__(self):
        return self

    def __next__(self):
        if self._left == 0:
            raise ExhaustedError(self._index)
        self._left -= 1
        value = self._view.get(self._index)
        self._index += 1
        return value

    def has_next(self):
        return self._left > 0


cview = CyclicView
