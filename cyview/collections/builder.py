from cyview.core import utility as U
from .cview import CyclicView


class ViewConfig(object):
    '''
    Plain record describing a view: the buffer, the start index and the end
    index (exclusive). end=None means until the end of the buffer.
    '''
    def __init__(self, buffer, start=0, end=None):
        self.buffer = buffer
        self.start = start
        self.end = end

    def __repr__(self):
        cap = None if self.buffer is None else len(self.buffer)
        return f'ViewConfig(capacity={cap}, start={self.start}, end={self.end})'


def resolve(config):
    '''
    Validate config and return the (start, size) pair of the view it describes.

    start == end describes an empty view, never a full one; a full view comes
    only from end=None with start=0.
    '''
    U.assert_buffer(config.buffer)
    cap = len(config.buffer)
    start = config.start
    U.assert_range(start, 0, cap, name='start')

    if config.end is None:
        size = cap - start
    else:
        end = config.end
        U.assert_range(end, 0, cap, name='end')
        size = end - start if start <= end else cap - start + end
    return start, size


def build_view(config):
    start, size = resolve(config)
    return CyclicView(config.buffer, start, size)


class ViewBuilder(object):
    '''
    Fluent construction of views:

        create().with_buffer(buf).all()
        create().with_buffer(buf).starting_from(s).until_end()
        create().with_buffer(buf).starting_from(s).until(e)
    '''

    def with_buffer(self, buffer):
        U.assert_buffer(buffer)
        return StartIndexSelector(buffer)


class StartIndexSelector(object):
    def __init__(self, buffer):
        self._buffer = buffer

    def all(self):
        return build_view(ViewConfig(self._buffer))

    def starting_from(self, start):
        U.assert_range(start, 0, len(self._buffer), name='start')
        return SecondIndexSelector(self._buffer, start)


class SecondIndexSelector(object):
    def __init__(self, buffer, start):
        self._buffer = buffer
        self._start = start

    def until_end(self):
        return build_view(ViewConfig(self._buffer, self._start))

    def until(self, end):
        U.assert_range(end, 0, len(self._buffer), name='end')
        return build_view(ViewConfig(self._buffer, self._start, end))


def create():
    return ViewBuilder()
