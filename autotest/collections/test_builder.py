import unittest
import array
import numpy as np
import cyview
from cyview import (
    ViewConfig, build_view,
    InvalidArgumentError, ArgumentTypeError,
)


class TestViewBuilder(unittest.TestCase):
    N = 20

    def setUp(self):
        self.buffer = list(range(self.N))
        self.selector = cyview.create().with_buffer(self.buffer)

    def test_builder_all(self):
        view = self.selector.all()
        self.assertEqual(view.size(), self.N)
        self.assertEqual(view.start, 0)
        self.assertEqual(view.to_list(), self.buffer)

    def test_builder_until(self):
        view = self.selector.starting_from(5).until(10)
        self.assertEqual(view.to_list(), [5, 6, 7, 8, 9])

    def test_builder_until_wraparound(self):
        view = self.selector.starting_from(18).until(2)
        self.assertEqual(view.to_list(), [18, 19, 0, 1])
        view = self.selector.starting_from(self.N - 2).until(1)
        self.assertEqual(view.to_list(), [self.N - 2, self.N - 1, 0])

    def test_builder_until_end(self):
        view = self.selector.starting_from(self.N - 2).until_end()
        self.assertEqual(view.to_list(), [self.N - 2, self.N - 1])
        view = self.selector.starting_from(0).until_end()
        self.assertEqual(view.size(), self.N)

    def test_builder_start_equals_end_is_empty(self):
        for s in (0, 3, self.N):
            view = self.selector.starting_from(s).until(s)
            self.assertEqual(view.size(), 0)
            self.assertTrue(view.is_empty())

    def test_builder_start_at_capacity(self):
        view = self.selector.starting_from(self.N).until(3)
        self.assertEqual(view.start, 0)
        self.assertEqual(view.to_list(), [0, 1, 2])
        view = self.selector.starting_from(self.N).until_end()
        self.assertTrue(view.is_empty())
        self.assertEqual(view.start, 0)

    def test_builder_shares_buffer(self):
        view = self.selector.starting_from(18).until(2)
        view.set(2, 'x')
        self.assertEqual(self.buffer[0], 'x')
        self.assertIs(view.buffer, self.buffer)

    def test_builder_invalid_buffer(self):
        self.assertRaises(InvalidArgumentError, cyview.create().with_buffer, None)
        self.assertRaises(ArgumentTypeError, cyview.create().with_buffer, (1, 2, 3))
        self.assertRaises(ArgumentTypeError, cyview.create().with_buffer, {0: 1})
        self.assertRaises(ArgumentTypeError, cyview.create().with_buffer, 10)
        self.assertRaises(InvalidArgumentError, cyview.create().with_buffer, np.zeros((2, 2)))

    def test_builder_invalid_index(self):
        for s in (-1, self.N + 1):
            self.assertRaises(InvalidArgumentError, self.selector.starting_from, s)
        second = self.selector.starting_from(3)
        for e in (-1, self.N + 1):
            self.assertRaises(InvalidArgumentError, second.until, e)
        self.assertRaises(ArgumentTypeError, self.selector.starting_from, 1.5)
        self.assertRaises(ArgumentTypeError, second.until, None)

    def test_builder_other_buffers(self):
        view = cyview.create().with_buffer(bytearray(b'abcdef')).starting_from(4).until(2)
        view.reverse()
        self.assertEqual(bytes(view.buffer), b'fecdba')
        view = cyview.create().with_buffer(array.array('i', range(6))).starting_from(3).until_end()
        self.assertEqual(view.to_list(), [3, 4, 5])
        view = cyview.create().with_buffer(np.arange(6)).starting_from(5).until(1)
        self.assertEqual(view.to_list(), [5, 0])

    def test_builder_empty_buffer(self):
        selector = cyview.create().with_buffer([])
        self.assertEqual(selector.all().size(), 0)
        self.assertEqual(selector.starting_from(0).until(0).size(), 0)
        self.assertEqual(selector.starting_from(0).until_end().size(), 0)
        self.assertRaises(InvalidArgumentError, selector.starting_from, 1)

    def test_config_build_view(self):
        view = build_view(ViewConfig(self.buffer, 18, 2))
        self.assertEqual(view.to_list(), [18, 19, 0, 1])
        view = build_view(ViewConfig(self.buffer))
        self.assertEqual(view.size(), self.N)
        self.assertRaises(InvalidArgumentError, build_view, ViewConfig(self.buffer, 0, self.N + 1))
        self.assertRaises(InvalidArgumentError, build_view, ViewConfig(None))


if __name__ == '__main__':
    unittest.main()
