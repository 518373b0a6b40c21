import inspect
import logging
import operator
import os
import threading
import unittest
from unittest import mock

from . import Curried, Link, annotate, curry, metadata, utils


def add3(x, y, z):
    return x + y + z


class TestCurry(unittest.TestCase):
    def test_exact_arity(self):
        ae = self.assertEqual

        ae(curry(3, add3)(1, 2, 3), add3(1, 2, 3))
        ae(curry(1, str.upper)('a'), 'A')
        ae(curry(2, divmod)(7, 2), (3, 1))

    def test_partitions(self):
        c = curry(3, add3)
        ae = self.assertEqual

        ae(c(1)(2)(3), 6)
        ae(c(1, 2)(3), 6)
        ae(c(1)(2, 3), 6)
        ae(c(1, 2, 3), 6)

    def test_empty_call_keeps_waiting(self):
        c = curry(2, lambda x, y: x * y)
        self.assertIsInstance(c(), Curried)
        self.assertEqual(c()(3)()(4), 12)

    def test_order_is_preserved(self):
        c = curry(4, lambda *xs: xs)
        self.assertEqual(c('a')('b', 'c')('d'), ('a', 'b', 'c', 'd'))

    def test_overflow(self):
        f = curry(2, lambda x, y: lambda z: x + y + z)
        self.assertEqual(f(1, 2, 3), 6)

    def test_overflow_into_curried(self):
        inner = lambda x, y: curry(2, lambda z, w: (x, y, z, w))
        f = curry(2, inner)
        self.assertEqual(f(1, 2, 3, 4), (1, 2, 3, 4))
        self.assertEqual(f(1, 2, 3)(4), (1, 2, 3, 4))

    def test_overflow_not_callable(self):
        with self.assertRaises(TypeError):
            curry(1, lambda x: x)(1, 2)

    def test_reuse(self):
        g = curry(2, lambda x, y: x + y)
        h = g(1)
        self.assertEqual(h(2), 3)
        self.assertEqual(h(5), 6)
        self.assertEqual(h.args, (1,))

    def test_zero_arity(self):
        self.assertEqual(curry(0, lambda: 42)(), 42)

    def test_zero_arity_overflow(self):
        self.assertEqual(curry(0, lambda: lambda x: x * 2)(21), 42)

    def test_called_once(self):
        calls = []

        def record(x, y):
            calls.append((x, y))
            return x + y

        c = curry(2, record)
        c(1)
        c(2)(3)
        self.assertEqual(calls, [(2, 3)])

    def test_fn_errors_propagate(self):
        def boom(x):
            raise KeyError(x)

        with self.assertRaises(KeyError):
            curry(1, boom)('k')
        with self.assertRaises(KeyError):
            curry(1, boom)('k', 'extra')

    def test_keywords_rejected(self):
        with self.assertRaises(TypeError):
            curry(2, add3)(1, y=2)

    def test_decorator(self):
        @curry(2)
        def mul(x, y):
            'Multiply'
            return x * y

        self.assertEqual(mul(3)(4), 12)
        self.assertEqual(mul.__name__, 'mul')
        self.assertEqual(mul(3).__doc__, 'Multiply')
        self.assertIs(mul.__wrapped__, mul.fn)

    def test_bad_arity(self):
        with self.assertRaises(TypeError):
            curry(1.5, add3)
        with self.assertRaises(TypeError):
            curry(True, add3)
        with self.assertRaises(ValueError):
            curry(-1, add3)

    def test_bad_fn(self):
        with self.assertRaises(TypeError):
            curry(1, 'not callable')
        with self.assertRaises(TypeError):
            curry(2, None)

    def test_threads(self):
        h = curry(2, lambda x, y: x + y)(100)
        results = [None] * 50

        def work(i):
            results[i] = h(i)

        threads = [threading.Thread(target=work, args=(i,)) for i in range(50)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(results, [100 + i for i in range(50)])
        self.assertEqual(h.args, (100,))


class TestCurried(unittest.TestCase):
    def test_immutable(self):
        c = curry(2, add3)(1)
        with self.assertRaises(AttributeError):
            c.args = (1, 2)
        with self.assertRaises(AttributeError):
            del c.fn

    def test_remaining(self):
        c = curry(3, add3)
        self.assertEqual(c.remaining, 3)
        self.assertEqual(c(1).remaining, 2)
        self.assertEqual(c(1, 2).remaining, 1)

    def test_repr(self):
        c = curry(3, add3)
        self.assertEqual(repr(c), 'add3')
        self.assertEqual(repr(c(1)('a')), "add3 1 'a'")

    def test_signature(self):
        c = curry(3, add3)
        self.assertEqual(str(inspect.signature(c)), '(x, y, z)')
        self.assertEqual(str(inspect.signature(c(1))), '(*args)')
        self.assertNotIn('__wrapped__', vars(c(1)))


class TestLogging(unittest.TestCase):
    def test_invoke_logged(self):
        with self.assertLogs('funcurry.currying', 'DEBUG') as cm:
            self.assertEqual(curry(2, operator.add)(1, 2), 3)
        self.assertIn('invoking add with 2 args', cm.output[0])

    def test_unroll_logged(self):
        with self.assertLogs('funcurry.currying', 'DEBUG') as cm:
            self.assertEqual(curry(2, lambda x, y: lambda z: z)(1, 2, 3), 3)
        self.assertIn('unrolling 1 extra args past arity 2', cm.output[0])

    def test_level_from_environment(self):
        ae = self.assertEqual

        with mock.patch.dict(os.environ, {'FUNCURRY_LOG_LEVEL': 'debug'}):
            ae(utils.log_level(), logging.DEBUG)
        with mock.patch.dict(os.environ, {'FUNCURRY_LOG_LEVEL': 'ERROR'}):
            ae(utils.log_level(), logging.ERROR)
        with mock.patch.dict(os.environ, {'FUNCURRY_LOG_LEVEL': 'nonsense'}):
            ae(utils.log_level(), logging.WARNING)
        with mock.patch.dict(os.environ):
            os.environ.pop('FUNCURRY_LOG_LEVEL', None)
            ae(utils.log_level(), logging.WARNING)

    def test_logger_uses_configured_level(self):
        self.assertEqual(utils.logger.level, utils.log_level())


class TestAnnotations(unittest.TestCase):
    @unittest.skipIf(utils.is_production(), 'curry is not annotated in production')
    def test_curry_metadata(self):
        meta = metadata(curry)
        self.assertEqual(meta.name, 'curry')
        self.assertEqual(meta.signature, 'curry(arity, fn)')
        self.assertEqual(meta.stability, 'stable')
        self.assertEqual(meta.authors, ('Quildreen Motta',))
        self.assertEqual([l.title for l in meta.see_also],
                         ['Why Curry Helps', 'Does Curry Help?'])

    @unittest.skipIf(utils.is_production(), 'annotate is a no-op in production')
    def test_annotate(self):
        f = curry(1, abs)
        self.assertIs(annotate(f, name='abs', tags=['math']), f)
        self.assertEqual(metadata(f).tags, ('math',))
        self.assertEqual(metadata(f).see_also, ())
        self.assertEqual(f(-2), 2)

    def test_link_defaults(self):
        self.assertEqual(Link('t', 'u').type, 'link')

    def test_production_is_noop(self):
        def f(x):
            return x

        with mock.patch.object(utils, 'ENV', 'production'):
            self.assertIs(annotate(f, name='f'), f)
        self.assertIsNone(metadata(f))

    def test_unannotatable(self):
        self.assertEqual(annotate(1, name='one'), 1)
        self.assertIsNone(metadata(1))
