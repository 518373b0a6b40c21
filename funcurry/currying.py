# Copyright 2017 Daniel Hilst Selli
# 
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
# 
#     http://www.apache.org/licenses/LICENSE-2.0
# 
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License. 
# 

'''Currying with a fixed arity'''

from functools import partial, WRAPPER_ASSIGNMENTS

from . import utils
from .annotations import Link, annotate

logger = utils.logger.getChild("currying")

FIELDS = ("arity", "fn", "args")
_missing = object()


class Curried(object):
    ''' A function waiting for the rest of its arguments.

        Holds the declared `arity`, the target `fn` and the positional
        `args` collected so far. Calling it never touches `args`, it
        builds a new tuple instead, so the same Curried can be reused
        with different continuations:

        >>> add = Curried(2, lambda x, y: x + y)
        >>> inc = add(1)
        >>> inc(2), inc(5)
        (3, 6)
        >>> inc.args, inc.remaining
        ((1,), 1)
    '''

    def __init__(self, arity, fn, args=()):
        self.__dict__.update(arity=arity, fn=fn, args=tuple(args))
        for attr in WRAPPER_ASSIGNMENTS:
            try:
                self.__dict__[attr] = getattr(fn, attr)
            except AttributeError:
                pass
        # only the root keeps fn's full signature
        if not self.args:
            self.__dict__["__wrapped__"] = fn

    def __setattr__(self, attr, val):
        if attr in FIELDS:
            raise AttributeError("Can't assign {} of Curried".format(attr))
        object.__setattr__(self, attr, val)

    def __delattr__(self, attr):
        if attr in FIELDS:
            raise AttributeError("Can't delete {} of Curried".format(attr))
        object.__delattr__(self, attr)

    @property
    def remaining(self):
        return self.arity - len(self.args)

    def __call__(self, *args):
        all_args = self.args + args
        count = len(all_args)
        if count < self.arity:
            return Curried(self.arity, self.fn, all_args)
        if count == self.arity:
            logger.debug("invoking %r with %d args", self, count)
            return self.fn(*all_args)
        return unroll_invoke(self.fn, self.arity, all_args)

    def __repr__(self):
        name = getattr(self, "__name__", repr(self.fn))
        return " ".join([name] + [repr(a) for a in self.args])


def unroll_invoke(fn, arity, args):
    '''Call fn with the first `arity` args and its result with the rest.

    The result must itself be callable, otherwise Python raises TypeError.
    '''
    first, rest = args[:arity], args[arity:]
    logger.debug("unrolling %d extra args past arity %d", len(rest), arity)
    return fn(*first)(*rest)


def curry(arity, fn=_missing):
    ''' Transform a function on `arity` positional arguments into a
        curried function.

        The curried function collects arguments over any number of calls
        and invokes `fn` as soon as it holds `arity` of them:

        >>> add3 = curry(3, lambda x, y, z: x + y + z)
        >>> add3(1)(2)(3), add3(1, 2)(3), add3(1, 2, 3)
        (6, 6, 6)

        Partial application falls out naturally:

        >>> prop = curry(2, lambda key, obj: obj[key])
        >>> list(map(prop('name'), [{'name': 'ada'}, {'name': 'bob'}]))
        ['ada', 'bob']

        Extra arguments are passed on to whatever `fn` returns, so
        `f(a, b, c)` on a two argument function means `f(a, b)(c)`:

        >>> adder = curry(2, lambda x, y: curry(1, lambda z: x + y + z))
        >>> adder(1, 2, 3)
        6

        That only works when the result is callable:

        >>> curry(1, lambda x: x)(1, 2)
        Traceback (most recent call last):
            ...
        TypeError: 'int' object is not callable

        Without `fn` it returns a decorator:

        >>> @curry(3)
        ... def volume(w, h, d):
        ...     return w * h * d
        >>> volume(2)(3)(4)
        24
        >>> volume(2)
        volume 2
    '''
    if isinstance(arity, bool) or not isinstance(arity, int):
        raise TypeError("arity must be an int, got {!r}".format(arity))
    if arity < 0:
        raise ValueError("arity must be non-negative, got {}".format(arity))
    if fn is _missing:
        return partial(curry, arity)
    if not callable(fn):
        raise TypeError("{!r} is not callable".format(fn))
    return Curried(arity, fn)


# -- Annotations ------------------------------------------------------
curry = annotate(
    curry,
    name="curry",
    signature="curry(arity, fn)",
    type="(int, (a1, a2, ..., an) -> b) -> (a1) -> (a2) -> ... -> (an) -> b",
    category="Currying",
    tags=["Lambda Calculus"],
    stability="stable",
    platforms=["Python"],
    authors=["Quildreen Motta"],
    module="funcurry.currying",
    licence="Apache-2.0",
    see_also=[
        Link("Why Curry Helps",
             "https://hughfdjackson.com/javascript/why-curry-helps/"),
        Link("Does Curry Help?",
             "https://hughfdjackson.com/javascript/does-curry-help/"),
    ],
    documentation=curry.__doc__,
)
