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

'''
Curried functions with a fixed arity.

>>> from funcurry import curry
>>> sub = curry(2, lambda x, y: x - y)
>>> sub(5)(3)
2
'''

from .annotations import Link, Metadata, annotate, metadata
from .currying import Curried, curry, unroll_invoke

__all__ = ['curry', 'Curried', 'unroll_invoke',
           'annotate', 'metadata', 'Metadata', 'Link']
