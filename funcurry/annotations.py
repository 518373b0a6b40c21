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

'''Descriptive metadata for documentation tools.

Metadata is attached to ``__metadata__`` and never changes how the
annotated object behaves. Under the ``production`` profile (see
``FUNCURRY_ENV``) annotation is skipped entirely.

>>> def inc(x):
...     return x + 1
>>> inc = annotate(inc, name='inc', signature='inc(x)', stability='stable')
>>> metadata(inc).signature
'inc(x)'
>>> inc(1)
2
'''

from collections import namedtuple

from . import utils

logger = utils.logger.getChild("annotations")

Link = namedtuple("Link", "title url type", defaults=("link",))

Metadata = namedtuple(
    "Metadata",
    "name signature type category tags stability platforms "
    "authors module licence see_also documentation",
    defaults=("", "", "", (), "experimental", (), (), "", "", (), ""),
)


def annotate(obj, **fields):
    '''Attach a Metadata record built from `fields` to `obj` and return `obj`'''
    if utils.is_production():
        return obj
    for key in ("tags", "platforms", "authors", "see_also"):
        if key in fields:
            fields[key] = tuple(fields[key])
    meta = Metadata(**fields)
    try:
        obj.__metadata__ = meta
    except (AttributeError, TypeError):
        logger.debug("can't annotate %r", obj)
    return obj


def metadata(obj):
    'Return the Metadata attached to obj, if any'
    return getattr(obj, "__metadata__", None)
