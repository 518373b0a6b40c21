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

'''Environment settings and the package logger'''

import logging
import os

ENV = os.environ.get("FUNCURRY_ENV", "development")


def is_production():
    return ENV == "production"


def log_level():
    'Logging level named by FUNCURRY_LOG_LEVEL, WARNING by default'
    name = os.environ.get("FUNCURRY_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, name, None)
    return level if isinstance(level, int) else logging.WARNING


logger = logging.getLogger("funcurry")
logger.setLevel(log_level())
console_handler = logging.StreamHandler()
formatter = logging.Formatter("==> %(levelname)s: %(message)s")
console_handler.setFormatter(formatter)
logger.addHandler(console_handler)
