# Copyright 2024 inuex35
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

"""
PyOSGB - GNSS position to Ordnance Survey National Grid conversion

Converts WGS84 latitude/longitude, including degree/minute strings as shown
by GPS receivers, to British National Grid easting/northing and lettered
grid references via a Helmert datum shift to OSGB36 and the National Grid
Transverse Mercator projection.
"""

__version__ = "1.0.0"
__author__ = "PyOSGB Development Team"
__title__ = "pyosgb"
__description__ = "GNSS position to OS National Grid conversion"

from .core import *
from .io import *
from .coordinate import *
