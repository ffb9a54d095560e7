#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pySatWater - Properties of saturated water, ice and vapor
              Copyright (C) 2026, The pySatWater Authors

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.
"""

from enum import Enum

class phase(Enum):  # Condensed phase in equilibrium with vapor
    ICE = 0
    LIQUID = 1

class tws_method(Enum):  # Saturation temperature solution method
    NR = 0
    BRENT = 1

class_dic = {
    "phase": phase,
    "method": tws_method,
}
