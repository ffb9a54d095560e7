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

import numpy as np
import numpy.typing as npt
from typing import Union

from pysatwater.shared_fns import convert_to_numpy, process_output
from pysatwater.constants import VI, DW_NUM, DW_DEN

def _densitywater(t):
    n = DW_NUM
    num = n[0] + t * (n[1] + t * (n[2] + t * (n[3] + t * (n[4] + t * n[5]))))
    return num / (DW_DEN[0] + DW_DEN[1] * t)

def volumeice(Tk: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns specific volume of saturated ice (m3/kg). Eq 2 of Hyland & Wexler (1983)
        Tk: Temperature (deg K). Takes a single float, 1D list or 1D Numpy array
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(VI[0] + t * (VI[1] + VI[2] * t), is_list)

def densitywater(Tk: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns density of saturated liquid water (kg/m3). Eq 5 of Hyland & Wexler (1983)
        Tk: Temperature (deg K). Takes a single float, 1D list or 1D Numpy array
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(_densitywater(t), is_list)

def volumewater(Tk: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns specific volume of saturated liquid water (m3/kg), the inverse of densitywater
        Tk: Temperature (deg K)
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(1.0 / _densitywater(t), is_list)
