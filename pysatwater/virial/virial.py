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
from pysatwater.constants import BV, CV

def Blin(Tk: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns virial coefficient B' of saturated water vapor (1/Pa). Eq 15 of Hyland & Wexler (1983)
        Tk: Temperature (deg K). Takes a single float, 1D list or 1D Numpy array
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(BV[0] - BV[1] * np.exp(BV[2] / t), is_list)

def Clin(Tk: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns virial coefficient C' of saturated water vapor (1/Pa^2). Eq 16 of Hyland & Wexler (1983)
        Tk: Temperature (deg K). Takes a single float, 1D list or 1D Numpy array
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(CV[0] - CV[1] * np.exp(CV[2] / t), is_list)

def dBlin(Tk: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns temperature derivative dB'/dT (1/Pa/K)
        Tk: Temperature (deg K)
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(BV[3] / (t * t) * np.exp(BV[2] / t), is_list)

def dClin(Tk: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns temperature derivative dC'/dT (1/Pa^2/K)
        Tk: Temperature (deg K)
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(CV[3] / (t * t) * np.exp(CV[2] / t), is_list)
