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
from typing import Tuple, Union

def convert_to_numpy(input_data: npt.ArrayLike) -> Tuple[np.ndarray, bool]:
    # Convert input data to a float numpy array ensuring it is always sizeable
    # Also returns whether the input was a list / array (True) or a scalar (False)
    is_list = np.ndim(input_data) > 0
    return np.atleast_1d(np.asarray(input_data, dtype=float)), is_list

def process_output(output_data: npt.ArrayLike, is_list: bool) -> Union[float, np.ndarray]:
    # Return a float if a scalar was passed in, else a numpy array
    output_data = np.asarray(output_data, dtype=float)
    if is_list:
        return output_data
    return float(output_data.reshape(-1)[0])
