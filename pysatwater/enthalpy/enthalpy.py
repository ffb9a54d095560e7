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
from pysatwater.saturation import Pws, Pws_s, dPws_l
from pysatwater.volume import volumewater
from pysatwater.virial import dBlin, dClin
from pysatwater.constants import T_TRIPLE, T_HW_LOW, T_HW_HIGH, R_W, L, MH, HI, HV

# Reference term T.v.dP/dT of liquid water at the triple point
BETA0 = T_TRIPLE * volumewater(T_TRIPLE) * dPws_l(T_TRIPLE)

def _enthalpyice(t):
    return HI[0] + t * (HI[1] + t * (HI[2] + t * HI[3])) + HI[4] * Pws_s(t)

def _enthalpywater(t):
    beta = t * volumewater(t) * dPws_l(t)

    alpha = np.empty_like(t)
    low = t < T_HW_LOW
    tl, th = t[low], t[~low]
    alpha[low] = L[0] + tl * (L[1] + tl * (L[2] + tl * (L[3] + tl * L[4]))) + L[5] * 10 ** (L[6] * (tl - T_TRIPLE))
    alpha_h = MH[0] + th * (MH[1] + th * (MH[2] + th * (MH[3] + th * MH[4])))
    hot = th > T_HW_HIGH
    alpha_h[hot] -= MH[5] * (th[hot] - T_HW_HIGH) ** 3.1
    alpha[~low] = alpha_h

    return alpha + beta - BETA0

def _enthalpyvapor(t, R):
    h = HV[0] + t * (HV[1] + t * (HV[2] + t * (HV[3] + t * (HV[4] + t * HV[5]))))
    p = Pws(t)
    return h - R * t * t * p * (dBlin(t) + 0.5 * dClin(t) * p)

def enthalpyice(Tk: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns specific enthalpy of saturated ice (J/kg). Eq 3 of Hyland & Wexler (1983)
        Tk: Temperature (deg K), 173.15 - 273.16. Takes a single float, 1D list or 1D Numpy array
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(_enthalpyice(t), is_list)

def enthalpywater(Tk: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns specific enthalpy of saturated liquid water (J/kg). Eqs 6-11 of Hyland & Wexler (1983)
        Separate correlations apply below and above 373.125 K, with an additional correction above 403.128 K
        Tk: Temperature (deg K), 273.16 - 473.15. Takes a single float, 1D list or 1D Numpy array
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(_enthalpywater(t), is_list)

def enthalpyvapor(Tk: npt.ArrayLike, R: float = R_W) -> Union[float, np.ndarray]:
    """ Returns specific enthalpy of saturated water vapor (J/kg). Eq 19 of Hyland & Wexler (1983)
        Tk: Temperature (deg K), 173.15 - 473.15. Takes a single float, 1D list or 1D Numpy array
        R: Specific gas constant of water vapor, J/(kg.K). Defaults to 461.52
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(_enthalpyvapor(t, R), is_list)

def enthalpy_vaporization(Tk: npt.ArrayLike, R: float = R_W) -> Union[float, np.ndarray]:
    """ Returns latent heat of vaporization, saturated vapor less saturated liquid enthalpy (J/kg)
        Tk: Temperature (deg K)
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(_enthalpyvapor(t, R) - _enthalpywater(t), is_list)

def enthalpy_sublimation(Tk: npt.ArrayLike, R: float = R_W) -> Union[float, np.ndarray]:
    """ Returns latent heat of sublimation, saturated vapor less saturated ice enthalpy (J/kg)
        Tk: Temperature (deg K)
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(_enthalpyvapor(t, R) - _enthalpyice(t), is_list)
