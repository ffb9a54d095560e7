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

import logging

import numpy as np
import numpy.typing as npt
import pandas as pd
from tabulate import tabulate

from pysatwater.classes import tws_method
from pysatwater.constants import T_TRIPLE, R_W
from pysatwater.shared_fns import convert_to_numpy
from pysatwater.saturation import Pws, dPws, Tws, saturation_phase
from pysatwater.volume import volumeice, volumewater
from pysatwater.enthalpy import enthalpyice, enthalpywater, enthalpyvapor

logger = logging.getLogger(__name__)

def saturation_table(
    temps: npt.ArrayLike,
    R: float = R_W,
    export: bool = False,
    filename: str = "SATWATER.INC",
) -> pd.DataFrame:
    """ Returns a DataFrame of saturated properties, one row per temperature
        Rows below the triple point (273.16 K) use ice correlations for the condensed phase, others liquid water
        temps: Temperatures (deg K). Takes a single float, 1D list or 1D Numpy array
        R: Specific gas constant of water vapor, J/(kg.K). Defaults to 461.52
        export: Boolean value that controls whether an include file is written. Default: False
        filename: Name of the include file. Default: 'SATWATER.INC'
    """
    t, _ = convert_to_numpy(temps)
    ice = t < T_TRIPLE

    hc, vc = np.empty_like(t), np.empty_like(t)
    hc[ice], vc[ice] = enthalpyice(t[ice]), volumeice(t[ice])
    hc[~ice], vc[~ice] = enthalpywater(t[~ice]), volumewater(t[~ice])
    hv = enthalpyvapor(t, R=R)

    df = pd.DataFrame()
    df["T (K)"] = t
    df["Phase"] = [ph.name for ph in saturation_phase(t)]
    df["Pws (Pa)"] = Pws(t)
    df["dPws (Pa/K)"] = dPws(t)
    df["v (m3/kg)"] = vc
    df["h (J/kg)"] = hc
    df["hg (J/kg)"] = hv
    df["hfg (J/kg)"] = hv - hc

    if export:
        tab = df.set_index("T (K)")
        headers = ["-- T (K)"] + list(tab.columns)
        fileout = "SATWATER\n" + tabulate(tab, headers) + "\n/"
        with open(filename, "w") as text_file:
            text_file.write(fileout)
        logger.info("Wrote %d row saturation table to %s", len(df), filename)
    return df

def saturation_table_p(
    pressures: npt.ArrayLike,
    method: tws_method = tws_method.NR,
    R: float = R_W,
    export: bool = False,
    filename: str = "SATWATER.INC",
) -> pd.DataFrame:
    """ Returns a DataFrame of saturated properties, one row per saturation pressure
        Saturation temperatures are solved with Tws, then tabulated as per saturation_table
        pressures: Saturation pressures (Pa). Takes a single float, 1D list or 1D Numpy array
        method: Tws solution method, 'NR' (Default) or 'BRENT'
    """
    p, _ = convert_to_numpy(pressures)
    t = Tws(p, method=method)
    return saturation_table(t, R=R, export=export, filename=filename)
