#!/usr/bin/env python3
"""
Validation tests for tables module.
"""

import sys
import os
import tempfile
import numpy as np
import pandas as pd

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pysatwater.tables as tables
import pysatwater.saturation as sat
import pysatwater.enthalpy as enthalpy
import pysatwater.volume as volume

def test_saturation_table_columns():
    df = tables.saturation_table([253.15, 273.16, 373.15])
    assert isinstance(df, pd.DataFrame)
    assert len(df) == 3
    assert list(df.columns) == ["T (K)", "Phase", "Pws (Pa)", "dPws (Pa/K)", "v (m3/kg)",
                                "h (J/kg)", "hg (J/kg)", "hfg (J/kg)"]
    assert list(df["Phase"]) == ["ICE", "LIQUID", "LIQUID"]

def test_saturation_table_uses_phase_correlations():
    df = tables.saturation_table([253.15, 373.15])
    ice, liq = df.iloc[0], df.iloc[1]
    assert ice["Pws (Pa)"] == sat.Pws_s(253.15)
    assert ice["v (m3/kg)"] == volume.volumeice(253.15)
    assert ice["h (J/kg)"] == enthalpy.enthalpyice(253.15)
    assert liq["v (m3/kg)"] == volume.volumewater(373.15)
    assert liq["h (J/kg)"] == enthalpy.enthalpywater(373.15)
    assert abs(liq["hfg (J/kg)"] - enthalpy.enthalpy_vaporization(373.15)) < 1e-6

def test_saturation_table_single_temperature():
    df = tables.saturation_table(300)
    assert len(df) == 1
    assert df["Phase"].iloc[0] == "LIQUID"

def test_saturation_table_p():
    p = [100.0, 101325.0]
    df = tables.saturation_table_p(p)
    assert len(df) == 2
    assert np.allclose(df["Pws (Pa)"], p, rtol=1e-12)
    assert df["Phase"].iloc[0] == "ICE"
    assert abs(df["T (K)"].iloc[1] - 373.1241) < 1e-3

def test_saturation_table_export():
    folder = tempfile.mkdtemp()
    filename = os.path.join(folder, "SAT.INC")
    df = tables.saturation_table(np.linspace(263.15, 303.15, 5), export=True, filename=filename)
    with open(filename) as f:
        text = f.read()
    lines = text.strip().split("\n")
    assert lines[0] == "SATWATER"
    assert lines[-1] == "/"
    assert "-- T (K)" in lines[1]
    assert "ICE" in text and "LIQUID" in text
    # Header, separator, then one line per row
    assert len(lines) == len(df) + 4
