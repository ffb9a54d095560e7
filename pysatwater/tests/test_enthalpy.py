#!/usr/bin/env python3
"""
Validation tests for enthalpy module.
Run with: python3 -m pytest pysatwater/tests/ -v
"""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pysatwater.enthalpy as enthalpy
from pysatwater.constants import T_HW_LOW, T_HW_HIGH

RTOL = 0.002

# =============================================================================
# Published table values (kJ/kg)
# =============================================================================

def test_enthalpywater_triple_point():
    """Liquid enthalpy is referenced to ~zero at the triple point"""
    h = enthalpy.enthalpywater(273.16)
    assert isinstance(h, float)
    assert abs(h) < 5, f"hw(273.16) = {h} J/kg"

def test_enthalpywater_boiling_point():
    h = enthalpy.enthalpywater(373.15)
    assert abs(h - 419.1e3) / 419.1e3 < RTOL, f"hw(373.15) = {h}"

def test_enthalpywater_high_range():
    h = enthalpy.enthalpywater(473.15)
    assert abs(h - 852.3e3) / 852.3e3 < RTOL, f"hw(473.15) = {h}"

def test_enthalpyvapor():
    assert abs(enthalpy.enthalpyvapor(273.16) - 2500.8e3) / 2500.8e3 < RTOL
    assert abs(enthalpy.enthalpyvapor(373.15) - 2675.5e3) / 2675.5e3 < RTOL
    assert abs(enthalpy.enthalpyvapor(473.15) - 2793.1e3) / 2793.1e3 < RTOL

def test_enthalpyice():
    h = enthalpy.enthalpyice(273.16)
    assert abs(h + 333.4e3) / 333.4e3 < RTOL, f"hi(273.16) = {h}"
    assert enthalpy.enthalpyice(173.15) < h

def test_enthalpyvapor_gas_constant():
    """Larger R increases the (negative) virial correction"""
    h = enthalpy.enthalpyvapor(373.15)
    h_r = enthalpy.enthalpyvapor(373.15, R=2 * 461.52)
    assert h_r < h
    assert (h - h_r) < 0.01 * h

# =============================================================================
# Continuity at sub-range boundaries
# =============================================================================

def test_enthalpywater_continuous_at_373():
    """Low and high range correlations meet at 373.125 K"""
    eps = 1e-9
    h_lo = enthalpy.enthalpywater(T_HW_LOW - eps)
    h_hi = enthalpy.enthalpywater(T_HW_LOW)
    assert abs(h_hi - h_lo) < 5, f"Jump at 373.125 K = {h_hi - h_lo} J/kg"

def test_enthalpywater_continuous_at_403():
    eps = 1e-6
    h_lo = enthalpy.enthalpywater(T_HW_HIGH)
    h_hi = enthalpy.enthalpywater(T_HW_HIGH + eps)
    assert abs(h_hi - h_lo) < 0.1

def test_enthalpywater_increasing():
    t = np.linspace(273.16, 473.15, 201)
    h = enthalpy.enthalpywater(t)
    assert isinstance(h, np.ndarray)
    assert np.all(np.diff(h) > 0)

def test_enthalpy_array_matches_scalar():
    t = [300.0, 373.125, 450.0]
    h = enthalpy.enthalpywater(t)
    for ti, hi in zip(t, h):
        assert abs(hi - enthalpy.enthalpywater(ti)) < 1e-6

# =============================================================================
# Latent heats
# =============================================================================

def test_enthalpy_vaporization():
    hfg = enthalpy.enthalpy_vaporization(373.15)
    assert abs(hfg - 2256.4e3) / 2256.4e3 < RTOL, f"hfg(373.15) = {hfg}"
    assert hfg == enthalpy.enthalpyvapor(373.15) - enthalpy.enthalpywater(373.15)

def test_enthalpy_sublimation():
    hig = enthalpy.enthalpy_sublimation(273.16)
    assert abs(hig - 2834.2e3) / 2834.2e3 < RTOL, f"hig(273.16) = {hig}"
    # Sublimation = fusion + vaporization at the triple point
    fusion = enthalpy.enthalpywater(273.16) - enthalpy.enthalpyice(273.16)
    assert abs(hig - fusion - enthalpy.enthalpy_vaporization(273.16)) < 1e-6
