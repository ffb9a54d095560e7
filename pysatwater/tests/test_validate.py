#!/usr/bin/env python3
"""
Validation tests for method validation and shared helper functions.
"""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pysatwater
from pysatwater.classes import phase, tws_method
from pysatwater.validate import validate_methods
from pysatwater.shared_fns import convert_to_numpy, process_output

def test_validate_string_methods():
    assert validate_methods(["method"], ["nr"]) == tws_method.NR
    assert validate_methods(["method"], ["Brent"]) == tws_method.BRENT
    assert validate_methods(["method", "phase"], ["NR", "ice"]) == [tws_method.NR, phase.ICE]

def test_validate_enum_passthrough():
    assert validate_methods(["phase"], [phase.LIQUID]) == phase.LIQUID

def test_validate_bad_method():
    try:
        validate_methods(["phase"], ["VAPOR"])
    except ValueError as e:
        assert "ICE" in str(e) and "LIQUID" in str(e)
    else:
        raise AssertionError("Unknown phase should raise ValueError")

def test_convert_and_process_scalar():
    arr, is_list = convert_to_numpy(300)
    assert not is_list
    assert arr.shape == (1,)
    out = process_output(arr * 2, is_list)
    assert isinstance(out, float) and out == 600.0

def test_convert_and_process_list():
    arr, is_list = convert_to_numpy([1, 2, 3])
    assert is_list
    assert arr.dtype == float
    out = process_output(arr, is_list)
    assert isinstance(out, np.ndarray) and len(out) == 3

def test_lazy_submodule_import():
    assert pysatwater.saturation.Tws(101325) > 373
    assert 'enthalpy' in dir(pysatwater)
    try:
        pysatwater.not_a_module
    except AttributeError:
        pass
    else:
        raise AssertionError("Unknown attribute should raise AttributeError")
