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
from typing import NamedTuple, Union

import numpy as np
import numpy.typing as npt
from scipy.optimize import brentq

from pysatwater.classes import phase, tws_method
from pysatwater.shared_fns import convert_to_numpy, process_output
from pysatwater.validate import validate_methods
from pysatwater.constants import T_TRIPLE, T_MIN, T_MAX, TWS_MAX_ITER, TWS_TOL, TWS_BRACKET, G, M, GG

logger = logging.getLogger(__name__)

class TwsResult(NamedTuple):
    T: Union[float, np.ndarray]  # Saturation temperature (deg K)
    converged: Union[bool, np.ndarray]  # True if the solver met its tolerance
    iterations: Union[int, np.ndarray]  # Solver iterations used
    in_range: Union[bool, np.ndarray]  # True if T lies within 173.15 - 473.15 K

def saturation_phase(Tk: npt.ArrayLike):
    """ Returns the condensed phase (phase.ICE or phase.LIQUID) used by Pws and dPws at temperature Tk.
        Ice below the triple point (273.16 K), liquid at and above it.
        Returns a single phase Enum, or a numpy object array of them if a list/array of temperatures is passed
    """
    t, is_list = convert_to_numpy(Tk)
    phases = [phase.ICE if ti < T_TRIPLE else phase.LIQUID for ti in t]
    if is_list:
        return np.array(phases, dtype=object)
    return phases[0]

def in_range(Tk: npt.ArrayLike, tol: float = 0.0) -> Union[bool, np.ndarray]:
    """ Returns True where Tk (deg K) lies within the 173.15 - 473.15 K range of the correlations
        tol: Allowance (deg K) beyond either limit, eg. the solver tolerance for a solved temperature. Defaults to zero
    """
    t, is_list = convert_to_numpy(Tk)
    ok = (t >= T_MIN - tol) & (t <= T_MAX + tol)
    if is_list:
        return ok
    return bool(ok[0])

# Array kernels. Callers are responsible for branch selection
def _pws_l(t):
    return np.exp((G[0] + t * (G[1] + t * (G[2] + t * (G[3] + t * G[4])))) / t + G[5] * np.log(t))

def _pws_s(t):
    return np.exp((M[0] + t * (M[1] + t * (M[2] + t * (M[3] + t * (M[4] + t * M[5]))))) / t + M[6] * np.log(t))

def _dpws_l(t):
    dlnp = (G[5] - G[0] / t) / t + G[2] + t * (2 * G[3] + 3 * G[4] * t)
    return _pws_l(t) * dlnp

def _dpws_s(t):
    dlnp = (M[6] - M[0] / t) / t + M[2] + t * (2 * M[3] + t * (3 * M[4] + 4 * M[5] * t))
    return _pws_s(t) * dlnp

def _by_phase(t, ice_fn, liq_fn):
    # Evaluates ice_fn below the triple point and liq_fn elsewhere, without evaluating both on every element
    out = np.empty_like(t)
    ice = t < T_TRIPLE
    if ice.any():
        out[ice] = ice_fn(t[ice])
    if (~ice).any():
        out[~ice] = liq_fn(t[~ice])
    return out

def Pws_l(Tk: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns saturation vapor pressure over liquid water (Pa). Eq 17 of Hyland & Wexler (1983)
        Tk: Temperature (deg K), 273.16 - 473.15. Takes a single float, 1D list or 1D Numpy array
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(_pws_l(t), is_list)

def Pws_s(Tk: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns saturation vapor pressure over ice (Pa). Eq 18 of Hyland & Wexler (1983)
        Tk: Temperature (deg K), 173.15 - 273.16. Takes a single float, 1D list or 1D Numpy array
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(_pws_s(t), is_list)

def Pws(Tk: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns saturation vapor pressure over ice (Tk < 273.16) or liquid water (Pa)
        At 273.16 K both expressions agree to about 6 significant figures
        Tk: Temperature (deg K). Takes a single float, 1D list or 1D Numpy array
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(_by_phase(t, _pws_s, _pws_l), is_list)

def dPws_l(Tk: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns derivative of saturation vapor pressure over liquid water with temperature (Pa/K)
        Tk: Temperature (deg K)
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(_dpws_l(t), is_list)

def dPws_s(Tk: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns derivative of saturation vapor pressure over ice with temperature (Pa/K)
        Tk: Temperature (deg K)
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(_dpws_s(t), is_list)

def dPws(Tk: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns derivative of saturation vapor pressure (Pa/K), using the same ice / liquid split as Pws
        Tk: Temperature (deg K)
    """
    t, is_list = convert_to_numpy(Tk)
    return process_output(_by_phase(t, _dpws_s, _dpws_l), is_list)

def _tws_guess(p):
    lnp = np.log(p)
    return GG[0] + lnp * (GG[1] + lnp * (GG[2] + lnp * (GG[3] + lnp * GG[4]))) + GG[5] * p

def Tws_guess(P: npt.ArrayLike) -> Union[float, np.ndarray]:
    """ Returns approximate saturation temperature (deg K) from saturation pressure P (Pa)
        Single correlation spanning both ice and liquid ranges, used to start the Tws iteration
    """
    p, is_list = convert_to_numpy(P)
    return process_output(_tws_guess(p), is_list)

def _tws_nr(p, tol, max_iter):
    t = _tws_guess(p)
    for niter in range(1, max_iter + 1):
        # Branch is re-evaluated at every step, so trajectories may cross the triple point
        if t < T_TRIPLE:
            f, df = p - _pws_s(t), -_dpws_s(t)
        else:
            f, df = p - _pws_l(t), -_dpws_l(t)
        dt = -f / df
        t += dt
        if abs(dt) < tol:
            return float(t), True, niter
    return float(t), False, max_iter

def _tws_brent(p, tol, max_iter):
    def err(t):
        return float(_by_phase(np.atleast_1d(float(t)), _pws_s, _pws_l)[0]) - p

    lo, hi = TWS_BRACKET
    if err(lo) * err(hi) > 0:
        raise ValueError(f"Saturation pressure {p} Pa lies outside the {lo} - {hi} K solution bracket")
    t, res = brentq(err, lo, hi, xtol=tol, maxiter=max_iter, full_output=True, disp=False)
    return float(t), bool(res.converged), int(res.iterations)

def _tws_solve(P, method, tol, max_iter):
    method = validate_methods(["method"], [method])
    p, is_list = convert_to_numpy(P)
    if (p <= 0).any():
        raise ValueError("Pressure must be positive")
    solver = _tws_nr if method == tws_method.NR else _tws_brent

    ts, convs, niters = [], [], []
    for pi in p:
        t, conv, niter = solver(float(pi), tol, max_iter)
        if conv:
            logger.debug("Tws(%g Pa) = %.6f K after %d %s iterations", pi, t, niter, method.name)
        else:
            logger.warning("Tws(%g Pa) did not converge within %d %s iterations. Returning last estimate %.6f K",
                           pi, max_iter, method.name, t)
        ts.append(t)
        convs.append(conv)
        niters.append(niter)
    return ts, convs, niters, is_list

def Tws(
    P: npt.ArrayLike,
    method: tws_method = tws_method.NR,
    tol: float = TWS_TOL,
    max_iter: int = TWS_MAX_ITER,
) -> Union[float, np.ndarray]:
    """ Returns saturation temperature (deg K) at saturation pressure P (Pa). Inverse of Pws
        An approximate correlation provides the first guess, refined by Newton-Raphson iteration
        If the iteration limit is reached the last estimate is returned (see Tws_result to detect this)
        P: Saturation pressure (Pa), must be positive. Takes a single float, 1D list or 1D Numpy array
        method: Solution method
                'NR' Newton-Raphson using the analytic derivative dPws (Default)
                'BRENT' Brent's method bracketed between 150 and 500 K
        tol: Convergence tolerance on temperature step (deg K). Defaults to 1e-11
        max_iter: Maximum solver iterations. Defaults to 100
    """
    ts, _, _, is_list = _tws_solve(P, method, tol, max_iter)
    return process_output(ts, is_list)

def Tws_result(
    P: npt.ArrayLike,
    method: tws_method = tws_method.NR,
    tol: float = TWS_TOL,
    max_iter: int = TWS_MAX_ITER,
) -> TwsResult:
    """ As Tws, but returns a TwsResult named tuple of (T, converged, iterations, in_range)
        so callers can tell a converged answer from a stalled one, and an in-range result from an extrapolation
    """
    ts, convs, niters, is_list = _tws_solve(P, method, tol, max_iter)
    if is_list:
        return TwsResult(np.asarray(ts), np.array(convs), np.array(niters), in_range(ts, tol=tol))
    return TwsResult(ts[0], convs[0], niters[0], in_range(ts[0], tol=tol))
