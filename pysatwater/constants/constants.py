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

# Hyland, R. W. and Wexler, A., "Formulations for the thermodynamic properties of the
# saturated phases of H2O from 173.15 K to 473.15 K", ASHRAE Transactions, 1983.

# Constants
T_TRIPLE = 273.16  # Triple point temperature (deg K). Ice / liquid branch boundary for Pws & dPws
T_MIN = 173.15  # Lower limit of the correlations (deg K)
T_MAX = 473.15  # Upper limit of the correlations (deg K)
T_HW_LOW = 373.125  # Boundary between low & high range water enthalpy correlations (deg K)
T_HW_HIGH = 403.128  # Onset of the power law correction to high range water enthalpy (deg K)
R_W = 461.52  # Specific gas constant for water vapor used by Hyland & Wexler, J/(kg.K)

# Tws Newton-Raphson solver settings
TWS_MAX_ITER = 100
TWS_TOL = 1e-11  # Absolute step size tolerance (deg K)
TWS_BRACKET = (150.0, 500.0)  # Bracket (deg K) used by the Brent solver option

# Coefficients
# Saturation pressure over liquid water, Eq 17
G = (-0.58002206e4, 0.13914993e1, -0.48640239e-1, 0.41764768e-4, -0.14452093e-7, 0.65459673e1)

# Saturation pressure over ice, Eq 18
M = (-0.56745359e4, 0.63925247e1, -0.96778430e-2, 0.62215701e-6, 0.20747825e-8, -0.94840240e-12, 0.41635019e1)

# Initial estimate of saturation temperature from pressure. Quartic in ln(P) plus a linear term in P
GG = (2.127925e2, 7.305398e0, 1.969953e-1, 1.103701e-2, 1.849307e-3, 5.145087e-6)

# Saturated water enthalpy, Eqs 6-11. Low range (T < 373.125 K)
L = (-0.11411380e7, 0.41930463e4, -0.8134865e-1, 0.1451133e-3, -0.1005230e-6, -0.563473e3, -0.036)

# Saturated water enthalpy, high range (T >= 373.125 K). Last term scales the (T - 403.128)^3.1 correction
MH = (-0.1141837121e7, 0.4194325677e4, -0.6908894163e-1, 0.105555302e-3, -0.7111382234e-7, 0.6059e-3)

# Saturated ice enthalpy, Eq 3. Last term multiplies Pws over ice
HI = (-0.647595e6, 0.274292e3, 0.2910583e1, 0.1083437e-2, 0.107e-2)

# Saturated vapor enthalpy, Eq 19
HV = (0.199798e7, 0.18035706e4, 0.36400463e0, -0.14677622e-2, 0.28726608e-5, -0.17508262e-8)

# Saturated ice specific volume, Eq 2
VI = (0.1070003e-2, -0.249936e-7, 0.371611e-9)

# Saturated water density, Eq 5. Quintic numerator / linear denominator
DW_NUM = (-0.2403360201e4, -0.140758895e1, 0.1068287657e0, -0.2914492351e-3, 0.373497936e-6, -0.21203787e-9)
DW_DEN = (-0.3424442728e1, 0.1619785e-1)

# Virial coefficients B' and C', Eqs 15 & 16: (b0, b1, k, dB/dT multiplier)
BV = (0.70e-8, 0.147184e-8, 1734.29, 2.5525974e-6)
CV = (0.104e-14, 0.335297e-17, 3645.09, 1.2221877e-14)
