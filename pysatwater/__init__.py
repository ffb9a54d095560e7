"""
pysatwater
===================================

-----------------------------------------------------------
Thermodynamic properties of saturated water, ice and vapor
-----------------------------------------------------------

Implements the closed form correlations of Hyland & Wexler (1983), "Formulations for the thermodynamic
properties of the saturated phases of H2O from 173.15 K to 473.15 K", ASHRAE Transactions.

All functions take temperature in deg K and pressure in Pa, and accept either a single float
(returning a float) or a 1D list / numpy array (returning a numpy array).

Includes functions to calculate;

- Saturation pressure over liquid water and ice, and its temperature derivative
- Saturation temperature from saturation pressure (Newton-Raphson inversion)
- Specific volume of saturated ice, density & specific volume of saturated water
- Virial coefficients B' and C' of saturated vapor and their derivatives
- Specific enthalpy of saturated ice, liquid water and vapor, and latent heats
- Tables of saturated properties, optionally exported as include files

Sub-modules are imported on first access, eg;

    import pysatwater.saturation as sat
    sat.Tws(101325)
"""

submodules = [
    'classes',
    'constants',
    'enthalpy',
    'saturation',
    'shared_fns',
    'tables',
    'validate',
    'virial',
    'volume',
]

__all__ = submodules

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pysatwater.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pysatwater' has no attribute '{name}'"
            )
