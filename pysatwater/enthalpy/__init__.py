from .enthalpy import enthalpyice, enthalpywater, enthalpyvapor, enthalpy_vaporization, enthalpy_sublimation
