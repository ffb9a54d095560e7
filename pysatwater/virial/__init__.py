from .virial import Blin, Clin, dBlin, dClin
