from .volume import volumeice, densitywater, volumewater
