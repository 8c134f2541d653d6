"""Search and hashing exercises, a kitchen simulation and a terminal weather viewer."""

__version__ = "0.1.0"