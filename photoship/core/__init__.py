"""photoship.core — Foundation layer.

Contains the pixel transforms, colour helpers, unit conversion, type
definitions, and configuration loading.
This module has NO dependencies on photoship.filters or photoship.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
