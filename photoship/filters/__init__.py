"""Pixel filter modules.

Every .py file in this package that defines a `pixel_filter` object is
auto-registered by photoship.registry.discover().
"""
