"""photoship — pixel filters for single RGB triplets.

Pure transforms live in photoship.core.pixels. Every transform is also
exposed as a named Filter under photoship.filters, discovered by
photoship.registry.
"""
