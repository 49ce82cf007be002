"""
Core configuration and numerical primitives.

Everything here is pure: no shared mutable state, no I/O.
"""
