"""
Core mathematical primitives, domain models, and contracts.

This module contains the range remapping building blocks. They are pure
and independent of any caller, I/O, or runtime state.
"""
