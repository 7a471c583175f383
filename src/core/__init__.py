"""
Core mathematical primitives, domain snapshots, and contracts.

This module contains the mixed-radix counter and its serialized form; it is
independent of any I/O.
"""
