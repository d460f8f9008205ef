"""
Core fraction engine: domain values, exact rational arithmetic, and wire contracts.

This package has no I/O and no state; every game in the fraction family
calls into it for both move evaluation and win-condition checks.
"""
