"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks that are independent
of the command surface: Term/Polynomial models, the quadratic solver,
IEEE-754 helpers and JSON Schema contracts.
"""
