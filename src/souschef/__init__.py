"""
Sous Chef kitchen-planning engine.

The package exposes the measurement algebra (units, conversion, practical rounding),
the ingredient consolidation engine behind shopping lists and meal prep, and the
storage, HTTP and CLI surfaces built on top of them.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
