"""Pointwise finite-strain constitutive laws, microstructure updates and obstacle contact terms."""

__version__ = "0.1.0"
__all__ = [
    "elastic",
    "elastoplastic",
    "microstructure",
    "obstacles",
    "constraints",
    "multipliers",
]