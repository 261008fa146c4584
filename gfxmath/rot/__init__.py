"""
Rotor module: rotations in 3D space.
"""

from .rotors import Rotor3

__all__ = [
    "Rotor3",
]
