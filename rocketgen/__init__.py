"""Procedural ASCII-art rocket generator."""
from . import utils
from . import parts
from . import assembly
from .assembly import Rocket, RocketAssembler

__version__ = "0.1.0"

__all__ = [
    'utils',
    'parts',
    'assembly',
    'Rocket',
    'RocketAssembler'
]
