"""Rocket assembly package."""
from . import errors
from . import random_source
from . import selection
from . import renderer
from . import assembler
from .assembler import MIN_HEIGHT, Phase, Rocket, RocketAssembler
from .errors import (
    ConfigurationError,
    NoEligiblePartError,
    RocketError,
    UnsatisfiableHeightError
)
from .random_source import NumpyRandomSource, RandomSource

__all__ = [
    'errors',
    'random_source',
    'selection',
    'renderer',
    'assembler',
    'MIN_HEIGHT',
    'Phase',
    'Rocket',
    'RocketAssembler',
    'ConfigurationError',
    'NoEligiblePartError',
    'RocketError',
    'UnsatisfiableHeightError',
    'NumpyRandomSource',
    'RandomSource'
]
