"""Utility package."""
from . import config
from . import logging

__all__ = [
    'config',
    'logging'
]
