"""Groot - a minimal content-addressed version control engine."""

__version__ = '0.1.0'

from groot.core.repository import Repository
from groot.core.objects import Commit, StagingEntry

__all__ = [
    'Repository',
    'Commit',
    'StagingEntry',
]
