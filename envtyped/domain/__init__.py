"""
Domain layer: ports for the environment store and the warning side channel.
These interfaces keep the accessors independent from os.environ and logging setup.
"""

from .ports import EnvStore, WarningSink

__all__ = [
    "EnvStore",
    "WarningSink",
]
