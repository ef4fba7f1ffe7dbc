"""A grid-filling arcade game: claim territory while dodging enemies."""

__version__ = "0.1.0"