"""A campus social network with friendships and friend recommendations."""

__version__ = "0.1.0"