"""Joke Gateway: personalised jokes assembled from a name service and a joke service."""

__version__ = "0.1.0"
