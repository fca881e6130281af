"""Console hotel booking manager with flat-file persistence."""

__version__ = "0.1.0"
