"""Console manager for pipes and compressor stations of a gas network."""

__version__ = "0.1.0"