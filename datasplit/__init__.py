"""datasplit: shuffle a dataset and split it into training and test sets."""

__version__ = "1.0.0"
