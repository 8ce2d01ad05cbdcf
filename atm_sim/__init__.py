"""Console ATM simulator with PIN authentication and an in-memory account."""

__version__ = "0.1.0"
