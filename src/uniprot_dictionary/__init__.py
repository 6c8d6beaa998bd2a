"""Dictionary lookup adapter over the UniProt tabular search API."""

__version__ = "0.1.0"
