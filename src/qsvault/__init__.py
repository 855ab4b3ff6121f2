"""Quantified-self vault: ingest health and location tickets into JSON files."""

__version__ = "0.1.0"
