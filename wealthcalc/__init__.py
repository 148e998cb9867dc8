"""Wealth projection backend: SIP and lump-sum growth calculator."""

__version__ = "0.1.0"
