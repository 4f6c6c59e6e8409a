"""Donation processing: money, cards, charges, donation tallies, ROT-128 data and an HTTP API."""

__version__ = "0.1.0"