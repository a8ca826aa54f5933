"""Shared infrastructure: persistence adapter, domain errors and counters."""
