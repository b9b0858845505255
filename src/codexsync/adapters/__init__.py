"""Adapters between the reconciliation domain and the outside world."""
