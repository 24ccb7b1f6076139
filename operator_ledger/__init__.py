"""Operator ledger account layouts, address derivation and epoch-ordered history buffers."""

__version__ = "0.1.0"