"""A current-account ledger with CSV load and save and a command-driven session."""

__version__ = "1.0.0"
__all__ = ["__version__"]