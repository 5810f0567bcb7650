"""Language server for wiki-linked markdown note vaults."""

__version__ = "0.1.0"
