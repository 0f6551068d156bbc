"""Administrative backend for vocabulary entries, fix-it requests and their audit trail."""

__version__ = "0.1.0"
