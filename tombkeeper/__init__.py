"""AES-256-CBC keys and encryption, configuration, and the state objects of a password manager interface."""

__version__ = "0.2.3"