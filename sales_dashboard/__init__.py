"""Sales Dashboard — monthly transaction statistics API."""
__version__ = "1.0.0"
