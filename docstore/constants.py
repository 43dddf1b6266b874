"""Shared constants for docstore."""

DEFAULT_URI = "mongodb://localhost:27017/"

# Backends selectable from the command line
BACKEND_CHOICES = ("mongo", "mongomock")
