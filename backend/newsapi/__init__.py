"""newsapi - articles CRUD service with an IMDb chart importer."""

__version__ = "0.1.0"
