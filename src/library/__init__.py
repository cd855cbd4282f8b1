"""Data-access layer for the library catalog: authors and books."""
