"""Utility modules for nodeplate."""
