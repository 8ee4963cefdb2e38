"""Reusable libraries bundled with xtio."""
