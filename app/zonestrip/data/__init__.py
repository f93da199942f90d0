"""Bundled data files for zonestrip."""
