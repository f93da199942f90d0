"""zonestrip - Remove the Zone.Identifier marker from downloaded files."""

__version__ = "0.1.0"
