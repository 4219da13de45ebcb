"""roster-sync: bulk clone and update repositories listed in a roster file."""

__version__ = "0.1.0"
