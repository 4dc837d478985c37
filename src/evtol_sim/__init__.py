"""eVTOL fleet charging simulator — discrete-event flight/charge model."""

__version__ = "0.1.0"
