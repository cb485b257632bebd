"""Record-keeping service for 3D-print jobs backed by a single JSON document."""

__version__ = "1.0.0"
