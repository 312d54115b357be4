"""Console sales tracker: sales records, text-file storage, summaries and an interactive menu."""

__version__ = "2.0.0"
__all__ = ["sale", "tracker", "cli"]