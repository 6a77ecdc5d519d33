"""Regional demography statistics: CSV loading, min/max/median, graph layout and a Tk window."""

__version__ = "0.1.0"
__all__ = ["errors", "records", "csv_reader", "statistics", "context", "graph", "app"]