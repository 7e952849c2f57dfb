"""Building blocks for agent-based epidemic simulation: diseases, configuration, grids, areas and citizen placement."""

__version__ = "0.1.0"