"""Terminal kanban board for directories of markdown tickets."""

__version__ = "0.1.0"
