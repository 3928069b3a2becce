"""tasktimeline: extract dated, tagged tasks from notes and lay them out in time."""

__version__ = "0.1.0"
