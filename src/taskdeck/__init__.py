"""Console task list manager: seed tasks, add a few, review them."""

__version__ = "0.1.0"
