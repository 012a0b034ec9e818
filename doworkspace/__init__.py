"""do-workspace: type a task, get a labelled card."""

__version__ = "0.1.0"
