"""bugbridge: locate, run and normalize the ohmybug scanner CLI."""

__version__ = "0.1.0"
