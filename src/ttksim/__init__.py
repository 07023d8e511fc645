"""Champion stat resolution and time-to-kill simulation."""

__version__ = "0.1.0"
