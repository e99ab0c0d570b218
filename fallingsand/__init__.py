"""A falling-sand particle simulation: particles, grid rules, input handling and a pygame window."""

__version__ = "0.1.0"