"""Interactive customisation of a cloned AI project template."""

__version__ = "0.1.0"
