"""A command line utility to simplify logging into AWS accounts and services."""

__version__ = "0.1.0"
