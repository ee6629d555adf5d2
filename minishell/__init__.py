"""A small shell front end: line checks, variable expansion and pipeline splitting."""

__version__ = "0.1.0"