"""Linked lists, a stack, Game of Life, temperature tables, coordinates, routing, API errors, pipelines and file helpers."""

__version__ = "0.1.0"