"""Helpers for puzzle solving: integer, string, sequence and mapping utilities, grid coordinates and directions, a linked list, a set type and timing."""

__version__ = "0.1.0"