"""Core domain layer - entities, interfaces, and exceptions."""

from flipcam.core import entities, exceptions, interfaces

__all__ = ["entities", "interfaces", "exceptions"]
