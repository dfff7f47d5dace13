"""Singly linked, doubly linked and contiguous list containers."""

__version__ = "0.1.0"
__all__ = ["contiguous", "doubly_linked", "singly_linked"]