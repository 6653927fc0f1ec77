"""Classic algorithm routines over lists, strings, linked lists and binary trees."""

__version__ = "0.1.0"