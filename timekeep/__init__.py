"""Timekeep - presentation layer of a desktop time tracker"""

__version__ = "0.1.0"
