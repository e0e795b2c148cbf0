"""
Todo List - Persistent list manager

A single-writer list service that owns an ordered collection of titled
items, enforces its invariants, and writes every change through to local
key-value storage.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
