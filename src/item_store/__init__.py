"""
Item Store - CRUD service over an in-memory item collection

A small HTTP service holding an ordered list of {id, name} records behind a
single lock, mirrored to a flat JSON file after every successful mutation.
"""

__version__ = "0.1.0"
