"""Use-case layer: text commands and load/save workflows.

Each module coordinates domain objects and ports without performing file
I/O directly, preserving MVVM + Hexagonal boundaries.
"""
