"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (JSON files on the
    local filesystem) used by use cases.

Dependencies:
    Submodules depend on ``pydantic`` for document validation, filesystem
    APIs, and domain protocol definitions.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests.
"""
