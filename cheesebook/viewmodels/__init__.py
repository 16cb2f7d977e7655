"""ViewModel package for UI state and command surfaces.

Call context:
    ``cheesebook/app/main.py`` imports concrete viewmodels from this package
    to bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types and use-case result
    types only. Storage and Tk stay outside.
"""
