"""Application composition layer for the Tkinter GUI.

``main`` wires views, view models, the storage adapter and the model into a
runnable desktop app without placing business logic in views.
"""
