"""Render layer — pure value-to-text functions.

Render modules may import from domain only.
They must never import from config or commands, and never perform I/O.
"""
