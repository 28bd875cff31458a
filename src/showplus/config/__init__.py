"""Configuration layer — TOML discovery, settings, and logging setup.

Config may import from domain.  It must never import from render or commands.
"""
