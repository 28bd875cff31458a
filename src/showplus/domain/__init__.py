"""Domain layer — sum-type carriers and validated format styles.

This layer depends only on stdlib and pydantic.
It must never import from render, config, or commands.
"""
