"""Domain layer — timestamps, metadata, front matter, the ordered file list.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
