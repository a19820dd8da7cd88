"""Domain layer — date templates, task lines, and note insertion rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
