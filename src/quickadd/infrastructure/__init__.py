"""Infrastructure layer — environment, registry, and note file I/O.

Modules here may raise the exceptions from :mod:`quickadd.domain.errors`.
They must never import from services, commands, or output.
"""
