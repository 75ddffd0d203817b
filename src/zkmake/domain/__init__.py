"""Domain layer — wikilink, path, and heading rules.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
