"""Domain layer: board, robot, commands, and the command grammar.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
