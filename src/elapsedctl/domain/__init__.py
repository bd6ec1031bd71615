"""Domain layer — instants and the elapsed-time breakdown.

This layer depends only on the stdlib.
It must never import from services, commands, output, or config.
"""
