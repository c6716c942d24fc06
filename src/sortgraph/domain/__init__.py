"""Domain layer — vertices, edges, and rejection reasons.

This layer depends only on stdlib.
It must never import from graph, services, infrastructure, commands, or config.
"""
