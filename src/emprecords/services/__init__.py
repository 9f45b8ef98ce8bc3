"""Service layer — record operations returning ServiceResult.

Services may import from domain and infrastructure layers.
They must never import from actions, commands or output.
"""
