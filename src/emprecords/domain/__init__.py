"""Domain layer — payloads, clock, and the auditable capability.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, actions, or config.
"""
