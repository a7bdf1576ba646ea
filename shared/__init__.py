"""
Shared Kernel

Base classes and utilities shared across the domain apps: value objects,
domain events, the unit of work, the in-process message bus and the
API error envelope.
"""
