"""
INFRASTRUCTURE LAYER - Adapters for the domain ports.

- persistence/ → in-memory and Prisma repository implementations
"""
