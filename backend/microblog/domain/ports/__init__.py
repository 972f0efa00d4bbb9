"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/  → Post, Comment and User persistence interfaces
"""
