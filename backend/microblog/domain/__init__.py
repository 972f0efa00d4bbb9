"""
DOMAIN LAYER - Posts, comments and the users who own them.

This layer contains:
- Entities: Business objects with identity (Post, Comment, User)
- Value Objects: Immutable identifiers (PostId, CommentId, UserId, UserEmail)
- Ports: Repository interfaces that infrastructure implements
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
