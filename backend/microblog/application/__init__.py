"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (create/update/destroy posts, comment, sign up/in)
- queries/   → Read operations (list/show/edit posts)
- dto/       → Form objects holding only the permitted fields
- common/    → Shared interfaces (Command, Query base classes, AuthContext)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- The current user is always passed in explicitly as an AuthContext
"""
