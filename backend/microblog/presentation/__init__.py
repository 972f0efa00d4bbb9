"""
Presentation Layer - HTTP routes and request/response handling.

This layer contains:
- web/: FastAPI routers for posts, comments and user sessions, plus the
  Outcome types every route returns
- dependencies/: per-request dependencies (the AuthContext)
"""
