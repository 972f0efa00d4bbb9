"""
COMMANDS - Write operations (CQRS)

Subfolders:
- posts/    → create_post, update_post, delete_post
- comments/ → create_comment
- users/    → register_user, authenticate_user
"""
