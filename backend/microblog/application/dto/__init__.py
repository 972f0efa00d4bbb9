"""
DTOs - Form objects

Each form lists the only fields a request body may set. Anything else a
client submits is dropped when the form is built, so fields such as the
owner or the id can never be mass-assigned onto an entity.

- post.py    → PostForm
- comment.py → CommentForm
- user.py    → SignInForm, SignUpForm
"""

from microblog.application.dto.post import PostForm
from microblog.application.dto.comment import CommentForm
from microblog.application.dto.user import SignInForm, SignUpForm

__all__ = [
    "PostForm",
    "CommentForm",
    "SignInForm",
    "SignUpForm",
]
