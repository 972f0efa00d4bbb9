"""microblog - short posts and comments, owned by the users who write them."""

__version__ = "1.0.0"
