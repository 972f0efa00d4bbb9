from microblog.domain.value_objects.post_id import PostId
from microblog.domain.value_objects.comment_id import CommentId
from microblog.domain.value_objects.user_id import UserId
from microblog.domain.value_objects.user_email import UserEmail

__all__ = ["PostId", "CommentId", "UserId", "UserEmail"]
