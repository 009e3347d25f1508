from board.models.user_model import User
from board.models.post_model import Post
from board.models.comment_model import Comment
from board.models.vote_model import Vote

__all__ = ["User", "Post", "Comment", "Vote"]
