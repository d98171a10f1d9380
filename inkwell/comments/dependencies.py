from inkwell.comments.service import CommentService


def get_comment_service() -> CommentService:
    return CommentService()
