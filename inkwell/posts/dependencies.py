from inkwell.posts.service import PostService


def get_post_service() -> PostService:
    return PostService()
