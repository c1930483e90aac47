"""Blog service - posts and their attachments."""

from app.cache import keys
from app.errors import require_text
from app.services.base import BaseService
from site_client.blog import BlogPost
from site_client.schemas import ExternalBlob


class BlogService(BaseService):
    """Blog queries and mutations."""

    async def all_posts(self) -> list[BlogPost]:
        return await self._query(keys.BLOG_POSTS, lambda c: c.blog_posts(), [])

    async def post(self, post_id: str) -> BlogPost | None:
        if not post_id:
            return None
        return await self._query(
            keys.with_params(keys.BLOG_POST, post_id),
            lambda c: c.blog_post(post_id),
            None,
        )

    async def create_post(self, title: str, content: str, excerpt: str) -> str:
        """Create a post, returns its id."""
        require_text(title, "title")
        return await self._mutate(
            "create_blog_post",
            lambda c: c.create_blog_post(title, content, excerpt),
        )

    async def update_post(self, post: BlogPost) -> None:
        """Replace title, content and excerpt of an existing post."""
        require_text(post.title, "title")
        await self._mutate(
            "update_blog_post",
            lambda c: c.update_blog_post(post.id, post.title, post.content, post.excerpt),
        )

    async def update_excerpt(self, post_id: str, excerpt: str) -> None:
        await self._mutate("update_excerpt", lambda c: c.update_excerpt(post_id, excerpt))

    async def delete_post(self, post_id: str) -> None:
        await self._mutate("delete_blog_post", lambda c: c.delete_blog_post(post_id))

    # ========== Attachments ==========

    async def add_file(self, post_id: str, file: ExternalBlob) -> str:
        return await self._mutate("add_blog_file", lambda c: c.add_blog_file(post_id, file))

    async def delete_file(self, post_id: str, file_path: str) -> None:
        await self._mutate("delete_blog_file", lambda c: c.delete_blog_file(post_id, file_path))

    async def add_image(
        self,
        post_id: str,
        image: ExternalBlob,
        position: int = 0,
        alt_text: str = "",
        size: str = "medium",
    ) -> str:
        return await self._mutate(
            "add_blog_image",
            lambda c: c.add_blog_image(post_id, image, position, alt_text, size),
        )

    async def update_image(self, post_id: str, image_id: str, position: int, size: str, alt_text: str) -> None:
        await self._mutate(
            "update_blog_image",
            lambda c: c.update_blog_image(post_id, image_id, position, size, alt_text),
        )

    async def delete_image(self, post_id: str, image_id: str) -> None:
        await self._mutate("delete_blog_image", lambda c: c.delete_blog_image(post_id, image_id))

    # ========== Section texts ==========

    async def update_title(self, title: str) -> None:
        require_text(title, "blog title")
        await self._mutate("update_blog_title", lambda c: c.update_blog_title(title))

    async def update_description(self, description: str) -> None:
        await self._mutate("update_blog_description", lambda c: c.update_blog_description(description))
