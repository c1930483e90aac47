"""Blog API client - posts, images, attached files."""

from site_client.base import BaseClient
from site_client.blog.schemas import BlogPost
from site_client.schemas import ExternalBlob


class BlogClient(BaseClient):
    """Client for blog endpoints."""

    async def blog_posts(self) -> list[BlogPost]:
        """GET /blog/posts - all posts."""
        return [BlogPost.model_validate(p) for p in await self._get("blog/posts")]

    async def blog_post(self, post_id: str) -> BlogPost | None:
        """GET /blog/posts/{id} - single post or None."""
        data = await self._get(f"blog/posts/{post_id}")
        return BlogPost.model_validate(data) if data is not None else None

    async def create_blog_post(self, title: str, content: str, excerpt: str) -> str:
        """POST /blog/posts - returns new post id."""
        return await self._post("blog/posts", {"title": title, "content": content, "excerpt": excerpt})

    async def update_blog_post(self, post_id: str, title: str, content: str, excerpt: str) -> None:
        """PUT /blog/posts/{id}."""
        await self._put(f"blog/posts/{post_id}", {"title": title, "content": content, "excerpt": excerpt})

    async def update_excerpt(self, post_id: str, excerpt: str) -> None:
        """PUT /blog/posts/{id}/excerpt."""
        await self._put(f"blog/posts/{post_id}/excerpt", {"excerpt": excerpt})

    async def delete_blog_post(self, post_id: str) -> None:
        """DELETE /blog/posts/{id} - also drops the post's attachments."""
        await self._delete(f"blog/posts/{post_id}")

    async def add_blog_file(self, post_id: str, file: ExternalBlob) -> str:
        """POST /blog/posts/{id}/files - returns file path."""
        return await self._post(f"blog/posts/{post_id}/files", {"file": file.model_dump()})

    async def delete_blog_file(self, post_id: str, file_path: str) -> None:
        """DELETE /blog/posts/{id}/files/{path}."""
        await self._delete(f"blog/posts/{post_id}/files/{file_path}")

    async def add_blog_image(
        self,
        post_id: str,
        image: ExternalBlob,
        position: int,
        alt_text: str,
        size: str,
    ) -> str:
        """POST /blog/posts/{id}/images - returns image id."""
        return await self._post(
            f"blog/posts/{post_id}/images",
            {"url": image.model_dump(), "position": position, "altText": alt_text, "size": size},
        )

    async def update_blog_image(
        self,
        post_id: str,
        image_id: str,
        position: int,
        size: str,
        alt_text: str,
    ) -> None:
        """PUT /blog/posts/{id}/images/{image_id}."""
        await self._put(
            f"blog/posts/{post_id}/images/{image_id}",
            {"position": position, "size": size, "altText": alt_text},
        )

    async def delete_blog_image(self, post_id: str, image_id: str) -> None:
        """DELETE /blog/posts/{id}/images/{image_id}."""
        await self._delete(f"blog/posts/{post_id}/images/{image_id}")

    async def update_blog_title(self, title: str) -> None:
        """PUT /blog/title - section heading stored in site content."""
        await self._put("blog/title", {"title": title})

    async def update_blog_description(self, description: str) -> None:
        """PUT /blog/description - section text stored in site content."""
        await self._put("blog/description", {"description": description})
