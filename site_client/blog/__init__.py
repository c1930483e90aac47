"""Blog API client."""

from site_client.blog.client import BlogClient
from site_client.blog.schemas import BlogPost, EditRecord, EmbeddedImage

__all__ = [
    "BlogClient",
    "BlogPost",
    "EmbeddedImage",
    "EditRecord",
]
