#!/usr/bin/env python3
"""
Operator commands against the site backend.

Usage:
    python site_admin.py visit [PAGE]                     # Simulate a page load (daily visitor tracking)
    python site_admin.py posts                            # List blog posts
    python site_admin.py analytics                        # Print visitor counters
    python site_admin.py create-post TITLE CONTENT EXCERPT
"""

import asyncio
import sys

from app.container import Container
from app.errors import BackendUnavailableError, ValidationError
from settings import API_BASE_URL, API_TIMEOUT
from settings.logging import setup_logging
from site_client import BackendError, set_api_config

logger = setup_logging(to_file=False)


async def visit(container: Container, page: str) -> None:
    """Run the page-load tracking flow once."""
    ack = await container.visitors.on_page_load(page)
    if ack is None:
        print("No unique visit reported (already tracked today, admin, or unavailable)")
    else:
        print(f"Unique visit reported for {ack.day_key}: {ack.count} visitors")


async def list_posts(container: Container) -> None:
    posts = await container.blog.all_posts()
    if not posts:
        print("No blog posts")
    for post in posts:
        print(f"{post.id:<12} {post.title}")


async def show_analytics(container: Container) -> None:
    data = await container.analytics.data()
    if data is None:
        print("Analytics not available")
        return

    sections = {
        "Daily visitors": data.daily_visitors,
        "Page visits": data.page_visits,
        "Section views": data.section_views,
        "Element clicks": data.element_clicks,
    }
    for title, rows in sections.items():
        print(f"\n{title}")
        print("-" * 40)
        for name, count in sorted(rows, key=lambda r: r[1], reverse=True):
            print(f"  {name:<28} {count:>8,}")


async def create_post(container: Container, title: str, content: str, excerpt: str) -> None:
    post_id = await container.blog.create_post(title, content, excerpt)
    print(f"Created post {post_id}")


async def run(args: list[str]) -> int:
    set_api_config(API_BASE_URL, API_TIMEOUT)

    async with Container() as container:
        if not container.connection.is_ready:
            logger.error("Backend unavailable at {}", API_BASE_URL)
            return 1

        command, rest = args[0], args[1:]
        try:
            if command == "visit":
                await visit(container, rest[0] if rest else "home")
            elif command == "posts":
                await list_posts(container)
            elif command == "analytics":
                await show_analytics(container)
            elif command == "create-post" and len(rest) == 3:
                await create_post(container, *rest)
            else:
                print(__doc__)
                return 1
        except ValidationError as e:
            print(f"Invalid input: {e.message}")
            return 1
        except (BackendError, BackendUnavailableError) as e:
            logger.error("{} failed: {}", command, e)
            return 1
    return 0


def main():
    args = sys.argv[1:]
    if not args or args[0] in ("-h", "--help"):
        print(__doc__)
        sys.exit(0 if args else 1)

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
