"""
Pop-up store search across Naver and Kakao.

Four verticals are queried, each inside its own failure boundary:
- naverBlogs: Naver blog search
- naverImages: Naver image search, linked back to matching blog posts
- kakaoBlogs: Kakao blog search
- kakaoPlaces: Kakao cultural-facility place search

A failing vertical leaves its slot empty; the bundle always has all four.
"""

from typing import Any

import structlog

from .models import SearchResultBundle
from .resilience import with_default
from .sources import KakaoSearchClient, NaverSearchClient

logger = structlog.get_logger()


def link_image_sources(
    images: list[dict[str, Any]], blogs: list[dict[str, Any]]
) -> list[dict[str, Any]]:
    """
    Attach a ``source`` page link to each image result.

    The source is the link of the first blog post whose title contains
    the image title or is contained by it. Images without a matching
    post fall back to their own link.
    """
    linked = []
    for image in images:
        title = image.get("title", "")
        source = image.get("link")
        for blog in blogs:
            blog_title = blog.get("title", "")
            if blog_title in title or title in blog_title:
                source = blog.get("link") or source
                break
        linked.append({**image, "source": source})
    return linked


class SearchAggregator:
    """Run the four provider searches and assemble one bundle."""

    def __init__(self, naver: NaverSearchClient, kakao: KakaoSearchClient):
        self.naver = naver
        self.kakao = kakao

    async def search(self, query: str) -> SearchResultBundle:
        """
        Search every provider vertical for pop-up stores.

        Args:
            query: Free-text query; the pop-up suffix is added per provider

        Returns:
            Bundle with all four slots present
        """
        bundle = SearchResultBundle(
            naver_blogs=await with_default(self.naver.search_blogs, [], query),
            naver_images=await with_default(self.search_linked_images, [], query),
            kakao_places=await with_default(self.kakao.search_places, [], query),
            kakao_blogs=await with_default(self.kakao.search_blogs, [], query),
        )

        logger.info(
            "popup_search_done",
            query=query,
            naver_blogs=len(bundle.naver_blogs),
            naver_images=len(bundle.naver_images),
            kakao_blogs=len(bundle.kakao_blogs),
            kakao_places=len(bundle.kakao_places),
        )
        return bundle

    async def search_linked_images(self, query: str) -> list[dict[str, Any]]:
        """Search Naver images and link each one to a matching blog post.

        The companion blog search shares the image vertical's failure
        boundary: if either call fails, no images are returned.
        """
        images = await self.naver.search_images(query)
        blogs = await self.naver.search_blogs(query)
        return link_image_sources(images, blogs)
