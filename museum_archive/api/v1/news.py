"""
News and notices endpoints.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from museum_archive.api.deps import StaffUser, Store
from museum_archive.kernel.models.news import NewsArticle, NewsCreate, NewsPatch
from museum_archive.schemas.common import SuccessResponse

router = APIRouter()


def _news_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="News article not found")


@router.get("", response_model=List[NewsArticle])
async def list_news(store: Store, category: str = "all"):
    """Newest first; category "all" lists every article."""
    articles = store.news
    if category != "all":
        articles = [a for a in articles if a.category.lower() == category.lower()]
    return sorted(articles, key=lambda a: a.date, reverse=True)


@router.get("/{news_id}", response_model=NewsArticle)
async def get_news(news_id: str, store: Store):
    article = store.get_news_by_id(news_id)
    if article is None:
        raise _news_not_found()
    return article


@router.post("", response_model=NewsArticle, status_code=status.HTTP_201_CREATED)
async def create_news(data: NewsCreate, store: Store, _: StaffUser):
    return store.add_news(data)


@router.patch("/{news_id}", response_model=NewsArticle)
async def update_news(news_id: str, data: NewsPatch, store: Store, _: StaffUser):
    article = store.update_news(news_id, data)
    if article is None:
        raise _news_not_found()
    return article


@router.delete("/{news_id}", response_model=SuccessResponse)
async def delete_news(news_id: str, store: Store, _: StaffUser):
    if not store.delete_news(news_id):
        raise _news_not_found()
    return SuccessResponse(message="News article deleted")
