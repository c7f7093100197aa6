"""Données d'exemple : python -m app.seed"""

import logging
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.database import init_db, session_scope
from app.core.logging import configure_logging
from app.repositories.page_repository import PageRepository
from app.schemas.page import PageCreate
from app.services.component_validator import validate_components
from typing import List

logger = logging.getLogger(__name__)

EXAMPLE_PAGES = [
    {
        "slug": "home",
        "title": "Welcome",
        "metadata": {
            "description": "Home page",
            "keywords": ["news", "home"],
            "ogImage": "https://example.com/og-image.jpg",
        },
        "components": [
            {
                "type": "Hero",
                "id": "hero-1",
                "props": {
                    "title": "Welcome",
                    "subtitle": "The latest news, as it happens",
                    "ctaText": "Read the news",
                    "ctaLink": "/news",
                },
            },
            {
                "type": "ArticleList",
                "id": "article-list-1",
                "props": {"title": "Latest news", "columns": 3},
                "children": [
                    {
                        "type": "ArticleCard",
                        "id": "article-1",
                        "props": {
                            "title": "Example article",
                            "excerpt": "An example article showing how pages are composed.",
                            "author": "Editorial team",
                            "publishedAt": "2024-01-15T10:00:00Z",
                            "category": "Technology",
                            "link": "/news/example",
                        },
                    },
                    {
                        "type": "ArticleCard",
                        "id": "article-2",
                        "props": {
                            "title": "Another article",
                            "excerpt": "More content for readers.",
                            "author": "Editorial team",
                            "publishedAt": "2024-01-14T15:30:00Z",
                            "category": "Science",
                            "link": "/news/another",
                        },
                    },
                ],
            },
        ],
    },
    {
        "slug": "news/technology",
        "title": "Technology",
        "components": [
            {
                "type": "Section",
                "id": "section-1",
                "props": {"title": "Technology"},
                "children": [
                    {"type": "Text", "id": "text-1", "props": {"content": "Everything about technology."}},
                ],
            },
        ],
    },
]


def seed_pages(db: Session, pages: List[dict] = None) -> List[str]:
    """Insère les pages absentes, renvoie les slugs créés"""
    repo = PageRepository(db)
    created = []
    for raw in pages if pages is not None else EXAMPLE_PAGES:
        data = PageCreate.model_validate(raw)
        if repo.count_with_slug(data.slug) > 0:
            logger.info(f"Seed: '{data.slug}' already present, skipped")
            continue
        validate_components(data.components)
        repo.insert(data)
        created.append(data.slug)
        logger.info(f"Seed: '{data.slug}' created")
    return created


if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    init_db()
    with session_scope() as session:
        slugs = seed_pages(session)
    logger.info(f"Seed finished, {len(slugs)} page(s) created")
