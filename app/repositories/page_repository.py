import logging
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.errors import InternalError
from app.models.page import Page
from app.schemas.page import PageCreate

logger = logging.getLogger(__name__)


class UniqueConstraintViolation(Exception):
    """Le stockage a refusé l'écriture : slug déjà pris (course entre deux requêtes)"""

    def __init__(self, slug: str):
        super().__init__(f"slug already stored: {slug}")
        self.slug = slug


SLUG_UNIQUE_MARKERS = (
    "uq_pages_slug",  # postgres : nom de la contrainte
    "unique constraint failed: pages.slug",  # sqlite
)


def _is_slug_violation(exc: IntegrityError) -> bool:
    """Seule la contrainte d'unicité du slug compte, pas un NOT NULL sur la même colonne"""
    message = str(exc.orig).lower()
    return any(marker in message for marker in SLUG_UNIQUE_MARKERS)


def _apply_payload(page: Page, data: PageCreate) -> None:
    page.slug = data.slug
    page.title = data.title
    page.page_metadata = data.metadata.to_payload() if data.metadata is not None else None
    page.components = list(data.components)


class PageRepository:
    """Accès aux pages via une session SQLAlchemy (une session par requête)"""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Page]:
        return self.db.query(Page).order_by(Page.created_at.desc()).all()

    def find_by_slug(self, slug: str) -> Optional[Page]:
        return self.db.query(Page).filter(Page.slug == slug).first()

    def find_by_id(self, page_id: str) -> Optional[Page]:
        return self.db.query(Page).filter(Page.id == page_id).first()

    def count_with_slug(self, slug: str, exclude_id: Optional[str] = None) -> int:
        query = self.db.query(func.count(Page.id)).filter(Page.slug == slug)
        if exclude_id:
            query = query.filter(Page.id != exclude_id)
        return query.scalar() or 0

    def insert(self, data: PageCreate) -> Page:
        page = Page()
        _apply_payload(page, data)
        self.db.add(page)
        self._commit(data.slug)
        self.db.refresh(page)
        return page

    def update(self, page_id: str, data: PageCreate) -> Optional[Page]:
        page = self.find_by_id(page_id)
        if not page:
            return None
        _apply_payload(page, data)
        self._commit(data.slug)
        self.db.refresh(page)
        return page

    def delete(self, page_id: str) -> bool:
        deleted = self.db.query(Page).filter(Page.id == page_id).delete(synchronize_session=False)
        self._commit()
        return deleted > 0

    def _commit(self, slug: Optional[str] = None) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if slug is not None and _is_slug_violation(exc):
                raise UniqueConstraintViolation(slug) from exc
            logger.error(f"Integrity error on pages: {exc.orig}")
            raise InternalError() from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Storage error on pages")
            raise InternalError() from exc
