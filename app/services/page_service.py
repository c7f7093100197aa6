# IMPORTS
import logging
import re
from sqlalchemy.orm import Session
from app.core.errors import NotFound, Conflict, MalformedIdentifier
from app.models.page import Page
from app.repositories.page_repository import PageRepository, UniqueConstraintViolation
from app.schemas.page import PageCreate, PageUpdate
from app.services.component_validator import validate_components, tree_depth
from typing import List

logger = logging.getLogger(__name__)

UUID_PATTERN = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)

# Aucun état entre deux appels : tout passe par la session fournie


def parse_page_id(raw_id: str) -> str:
    """Vérifie le format UUID (forme à tirets) et renvoie la forme minuscule"""
    if not isinstance(raw_id, str) or not UUID_PATTERN.match(raw_id):
        raise MalformedIdentifier()
    return raw_id.lower()


# func 1: get_all_pages()
def get_all_pages(db: Session) -> List[Page]:
    return PageRepository(db).find_all()


# func 2: get_page_by_slug()
def get_page_by_slug(db: Session, slug: str) -> Page:
    page = PageRepository(db).find_by_slug(slug)
    if not page:
        raise NotFound()
    return page


# func 3: get_page_by_id()
def get_page_by_id(db: Session, page_id: str) -> Page:
    page = PageRepository(db).find_by_id(parse_page_id(page_id))
    if not page:
        raise NotFound()
    return page


# func 4: create_page()
def create_page(db: Session, data: PageCreate) -> Page:
    repo = PageRepository(db)

    # ÉTAPE 1: contrôle rapide, la contrainte unique reste l'arbitre
    if repo.count_with_slug(data.slug) > 0:
        raise Conflict()

    # ÉTAPE 2: arbre de composants
    validate_components(data.components)

    # ÉTAPE 3: écriture
    try:
        page = repo.insert(data)
    except UniqueConstraintViolation:
        logger.info(f"Slug '{data.slug}' taken concurrently, create rejected")
        raise Conflict()

    depth = max(tree_depth(c) for c in page.components)
    logger.info(f"Page created: {page.slug} ({page.id}, {len(page.components)} root components, depth {depth})")
    return page


# func 5: update_page()
def update_page(db: Session, page_id: str, data: PageUpdate) -> Page:
    page_id = parse_page_id(page_id)
    repo = PageRepository(db)

    existing = repo.find_by_id(page_id)
    if not existing:
        raise NotFound()

    # slug inchangé : pas de nouveau contrôle
    if data.slug != existing.slug and repo.count_with_slug(data.slug, exclude_id=page_id) > 0:
        raise Conflict()

    validate_components(data.components)

    try:
        updated = repo.update(page_id, data)
    except UniqueConstraintViolation:
        logger.info(f"Slug '{data.slug}' taken concurrently, update of {page_id} rejected")
        raise Conflict()

    # la ligne a disparu entre la lecture et l'écriture
    if not updated:
        raise NotFound()

    logger.info(f"Page updated: {updated.slug} ({updated.id})")
    return updated


# func 6: delete_page()
def delete_page(db: Session, page_id: str) -> None:
    page_id = parse_page_id(page_id)
    if not PageRepository(db).delete(page_id):
        raise NotFound()
    logger.info(f"Page deleted: {page_id}")
