from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.schemas.page import (
    PageCreate, PageUpdate, PageResponse, ApiResponse, DeleteConfirmation, ErrorResponse
)
from app.services import page_service
from app.services.slug_resolver import PAGES_PREFIX, ListAll, GetById, PageReadIntent, resolve_page_path
from typing import List

router = APIRouter(prefix=PAGES_PREFIX, tags=["pages"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


def _page_envelope(page) -> ApiResponse[PageResponse]:
    return ApiResponse[PageResponse](data=PageResponse.model_validate(page))


def valid_page_id(page_id: str) -> str:
    # dépendance : le format de l'id est vérifié avant la validation du corps
    return page_service.parse_page_id(page_id)


def _dispatch_read(intent: PageReadIntent, db: Session):
    if isinstance(intent, ListAll):
        pages = page_service.get_all_pages(db)
        return ApiResponse[List[PageResponse]](data=[PageResponse.model_validate(p) for p in pages])

    if isinstance(intent, GetById):
        return _page_envelope(page_service.get_page_by_id(db, intent.page_id))

    return _page_envelope(page_service.get_page_by_slug(db, intent.slug))


@router.get("", response_model=ApiResponse[List[PageResponse]])
def list_pages(db: Session = Depends(get_db)):
    # Toutes les pages, les plus récentes d'abord
    return _dispatch_read(resolve_page_path(PAGES_PREFIX), db)


# Lecture par id (/pages/id/<uuid>) ou par slug, multi-segments compris (/pages/news/technology)
@router.get("/{page_path:path}", response_model=None, responses=ERROR_RESPONSES)
def read_page(page_path: str, db: Session = Depends(get_db)):
    return _dispatch_read(resolve_page_path(f"{PAGES_PREFIX}/{page_path}"), db)


# Crée une page
@router.post("", response_model=ApiResponse[PageResponse], status_code=status.HTTP_201_CREATED,
             responses=ERROR_RESPONSES)
def create_page(page_data: PageCreate, db: Session = Depends(get_db)):
    return _page_envelope(page_service.create_page(db, page_data))


@router.put("/{page_id}", response_model=ApiResponse[PageResponse], responses=ERROR_RESPONSES)
def update_page(page_data: PageUpdate, page_id: str = Depends(valid_page_id), db: Session = Depends(get_db)):
    # Remplace slug, titre, metadata et composants
    return _page_envelope(page_service.update_page(db, page_id, page_data))


@router.delete("/{page_id}", response_model=ApiResponse[DeleteConfirmation], responses=ERROR_RESPONSES)
def delete_page(page_id: str = Depends(valid_page_id), db: Session = Depends(get_db)):
    page_service.delete_page(db, page_id)
    return ApiResponse[DeleteConfirmation](data=DeleteConfirmation())
