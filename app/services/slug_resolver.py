"""Résolution des chemins de lecture /pages/...

Les routes littérales sont testées avant la capture de slug, dans l'ordre de
`PAGE_READ_ROUTES`. Conséquence : un slug qui commence par "id/" n'est
jamais atteignable en lecture par slug (voir RESERVED_SLUG_PREFIX dans les
schemas, ces slugs sont refusés à l'écriture).
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union

PAGES_PREFIX = "/pages"
ID_SEGMENT = "id/"


@dataclass(frozen=True)
class ListAll:
    pass


@dataclass(frozen=True)
class GetById:
    page_id: str


@dataclass(frozen=True)
class GetBySlug:
    slug: str


PageReadIntent = Union[ListAll, GetById, GetBySlug]


def normalize_slug(raw: str) -> str:
    """Retire un seul '/' initial, les segments internes restent intacts"""
    return raw[1:] if raw.startswith("/") else raw


def _match_collection(remainder: str) -> Optional[PageReadIntent]:
    if normalize_slug(remainder) == "":
        return ListAll()
    return None


def _match_by_id(remainder: str) -> Optional[PageReadIntent]:
    path = normalize_slug(remainder)
    if path.startswith(ID_SEGMENT) and len(path) > len(ID_SEGMENT):
        # transmis tel quel, le format est vérifié par le service
        return GetById(path[len(ID_SEGMENT):])
    return None


def _match_slug(remainder: str) -> Optional[PageReadIntent]:
    # accepte tout : le "not found" est décidé à la lecture
    return GetBySlug(normalize_slug(remainder))


# Ordre = priorité : routes réservées d'abord, capture du slug en dernier
PAGE_READ_ROUTES: tuple[tuple[str, Callable[[str], Optional[PageReadIntent]]], ...] = (
    ("list", _match_collection),
    ("by_id", _match_by_id),
    ("by_slug", _match_slug),
)


def resolve_page_path(path: str, prefix: str = PAGES_PREFIX) -> PageReadIntent:
    remainder = path[len(prefix):] if path.startswith(prefix) else path
    for _name, matcher in PAGE_READ_ROUTES:
        intent = matcher(remainder)
        if intent is not None:
            return intent
