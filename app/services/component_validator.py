"""Validation des arbres de composants envoyés par l'outil d'édition.

Le parcours est fait avec une pile explicite de couples (noeud, profondeur)
plutôt qu'avec la récursion Python : la limite de profondeur ne dépend pas
de la pile d'appels et l'ordre de parcours reste celui du document
(préfixe), ce qui garde le comportement "première erreur rencontrée".
"""

import enum
from collections.abc import Mapping
from typing import Any, Iterable
from app.core.errors import ValidationError

# La racine compte comme profondeur 0
MAX_COMPONENT_DEPTH = 10


class ComponentType(str, enum.Enum):
    HERO = "Hero"
    ARTICLE_CARD = "ArticleCard"
    ARTICLE_LIST = "ArticleList"
    SECTION = "Section"
    TEXT = "Text"
    IMAGE = "Image"
    CONTAINER = "Container"


VALID_COMPONENT_TYPES = frozenset(t.value for t in ComponentType)


def _check_node(node: Any, depth: int) -> None:
    if depth > MAX_COMPONENT_DEPTH:
        raise ValidationError("nesting too deep")

    if node is None:
        raise ValidationError("missing node")

    if not isinstance(node, Mapping) or not node.get("type"):
        raise ValidationError("missing type")

    node_type = node["type"]
    if not isinstance(node_type, str) or node_type not in VALID_COMPONENT_TYPES:
        raise ValidationError(f"invalid type: {node_type}")

    node_id = node.get("id")
    if not isinstance(node_id, str) or not node_id:
        raise ValidationError("missing id")

    if not isinstance(node.get("props"), Mapping):
        raise ValidationError("missing props")

    children = node.get("children")
    if children is not None and not isinstance(children, (list, tuple)):
        raise ValidationError("children must be a sequence")


def validate_component(node: Any, depth: int = 0) -> None:
    """Valide un noeud et tout son sous-arbre, lève ValidationError à la première erreur"""
    stack = [(node, depth)]
    while stack:
        current, current_depth = stack.pop()
        _check_node(current, current_depth)

        children = current.get("children") or ()
        # empilés à l'envers pour dépiler dans l'ordre du document
        for child in reversed(children):
            stack.append((child, current_depth + 1))


def validate_components(components: Iterable[Any]) -> None:
    for component in components:
        validate_component(component, 0)


def tree_depth(node: Mapping) -> int:
    """Profondeur maximale d'un arbre déjà validé (0 pour une feuille)"""
    deepest = 0
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        for child in current.get("children") or ():
            stack.append((child, depth + 1))
    return deepest
