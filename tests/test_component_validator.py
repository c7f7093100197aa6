import pytest
from app.core.errors import ValidationError
from app.services.component_validator import (
    MAX_COMPONENT_DEPTH, ComponentType, VALID_COMPONENT_TYPES,
    validate_component, validate_components, tree_depth,
)


def node(type_="Text", id_="n", props=None, **extra):
    result = {"type": type_, "id": id_, "props": props if props is not None else {}}
    result.update(extra)
    return result


def chain(depth):
    """Arbre linéaire dont la feuille est à la profondeur `depth`"""
    current = node("Text", f"n{depth}")
    for level in range(depth - 1, -1, -1):
        current = node("Container", f"n{level}", children=[current])
    return current


# ========== ARBRES VALIDES ==========
def test_valid_tree_passes():
    tree = node("Section", "s1", {"title": "News"}, children=[
        node("ArticleList", "list", {"columns": 3}, children=[
            node("ArticleCard", "c1", {"title": "A"}),
            node("ArticleCard", "c2", {"title": "B"}),
        ]),
        node("Image", "img", {"src": "https://example.com/a.png"}),
    ])
    assert validate_component(tree) is None


def test_every_component_type_is_accepted():
    assert VALID_COMPONENT_TYPES == {"Hero", "ArticleCard", "ArticleList", "Section", "Text", "Image", "Container"}
    for component_type in ComponentType:
        validate_component(node(component_type.value))


def test_children_none_or_empty_is_accepted():
    validate_component(node(children=None))
    validate_component(node(children=[]))


def test_props_content_is_opaque():
    validate_component(node(props={"nested": {"deep": [1, 2, {"x": None}]}, "n": 3.5}))


# ========== PROFONDEUR ==========
def test_depth_ten_is_accepted():
    tree = chain(MAX_COMPONENT_DEPTH)
    assert tree_depth(tree) == 10
    validate_component(tree)


def test_depth_eleven_is_rejected():
    with pytest.raises(ValidationError, match="nesting too deep"):
        validate_component(chain(MAX_COMPONENT_DEPTH + 1))


def test_starting_depth_is_counted():
    validate_component(node(), depth=10)
    with pytest.raises(ValidationError, match="nesting too deep"):
        validate_component(node(), depth=11)


def test_very_deep_tree_does_not_hit_recursion_limit():
    with pytest.raises(ValidationError, match="nesting too deep"):
        validate_component(chain(5000))


# ========== ERREURS PAR CHAMP ==========
def test_bogus_type_is_rejected():
    with pytest.raises(ValidationError, match="invalid type: Bogus"):
        validate_component(node("Bogus", "x", {"title": "fine"}, children=[node()]))


def test_bogus_type_in_child_is_rejected():
    with pytest.raises(ValidationError, match="invalid type: Bogus"):
        validate_component(node("Section", children=[node("Text"), node("Bogus")]))


def test_type_is_case_sensitive():
    with pytest.raises(ValidationError, match="invalid type: text"):
        validate_component(node("text"))


def test_non_string_type_is_rejected():
    with pytest.raises(ValidationError, match="invalid type"):
        validate_component(node(["Text"]))


def test_missing_node():
    with pytest.raises(ValidationError, match="missing node"):
        validate_component(None)


def test_missing_node_in_children():
    with pytest.raises(ValidationError, match="missing node"):
        validate_component(node("Container", children=[None]))


def test_missing_type():
    with pytest.raises(ValidationError, match="missing type"):
        validate_component({"id": "x", "props": {}})


def test_non_mapping_node_has_no_type():
    with pytest.raises(ValidationError, match="missing type"):
        validate_component("Text")


@pytest.mark.parametrize("bad_id", [None, 42, ""])
def test_missing_id(bad_id):
    with pytest.raises(ValidationError, match="missing id"):
        validate_component({"type": "Text", "id": bad_id, "props": {}})


@pytest.mark.parametrize("bad_props", [None, "text", ["a"]])
def test_missing_props(bad_props):
    with pytest.raises(ValidationError, match="missing props"):
        validate_component({"type": "Text", "id": "x", "props": bad_props})


def test_children_must_be_a_sequence():
    with pytest.raises(ValidationError, match="children must be a sequence"):
        validate_component(node(children={"type": "Text"}))


def test_first_error_wins():
    """Arrêt à la première erreur, dans l'ordre du document"""
    tree = node("Container", children=[
        node("Section", "a", children=[node("Bogus", "a1")]),
        node("Text", ""),
    ])
    with pytest.raises(ValidationError) as exc_info:
        validate_component(tree)
    assert exc_info.value.message == "invalid type: Bogus"


def test_validation_error_public_message():
    with pytest.raises(ValidationError) as exc_info:
        validate_component(node("Bogus"))
    assert exc_info.value.status_code == 400
    assert exc_info.value.public_message == "Validation failed: invalid type: Bogus"


# ========== LISTE RACINE ==========
def test_validate_components_checks_every_root():
    validate_components([node("Hero", "h"), node("Text", "t")])
    with pytest.raises(ValidationError, match="missing props"):
        validate_components([node("Hero", "h"), {"type": "Text", "id": "t"}])


def test_root_components_start_at_depth_zero():
    validate_components([chain(10), chain(3)])
    with pytest.raises(ValidationError, match="nesting too deep"):
        validate_components([chain(3), chain(11)])


def test_tree_depth():
    assert tree_depth(node()) == 0
    assert tree_depth(node("Section", children=[node(), node("Container", children=[node()])])) == 2
