"""Sample forests for DazzleForest consumers and tests.

Each function returns a freshly built forest, so callers may edit the
result freely.
"""

from ..core.node import Forest, make_node


def menu_forest() -> Forest:
    """Small mixed forest.

    Structure:
    pasta's
    bob
    ├── pob
    │   └── go
    └── rob2
    pizza
    └── cheese pizza
    """
    return [
        make_node("pasta's", id=1),
        make_node("bob", [
            make_node("pob", [make_node("go", id=4)], id=3),
            make_node("rob2", id=5),
        ], id=2),
        make_node("pizza", [make_node("cheese pizza", id=7)], id=6),
    ]


def filesystem_forest() -> Forest:
    """Folder/file forest with a ``type`` field on every node.

    Structure:
    documents/
    ├── work/
    │   ├── report.pdf
    │   └── presentation.pptx
    └── personal/
        └── photo.jpg
    downloads/
    """
    return [
        make_node("documents", [
            make_node("work", [
                make_node("report.pdf", id=3, type="file"),
                make_node("presentation.pptx", id=4, type="file"),
            ], id=2, type="folder"),
            make_node("personal", [
                make_node("photo.jpg", id=6, type="file"),
            ], id=5, type="folder"),
        ], id=1, type="folder"),
        make_node("downloads", id=7, type="folder"),
    ]


def chain_forest(length: int, prefix: str = "n") -> Forest:
    """Single tree that is one path of ``length`` nodes (n0 -> n1 -> ...)."""
    node = None
    for i in reversed(range(length)):
        node = make_node(f"{prefix}{i}", [node] if node else None)
    return [node] if node else []
