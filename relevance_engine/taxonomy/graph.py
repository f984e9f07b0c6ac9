"""
Loaded knowledge graphs and traversal helpers.

The method and topic graphs are adjacency-keyed mappings (id -> node) built
once at import time from the static lexicon tables. Both mappings are
read-only proxies; traversal helpers are plain graph walks over them and
never mutate anything, so they are safe to call from concurrent scorers.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import NamedTuple

from relevance_engine.taxonomy.method_data import METHOD_DATA
from relevance_engine.taxonomy.nodes import MethodNode, TopicNode
from relevance_engine.taxonomy.topic_data import TOPIC_DATA


def build_method_taxonomy(data: Mapping[str, dict]) -> Mapping[str, MethodNode]:
    """Build a read-only method graph from a lexicon table."""
    return MappingProxyType(
        {node_id: MethodNode(id=node_id, **entry) for node_id, entry in data.items()}
    )


def build_topic_taxonomy(data: Mapping[str, dict]) -> Mapping[str, TopicNode]:
    """Build a read-only topic graph from a lexicon table."""
    return MappingProxyType(
        {node_id: TopicNode(id=node_id, **entry) for node_id, entry in data.items()}
    )


METHOD_TAXONOMY: Mapping[str, MethodNode] = build_method_taxonomy(METHOD_DATA)
TOPIC_TAXONOMY: Mapping[str, TopicNode] = build_topic_taxonomy(TOPIC_DATA)


def _children_index(taxonomy: Mapping[str, MethodNode | TopicNode]) -> Mapping[str, tuple[str, ...]]:
    children: dict[str, list[str]] = {}
    for node in taxonomy.values():
        if node.parent:
            children.setdefault(node.parent, []).append(node.id)
    return MappingProxyType({k: tuple(v) for k, v in children.items()})


_METHOD_CHILDREN = _children_index(METHOD_TAXONOMY)


class TopicNeighborhood(NamedTuple):
    related: frozenset[str]
    adjacent: frozenset[str]


def _known(ids: Iterable[str], taxonomy: Mapping) -> set[str]:
    return {i for i in ids if i in taxonomy}


def method_family(method_id: str) -> frozenset[str]:
    """
    One-hop method family: the method plus its parent, siblings, implied
    methods and implying methods.

    Unknown ids come back as a singleton family.
    """
    node = METHOD_TAXONOMY.get(method_id)
    if node is None:
        return frozenset({method_id})

    family = {method_id}
    if node.parent:
        family.add(node.parent)
    family.update(node.siblings)
    family.update(node.implies)
    family.update(node.implied_by)
    return frozenset(_known(family, METHOD_TAXONOMY) | {method_id})


def method_descendants(method_id: str) -> frozenset[str]:
    """All methods below ``method_id`` in the parent hierarchy."""
    found: set[str] = set()
    stack = list(_METHOD_CHILDREN.get(method_id, ()))
    while stack:
        child = stack.pop()
        if child in found:
            continue
        found.add(child)
        stack.extend(_METHOD_CHILDREN.get(child, ()))
    return frozenset(found)


def related_closure(topic_id: str, depth: int = 1) -> frozenset[str]:
    """Topics reachable from ``topic_id`` within ``depth`` hops over related edges."""
    if topic_id not in TOPIC_TAXONOMY:
        return frozenset({topic_id})

    seen = {topic_id}
    frontier = {topic_id}
    for _ in range(max(0, depth)):
        next_frontier: set[str] = set()
        for current in frontier:
            node = TOPIC_TAXONOMY.get(current)
            if node is None:
                continue
            next_frontier.update(_known(node.related, TOPIC_TAXONOMY) - seen)
        if not next_frontier:
            break
        seen.update(next_frontier)
        frontier = next_frontier
    return frozenset(seen)


def topic_neighborhood(
    topic_id: str,
    depth: int = 1,
    adjacent_depth: int = 1,
) -> TopicNeighborhood:
    """
    Walk the topic graph around ``topic_id``.

    ``related`` is the related-edge closure to ``depth`` hops (including the
    topic itself). ``adjacent`` grows with ``adjacent_depth``:

    1. the topic's own adjacent edges;
    2. plus the related and adjacent edges of each related topic;
    3. plus the related edges of everything already in the adjacent ring.

    Ids in ``related`` are never repeated in ``adjacent``.
    """
    node = TOPIC_TAXONOMY.get(topic_id)
    if node is None:
        return TopicNeighborhood(frozenset({topic_id}), frozenset())

    related = related_closure(topic_id, depth)

    ring = _known(node.adjacent, TOPIC_TAXONOMY)
    if adjacent_depth >= 2:
        for related_id in node.related:
            related_node = TOPIC_TAXONOMY.get(related_id)
            if related_node is None:
                continue
            ring.update(_known(related_node.related, TOPIC_TAXONOMY))
            ring.update(_known(related_node.adjacent, TOPIC_TAXONOMY))
    if adjacent_depth >= 3:
        for adjacent_id in list(ring):
            adjacent_node = TOPIC_TAXONOMY.get(adjacent_id)
            if adjacent_node is not None:
                ring.update(_known(adjacent_node.related, TOPIC_TAXONOMY))

    return TopicNeighborhood(related, frozenset(ring - related))
