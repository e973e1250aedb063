## Roadmap -> node/edge graph with tree positions and expand/collapse state
from dataclasses import asdict, dataclass, field
from typing import Iterable

from inagiffy.agents.schemas import Roadmap

TOPIC_NODE_ID = "topic"

ROOT_X = 400
ROOT_Y = 0
BRANCH_Y = 150
BRANCH_SPACING = 300
SUBTOPIC_OFFSET_Y = 180
SUBTOPIC_SPACING = 200

# Resources shown on a collapsed subtopic card
COLLAPSED_RESOURCE_COUNT = 2


@dataclass
class DiagramNode:
    id: str
    type: str  # "topic" | "branch" | "subtopic"
    x: float
    y: float
    label: str
    description: str = ""
    expanded: bool = False
    resources: list[dict] = field(default_factory=list)
    hidden_resources: int = 0
    summary: list[str] = field(default_factory=list)


@dataclass
class DiagramEdge:
    id: str
    source: str
    target: str
    kind: str  # "branch" | "subtopic"


@dataclass
class Diagram:
    nodes: list[DiagramNode]
    edges: list[DiagramEdge]

    def node(self, node_id: str) -> DiagramNode:
        for n in self.nodes:
            if n.id == node_id:
                return n
        raise KeyError(node_id)

    def to_dict(self) -> dict:
        return {
            "nodes": [asdict(n) for n in self.nodes],
            "edges": [asdict(e) for e in self.edges],
        }


def branch_node_id(branch_index: int) -> str:
    return f"branch-{branch_index}"


def subtopic_node_id(branch_index: int, subtopic_index: int) -> str:
    return f"subtopic-{branch_index}-{subtopic_index}"


def _row_start(center: float, count: int, spacing: float) -> float:
    """x of the first of `count` nodes spaced `spacing` apart and centred on `center`."""
    return center - ((count - 1) * spacing) / 2


def node_ids(roadmap: Roadmap) -> set[str]:
    ids = {TOPIC_NODE_ID}
    for bi, branch in enumerate(roadmap.branches):
        ids.add(branch_node_id(bi))
        for si in range(len(branch.subtopics)):
            ids.add(subtopic_node_id(bi, si))
    return ids


def build_diagram(roadmap: Roadmap, expanded: Iterable[str] = ()) -> Diagram:
    """
    One topic node, one node per branch under it, one node per subtopic under
    its branch. An expanded branch drops its subtopic nodes and lists their
    names inline; an expanded subtopic shows all of its resources.
    """
    expanded = set(expanded)
    nodes: list[DiagramNode] = []
    edges: list[DiagramEdge] = []

    nodes.append(DiagramNode(
        id=TOPIC_NODE_ID,
        type="topic",
        x=ROOT_X,
        y=ROOT_Y,
        label=roadmap.topic,
        expanded=TOPIC_NODE_ID in expanded,
    ))

    branch_x = _row_start(ROOT_X, len(roadmap.branches), BRANCH_SPACING)
    for bi, branch in enumerate(roadmap.branches):
        bid = branch_node_id(bi)
        bx = branch_x + bi * BRANCH_SPACING
        branch_expanded = bid in expanded

        nodes.append(DiagramNode(
            id=bid,
            type="branch",
            x=bx,
            y=BRANCH_Y,
            label=branch.name,
            description=branch.description,
            expanded=branch_expanded,
            summary=[s.name for s in branch.subtopics] if branch_expanded else [],
        ))
        edges.append(DiagramEdge(
            id=f"edge-{TOPIC_NODE_ID}-{bid}",
            source=TOPIC_NODE_ID,
            target=bid,
            kind="branch",
        ))

        if branch_expanded:
            continue

        sub_x = _row_start(bx, len(branch.subtopics), SUBTOPIC_SPACING)
        for si, subtopic in enumerate(branch.subtopics):
            sid = subtopic_node_id(bi, si)
            sub_expanded = sid in expanded
            resources = [r.model_dump(mode="json") for r in subtopic.resources]
            shown = resources if sub_expanded else resources[:COLLAPSED_RESOURCE_COUNT]

            nodes.append(DiagramNode(
                id=sid,
                type="subtopic",
                x=sub_x + si * SUBTOPIC_SPACING,
                y=BRANCH_Y + SUBTOPIC_OFFSET_Y,
                label=subtopic.name,
                description=subtopic.description,
                expanded=sub_expanded,
                resources=shown,
                hidden_resources=len(resources) - len(shown),
            ))
            edges.append(DiagramEdge(
                id=f"edge-{bid}-{sid}",
                source=bid,
                target=sid,
                kind="subtopic",
            ))

    return Diagram(nodes=nodes, edges=edges)


class DiagramState:
    """Per-view expand/collapse state. Every node is collapsed until toggled."""

    def __init__(self, expanded: Iterable[str] = ()):
        self.expanded: set[str] = set(expanded)

    def is_expanded(self, node_id: str) -> bool:
        return node_id in self.expanded

    def toggle(self, node_id: str) -> bool:
        """Flip a node and return its new state (True = expanded)."""
        if node_id in self.expanded:
            self.expanded.discard(node_id)
            return False
        self.expanded.add(node_id)
        return True

    def collapse_all(self) -> None:
        self.expanded.clear()

    def validate(self, roadmap: Roadmap) -> None:
        unknown = self.expanded - node_ids(roadmap)
        if unknown:
            raise KeyError(f"Unknown node id(s): {', '.join(sorted(unknown))}")

    def render(self, roadmap: Roadmap) -> Diagram:
        self.validate(roadmap)
        return build_diagram(roadmap, self.expanded)
