"""
graph.py — Explicit Graph State Space
======================================
A graph whose vertices are the states.  The search core sees only vertex
ids (strings); GraphSpace turns the graph into the three collaborators
search() wants.

Every edge is one step: path cost is the hop count, so edge lengths on
the canvas only matter to the heuristics.

Responsibilities:
  1. CRUD on vertices & edges               (add / get / remove)
  2. Adjacency queries                      (neighbours, edge_between)
  3. Grid generator                         (4-connected, optional walls)
  4. Import from an adjacency-list text     (text → graph)
  5. Serialisation round-trip               (to_dict / from_dict)
  6. GraphSpace: successors / goal test / heuristics for a target vertex

Design decisions:
  - Vertices & edges stored in plain dicts keyed by id for O(1) lookup.
  - A separate adjacency dict `_adj[vertex_id] → [(neighbour_id, edge_id)]`
    is maintained incrementally so neighbour queries are O(degree).
  - Geometric heuristics are divided by the longest edge under the same
    metric.  One hop can close at most that much distance, so the result
    never overestimates the remaining hop count.
"""

import math
import random
import uuid
from typing import Any, Callable, Dict, List, Mapping, Optional, Set, Tuple


# ---------------------------------------------------------------------------
# Vertex & Edge
# ---------------------------------------------------------------------------
class Vertex:
    """
    Attributes:
        id      : Unique identifier; this is the search state.
        label   : Human-readable name.
        x, y    : Coordinates used by the geometric heuristics.
        blocked : Obstacle flag; blocked vertices are never generated.
    """

    __slots__ = ("id", "label", "x", "y", "blocked")

    def __init__(self, x: float = 0.0, y: float = 0.0, label: Optional[str] = None, vertex_id: Optional[str] = None):
        self.id:      str   = vertex_id or str(uuid.uuid4())[:8]
        self.label:   str   = label or self.id
        self.x:       float = x
        self.y:       float = y
        self.blocked: bool  = False

    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label, "x": self.x, "y": self.y, "blocked": self.blocked}

    @classmethod
    def from_dict(cls, data: dict) -> "Vertex":
        v = cls(x=data.get("x", 0.0), y=data.get("y", 0.0), label=data.get("label"), vertex_id=data["id"])
        v.blocked = data.get("blocked", False)
        return v

    def __repr__(self) -> str:
        return f"Vertex(id={self.id}, pos=({self.x:.2f},{self.y:.2f}), blocked={self.blocked})"


class Edge:

    __slots__ = ("id", "source", "target", "directed")

    def __init__(self, source: str, target: str, directed: bool = False, edge_id: Optional[str] = None):
        self.id:       str  = edge_id or str(uuid.uuid4())[:8]
        self.source:   str  = source
        self.target:   str  = target
        self.directed: bool = directed

    def to_dict(self) -> dict:
        return {"id": self.id, "source": self.source, "target": self.target, "directed": self.directed}

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=data["source"],
            target=data["target"],
            directed=data.get("directed", False),
            edge_id=data.get("id"),
        )

    def __repr__(self) -> str:
        arrow = " → " if self.directed else " ↔ "
        return f"Edge({self.source}{arrow}{self.target})"


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------
class Graph:
    """
    Attributes:
        vertices : {vertex_id: Vertex}
        edges    : {edge_id: Edge}
        directed : graph-level directedness
        _adj     : {vertex_id: [(neighbour_id, edge_id), …]}
    """

    def __init__(self, directed: bool = False):
        self.vertices: Dict[str, Vertex] = {}
        self.edges:    Dict[str, Edge]   = {}
        self.directed: bool              = directed
        self._adj:     Dict[str, List[Tuple[str, str]]] = {}

    # ==================================================================
    # VERTEX CRUD
    # ==================================================================
    def add_vertex(self, vertex: Vertex) -> Vertex:
        self.vertices[vertex.id] = vertex
        self._adj.setdefault(vertex.id, [])
        return vertex

    def create_vertex(self, x: float, y: float, label: Optional[str] = None, vertex_id: Optional[str] = None) -> Vertex:
        """Convenience: create + add in one call."""
        return self.add_vertex(Vertex(x=x, y=y, label=label, vertex_id=vertex_id))

    def get_vertex(self, vertex_id: str) -> Optional[Vertex]:
        return self.vertices.get(vertex_id)

    def remove_vertex(self, vertex_id: str) -> None:
        if vertex_id not in self.vertices:
            return
        for eid in [eid for eid, e in self.edges.items() if vertex_id in (e.source, e.target)]:
            self.remove_edge(eid)
        del self.vertices[vertex_id]
        self._adj.pop(vertex_id, None)

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        for end in (edge.source, edge.target):
            if end not in self.vertices:
                raise KeyError(f"unknown vertex {end!r}")
        self.edges[edge.id] = edge
        self._adj[edge.source].append((edge.target, edge.id))
        if not edge.directed:
            self._adj[edge.target].append((edge.source, edge.id))
        return edge

    def create_edge(self, source: str, target: str, edge_id: Optional[str] = None) -> Edge:
        return self.add_edge(Edge(source=source, target=target, directed=self.directed, edge_id=edge_id))

    def remove_edge(self, edge_id: str) -> None:
        if edge_id not in self.edges:
            return
        e = self.edges.pop(edge_id)
        for end in (e.source, e.target):
            self._adj[end][:] = [(n, eid) for n, eid in self._adj[end] if eid != edge_id]

    def edge_between(self, a: str, b: str) -> Optional[Edge]:
        """First edge leading from a to b (direction-aware)."""
        for nbr, eid in self._adj.get(a, []):
            if nbr == b:
                return self.edges[eid]
        return None

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, vertex_id: str) -> List[str]:
        """Distinct, unblocked neighbour ids in insertion order."""
        seen: Set[str] = set()
        result = []
        for nbr, _ in self._adj.get(vertex_id, []):
            if nbr in seen or self.vertices[nbr].blocked:
                continue
            seen.add(nbr)
            result.append(nbr)
        return result

    def longest_edge(self, metric: Callable[[Vertex, Vertex], float]) -> float:
        return max(
            (metric(self.vertices[e.source], self.vertices[e.target]) for e in self.edges.values()),
            default=0.0,
        )

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "directed": self.directed,
            "vertices": [v.to_dict() for v in self.vertices.values()],
            "edges":    [e.to_dict() for e in self.edges.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls(directed=data.get("directed", False))
        for vd in data.get("vertices", []):
            g.add_vertex(Vertex.from_dict(vd))
        for ed in data.get("edges", []):
            g.add_edge(Edge.from_dict(ed))
        return g

    # ==================================================================
    # GENERATORS
    # ==================================================================
    @classmethod
    def generate_grid(
        cls,
        rows: int = 6,
        cols: int = 8,
        wall_prob: float = 0.0,
        seed: Optional[int] = None,
    ) -> "Graph":
        """
        4-connected grid with unit spacing; vertex ids are "row_col".
        With wall_prob > 0 some interior vertices are blocked → maze feel.
        """
        rng = random.Random(seed)
        g = cls()

        def vid(r, c):
            return f"{r}_{c}"

        for r in range(rows):
            for c in range(cols):
                v = g.create_vertex(float(c), float(r), vertex_id=vid(r, c))
                if 0 < r < rows - 1 and 0 < c < cols - 1 and rng.random() < wall_prob:
                    v.blocked = True

        for r in range(rows):
            for c in range(cols):
                for dr, dc in ((0, 1), (1, 0)):      # right, down (undirected covers both)
                    nr, nc = r + dr, c + dc
                    if nr < rows and nc < cols:
                        g.create_edge(vid(r, c), vid(nr, nc))
        return g

    @classmethod
    def from_adjacency_list(cls, text: str, directed: bool = False) -> "Graph":
        """
        Parse a simple text adjacency list, one vertex per line:

            A: B C D            → A connects to B, C, D
            A -> B, C           → alternate arrow syntax
            A(0,3): B           → optional coordinates for the heuristics
            # comment           → ignored

        Vertices without coordinates are laid out on a unit circle.
        """
        adjacency: Dict[str, List[str]] = {}
        coords:    Dict[str, Tuple[float, float]] = {}

        def register(token: str) -> str:
            token = token.strip()
            if "(" in token and token.endswith(")"):
                name, raw = token[:-1].split("(", 1)
                try:
                    x, y = (float(v) for v in raw.split(";" if ";" in raw else ","))
                except ValueError as exc:
                    raise ValueError(f"bad coordinates in {token!r}") from exc
                name = name.strip()
                coords[name] = (x, y)
                token = name
            adjacency.setdefault(token, [])
            return token

        for line in text.strip().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            for sep in ("->", "→", ":"):
                if sep in line:
                    head, tail = line.split(sep, 1)
                    break
            else:
                register(line)
                continue
            src = register(head)
            for token in _split_targets(tail):
                adjacency[src].append(register(token))

        g = cls(directed=directed)
        labels = list(adjacency)
        for i, label in enumerate(labels):
            if label in coords:
                x, y = coords[label]
            else:
                angle = 2 * math.pi * i / max(len(labels), 1)
                x, y = math.cos(angle), math.sin(angle)
            g.create_vertex(x, y, label=label, vertex_id=label)

        seen: Set = set()
        for src, targets in adjacency.items():
            for tgt in targets:
                key = (src, tgt) if directed else frozenset((src, tgt))
                if key in seen:
                    continue
                seen.add(key)
                g.create_edge(src, tgt)
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def vertex_ids(self) -> List[str]:
        return list(self.vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self.vertices)}, edges={len(self.edges)}, directed={self.directed})"


def _split_targets(tail: str) -> List[str]:
    """Split 'B, C(1,2) D' on commas/spaces, but not inside parentheses."""
    tokens, current, depth = [], [], 0
    for ch in tail:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        if depth == 0 and (ch.isspace() or ch == ","):
            if current:
                tokens.append("".join(current))
                current = []
            continue
        current.append(ch)
    if current:
        tokens.append("".join(current))
    return tokens


# ---------------------------------------------------------------------------
# Metrics (two Vertex objects → float)
# ---------------------------------------------------------------------------
def euclidean(a: Vertex, b: Vertex) -> float:
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


def manhattan(a: Vertex, b: Vertex) -> float:
    return abs(a.x - b.x) + abs(a.y - b.y)


# ---------------------------------------------------------------------------
# GraphSpace — the search collaborators
# ---------------------------------------------------------------------------
class GraphSpace:
    """Search collaborators for reaching `target` inside `graph`."""

    def __init__(self, graph: Graph, target: str):
        if target not in graph.vertices:
            raise KeyError(f"unknown target vertex {target!r}")
        self.graph  = graph
        self.target = target
        self._longest: Dict[Callable, float] = {}

    def is_goal(self, vertex_id: str) -> bool:
        return vertex_id == self.target

    def successors(self, vertex_id: str) -> List[str]:
        return self.graph.neighbours(vertex_id)

    # -- heuristics --
    def zero(self, vertex_id: str) -> float:
        return 0.0

    def euclidean(self, vertex_id: str) -> float:
        return self._scaled(euclidean, vertex_id)

    def manhattan(self, vertex_id: str) -> float:
        return self._scaled(manhattan, vertex_id)

    def table(self, estimates: Mapping[str, float]) -> Callable[[str], float]:
        """Heuristic read from an explicit {vertex_id: h} mapping."""
        def h(vertex_id: str) -> float:
            return estimates[vertex_id]
        return h

    def _scaled(self, metric: Callable[[Vertex, Vertex], float], vertex_id: str) -> float:
        if metric not in self._longest:
            self._longest[metric] = self.graph.longest_edge(metric)
        longest = self._longest[metric]
        if longest == 0:
            return 0.0
        return metric(self.graph.vertices[vertex_id], self.graph.vertices[self.target]) / longest

    def __repr__(self) -> str:
        return f"GraphSpace(target={self.target}, {self.graph!r})"
