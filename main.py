"""
main.py — Search Service Flask App
===================================
JSON API over the best-first search core.

Routes:
  GET  /api/heuristics          – heuristic registry (optionally ?space=sliding|graph)
  POST /api/puzzle/solve        – solve a sliding-tile board
  POST /api/puzzle/compare      – run two heuristics on the same board
  POST /api/puzzle/trace        – every recorded step of one run
  POST /api/graph/solve         – shortest hop path in an adjacency-list graph

Status codes:
  200  path found
  400  malformed request (bad board, unknown heuristic, bad config)
  404  frontier exhausted — no path exists
  422  unsolvable board (parity check) or search budget exceeded
  500  a collaborator broke its contract

The search core itself does no I/O; everything request-shaped lives here.
"""

import logging
import os
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

from engine import Recorder, compare
from search import (
    FrontierExhausted,
    MalformedCollaborator,
    SearchBudgetExceeded,
    SearchConfig,
    SearchStats,
    search,
)
from spaces import (
    GRAPH,
    SLIDING,
    Graph,
    GraphSpace,
    heuristic_for,
    list_heuristics,
    puzzle_for,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.update(
    DEFAULT_MAX_EXPANSIONS=int(os.environ.get("SEARCH_MAX_EXPANSIONS", "200000")),
    DEFAULT_MAX_SECONDS=float(os.environ.get("SEARCH_MAX_SECONDS", "10")),
    TRACE_MAX_EXPANSIONS=int(os.environ.get("SEARCH_TRACE_MAX_EXPANSIONS", "2000")),
)


class InvalidRequest(Exception):
    """Request payload could not be turned into a search problem."""


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------
def _payload() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidRequest("expected a JSON object body")
    return data


def _text(data: Dict[str, Any], key: str, default: Optional[str] = None) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise InvalidRequest(f"'{key}' must be a string")
    return value


def _limit(data: Dict[str, Any], key: str, default):
    # null means "use the server default", never "unbounded"
    value = data.get(key)
    return default if value is None else value


def _config(data: Dict[str, Any], max_expansions: Optional[int] = None) -> SearchConfig:
    try:
        return SearchConfig(
            max_expansions=_limit(data, "max_expansions", max_expansions or app.config["DEFAULT_MAX_EXPANSIONS"]),
            max_seconds=_limit(data, "max_seconds", app.config["DEFAULT_MAX_SECONDS"]),
        )
    except ValueError as exc:
        raise InvalidRequest(str(exc)) from exc


def _puzzle(data: Dict[str, Any]):
    raw = data.get("board")
    try:
        if isinstance(raw, str):
            tokens = raw.replace(",", " ").split()
            puzzle = puzzle_for(tokens)
            board = puzzle.parse_board(raw)
        elif isinstance(raw, list):
            puzzle = puzzle_for(raw)
            board = puzzle.parse_board(" ".join(str(t) for t in raw))
        else:
            raise InvalidRequest("'board' must be a list of ints or a string")
    except ValueError as exc:
        raise InvalidRequest(str(exc)) from exc
    return puzzle, board


def _heuristic(space_obj, key: str, space: str):
    try:
        return heuristic_for(space_obj, key, space)
    except KeyError as exc:
        raise InvalidRequest(exc.args[0]) from exc


def _error(message: str, status: int, **extra) -> Tuple[Any, int]:
    body = {"error": message}
    body.update(extra)
    return jsonify(body), status


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------
@app.errorhandler(InvalidRequest)
def handle_bad_request(exc):
    return _error(str(exc), 400)


@app.errorhandler(FrontierExhausted)
def handle_exhausted(exc):
    return _error("no path exists", 404, stats=exc.stats.snapshot() if exc.stats else {})


@app.errorhandler(SearchBudgetExceeded)
def handle_budget(exc):
    return _error(str(exc), 422, limit=exc.limit, stats=exc.stats.snapshot() if exc.stats else {})


@app.errorhandler(MalformedCollaborator)
def handle_malformed(exc):
    logger.error("collaborator %s broke its contract: %s", exc.collaborator, exc)
    return _error(str(exc), 500, collaborator=exc.collaborator)


# ---------------------------------------------------------------------------
# API: Registry
# ---------------------------------------------------------------------------
@app.route("/api/heuristics")
def api_heuristics():
    space = request.args.get("space")
    return jsonify([
        {
            "key":         h.key,
            "label":       h.label,
            "spaces":      h.spaces,
            "admissible":  h.admissible,
            "description": h.description,
        }
        for h in list_heuristics(space)
    ])


# ---------------------------------------------------------------------------
# API: Sliding puzzle
# ---------------------------------------------------------------------------
@app.route("/api/puzzle/solve", methods=["POST"])
def api_puzzle_solve():
    data = _payload()
    puzzle, board = _puzzle(data)
    key = _text(data, "heuristic", "manhattan")
    h_fn = _heuristic(puzzle, key, SLIDING)
    config = _config(data)

    if not puzzle.is_solvable(board):
        return _error("board is not solvable", 422)

    stats = SearchStats()
    path = search(board, puzzle.is_goal, puzzle.successors, h_fn, config=config, stats=stats)
    logger.info("solved %dx%d board with %s in %d moves", puzzle.size, puzzle.size, key, len(path) - 1)

    return jsonify({
        "heuristic": key,
        "path":      [list(b) for b in path],
        "moves":     puzzle.moves(path),
        "length":    len(path) - 1,
        "stats":     stats.snapshot(),
    })


@app.route("/api/puzzle/compare", methods=["POST"])
def api_puzzle_compare():
    data = _payload()
    puzzle, board = _puzzle(data)
    keys = data.get("heuristics", ["manhattan", "misplaced_tiles"])
    if not isinstance(keys, list) or len(keys) != 2:
        raise InvalidRequest("'heuristics' must name exactly two heuristics")
    fns = [_heuristic(puzzle, k, SLIDING) for k in keys]
    config = _config(data)

    if not puzzle.is_solvable(board):
        return _error("board is not solvable", 422)

    recorders = []
    for key, fn in zip(keys, fns):
        rec = Recorder()
        rec.start(board, puzzle.is_goal, puzzle.successors, fn, heuristic_name=key, config=config)
        rec.run_to_completion()
        recorders.append(rec)

    return jsonify(compare(*recorders).to_dict())


@app.route("/api/puzzle/trace", methods=["POST"])
def api_puzzle_trace():
    data = _payload()
    puzzle, board = _puzzle(data)
    key = _text(data, "heuristic", "manhattan")
    h_fn = _heuristic(puzzle, key, SLIDING)
    config = _config(data, max_expansions=app.config["TRACE_MAX_EXPANSIONS"])
    config.record_sets = bool(data.get("record_sets", False))

    if not puzzle.is_solvable(board):
        return _error("board is not solvable", 422)

    rec = Recorder()
    rec.start(board, puzzle.is_goal, puzzle.successors, h_fn, heuristic_name=key, config=config)
    rec.run_to_completion()
    return jsonify(rec.export())


# ---------------------------------------------------------------------------
# API: Graph
# ---------------------------------------------------------------------------
@app.route("/api/graph/solve", methods=["POST"])
def api_graph_solve():
    data = _payload()
    try:
        graph = Graph.from_adjacency_list(_text(data, "adjacency"), directed=bool(data.get("directed", False)))
    except ValueError as exc:
        raise InvalidRequest(str(exc)) from exc

    source, target = _text(data, "source"), _text(data, "target")
    for name, vid in (("source", source), ("target", target)):
        if vid not in graph.vertices:
            raise InvalidRequest(f"unknown {name} vertex {vid!r}")

    space = GraphSpace(graph, target)
    key = _text(data, "heuristic", "euclidean")
    h_fn = _heuristic(space, key, GRAPH)

    stats = SearchStats()
    path = search(source, space.is_goal, space.successors, h_fn, config=_config(data), stats=stats)
    return jsonify({
        "heuristic": key,
        "path":      path,
        "length":    len(path) - 1,
        "stats":     stats.snapshot(),
    })


if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run(debug=os.environ.get("FLASK_DEBUG") == "1", port=int(os.environ.get("PORT", "5000")))
