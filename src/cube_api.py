"""cube_api.py — Flask HTTP shell around the cube model
=======================================================

Small JSON API used by a browser frontend. All cube logic lives in the other
modules; this file only maps requests to them and errors to status codes.

Endpoints
- GET  /health       -> {"ok": true}
- POST /api/state    -> raw text body (net, 54 stickers or scramble)
                        => {"facelets", "net"}
- POST /api/solve    -> raw text body => {"facelets", "solution", "moves", "trace"}
- POST /api/verify   -> raw text body => {"ok", "message", "facelets"}
- POST /api/trace    -> JSON {"facelets", "moves"} => {"trace"}

Errors
- input problems (CubeInputError, SearchError) -> 400 {"error", "kind"}
- wrong method                                 -> 405 {"error": "Use POST"}
- anything else                                -> 500 {"error": "Internal error"}

------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. MIT License.
"""

import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from cube_errors import CubeInputError, InvalidMoveError, SearchError
from cube_input import build_net_text, parse_to_facelets
from cube_moves import parse_moves
from cube_solver import CubeSolver
from cube_status import validate_facelets
from cube_trace import trace

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def _error(message: str, status: int, kind: Optional[str] = None):
    body = {"error": message}
    if kind:
        body["kind"] = kind
    return jsonify(body), status


def create_app(solver: Optional[CubeSolver] = None) -> Flask:
    """Create and return the Flask application.

    `solver` defaults to a CubeSolver backed by kociemba; tests pass one
    with a stub search.
    """
    app = Flask(__name__)
    # allow CORS for local development. If deploying on a network, replace
    # '*' with explicit origins.
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    cube_solver = solver or CubeSolver()

    @app.errorhandler(CubeInputError)
    def _bad_input(e: CubeInputError):
        logger.info("Rejected input (%s): %s", e.kind, e)
        return _error(str(e), 400, e.kind)

    @app.errorhandler(SearchError)
    def _search_failed(e: SearchError):
        return _error(e.reply, 400, e.kind)

    @app.errorhandler(405)
    def _wrong_method(e):
        return _error("Use POST", 405)

    @app.errorhandler(Exception)
    def _internal(e: Exception):
        if isinstance(e, HTTPException):
            return _error(e.description, e.code)
        logger.exception("Unhandled error on %s: %s", request.path, e)
        return _error("Internal error", 500)

    @app.route("/health")
    def _health():
        return jsonify({"ok": True})

    @app.route("/api/state", methods=["POST"])
    def _state():
        facelets = parse_to_facelets(request.get_data(as_text=True))
        return jsonify({"facelets": facelets, "net": build_net_text(facelets)})

    @app.route("/api/solve", methods=["POST"])
    def _solve():
        result = cube_solver.solve(request.get_data(as_text=True))
        return jsonify(result.to_dict())

    @app.route("/api/verify", methods=["POST"])
    def _verify():
        facelets = parse_to_facelets(request.get_data(as_text=True))
        ok, message = validate_facelets(facelets)
        return jsonify({"ok": ok, "message": message, "facelets": facelets})

    @app.route("/api/trace", methods=["POST"])
    def _trace():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise CubeInputError("Body must be a JSON object with 'facelets' and 'moves'",
                                 expected="object", found=type(data).__name__)

        raw = data.get("facelets") or ""
        if not isinstance(raw, str):
            raise CubeInputError("'facelets' must be a string",
                                 expected="string", found=type(raw).__name__)
        facelets = parse_to_facelets(raw)

        moves = data.get("moves") or []
        if isinstance(moves, str):
            moves = parse_moves(moves)
        elif not isinstance(moves, list) or not all(isinstance(mv, str) for mv in moves):
            raise InvalidMoveError("'moves' must be a string or a list of move strings",
                                   expected="[URFDLB]('|2)?", found=moves)
        return jsonify({"trace": trace(facelets, moves)})

    return app
