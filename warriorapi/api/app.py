"""Flask API application."""

import logging
import math
import re
from typing import Optional

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from warriorapi.api.server_config import ServerConfig
from warriorapi.engine.critical import CriticalRoller
from warriorapi.exceptions import (
    DuplicateWarriorIdError,
    InvalidWarriorPayloadError,
    WarriorNotFoundError,
)
from warriorapi.models.warrior import Warrior, WarriorInfo
from warriorapi.store.warrior_store import WarriorStore

NOT_FOUND_MESSAGE = "Warrior not found"

# Plain ASCII decimals only: no signs other than "-", no underscores, no whitespace
_ID_PATTERN = re.compile(r"-?[0-9]+")
_COST_PATTERN = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

_default_config = ServerConfig()

logging.basicConfig(
    level=_default_config.log_level,
    format='[%(name)-19s - %(levelname)5s] %(message)s',
)


def create_app(
    store: Optional[WarriorStore] = None,
    roller: Optional[CriticalRoller] = None,
    config: Optional[ServerConfig] = None,
) -> Flask:
    """
    Create the warrior API application.

    Args:
        store: Warrior store to serve. A new empty store is built when omitted.
        roller: Critical hit roller shared by every damage computation.
        config: Server configuration, defaults to the environment-driven one.

    Returns:
        Configured Flask app
    """
    config = config or _default_config
    app = Flask("flask.warriorapi")
    app.extensions["warrior_store"] = store if store is not None else WarriorStore(id_policy=config.id_policy)
    app.extensions["critical_roller"] = roller if roller is not None else config.make_roller()

    _register_hooks(app)
    _register_error_handlers(app)
    _register_routes(app)
    return app


def _store() -> WarriorStore:
    return current_app.extensions["warrior_store"]


def _roller() -> CriticalRoller:
    return current_app.extensions["critical_roller"]


def _parse_warrior_id(raw_id: str) -> int:
    """Parse a path id; anything non-numeric can't match a warrior."""
    if not _ID_PATTERN.fullmatch(raw_id):
        raise WarriorNotFoundError(raw_id)
    return int(raw_id)


def _parse_cost(raw_cost: str) -> Optional[float]:
    """Parse a purchase cost, or None when it isn't a finite decimal."""
    if not _COST_PATTERN.fullmatch(raw_cost):
        return None
    cost = float(raw_cost)
    return cost if math.isfinite(cost) else None


def _request_payload() -> dict:
    """Get the JSON body as a dict, or {} when absent or not an object."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _register_hooks(app: Flask) -> None:
    @app.before_request
    def log_request_info():
        app.logger.info('Access to: %s %s from %s (%s)',
            request.method,
            request.url,
            request.headers.get('X-Forwarded-For', request.remote_addr),
            request.headers.get('User-Agent'))


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(WarriorNotFoundError)
    def handle_not_found(e: WarriorNotFoundError):
        app.logger.info(e.message)
        return jsonify({"error": NOT_FOUND_MESSAGE}), 404

    @app.errorhandler(DuplicateWarriorIdError)
    def handle_duplicate_id(e: DuplicateWarriorIdError):
        app.logger.warning(e.message)
        return jsonify({"error": "Warrior id already exists", "id": e.warrior_id}), 409

    @app.errorhandler(InvalidWarriorPayloadError)
    def handle_invalid_payload(e: InvalidWarriorPayloadError):
        app.logger.warning(e.message)
        return jsonify({"error": "Invalid warrior payload", "message": e.details}), 400

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        """Return JSON instead of HTML for HTTP errors."""
        response = e.get_response()
        response.data = jsonify(
            {
                "error": e.name,
                "code": e.code,
                "description": e.description,
            }
        ).data
        response.content_type = "application/json"
        return response

    @app.errorhandler(Exception)
    def handle_internal_error(e: Exception):
        """Handle unexpected errors."""
        app.logger.error(f"Internal server error: {e}", exc_info=True)
        return jsonify({"error": "Internal Server Error", "message": "An unexpected error occurred"}), 500


def _register_routes(app: Flask) -> None:
    @app.route("/warriors/names", methods=["GET"])
    def list_warrior_names():
        """List every warrior name."""
        return jsonify(_store().list_names())

    @app.route("/warriors", methods=["POST"])
    def create_warrior():
        """Create a new warrior."""
        warrior = _store().create(_request_payload())
        return jsonify(warrior.to_payload()), 201

    @app.route("/warriors", methods=["GET"])
    def list_warriors():
        """List all warriors."""
        return jsonify([warrior.to_payload() for warrior in _store().list_warriors()])

    @app.route("/warriors/<warrior_id>", methods=["GET"])
    def get_warrior(warrior_id: str):
        """Get a warrior by id."""
        return jsonify(_get(warrior_id).to_payload())

    @app.route("/warriors/<warrior_id>", methods=["PUT"])
    def update_warrior(warrior_id: str):
        """Merge the request fields into a warrior."""
        warrior = _store().update(_parse_warrior_id(warrior_id), _request_payload())
        return jsonify(warrior.to_payload())

    @app.route("/warriors/<warrior_id>", methods=["DELETE"])
    def delete_warrior(warrior_id: str):
        """Delete a warrior."""
        warrior = _store().delete(_parse_warrior_id(warrior_id))
        return jsonify(warrior.to_payload())

    @app.route("/warriors/<warrior_id>/isLowOnHealth", methods=["GET"])
    def is_low_on_health(warrior_id: str):
        warrior = _get(warrior_id)
        return jsonify({"isLowOnHealth": warrior.is_low_on_health()})

    @app.route("/warriors/<warrior_id>/canAffordPurchase/<cost>", methods=["GET"])
    def can_afford_purchase(warrior_id: str, cost: str):
        warrior = _get(warrior_id)
        parsed_cost = _parse_cost(cost)
        if parsed_cost is None:
            return jsonify({"error": "Invalid cost"}), 400
        return jsonify({"canAffordPurchase": warrior.can_afford_purchase(parsed_cost)})

    @app.route("/warriors/<warrior_id>/isSpecialAbilityEligible", methods=["GET"])
    def is_special_ability_eligible(warrior_id: str):
        warrior = _get(warrior_id)
        return jsonify({"isSpecialAbilityEligible": warrior.is_special_ability_eligible()})

    @app.route("/warriors/<warrior_id>/calculateTotalDamage", methods=["GET"])
    def calculate_total_damage(warrior_id: str):
        warrior = _get(warrior_id)
        return jsonify({"totalDamage": warrior.calculate_total_damage(_roller())})

    @app.route("/warriors/<warrior_id>/info", methods=["GET"])
    def warrior_info(warrior_id: str):
        """Get every derived value of a warrior in one response."""
        warrior = _get(warrior_id)
        cost = _parse_cost(request.args.get("cost", "0"))
        if cost is None:
            return jsonify({"error": "Invalid cost"}), 400
        info = WarriorInfo.from_warrior(warrior, cost=cost, rng=_roller())
        return jsonify(info.to_payload())


def _get(warrior_id: str) -> Warrior:
    return _store().get(_parse_warrior_id(warrior_id))


def run_server(config: Optional[ServerConfig] = None) -> None:
    """Run the development server until interrupted."""
    config = config or _default_config
    server_app = create_app(config=config)
    server_app.logger.info(f"Server is running on port {config.port}")
    server_app.run(host=config.host, port=config.port, debug=config.debug)


app = create_app()


if __name__ == "__main__":
    run_server()
