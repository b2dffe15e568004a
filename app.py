import logging
from collections.abc import Mapping
from typing import Optional

import click
from flask import Flask, current_app, jsonify, redirect, request, url_for
from werkzeug.exceptions import BadRequest, HTTPException

from config import GarageConfig
from exceptions import DuplicateVehicleError, GarageError, MissingIdentifierError
from garage import Garage
from models import create_car, create_motorbike, create_vehicle

_logger = logging.getLogger(__name__)


def create_app(config: Optional[GarageConfig] = None) -> Flask:
    config = config or GarageConfig.from_env()
    logging.basicConfig(level=config.log_level)

    app = Flask(__name__)
    app.config["GARAGE"] = config
    app.extensions["garage"] = Garage.from_config(config)
    _logger.info(
        "Garage ready: %d levels x %d lots", config.levels, config.lots_per_level
    )

    _register_error_handlers(app)
    _register_routes(app)
    app.cli.add_command(demo)
    return app


def get_garage() -> Garage:
    return current_app.extensions["garage"]


def _error(error: str, message: str, status: int):
    return jsonify({"error": error, "message": message}), status


# -------------------------
# Error handlers
# -------------------------
def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return _error(exc.name, exc.description or "", exc.code or 500)

    @app.errorhandler(DuplicateVehicleError)
    def handle_duplicate(exc: DuplicateVehicleError):
        body = {"error": "duplicate_vehicle", "message": str(exc), "identifier": exc.identifier}
        if exc.location is not None:
            body.update(exc.location.to_dict())
        return jsonify(body), 400

    @app.errorhandler(GarageError)
    def handle_garage_error(exc: GarageError):
        return _error(type(exc).__name__, str(exc), 400)


# -------------------------
# Routes
# -------------------------
def _register_routes(app: Flask) -> None:
    @app.route("/", methods=["GET"])
    def root():
        return redirect(url_for("garage_summary"))

    @app.route("/garage", methods=["GET"])
    def garage_summary():
        return jsonify(get_garage().summary())

    @app.route("/vehicles", methods=["GET"])
    def list_vehicles():
        return jsonify([vl.to_dict() for vl in get_garage().vehicle_locations()])

    @app.route("/vehicles/<identifier>", methods=["GET"])
    def find_vehicle(identifier):
        location = get_garage().find_location(identifier)
        if location is None:
            return _error("not_found", f"Vehicle {identifier!r} is not parked", 404)
        return jsonify({"identifier": identifier, **location.to_dict()})

    @app.route("/vehicles", methods=["POST"])
    def enter_vehicle():
        data = request.get_json(silent=True)
        if data is None:
            data = request.form
        if not isinstance(data, Mapping):
            raise BadRequest("Request body must be an object.")

        identifier = data.get("identifier") or ""
        if not isinstance(identifier, str):
            raise MissingIdentifierError(f"Identifier must be a string, got {identifier!r}")
        identifier = identifier.strip()
        vehicle = create_vehicle(data.get("kind") or "car", identifier)

        location = get_garage().enter(vehicle)
        if location is None:
            return _error("garage_full", "No free lot available", 409)
        return jsonify({"identifier": identifier, **location.to_dict()}), 201

    @app.route("/vehicles/<identifier>", methods=["DELETE"])
    def exit_vehicle(identifier):
        location = get_garage().exit(identifier)
        if location is None:
            return _error("not_found", f"Vehicle {identifier!r} is not parked", 404)
        return jsonify({"identifier": identifier, **location.to_dict()})


# -------------------------
# Demo
# -------------------------
@click.command("demo")
@click.option("--levels", default=2, show_default=True, type=click.IntRange(min=1),
              help="Number of parking levels.")
@click.option("--lots", default=4, show_default=True, type=click.IntRange(min=0),
              help="Lots per level.")
def demo(levels: int, lots: int) -> None:
    """Park a motorbike and a car, let the car leave, then look both up."""
    motorbike1 = create_motorbike("motorbike1")
    car1 = create_car("car1")

    garage = Garage(levels, lots)

    garage.enter(motorbike1)
    garage.enter(car1)
    click.echo(str(garage))

    garage.exit(car1)
    click.echo(str(garage))

    for vehicle in (car1, motorbike1):
        location = garage.find_location(vehicle)
        if location is not None:
            click.echo(f"{vehicle} at {location}")
        else:
            click.echo(f"{vehicle} is not parked")


app = create_app()


if __name__ == "__main__":
    cfg = app.config["GARAGE"]
    app.run(host=cfg.host, port=cfg.port, debug=cfg.debug)
