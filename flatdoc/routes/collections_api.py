from flask import Blueprint, current_app, jsonify, request

from ..errors import CollectionNotFound, CollectionParseError, InvalidCollectionName
from ..extensions import store
from ..storage.collection import Collection

bp = Blueprint("collections_api", __name__)


@bp.errorhandler(InvalidCollectionName)
def _invalid_name(e):
    return jsonify({"error": str(e)}), 400


@bp.errorhandler(CollectionNotFound)
def _not_found(e):
    return jsonify({"error": str(e)}), 404


@bp.errorhandler(CollectionParseError)
def _unreadable(e):
    current_app.logger.exception("Collection %s could not be parsed", e.collection)
    return jsonify({"error": str(e)}), 500


@bp.get("/collections")
def list_collections():
    return jsonify(store.collections())


@bp.get("/collections/<name>/records")
def list_records(name):
    # query-string values are strings, so only string fields can be matched here
    query = request.args.to_dict()
    return jsonify(Collection(store, name).find_many(query))


@bp.get("/collections/<name>/records/<record_id>")
def get_record(name, record_id):
    record = Collection(store, name).find_one({"id": record_id})
    if record is None:
        return jsonify({"error": f"Record not found: {record_id}"}), 404
    return jsonify(record)


@bp.post("/collections/<name>/records")
def create_record(name):
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "Body must be a JSON object"}), 400
    record = Collection(store, name).create(payload)
    current_app.logger.info("Created %s record %s", name, record["id"])
    return jsonify(record), 201
