from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import jwt_required
from conference.exceptions import MissingFieldsError, NotFoundError, StorageError
from conference.services import EventService
from conference.utils.auth import admin_required

event_bp = Blueprint("event", __name__)


@event_bp.route("/events", methods=["GET"])
@jwt_required()
def get_all_events():
    events = EventService.get_events()
    return jsonify([event.to_dict() for event in events])


@event_bp.route("/events/<int:event_id>", methods=["GET"])
@jwt_required()
def get_event(event_id):
    try:
        event = EventService.get_event(event_id)
        return jsonify(event.to_dict())
    except NotFoundError as e:
        return jsonify({"error": str(e)}), 404


@event_bp.route("/events", methods=["POST"])
@jwt_required()
@admin_required
def create_event():
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data, dict):
            return jsonify({"error": "No data provided"}), 400

        event = EventService.create_event(data)
        return jsonify(event.to_dict()), 201
    except MissingFieldsError as e:
        return (
            jsonify({"error": str(e), "missing_fields": e.fields}),
            400,
        )
    except ValueError as e:
        return jsonify({"error": f"Invalid event data: {str(e)}"}), 400
    except StorageError as e:
        current_app.logger.error(f"Create event error: {str(e)}")
        return jsonify({"error": "Failed to create event"}), 500


@event_bp.route("/events/<int:event_id>/check-ins", methods=["GET"])
@jwt_required()
@admin_required
def get_checked_in_users(event_id):
    try:
        users = EventService.get_checked_in_users(event_id)
        return jsonify([user.to_dict() for user in users])
    except NotFoundError as e:
        return jsonify({"error": str(e)}), 404
