from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import jwt_required
from conference.exceptions import BadRequestError, NotFoundError, StorageError
from conference.services import CheckInService, UserService
from conference.utils.auth import admin_required
from conference.utils.validation import normalize_string, parse_positive_int

user_bp = Blueprint("user", __name__)


def _page_args():
    page_number = parse_positive_int(request.args.get("page")) or 1
    limit = parse_positive_int(request.args.get("limit")) or 10
    return page_number, limit


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _serialize_page(page, include_related=False):
    return {
        **page,
        "users": [user.to_dict(include_related=include_related) for user in page["users"]],
    }


@user_bp.route("", methods=["GET"])
@jwt_required()
def get_single_user():
    try:
        email = normalize_string(request.args.get("email"))
        user_id = parse_positive_int(request.args.get("id"))
        service = UserService()

        if email and user_id:
            user = service.get_user_by_id_and_email(user_id, email)
        elif email:
            user = service.get_user_by_email(email)
        elif user_id:
            user = service.get_user_by_id(user_id)
        else:
            raise BadRequestError("Please supply either a valid email or id parameter")

        if not user:
            raise NotFoundError("The requested user does not exist")

        return jsonify({"user": user.to_dict(include_related=True)})
    except BadRequestError as e:
        return jsonify({"error": str(e)}), 400
    except NotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except Exception as e:
        current_app.logger.error(f"Get user error: {str(e)}", exc_info=True)
        return jsonify({"error": "An unexpected error occurred"}), 500


@user_bp.route("/all", methods=["GET"])
@jwt_required()
def get_user_page():
    try:
        page_number, limit = _page_args()
        page = UserService().get_user_page(page_number, limit)
        return jsonify(_serialize_page(page))
    except Exception as e:
        current_app.logger.error(f"Get user page error: {str(e)}", exc_info=True)
        return jsonify({"error": "An unexpected error occurred"}), 500


@user_bp.route("/data", methods=["GET"])
@jwt_required()
@admin_required
def get_user_data_page():
    try:
        page_number, limit = _page_args()
        page = UserService().get_user_data_page(page_number, limit)
        return jsonify(_serialize_page(page, include_related=True))
    except Exception as e:
        current_app.logger.error(f"Get user data page error: {str(e)}", exc_info=True)
        return jsonify({"error": "An unexpected error occurred"}), 500


@user_bp.route("/check-in", methods=["POST"])
@jwt_required()
@admin_required
def check_user_into_event():
    data = _json_body()
    user_id = parse_positive_int(data.get("user_id"))
    event_id = parse_positive_int(data.get("event_id"))

    if not user_id:
        return jsonify({"error": "You must supply a valid user id"}), 400

    if not event_id:
        return jsonify({"error": "You must supply a valid event id"}), 400

    try:
        result = CheckInService().check_in(event_id, user_id)
        return jsonify(result), 200
    except NotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except StorageError as e:
        current_app.logger.error(f"Error checking in user {user_id} to event {event_id}: {str(e)}")
        return jsonify({"error": "Failed to check in"}), 500
    except Exception as e:
        current_app.logger.error(f"Check-in exception: {str(e)}", exc_info=True)
        return jsonify({"error": "An unexpected error occurred"}), 500


@user_bp.route("/destroy", methods=["DELETE"])
@jwt_required()
@admin_required
def delete_user_by_id():
    data = _json_body()
    user_id = parse_positive_int(data.get("user_id"))

    if not user_id:
        return jsonify({"error": "You must supply a valid user id"}), 400

    try:
        result = UserService().delete_by_id(user_id)
        return jsonify(result), 200
    except NotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except StorageError as e:
        current_app.logger.error(f"Error deleting user {user_id}: {str(e)}")
        return jsonify({"error": "Failed to delete user"}), 500
    except Exception as e:
        current_app.logger.error(f"Delete user exception: {str(e)}", exc_info=True)
        return jsonify({"error": "An unexpected error occurred"}), 500
