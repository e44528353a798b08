from functools import wraps
from flask import jsonify
from flask_jwt_extended import get_jwt_identity
from conference.extensions import db
from conference.models import User


def current_user():
    """The user the request's JWT was issued for, or None."""
    current_user_id = get_jwt_identity()
    if not current_user_id:
        return None
    return db.session.get(User, int(current_user_id))


def admin_required(fn):
    """Only lets admins through. Must sit below ``@jwt_required()``."""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        user = current_user()
        if not user or not user.is_admin:
            return jsonify({"error": "Admin privileges required"}), 403
        return fn(*args, **kwargs)

    return wrapper
