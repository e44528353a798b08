import argparse
from flask_jwt_extended import create_access_token
from conference import create_app
from conference.models import User, UserRole
from conference.extensions import db


def create_admin_user(email, update=False):
    app = create_app()
    with app.app_context():
        # Check if admin already exists
        admin = User.query.filter_by(email=email).first()
        if not admin:
            admin = User(
                email=email,
                role_id=UserRole.ADMIN.value,
                first_name="Admin",
                last_name="User",
            )
            db.session.add(admin)
            db.session.commit()
            print("Admin user created successfully!")
        elif update:
            admin.role_id = UserRole.ADMIN.value
            db.session.commit()
            print("Admin user updated successfully!")
        else:
            print("Admin user already exists!")

        print(f"Access token: {create_access_token(identity=str(admin.id))}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create or promote an admin user")
    parser.add_argument("--email", default="admin@example.com")
    args = parser.parse_args()
    create_admin_user(args.email, update=True)
