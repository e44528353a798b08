#!/usr/bin/env python3
import os
from dotenv import load_dotenv
from conference import create_app, db

# Load environment variables
load_dotenv()


def build_app():
    """Creates the app. Tables normally come from ``flask db upgrade``; set
    CREATE_TABLES=1 to create them directly (local SQLite, demos)."""
    app = create_app()

    if os.getenv("CREATE_TABLES", "").lower() in ["1", "true", "yes"]:
        with app.app_context():
            db.create_all()
            app.logger.info(f"Created tables: {sorted(db.metadata.tables)}")

    return app


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5001))
    build_app().run(host="0.0.0.0", port=port, debug=os.getenv("FLASK_DEBUG") == "1")
