import os

from src.hr_portal.hr_portal.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "3001")), debug=app.config["DEBUG"])
