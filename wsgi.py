"""
Web Server Gateway Interface (WSGI) entry point

    gunicorn --bind=0.0.0.0:3000 --workers=1 wsgi:app
"""
from service import create_app

app = create_app()

if __name__ == "__main__":
    app.logger.info("Server running at http://localhost:%s", app.config["PORT"])
    app.logger.info("Press CTRL+C to stop")
    app.run(host="0.0.0.0", port=app.config["PORT"])
