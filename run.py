"""Development server entry point. Use gunicorn (gunicorn_config.py) in production."""
from covid_api import create_app
from covid_api.config.settings import Config

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=Config.PORT, debug=app.config.get("DEBUG", False))
