#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: python -m interest_calc   # or: flask --app interest_calc.app:create_app run --debug

from interest_calc.app import create_app
from interest_calc.config import load_settings

if __name__ == "__main__":
    settings = load_settings()
    app = create_app(settings)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
