# Punto de entrada para uvicorn: `uvicorn main:app`
# La construcción de la app vive en app/core/application.py
from app.core.application import create_app, configure_logging
from app.core.config import Settings

settings = Settings()
configure_logging(settings.log_level)

app = create_app(settings)
