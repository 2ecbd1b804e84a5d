# main.py (raíz)
import uvicorn

from hubsy.config.settings import Settings, configure_logging
from hubsy.main import create_app

settings = Settings.from_env()
configure_logging(settings.log_level)

app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
