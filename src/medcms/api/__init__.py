import os

from fastapi import APIRouter, FastAPI

from .routes import content, forms


def create_app(config_obj=None) -> FastAPI:
    from ..config import Config
    from ..i18n import initialize

    if config_obj is None:
        config_file = os.environ.get("CONFIG_FILE")
        config_obj = Config.load_from_file(config_file) if config_file else Config()

    initialize(ui_language=config_obj.language.value)

    app = FastAPI(title="medcms API")
    app.state.config = config_obj

    api_router = APIRouter(prefix="/api/v1")
    api_router.include_router(forms.router)
    api_router.include_router(content.router)
    app.include_router(api_router)

    return app
