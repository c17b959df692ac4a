from fastapi import FastAPI

from payments_harness.config import MockServerConfig, load_mock_server_config
from payments_harness.mock_server.database import Base, make_engine, make_session_factory
from payments_harness.mock_server import models  # noqa: F401  registers tables
from payments_harness.mock_server.routes import router


def create_app(config: MockServerConfig | None = None) -> FastAPI:
    """Build a generic REST CRUD backend with its own database."""
    config = config or load_mock_server_config()
    engine = make_engine(config.database_url)
    Base.metadata.create_all(bind=engine)

    app = FastAPI(title="Payments Mock Backend")
    app.state.config = config
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    app.include_router(router)
    return app
