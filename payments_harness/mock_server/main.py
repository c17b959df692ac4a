# Serve with: uvicorn payments_harness.mock_server.main:app --port 3000
from payments_harness.config import log_level
from payments_harness.log import configure_logging
from payments_harness.mock_server.app import create_app

configure_logging(log_level())

app = create_app()
