from payments_harness.mock_server.app import create_app

__all__ = ["create_app"]
