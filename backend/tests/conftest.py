"""Shared test configuration and pytest markers."""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the FastAPI layer through TestClient"
    )
