"""API configuration adapter.

Bridges the centralized worksync_config settings with the API layer.
``create_app`` pins the settings it was built with on ``app.state`` so
that request handlers see the same values the app was configured with.
"""

from fastapi import Request

from worksync_config.settings import Settings


def get_api_settings(request: Request) -> Settings:
    """Get the settings of the running application."""
    return request.app.state.settings
