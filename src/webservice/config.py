"""Configuration using pydantic-settings."""

from pydantic_settings import BaseSettings


class WebserviceSettings(BaseSettings):
    """Loader and transport configuration."""

    timeout: float = 10.0
    user_agent: str = "Webservice/0.1 (+https://github.com/webservice)"
    follow_redirects: bool = True
    check_status: bool = False

    model_config = {"env_prefix": "WEBSERVICE_"}


settings = WebserviceSettings()
