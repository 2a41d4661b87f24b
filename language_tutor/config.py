"""Settings for the tutor.

Uses pydantic-settings to read TUTOR_* environment variables (or a local
.env file). Defaults reproduce the fixed constants of the classic tutor
prompt; the API token is not a setting and always comes from the command line.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Completion endpoint
    api_url: str = "https://api.openai.com/v1/completions"
    model: str = "text-davinci-002"

    # Sampling
    temperature: float = Field(default=0.8, ge=0.0, le=2.0)
    max_tokens: int = Field(default=256, gt=0)
    stop: str = "S:"

    # Number of prior interactions included in each prompt
    context_window: int = Field(default=10, ge=0)

    # Timeout (seconds)
    timeout: float = Field(default=60.0, gt=0)

    log_level: str = "WARNING"

    model_config = {
        "env_prefix": "TUTOR_",
        "env_file": ".env",
        "extra": "ignore",
    }


settings = Settings()
