"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Redis (chat state storage)
    REDIS_URL: str = "redis://localhost:6379/0"

    # LLM
    DASHSCOPE_API_KEY: str = ""
    LLM_MODEL: str = "qwen-plus"

    # Relay: empty means the widget calls the LLM service in-process
    RELAY_URL: str = ""
    RELAY_TIMEOUT: float = 30.0

    # App
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Chat widget
    DEFAULT_GAME_CONTEXT: str = "a video game"
    SESSION_TITLE_LENGTH: int = 30
    WELCOME_MESSAGE: str = (
        "Hello! Pick a game from the carousel and ask me anything about it."
    )
    FALLBACK_MESSAGE: str = "Sorry, I'm having trouble connecting to the AI right now."
    RENDER_MARKDOWN: bool = True
    MAX_WIDGETS: int = 1000  # in-memory controllers kept before the least recent is dropped

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
