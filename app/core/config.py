from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


SUMMARIZER_BACKENDS = ("ollama", "openai", "template")


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be configured via .env file or environment variables.
    """

    # =============================================================================
    # APPLICATION
    # =============================================================================
    PROJECT_NAME: str = "Student Records API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_PREFIX: str = ""
    SEED_ON_STARTUP: bool = False

    # =============================================================================
    # SERVER
    # =============================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # =============================================================================
    # SUMMARIZER
    # =============================================================================
    SUMMARIZER_BACKEND: str = "ollama"
    SUMMARY_TIMEOUT_SECONDS: float = 60.0
    SUMMARY_MAX_CHUNKS: int = 10000

    OLLAMA_BASE_URL: str = "http://localhost:11434"
    OLLAMA_MODEL: str = "llama3.2"

    # OpenAI-compatible endpoint, used by the "openai" backend
    LLM_BASE_URL: str = ""
    LLM_MODEL: str = "openai/gpt-oss-20b"
    LLM_API_KEY: str = "empty"

    # =============================================================================
    # LOGGING
    # =============================================================================
    LOG_LEVEL: str = "INFO"

    @field_validator("SUMMARIZER_BACKEND", mode="before")
    @classmethod
    def normalize_backend(cls, v):
        """Lower-case the backend name and reject unknown ones."""
        if isinstance(v, str):
            v = v.strip().lower()
        if v not in SUMMARIZER_BACKENDS:
            raise ValueError(
                f"SUMMARIZER_BACKEND must be one of {', '.join(SUMMARIZER_BACKENDS)}"
            )
        return v

    @field_validator("API_PREFIX")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow"  # Allow extra fields for future extensions
    )


# Create global settings instance
settings = Settings()


# Helper function to display current config (for debugging)
def print_config():
    """Print current configuration (hide sensitive data)."""
    print("=" * 80)
    print("CURRENT CONFIGURATION")
    print("=" * 80)
    print(f"Project Name: {settings.PROJECT_NAME}")
    print(f"Version: {settings.APP_VERSION}")
    print(f"Debug Mode: {settings.DEBUG}")
    print(f"API Prefix: {settings.API_PREFIX or '/'}")
    print(f"Listen: {settings.HOST}:{settings.PORT}")
    print("-" * 80)
    print(f"Summarizer: {settings.SUMMARIZER_BACKEND}")
    print(f"Timeout: {settings.SUMMARY_TIMEOUT_SECONDS}s")
    print(f"Max Chunks: {settings.SUMMARY_MAX_CHUNKS}")
    print(f"Ollama: {settings.OLLAMA_BASE_URL} ({settings.OLLAMA_MODEL})")
    print(f"LLM: {settings.LLM_BASE_URL or '-'} ({settings.LLM_MODEL})")
    print(f"LLM API Key: {'*' * len(settings.LLM_API_KEY)}")
    print("=" * 80)


if __name__ == "__main__":
    # Test config loading
    print_config()
