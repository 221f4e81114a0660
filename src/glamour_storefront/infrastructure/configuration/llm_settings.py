from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class LlmSettings(BaseSettings):
    groq_api_key: SecretStr | None = Field(default=None, alias="GROQ_API_KEY")
    groq_base_url: str = Field(default="https://api.groq.com/openai/v1", alias="GROQ_BASE_URL")
    groq_model: str = Field(default="llama-3.3-70b-versatile", alias="GROQ_MODEL")
    llm_timeout_s: float = Field(default=15.0, gt=0, alias="LLM_TIMEOUT_S")
    llm_max_attempts: int = Field(default=1, ge=1, alias="LLM_MAX_ATTEMPTS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    @property
    def ai_enabled(self) -> bool:
        return bool(self.groq_api_key and self.groq_api_key.get_secret_value())
