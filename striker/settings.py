from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    openai_api_key: str = ""
    openai_base_url: str | None = None
    openai_model: str = "gpt-4o-mini"
    commentary_timeout: float = 8.0
    commentary_max_tokens: int = 60

    model_config = {"env_prefix": "STRIKER_", "env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def commentary_enabled(self) -> bool:
        return bool(self.openai_api_key)


settings = Settings()
