from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"

    # Groq (OpenAI-compatible chat completions)
    groq_api_key: str = ""
    groq_base_url: str = "https://api.groq.com/openai/v1"
    groq_model: str = "llama-3.3-70b-versatile"
    completion_temperature: float = 0.5
    completion_max_tokens: int = 2048

    # SerpAPI
    serp_api_key: str = ""
    serp_base_url: str = "https://serpapi.com/search.json"
    serp_num_results: int = 3
    serp_language: str = "fr"
    http_timeout_seconds: float = 30.0

    # Fallback booking links
    booking_base_url: str = "https://www.booking.com/search.html"
    booking_lang: str = "fr"

    # Prompt
    budget_currency: str = "DT"

    # CORS
    cors_origins: str = "*"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def search_enabled(self) -> bool:
        return bool(self.serp_api_key)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
