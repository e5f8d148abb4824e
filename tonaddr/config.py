from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    allowed_domains: str = Field(default="localhost")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def allowed_origins(self) -> list[str]:
        origins = []
        for domain in self.allowed_domains.split(","):
            domain = domain.strip()
            if not domain:
                continue
            origins.append(f"https://{domain}")
            origins.append(f"http://{domain}")
        return origins


settings = Settings()
