from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # MongoDB
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "Art"

    # Value substituted for {#MyName} in seed documents
    MY_NAME: str = "Anonymous"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        # logging only accepts upper-case level names
        return value.strip().upper()

    def placeholder_variables(self) -> dict:
        """Variables available to {#Key} placeholders in migrations"""
        return {"MyName": self.MY_NAME}

settings = Settings()
