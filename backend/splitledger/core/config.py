from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Splitledger API"
    cors_origins: str = "http://localhost:3000"
    log_level: str = Field(default="INFO", validation_alias=AliasChoices('log_level', 'splitledger_log_level'))
    default_simplify_debts: bool = False
    max_member_name_length: int = 100


settings = Settings()
