from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from fancyhangman.lang.normalize import AppLanguage, parse_app_language


class Settings(BaseSettings):
    # Table backend when set, otherwise the text backend
    database_url: str | None = None
    wordbase_file: str | None = None

    max_guesses: int = Field(default=6, gt=0)
    locale: AppLanguage = AppLanguage.EN
    word_length: int = Field(default=5, gt=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("locale", mode="before")
    @classmethod
    def _parse_locale(cls, value):
        if isinstance(value, AppLanguage):
            return value
        return parse_app_language(value)

    @model_validator(mode="after")
    def _require_storage(self):
        if not self.database_url and not self.wordbase_file:
            raise ValueError("WORDBASE_FILE must be set when no DATABASE_URL is given")
        return self

    @property
    def uses_database(self) -> bool:
        return bool(self.database_url)
