from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SmtpConfig(BaseSettings):
    """SMTP relay settings, read from the environment once at startup."""

    model_config = SettingsConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    host: str = Field(default="smtp.gmail.com", validation_alias="SMTP_HOST")
    port: int = Field(default=587, validation_alias="SMTP_PORT")
    user: Optional[str] = Field(default=None, validation_alias="SMTP_USER")
    password: Optional[str] = Field(default=None, validation_alias="SMTP_PASS")
    email_to: Optional[str] = Field(default=None, validation_alias="EMAIL_TO")
    from_name: str = Field(default="Medical Shop", validation_alias="EMAIL_FROM_NAME")

    @field_validator("host", mode="before")
    @classmethod
    def _blank_host(cls, value):
        return value or "smtp.gmail.com"

    @field_validator("port", mode="before")
    @classmethod
    def _blank_port(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return 587
        return value

    @property
    def implicit_tls(self) -> bool:
        return self.port == 465

    @property
    def destination(self) -> Optional[str]:
        return self.email_to or self.user

    @property
    def sender(self) -> str:
        return f'"{self.from_name}" <{self.user}>'

    def is_ready(self) -> bool:
        return bool(self.user and self.password)
