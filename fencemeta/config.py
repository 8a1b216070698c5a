import os
import re

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    include: list[str] = ["caption"]  # attribute names copied into data-* attributes
    include_pattern: str | None = None  # regex over attribute names, OR-ed with `include`
    lang_attr: str | None = "language"  # None or empty: no language attribute
    allow_flags: bool = True  # key-only attributes, e.g. ```python linenos
    footnotes: bool = True

    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="FENCEMETA_",
        env_file=[os.getenv("ENV_FILE", ""), ".env"],
        extra="ignore",
    )

    def include_predicate(self) -> list:
        """Include option as accepted by `as_predicate`."""
        parts: list = list(self.include)
        if self.include_pattern:
            parts.append(re.compile(self.include_pattern))
        return parts
