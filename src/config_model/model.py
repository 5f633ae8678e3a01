from __future__ import annotations
from typing import Dict, List, Union
from pathlib import Path
import os
from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------- Leaf models ----------

class EnvCfg(BaseModel):
    project_name: str = "attribute-sanitizer"


class LoggingCfg(BaseModel):
    level: str = "INFO"
    structured_json: bool = True

    @field_validator("level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()


# attribute -> "trim|lowercase" or ["trim", "lowercase"]
ProfileRules = Dict[str, Union[str, List[str]]]


# ---------- Root ----------

class RootCfg(BaseModel):
    model_config = ConfigDict(extra="ignore")

    env: EnvCfg = EnvCfg()
    logging: LoggingCfg = LoggingCfg()
    # named rule sets, e.g. [profiles.contact_form]
    profiles: Dict[str, ProfileRules] = Field(default_factory=dict)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str]) -> "RootCfg":
        try:
            import tomllib  # py>=3.11
        except ImportError:
            import tomli as tomllib

        p = Path(path)
        try:
            with p.open("rb") as f:
                raw = tomllib.load(f)
        except tomllib.TOMLDecodeError:
            # Retry once without a BOM (common editor artifact)
            text = p.read_text(encoding="utf-8-sig")
            try:
                raw = tomllib.loads(text)
            except tomllib.TOMLDecodeError as e:
                snippet = text[:80].replace("\n", "\\n")
                raise RuntimeError(f"Failed to parse TOML at {p}. First chars: {snippet!r}") from e

        raw.setdefault("env", {})
        raw.setdefault("logging", {})
        raw.setdefault("profiles", {})
        return cls(**raw)

    @classmethod
    def load(cls, path: str | None = None) -> "RootCfg":
        final = Path(path or os.environ.get("SANITIZER_CFG", "config/config.toml")).resolve()
        return cls.from_toml(final)


# Convenience import for callers
def load_config(path: str | None = None) -> RootCfg:
    return RootCfg.load(path)
