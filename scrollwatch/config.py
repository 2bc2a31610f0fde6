"""Observer configuration loading helpers."""

from __future__ import annotations

from pathlib import Path

import tomllib

from pydantic import BaseModel, Field, ValidationError

CONFIG_FILE = Path.home() / ".config" / "scrollwatch" / "config.toml"


class ObserverConfig(BaseModel):
    """Tuning for a debounced value observer."""

    debounce_seconds: float = Field(default=0.4, ge=0)
    flush_on_close: bool = False


class AppConfig(BaseModel):
    """Shape of the configuration file."""

    log_level: str = "WARNING"
    observer: ObserverConfig = Field(default_factory=ObserverConfig)

    def with_observer(self, **updates: object) -> AppConfig:
        """Return a copy with observer settings changed."""

        observer = ObserverConfig.model_validate(self.observer.model_dump() | updates)
        return self.model_copy(update={"observer": observer})


def load_config() -> AppConfig:
    """Load configuration from disk; fall back to defaults if missing."""

    try:
        data = _read_config_file()
    except FileNotFoundError:
        return AppConfig()
    except (tomllib.TOMLDecodeError, OSError):
        return AppConfig()

    observer = _observer_from(data.get("observer", {}))  # type: ignore[arg-type]
    return AppConfig(
        log_level=data.get("log_level", AppConfig.model_fields["log_level"].default),
        observer=observer,
    )


def save_config(config: AppConfig) -> None:
    """Persist configuration to disk."""

    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    flush = "true" if config.observer.flush_on_close else "false"
    lines: list[str] = [
        f'log_level = "{config.log_level}"',
        "",
        "[observer]",
        f"debounce_seconds = {config.observer.debounce_seconds}",
        f"flush_on_close = {flush}",
    ]
    CONFIG_FILE.write_text("\n".join(lines) + "\n")


def _observer_from(raw: dict[str, object]) -> ObserverConfig:
    """Build observer settings, keeping each field that validates on its own."""

    accepted: dict[str, object] = {}
    for key, value in raw.items():
        try:
            ObserverConfig(**{key: value})
        except ValidationError:
            continue
        accepted[key] = value
    return ObserverConfig(**accepted)


def _read_config_file() -> dict[str, object]:
    with CONFIG_FILE.open("rb") as handle:
        raw = tomllib.load(handle)
    data: dict[str, object] = {}
    if isinstance(raw, dict):
        log_level = raw.get("log_level")
        if isinstance(log_level, str):
            data["log_level"] = log_level.upper()
        observer = raw.get("observer")
        if isinstance(observer, dict):
            parsed: dict[str, object] = {}
            seconds = observer.get("debounce_seconds")
            # bool is an int subclass; reject it explicitly
            if isinstance(seconds, (int, float)) and not isinstance(seconds, bool):
                parsed["debounce_seconds"] = float(seconds)
            flush = observer.get("flush_on_close")
            if isinstance(flush, bool):
                parsed["flush_on_close"] = flush
            data["observer"] = parsed
    return data


__all__ = ["AppConfig", "CONFIG_FILE", "ObserverConfig", "load_config", "save_config"]
