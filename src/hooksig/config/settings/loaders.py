"""Config settings – environment and ``.env`` loaders."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from dotenv import dotenv_values

from hooksig.config.settings.base import Settings
from hooksig.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

S = TypeVar("S", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def _to_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"expected one of {sorted(_TRUTHY | _FALSY)}")


# Field annotations are strings under ``from __future__ import annotations``.
_COERCERS: dict[Any, Callable[[str], Any]] = {
    bool: _to_bool, "bool": _to_bool,
    int: int, "int": int,
    float: float, "float": float,
}


class SettingsLoader(abc.ABC):
    """Port: build a :class:`Settings` subclass from some key/value source."""

    @abc.abstractmethod
    def source(self) -> Mapping[str, str]: ...

    def load(self, settings_class: type[S]) -> S:
        values = self.source()
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            key = settings_class.env_key(field.name)
            if key not in values:
                required = (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING
                )
                if required:
                    raise MissingRequiredSettingError(key)
                continue
            coerce = _COERCERS.get(field.type, str)
            try:
                kwargs[field.name] = coerce(values[key])
            except ValueError as exc:
                raise InvalidSettingValueError(key, values[key], str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Cannot build {settings_class.__name__}: {exc}") from exc


class EnvSettingsLoader(SettingsLoader):
    """Read settings from ``os.environ``."""

    def source(self) -> Mapping[str, str]:
        return os.environ


class DotenvSettingsLoader(SettingsLoader):
    """Read a ``.env`` file; real environment variables win unless *override*."""

    def __init__(self, env_file: str = ".env", *, override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def source(self) -> Mapping[str, str]:
        from_file = {k: v for k, v in dotenv_values(self._env_file).items() if v is not None}
        if self._override:
            return {**os.environ, **from_file}
        return {**from_file, **os.environ}


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
