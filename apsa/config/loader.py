"""APSA — Завантаження конфігурації"""
import dataclasses
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Type, TypeVar

import yaml

from .settings import APSAConfig

T = TypeVar("T")


def save_yaml(config: APSAConfig, path: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(asdict(config), f, default_flow_style=False, sort_keys=False)


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
    """Зібрати dataclass з вкладеного словника (невідомі ключі ігноруються)"""
    kwargs = {}
    for f in dataclasses.fields(cls):
        if f.name not in data:
            continue
        value = data[f.name]
        default = f.default_factory() if f.default_factory is not dataclasses.MISSING else None
        if dataclasses.is_dataclass(default) and isinstance(value, dict):
            value = _from_dict(type(default), value)
        kwargs[f.name] = value
    return cls(**kwargs)


def config_from_dict(data: Dict[str, Any]) -> APSAConfig:
    return _from_dict(APSAConfig, data or {})


def save_config(config: APSAConfig, path: str) -> None:
    save_yaml(config, path)


def load_config(path: str) -> APSAConfig:
    return config_from_dict(load_yaml(path))
