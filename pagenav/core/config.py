"""Centralized configuration for pagenav.

Defaults are read from a YAML profile loaded via Hydra from
``pagenav/core/configs/``. The profile is selected by ``PAGENAV_CONFIG_NAME``
(default: ``"base"``). Use Hydra overrides (``key=value``) with
:func:`load_config` to customize values.

Usage::

    from pagenav.core.config import get_config, load_config

    cfg = get_config()                                   # cached, env-selected
    cfg = load_config(overrides=["page_size=25"])        # explicit
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from hydra import compose, initialize_config_dir
from hydra.core.config_store import ConfigStore
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from pagenav.exceptions import InvalidArgumentError
from pagenav.styles import Framework

logger = logging.getLogger(__name__)

_CONFIG_DIR = str(Path(__file__).parent / "configs")


@dataclass
class PaginationConfig:
    """Default pagination settings (dataclass for Hydra structured-config compatibility)."""

    query_key: str = "page"
    page_size: int = 10
    pad: int = 3
    framework: str = "bootstrap"
    previous_label: str = "Previous"
    next_label: str = "Next"


cs = ConfigStore.instance()
cs.store(name="_pagenav_schema", node=PaginationConfig)


def _validate(cfg: PaginationConfig) -> PaginationConfig:
    if not cfg.query_key:
        raise InvalidArgumentError("query_key", cfg.query_key, "must be a non-empty string")
    if cfg.page_size < 1:
        raise InvalidArgumentError("page_size", cfg.page_size, "must be a positive integer")
    if cfg.pad < 0:
        raise InvalidArgumentError("pad", cfg.pad, "must be a non-negative integer")
    Framework.parse(cfg.framework)
    return cfg


def load_config(
    config_dir: str | None = None,
    config_name: str = "base",
    overrides: list[str] | None = None,
) -> PaginationConfig:
    """Load a profile via Hydra Compose API and return a PaginationConfig.

    Raises:
        InvalidArgumentError: A value has the wrong type or is out of range.
    """
    abs_dir = os.path.abspath(config_dir or _CONFIG_DIR)

    with initialize_config_dir(version_base=None, config_dir=abs_dir):
        cfg = compose(config_name=config_name, overrides=overrides or [])

    try:
        typed_cfg = OmegaConf.merge(OmegaConf.structured(PaginationConfig), cfg)
        obj = OmegaConf.to_object(typed_cfg)
    except OmegaConfBaseException as e:
        raise InvalidArgumentError("config", config_name, str(e)) from e
    if not isinstance(obj, PaginationConfig):
        raise TypeError("Hydra did not produce a PaginationConfig instance")
    return _validate(obj)


@lru_cache(maxsize=1)
def get_config() -> PaginationConfig:
    """Return the pagination defaults for the current profile.

    The profile is determined by ``PAGENAV_CONFIG_NAME`` (default: ``"base"``).
    A missing profile falls back to built-in defaults.

    The result is cached; call ``get_config.cache_clear()`` to re-read
    (useful in tests).
    """
    config_name = os.environ.get("PAGENAV_CONFIG_NAME", "base").strip().lower()
    try:
        return load_config(config_name=config_name)
    except InvalidArgumentError:
        raise
    except Exception:
        logger.debug("Failed to load config %r, falling back to defaults", config_name, exc_info=True)
        return PaginationConfig()
