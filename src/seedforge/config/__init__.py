"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Environment variable named by ``logging.level_env``
"""

from .schema import ConfigModel, ForgerSettings, LoggingSettings, StringSettings, load_config

__all__ = ["ConfigModel", "ForgerSettings", "LoggingSettings", "StringSettings", "load_config"]
