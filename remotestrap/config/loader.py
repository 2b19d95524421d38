"""配置文件加载"""

import logging
from pathlib import Path
from typing import Optional, Union

import marshmallow
import marshmallow_dataclass
import yaml

from remotestrap.core.errors import ConfigurationError
from remotestrap.core.models import Config
from remotestrap.core.paths import expand_tilde

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.remotestrap/config.yaml"

ConfigSchema = marshmallow_dataclass.class_schema(Config)


def parse_config(text: str) -> Config:
    """解析 YAML 文本，空文档得到空配置"""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"invalid YAML: {e}") from e

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigurationError("configuration must be a mapping")

    try:
        return ConfigSchema(unknown=marshmallow.RAISE).load(data)
    except marshmallow.ValidationError as e:
        raise ConfigurationError(f"invalid configuration: {e.messages}") from e


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """加载配置文件

    未指定路径时读取默认位置，默认文件不存在则返回空配置；
    显式指定的文件不存在或无法解析时抛出 ConfigurationError。
    """
    explicit = path is not None
    config_path = Path(expand_tilde(path if explicit else DEFAULT_CONFIG_PATH))

    if not config_path.exists():
        if explicit:
            raise ConfigurationError(f"config file not found: {config_path}")
        logger.debug(f"no config file at {config_path}")
        return Config()

    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"cannot read config {config_path}: {e}") from e

    logger.debug(f"loaded config {config_path}")
    return parse_config(text)
