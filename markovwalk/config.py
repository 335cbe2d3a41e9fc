import dataclasses
import logging
import os
import typing

import yaml


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "markovwalk.yaml"


@dataclasses.dataclass
class WalkSettings:

	"""
	Run parameters for one of the demo applications.

	Attributes:
		seed: Seed for the process-wide random source (``None`` = entropy).
		count: Number of walks to generate.
		max_length: Most states per walk, or ``None`` for no limit.
		word_limit: Most corpus words to read (tweets only), ``None`` = all.
	"""

	seed: typing.Optional[int] = None
	count: int = 1
	max_length: typing.Optional[int] = None
	word_limit: typing.Optional[int] = None


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		config = yaml.safe_load(f)

	if config is None:
		return {}

	if not isinstance(config, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(config).__name__}")

	return config


def settings_from_config (config: dict, section: str, defaults: typing.Optional[WalkSettings] = None) -> WalkSettings:

	"""
	Overlay the values in ``config[section]`` onto ``defaults``.
	"""

	settings = dataclasses.replace(defaults) if defaults is not None else WalkSettings()
	values = config.get(section) or {}

	for field in dataclasses.fields(WalkSettings):
		if field.name in values:
			setattr(settings, field.name, values[field.name])

	return settings


def configure_logging (config: dict) -> None:

	"""
	Set the root log level from ``logging.level`` (default WARNING).

	The level may be a name such as ``"debug"`` or a number such as ``10``.
	"""

	configured = (config.get('logging') or {}).get('level', 'WARNING')

	if isinstance(configured, bool):
		raise ValueError(f"Unknown log level: {configured}")

	if isinstance(configured, int):
		level = configured

	else:
		level_name = str(configured).upper()
		level = logging.getLevelName(level_name)

		if not isinstance(level, int):
			raise ValueError(f"Unknown log level: {level_name}")

	logging.basicConfig(level=level)
	logging.getLogger().setLevel(level)
