import logging
import typing
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'config.yml'


class ConfigurationError(Exception):
    pass


class Settings(BaseModel):
    input_file: typing.Optional[Path] = None
    output_file: typing.Optional[Path] = None
    tmp_files_directory: Path = Path('.')
    order: typing.Literal['asc', 'desc'] = 'asc'
    word_wrap: int = 100
    max_temp_files: int = Field(default=1024, ge=1)
    max_memory: typing.Optional[int] = Field(default=None, ge=0)  # bytes
    distinct: bool = False  # collapse repeated tokens inside one chunk


def load_config(path: typing.Union[str, Path] = DEFAULT_CONFIG_PATH) -> dict:
    """Read settings from a YAML file, returning nothing if it cannot be read."""
    try:
        with open(path, encoding='utf-8') as config_file:
            data = yaml.safe_load(config_file)
    except FileNotFoundError:
        logger.info(
            'Configuration file not found. '
            'Using command line variables or internal defaults.'
        )
        return {}
    except (OSError, yaml.YAMLError) as error:
        logger.warning(
            'Unable to load configuration file: %s. '
            'Using command line variables or internal defaults', error,
        )
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(
            'Configuration file %s does not contain a mapping, ignoring it', path,
        )
        return {}
    return data


def resolve_settings(file_values: dict, cli_values: dict) -> Settings:
    """Combine sources, command line first, then config file, then defaults."""
    values = dict(file_values)
    max_temp_files = cli_values.get('max_temp_files')
    if max_temp_files is not None and max_temp_files < 1:
        logger.warning(
            'Invalid max temp file value: %d. Continuing with %s',
            max_temp_files, values.get('max_temp_files', 'internal default'),
        )
        cli_values = {k: v for k, v in cli_values.items() if k != 'max_temp_files'}
    values.update({k: v for k, v in cli_values.items() if v is not None})
    return Settings.model_validate(values)


def missing_parameters(settings: Settings) -> typing.List[str]:
    missing = []
    if settings.input_file is None:
        missing.append('Input file')
    if settings.output_file is None:
        missing.append('Output file')
    return missing


def required_parameters_message(missing: typing.List[str]) -> str:
    return 'The following parameters are required: ' + ', '.join(missing)
