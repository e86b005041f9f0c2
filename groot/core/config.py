"""Configuration for Groot.

Settings live in INI files: the global ``~/.grootconfig`` and the
repository's ``.groot/config``. An environment variable
``GROOT_<SECTION>_<KEY>`` overrides both, and the repository file
overrides the global one. Groot interprets three keys:

- ``core.ignorefile``: name of the ignore file in the work tree
- ``core.loglevel``: logging level used by the command line
- ``color.ui``: set to false to disable colored diff output

Other keys are stored and read back verbatim.
"""

import configparser
import io
import logging
import os
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from .errors import ConfigError
from groot.utils.fs import write_text_atomic

logger = logging.getLogger(__name__)

ENV_PREFIX = 'GROOT'
DEFAULT_IGNORE_FILE = '.grootignore'
DEFAULT_LOG_LEVEL = 'WARNING'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def parse_bool(value: str) -> bool:
    """
    Interpret a boolean setting (true/false, yes/no, on/off, 1/0).
    
    Raises:
        ValueError: If the value is none of those
    """
    try:
        return configparser.ConfigParser.BOOLEAN_STATES[value.strip().lower()]
    except KeyError:
        raise ValueError(f"not a boolean: {value!r}")


def _check_log_level(value: str) -> None:
    if value.strip().upper() not in LOG_LEVELS:
        raise ValueError(f"expected one of {', '.join(LOG_LEVELS)}")


def _check_file_name(value: str) -> None:
    if not value.strip():
        raise ValueError("file name is empty")


# Keys Groot interprets, with the check their values must pass
VALIDATORS: Dict[Tuple[str, str], Callable[[str], None]] = {
    ('core', 'ignorefile'): _check_file_name,
    ('core', 'loglevel'): _check_log_level,
    ('color', 'ui'): parse_bool,
}


def parse_key(key: str) -> Tuple[str, str]:
    """
    Split a dotted key into section and option.
    
    ``color.ui`` gives ``('color', 'ui')``; a bare ``ignorefile`` belongs
    to the ``core`` section.
    
    Raises:
        ConfigError: If the section or option part is empty
    """
    section, dot, option = key.strip().rpartition('.')
    if dot and not section:
        raise ConfigError(key, "empty section name")
    if not option:
        raise ConfigError(key, "empty option name")
    return (section or 'core').lower(), option.lower()


class ConfigFile:
    """
    A single INI file, parsed on first use.
    
    A file that cannot be parsed is logged and read as empty. Writes to
    such a file raise ConfigError instead of replacing what is there.
    """
    
    def __init__(self, path: Path, scope: str):
        self.path = Path(path)
        self.scope = scope
        self.broken = False
        self._parser: Optional[configparser.ConfigParser] = None
    
    @property
    def parser(self) -> configparser.ConfigParser:
        if self._parser is None:
            parser = configparser.ConfigParser(interpolation=None)
            try:
                parser.read(self.path, encoding='utf-8')
            except (configparser.Error, UnicodeDecodeError) as e:
                logger.warning("Ignoring %s config %s: %s", self.scope, self.path, e)
                parser = configparser.ConfigParser(interpolation=None)
                self.broken = True
            self._parser = parser
        return self._parser
    
    def lookup(self, section: str, option: str) -> Optional[str]:
        if self.parser.has_option(section, option):
            return self.parser.get(section, option)
        return None
    
    def values(self) -> Dict[str, str]:
        """All values in the file keyed by ``section.option``."""
        return {
            f"{section}.{option}": value
            for section in self.parser.sections()
            for option, value in self.parser.items(section)
        }
    
    def assign(self, section: str, option: str, value: str) -> None:
        parser = self._writable()
        if not parser.has_section(section):
            parser.add_section(section)
        parser.set(section, option, value)
        self._save()
    
    def remove(self, section: str, option: str) -> bool:
        parser = self._writable()
        if not parser.has_option(section, option):
            return False
        
        parser.remove_option(section, option)
        if not parser.options(section):
            parser.remove_section(section)
        self._save()
        return True
    
    def _writable(self) -> configparser.ConfigParser:
        parser = self.parser
        if self.broken:
            raise ConfigError(self.path, "file cannot be parsed; fix or remove it first")
        return parser
    
    def _save(self) -> None:
        buffer = io.StringIO()
        self.parser.write(buffer)
        write_text_atomic(self.path, buffer.getvalue())


class Config:
    """
    Layered view over environment, repository and global settings.
    
    Reads never fail: unparseable files are treated as empty and invalid
    values of interpreted keys fall back to their defaults, with a logged
    warning. Writes validate interpreted keys and raise ConfigError.
    """
    
    GLOBAL_CONFIG_PATH = Path.home() / '.grootconfig'
    
    def __init__(self, repo_config_path: Optional[Path] = None):
        """
        Args:
            repo_config_path: The repository's config file, None outside a repository
        """
        self.repo_config_path = Path(repo_config_path) if repo_config_path else None
        self.global_file = ConfigFile(self.GLOBAL_CONFIG_PATH, 'global')
        self.repo_file = (ConfigFile(self.repo_config_path, 'repository')
                          if self.repo_config_path else None)
    
    def _layers(self) -> List[ConfigFile]:
        return [f for f in (self.repo_file, self.global_file) if f is not None]
    
    def _target(self, global_config: bool) -> ConfigFile:
        if global_config:
            return self.global_file
        if self.repo_file is None:
            raise ConfigError('repository', "not inside a groot repository")
        return self.repo_file
    
    def get(self, section: str, option: str, fallback: Optional[str] = None) -> Optional[str]:
        """Look a value up in the environment, then the repository file, then the global file."""
        env_value = os.environ.get(f"{ENV_PREFIX}_{section.upper()}_{option.upper()}")
        if env_value is not None:
            return env_value
        
        for layer in self._layers():
            value = layer.lookup(section, option)
            if value is not None:
                return value
        
        return fallback
    
    def get_bool(self, section: str, option: str, fallback: bool = False) -> bool:
        """
        Raises:
            ValueError: If the value is set but is not a boolean
        """
        value = self.get(section, option)
        if value is None:
            return fallback
        try:
            return parse_bool(value)
        except ValueError as e:
            raise ValueError(f"{section}.{option}: {e}")
    
    def set(self, section: str, option: str, value: str, global_config: bool = False) -> None:
        """
        Store a value in the repository file, or the global file.
        
        Raises:
            ConfigError: If the value is invalid for an interpreted key, there
                is no repository file, or the target file cannot be parsed
        """
        check = VALIDATORS.get((section, option))
        if check is not None:
            try:
                check(value)
            except ValueError as e:
                raise ConfigError(f"{section}.{option}", str(e))
        self._target(global_config).assign(section, option, value)
    
    def unset(self, section: str, option: str, global_config: bool = False) -> bool:
        """Remove a value; returns False if it was not set in that file."""
        return self._target(global_config).remove(section, option)
    
    def list_all(self) -> Dict[str, str]:
        """Values from both files by dotted key; repository values shadow global ones."""
        values = {}
        for layer in reversed(self._layers()):
            values.update(layer.values())
        return dict(sorted(values.items()))
    
    def _checked(self, section: str, option: str, default: str) -> str:
        value = self.get(section, option)
        if value is None:
            return default
        try:
            VALIDATORS[(section, option)](value)
        except ValueError as e:
            logger.warning("Ignoring %s.%s = %r (%s); using %s", section, option, value, e, default)
            return default
        return value.strip()
    
    @property
    def ignore_file(self) -> str:
        """Name of the ignore file in the work tree."""
        return self._checked('core', 'ignorefile', DEFAULT_IGNORE_FILE)
    
    @property
    def log_level(self) -> int:
        """Numeric logging level for the command line."""
        return getattr(logging, self._checked('core', 'loglevel', DEFAULT_LOG_LEVEL).upper())
    
    @property
    def use_color(self) -> bool:
        """Whether diff output should be colored."""
        return parse_bool(self._checked('color', 'ui', 'true'))


def get_config(repo=None) -> Config:
    """Config for a repository, or global-only config when repo is None."""
    return Config(repo.config_file if repo else None)
