"""
Configuration Management

Settings for the approval gate, loaded from the environment or a YAML file
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
from pathlib import Path
import logging
from logging.handlers import RotatingFileHandler

from .models.requirement import Requirement, parse_requirements


VALID_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}


class ConfigError(ValueError):
    """Configuration is missing or invalid"""


@dataclass
class GitHubConfig:
    """GitHub API 설정"""
    token: Optional[str] = None
    api_base_url: str = "https://api.github.com"
    timeout_seconds: int = 30


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class AppConfig:
    """전체 애플리케이션 설정"""
    github: GitHubConfig = field(default_factory=GitHubConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    requirements: List[Requirement] = field(default_factory=list)
    debug: bool = False

    @classmethod
    def from_env(cls, env: Optional[Dict[str, str]] = None) -> "AppConfig":
        """환경 변수에서 설정 로드"""
        env = os.environ if env is None else env
        debug = env.get("DEBUG", "false").lower() == "true"
        return cls(
            github=GitHubConfig(
                token=env.get("INPUT_TOKEN") or env.get("GITHUB_TOKEN"),
                api_base_url=env.get("GITHUB_API_URL", "https://api.github.com"),
                timeout_seconds=int(env.get("GITHUB_TIMEOUT", "30")),
            ),
            logging=LoggingConfig(
                level=env.get("LOG_LEVEL", "DEBUG" if debug else "INFO"),
                format=env.get("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
                file_path=env.get("LOG_FILE"),
                max_file_size=int(env.get("LOG_MAX_SIZE", str(10 * 1024 * 1024))),
                backup_count=int(env.get("LOG_BACKUP_COUNT", "5")),
            ),
            requirements=parse_requirements(env.get("INPUT_REQUIREMENTS")),
            debug=debug,
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "AppConfig":
        """YAML 파일에서 설정 로드"""
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            try:
                config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Config file is not valid YAML: {config_path}: {e}") from e

        if not isinstance(config_data, dict):
            raise ConfigError(f"Config file must contain a mapping: {config_path}")

        try:
            github = GitHubConfig(**(config_data.get('github') or {}))
            logging_config = LoggingConfig(**(config_data.get('logging') or {}))
        except TypeError as e:
            raise ConfigError(f"Unknown setting in {config_path}: {e}") from e

        return cls(
            github=github,
            logging=logging_config,
            requirements=parse_requirements(config_data.get('requirements')),
            debug=config_data.get('debug', False),
        )

    def validate(self) -> None:
        """설정 유효성 검사"""
        errors = []

        if not self.github.token:
            errors.append("GitHub token is required")

        if self.github.timeout_seconds <= 0:
            errors.append("GitHub timeout must be positive")

        if self.logging.level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ConfigError(f"Configuration validation failed: {'; '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환"""
        return {
            'github': {
                'api_base_url': self.github.api_base_url,
                'timeout_seconds': self.github.timeout_seconds,
                # 보안상 토큰은 제외
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
            'requirements': [
                {
                    'patterns': list(r.patterns),
                    'required_approvals': r.required_approvals,
                }
                for r in self.requirements
            ],
            'debug': self.debug,
        }


def configure_logging(config: LoggingConfig) -> None:
    """로깅 설정"""
    logging.basicConfig(
        level=getattr(logging, config.level.upper()),
        format=config.format,
    )

    # 파일 로깅이 설정된 경우 로테이션 설정
    if config.file_path:
        handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        handler.setFormatter(logging.Formatter(config.format))
        logging.getLogger().addHandler(handler)
