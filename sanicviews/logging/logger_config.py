"""
Logging Configuration
Provides structured logging with sensitive data filtering
"""
import logging
import logging.handlers
import json
import re
from pathlib import Path
from typing import Dict, List, Optional
from datetime import datetime


class SensitiveDataFilter(logging.Filter):
    """
    Filter to redact sensitive data from logs
    View data and temp data may carry tokens or credentials
    """

    # name -> (pattern, replacement)
    SENSITIVE_PATTERNS = {
        'password': (r"""(['"]password['"]\s*:\s*)['"][^'"]*['"]""", r"\1'[REDACTED]'"),
        'token': (r"""(['"]\w*token['"]\s*:\s*)['"][^'"]*['"]""", r"\1'[REDACTED]'"),
        'secret': (r"""(['"]\w*secret\w*['"]\s*:\s*)['"][^'"]*['"]""", r"\1'[REDACTED]'"),
        'session_cookie': (r'(session=)[^;\s]+', r'\1[REDACTED]'),
        'auth_header': (r'(Authorization:\s+Bearer\s+)[A-Za-z0-9\-_=.+/]+', r'\1[REDACTED]'),
    }

    def __init__(self, additional_patterns: Optional[Dict[str, tuple]] = None):
        """
        Args:
            additional_patterns: Extra patterns as name: (regex, replacement)
        """
        super().__init__()
        patterns = self.SENSITIVE_PATTERNS.copy()
        if additional_patterns:
            patterns.update(additional_patterns)

        self.compiled_patterns = [
            (re.compile(pattern, re.IGNORECASE), replacement)
            for pattern, replacement in patterns.values()
        ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact the message and string args; always lets the record through"""
        if isinstance(record.msg, str):
            record.msg = self._redact(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {
                    k: self._redact(v) if isinstance(v, str) else v
                    for k, v in record.args.items()
                }
            elif isinstance(record.args, tuple):
                record.args = tuple(
                    self._redact(arg) if isinstance(arg, str) else arg
                    for arg in record.args
                )

        return True

    def _redact(self, text: str) -> str:
        for pattern, replacement in self.compiled_patterns:
            text = pattern.sub(replacement, text)
        return text


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    Outputs logs in JSON format for easy parsing and analysis
    """

    RESERVED_ATTRS = frozenset([
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'pathname', 'process', 'processName', 'relativeCreated',
        'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
        'message', 'taskName',
    ])

    def __init__(self, include_fields: Optional[List[str]] = None):
        super().__init__()
        self.include_fields = include_fields or []

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        for field in self.include_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # extra={...} fields
        for key, value in record.__dict__.items():
            if key not in self.RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """
    @staticmethod
    def setup_logger(
        name: str,
        format_type: str = 'json',
        max_bytes: int = None,
        backup_count: int = None,
        filter_sensitive: bool = True,
        additional_sensitive_patterns: Optional[Dict[str, tuple]] = None,
        file_name: Optional[str] = None
    ) -> logging.Logger:
        """
        Setup a logger with rotation and optional sensitive data filtering

        Args:
            name: Logger name
            format_type: Format type ('json' or 'text')
            max_bytes: Max bytes before rotation
            backup_count: Number of backup files to keep
            filter_sensitive: Enable sensitive data filtering
            additional_sensitive_patterns: Additional patterns to filter
            file_name: Log file name without extension (defaults to name)

        Returns:
            Configured logger
        """
        from sanicviews.defaults import DEFAULT_LOG_MAX_BYTES, DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_DIR
        from sanicviews.support import Config

        if max_bytes is None:
            max_bytes = DEFAULT_LOG_MAX_BYTES
        if backup_count is None:
            backup_count = DEFAULT_LOG_BACKUP_COUNT

        app_env = Config.get('app.APP_ENV', 'local')
        enable_console = Config.get('app.APP_DEBUG', False)

        logger = logging.getLogger(name)
        logger.setLevel(LoggerConfig.get_level_by_environment(app_env))
        logger.handlers.clear()

        log_dir = Path(Config.get('logging.LOG_DIR', DEFAULT_LOG_DIR))
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"{file_name or name}.log"

        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
        handler.setFormatter(formatter)

        sensitive_filter = SensitiveDataFilter(additional_sensitive_patterns) if filter_sensitive else None
        if sensitive_filter:
            handler.addFilter(sensitive_filter)
        logger.addHandler(handler)

        if enable_console:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            if sensitive_filter:
                console_handler.addFilter(sensitive_filter)
            logger.addHandler(console_handler)

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """
        Get logging level based on environment

        Args:
            environment: Environment name ('production', 'development', 'testing')

        Returns:
            Logging level
        """
        levels = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'development': logging.DEBUG,
            'testing': logging.ERROR,
        }
        return levels.get(environment.lower(), logging.INFO)
