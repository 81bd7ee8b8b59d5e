from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

ROOT_LOGGER = "nfa2dfa"


def setup_logging(log_level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """配置 nfa2dfa 命名空间下的日志。

    控制台 handler 写到 stderr，stdout 只留给自动机文本输出；
    指定 log_file 时额外写一个滚动文件。
    """
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "simple": {"format": "%(levelname)s - %(name)s - %(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "simple",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            ROOT_LOGGER: {
                "level": log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }

    if log_file:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "detailed",
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 3,
            "encoding": "utf8",
        }
        config["loggers"][ROOT_LOGGER]["handlers"].append("file")
        # 文件里保留 DEBUG 细节
        config["loggers"][ROOT_LOGGER]["level"] = "DEBUG"

    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
