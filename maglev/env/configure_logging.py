from maglev.logging import LoggingConfig

from .env import Env


def configure_logging(env: Env) -> LoggingConfig:
    config = LoggingConfig()
    config.update(
        log_level=env.MAGLEV_LOG_LEVEL,
        log_output=env.MAGLEV_LOG_OUTPUT,
        log_format=env.MAGLEV_LOG_FORMAT,
    )

    return config
