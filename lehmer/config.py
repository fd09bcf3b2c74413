"""Настройки анализа и командной строки"""

import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    'max_period_iterations': 10000,  # граница поиска периода в analyze
    'chi2_bins': 10,
    'alpha': 0.05,
    'sample_size': 10000,
    'search_limit': 10,
    'max_c': 100,
    'display_limit': None,  # None - вывести m чисел
    'plot_dpi': 300,
    'log_level': 'WARNING',
}

LOG_LEVEL_ENV = 'LEHMER_LOG_LEVEL'


def is_known_log_level(level: str) -> bool:
    # для неизвестного имени getLevelName возвращает строку "Level <name>"
    return isinstance(logging.getLevelName(level), int)


def make_config(**overrides: Any) -> Dict[str, Any]:
    """
    Копия настроек по умолчанию с заменой указанных значений

    Неизвестный уровень журналирования из LEHMER_LOG_LEVEL заменяется на WARNING.

    Raises:
        KeyError: неизвестный параметр настройки
    """
    unknown = set(overrides) - set(DEFAULT_CONFIG)
    if unknown:
        raise KeyError(f"Неизвестные параметры настройки: {', '.join(sorted(unknown))}")

    config = dict(DEFAULT_CONFIG)
    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        if is_known_log_level(env_level.upper()):
            config['log_level'] = env_level.upper()
        else:
            logger.warning("unknown %s=%r, using %s", LOG_LEVEL_ENV, env_level, config['log_level'])
    config.update(overrides)
    return config
