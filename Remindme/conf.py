# -*- coding: utf-8 -*-
"""
应用程序配置。

AppConfig: 保存提醒文件路径、调度间隔、窗口参数等静态配置，
可从 data/remindme_conf.json 加载，文件不存在时使用默认值。
"""

import json
import logging
from typing import Optional

from Remindme.utils import read_json

log = logging.getLogger(__name__)

CONF_PATH = 'data/remindme_conf.json'
REMINDER_FILE = 'reminders.txt'
WINDOW_TITLE = 'Elderly Reminder System'


class AppConfig:
    """
    提醒程序的静态配置。
    """

    def __init__(self):
        """初始化一个使用默认值的 AppConfig 实例。"""
        self.reminder_file: str = REMINDER_FILE
        self.tick_seconds: float = 1.0
        self.window_title: str = WINDOW_TITLE
        self.window_width: int = 600
        self.window_height: int = 450
        # 为 True 时每天重新提醒；默认每次运行只提醒一次
        self.refire_daily: bool = False

    @classmethod
    def init_config(cls, conf_path: Optional[str] = CONF_PATH) -> 'AppConfig':
        """
        加载配置文件并返回 AppConfig 实例。

        配置文件不存在时静默使用默认值；文件损坏或字段不合法时记录警告并回退到默认值。
        """
        config_instance = cls()
        if not conf_path:
            return config_instance

        try:
            conf_params = read_json(conf_path)
        except FileNotFoundError:
            log.info("未找到配置文件 '%s'，使用默认配置。", conf_path)
            return config_instance
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            log.warning("无法读取配置文件 '%s': %s。使用默认配置。", conf_path, e)
            return config_instance

        if not isinstance(conf_params, dict):
            log.warning("配置文件 '%s' 的顶层不是对象，使用默认配置。", conf_path)
            return config_instance

        reminder_file = conf_params.get('reminder_file', config_instance.reminder_file)
        if isinstance(reminder_file, str) and reminder_file:
            config_instance.reminder_file = reminder_file
        else:
            log.warning("配置项 'reminder_file' 无效: %r", reminder_file)

        window_title = conf_params.get('window_title', config_instance.window_title)
        if isinstance(window_title, str):
            config_instance.window_title = window_title

        config_instance.tick_seconds = _positive(conf_params, 'tick_seconds', config_instance.tick_seconds, float)
        config_instance.window_width = _positive(conf_params, 'window_width', config_instance.window_width, int)
        config_instance.window_height = _positive(conf_params, 'window_height', config_instance.window_height, int)
        refire_daily = conf_params.get('refire_daily', config_instance.refire_daily)
        if isinstance(refire_daily, bool):
            config_instance.refire_daily = refire_daily
        else:
            log.warning("配置项 'refire_daily' 必须为 true 或 false: %r，使用默认值 %s。",
                        refire_daily, config_instance.refire_daily)

        return config_instance


def _positive(conf_params: dict, key: str, default, cast):
    """读取一个正数配置项，不合法时返回默认值。"""
    raw = conf_params.get(key, default)
    try:
        value = cast(raw)
    except (TypeError, ValueError):
        log.warning("配置项 '%s' 无法转换为数字: %r，使用默认值 %s。", key, raw, default)
        return default
    if value <= 0:
        log.warning("配置项 '%s' 必须为正数: %r，使用默认值 %s。", key, raw, default)
        return default
    return value
