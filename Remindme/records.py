# -*- coding: utf-8 -*-
"""
提醒记录的数据结构与文本编解码。

一条提醒记录在文件中占一行，格式为 `HH:MM - 提醒内容`。
ReminderRecord: 不可变的提醒记录 (每日分钟数, 提醒内容)。
parse_time / format_time: `HH:MM` 与每日分钟数之间的转换。
parse_record / format_record: 单行文本与 ReminderRecord 之间的转换。
"""

import re
from dataclasses import dataclass
from typing import Optional

SEPARATOR = ' - '
MINUTES_PER_DAY = 24 * 60

# 只接受 ASCII 数字，两位小时 + 两位分钟
_TIME_PATTERN = re.compile(r'([01][0-9]|2[0-3]):([0-5][0-9])')
_LINE_BREAKS = ('\r', '\n')


@dataclass(frozen=True)
class ReminderRecord:
    """
    一条每日提醒：在 minute_of_day 对应的时刻提醒 message。
    """
    minute_of_day: int
    message: str

    def __post_init__(self):
        if not isinstance(self.minute_of_day, int) or not 0 <= self.minute_of_day < MINUTES_PER_DAY:
            raise ValueError(f"minute_of_day 超出范围: {self.minute_of_day!r}")
        if not self.message:
            raise ValueError("提醒内容不能为空")
        if any(ch in self.message for ch in _LINE_BREAKS):
            raise ValueError("提醒内容不能包含换行符")

    @classmethod
    def at(cls, hour: int, minute: int, message: str) -> 'ReminderRecord':
        """按小时、分钟创建记录。"""
        return cls(hour * 60 + minute, message)

    @property
    def time_text(self) -> str:
        return format_time(self.minute_of_day)

    @property
    def line(self) -> str:
        """序列化后的单行文本 (不含换行符)。"""
        return format_record(self)

    def __str__(self) -> str:
        return self.line


def parse_time(text: str) -> Optional[int]:
    """
    解析 `HH:MM` 字符串，返回每日分钟数；格式不合法时返回 None。

    不做任何 strip，前后带空格的输入同样视为不合法。
    """
    if not isinstance(text, str):
        return None
    match = _TIME_PATTERN.fullmatch(text)
    if match is None:
        return None
    return int(match.group(1)) * 60 + int(match.group(2))


def format_time(minute_of_day: int) -> str:
    hours, minutes = divmod(minute_of_day, 60)
    return f'{hours:02d}:{minutes:02d}'


def parse_record(line: str) -> Optional[ReminderRecord]:
    """
    将文件中的一行解析为 ReminderRecord。

    只按第一个 ' - ' 分割，因此提醒内容本身可以包含 ' - '。
    空行、缺少分隔符、时间不合法或内容为空的行返回 None (由调用方跳过)。
    """
    line = line.rstrip('\r\n')
    parts = line.split(SEPARATOR, 1)
    if len(parts) < 2:
        return None

    minute_of_day = parse_time(parts[0])
    if minute_of_day is None:
        return None

    message = parts[1]
    if not message or any(ch in message for ch in _LINE_BREAKS):
        return None
    return ReminderRecord(minute_of_day, message)


def format_record(record: ReminderRecord) -> str:
    return f'{format_time(record.minute_of_day)}{SEPARATOR}{record.message}'
