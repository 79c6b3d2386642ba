# -*- coding: utf-8 -*-
"""
界面提交提醒的入口。

submit() 校验用户输入的提醒内容和时间，通过校验后写入 ReminderStore，
返回的 SubmitStatus 带有直接显示给用户的状态文本。
"""

import enum

from Remindme.records import ReminderRecord, parse_time
from Remindme.store import AddResult, ReminderStore


class SubmitStatus(enum.Enum):
    OK = "✅ Reminder saved!"
    EMPTY_MESSAGE = "⚠ Please enter the Reminder Message."
    EMPTY_TIME = "⚠ Please enter the Reminder Time."
    BAD_TIME_FORMAT = "⚠ Invalid time format. Use HH:mm."
    DUPLICATE = "⚠ Reminder already exists."

    @property
    def text(self) -> str:
        return self.value

    @property
    def accepted(self) -> bool:
        """输入通过校验 (无论是否重复)。"""
        return self in (SubmitStatus.OK, SubmitStatus.DUPLICATE)


def submit(store: ReminderStore, message_raw: str, time_raw: str) -> SubmitStatus:
    """
    校验并提交一条提醒。

    两个输入都会先去掉首尾空白；校验顺序为：内容为空、时间为空、时间格式。
    提醒内容中的换行符会被替换为空格，保证一条记录只占文件中的一行。
    """
    message = ' '.join((message_raw or '').strip().splitlines())
    time_text = (time_raw or '').strip()

    if not message:
        return SubmitStatus.EMPTY_MESSAGE
    if not time_text:
        return SubmitStatus.EMPTY_TIME

    minute_of_day = parse_time(time_text)
    if minute_of_day is None:
        return SubmitStatus.BAD_TIME_FORMAT

    result = store.add(ReminderRecord(minute_of_day, message))
    if result is AddResult.DUPLICATE:
        return SubmitStatus.DUPLICATE
    return SubmitStatus.OK
