# -*- coding: utf-8 -*-
"""
提醒调度。

ReminderScheduler 每秒检查一次当前时间 (精确到分钟)，
时间与提醒记录相符且本次运行中尚未提醒过时，依次发出蜂鸣、日志和弹窗信号。
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional, Set

from apscheduler.executors.debug import DebugExecutor
from apscheduler.schedulers.qt import QtScheduler
from apscheduler.triggers import interval

from PyQt5.QtCore import QObject, pyqtSignal

from Remindme.records import ReminderRecord
from Remindme.store import ReminderStore

log = logging.getLogger(__name__)

TICK_JOB_ID = 'reminder_tick'
ALERT_TITLE = 'Reminder Alert'
ALERT_HEADER = "It's Time!"
LOG_TEMPLATE = '⏰ Reminder Triggered: {message} at {now}\n'


class ReminderScheduler(QObject):
    """
    提醒调度器，在 Qt 事件循环中周期性执行 tick()。

    状态只有两种：停止 (初始) 和运行中。start() 会清空已提醒集合，
    stop() 取消后续的 tick。已提醒集合在一次运行中不会被清空，
    因此默认情况下每条提醒在一次运行中最多提醒一次。

    信号:
        sig_beep_sche: 请求发出提示音。
        sig_log_sche (str): 请求在日志区追加一行文本。
        sig_alert_sche (str, str, str): 请求显示非阻塞弹窗 (标题, 抬头, 正文)。
    """

    # --- 信号定义 ---
    sig_beep_sche = pyqtSignal(name='sig_beep_sche')
    sig_log_sche = pyqtSignal(str, name='sig_log_sche')
    sig_alert_sche = pyqtSignal(str, str, str, name='sig_alert_sche')

    def __init__(self,
                 store: ReminderStore,
                 clock: Callable[[], datetime] = datetime.now,
                 tick_seconds: float = 1.0,
                 refire_daily: bool = False,
                 parent: Optional[QObject] = None) -> None:
        """
        初始化调度器。调度器创建后处于停止状态，需要调用 start()。
        """
        super(ReminderScheduler, self).__init__(parent)
        self.store = store
        self.clock = clock
        self.tick_seconds = tick_seconds
        self.refire_daily = refire_daily

        self.fired: Set[str] = set()  # 本次运行中已提醒过的记录 (序列化文本)
        self._last_minute: Optional[str] = None
        self.scheduler: Optional[QtScheduler] = None

    @property
    def is_running(self) -> bool:
        return self.scheduler is not None

    def start(self) -> None:
        """
        从停止状态进入运行状态：清空已提醒集合并开始每秒 tick。
        已在运行时不做任何事。
        """
        if self.is_running:
            return

        self.fired.clear()
        self._last_minute = None

        # DebugExecutor 直接在 Qt 事件循环中执行任务，不使用线程池
        self.scheduler = QtScheduler(executors={'default': DebugExecutor()})
        self.scheduler.add_job(self.tick,
                               interval.IntervalTrigger(seconds=self.tick_seconds),
                               id=TICK_JOB_ID,
                               max_instances=1,
                               coalesce=True)
        self.scheduler.start()
        log.info("提醒调度器已启动，间隔 %s 秒。", self.tick_seconds)

    def stop(self) -> None:
        """
        停止调度器，取消后续的 tick。未运行时不做任何事。
        """
        if not self.is_running:
            return

        scheduler, self.scheduler = self.scheduler, None
        # 先移除任务，关闭后残留的定时器唤醒也不会再执行 tick
        scheduler.remove_all_jobs()
        scheduler.shutdown(wait=False)
        log.info("提醒调度器已停止。")

    def tick(self, now: Optional[datetime] = None) -> List[ReminderRecord]:
        """
        执行一次检查，返回本次触发的提醒记录 (按插入顺序)。

        遍历的是 store 的快照，本次 tick 期间新增的提醒最早在下一次 tick 触发。
        单条提醒处理出错只记录日志，不影响其余提醒。
        """
        now_text = (now or self.clock()).strftime('%H:%M')
        if self.refire_daily and now_text != self._last_minute:
            self._reset_fired_for(now_text)
        self._last_minute = now_text

        triggered = []
        for record in self.store.snapshot():
            try:
                if record.time_text != now_text or record.line in self.fired:
                    continue
                self.fired.add(record.line)
                triggered.append(record)
                self._fire(record, now_text)
            except Exception as e:
                log.exception("处理提醒 '%s' 时发生错误: %s", record, e)

        return triggered

    def _fire(self, record: ReminderRecord, now_text: str) -> None:
        log.info("触发提醒: %s", record.line)
        self.sig_beep_sche.emit()
        self.sig_log_sche.emit(LOG_TEMPLATE.format(message=record.message, now=now_text))
        self.sig_alert_sche.emit(ALERT_TITLE, ALERT_HEADER, record.message)

    def _reset_fired_for(self, now_text: str) -> None:
        """
        分钟切换时，移除与新分钟不同的已提醒记录，使它们在之后的日子里可以再次提醒。
        """
        self.fired = {line for line in self.fired if line.startswith(now_text)}
