# -*- coding: utf-8 -*-
"""
提醒记录的存储与持久化。

ReminderStore 按插入顺序保存提醒记录，保证不出现重复的记录，
每次新增后把全部记录整体重写到文本文件 (每行一条)。
"""

import enum
import logging
from typing import Iterator, List, Optional, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from Remindme.conf import REMINDER_FILE
from Remindme.records import ReminderRecord, parse_record
from Remindme.utils import ensure_parent_dir

log = logging.getLogger(__name__)


class AddResult(enum.Enum):
    ADDED = 'added'
    DUPLICATE = 'duplicate'


class ReminderStore(QObject):
    """
    有序、去重的提醒记录集合。

    内存中的记录是权威数据，文件只是它的投影：写文件失败时只记录日志，
    不回滚内存状态。

    信号:
        sig_changed: 记录集合发生变化 (加载完成或新增成功) 后发出。
    """

    sig_changed = pyqtSignal(name='sig_changed')

    def __init__(self, file_path: str = REMINDER_FILE, parent: Optional[QObject] = None) -> None:
        super(ReminderStore, self).__init__(parent)
        self.file_path: str = file_path
        self._records: List[ReminderRecord] = []
        self._lines: set = set()  # 已有记录的序列化文本，用于去重

    def load(self, path: Optional[str] = None) -> int:
        """
        从文件读取提醒记录并追加到内存中，返回本次新增的记录数。

        文件不存在或无法打开时视为空文件；读取中途出错时保留已读取的部分。
        空行、格式错误的行和无法按 UTF-8 解码的行会被跳过，不影响其它行。
        文件开头的 BOM 会被忽略。
        """
        path = path or self.file_path
        loaded = 0
        try:
            # 按字节逐行读取，每行单独解码
            with open(path, 'rb') as f:
                for line_no, raw in enumerate(f, start=1):
                    try:
                        line = raw.decode('utf-8-sig' if line_no == 1 else 'UTF-8')
                    except UnicodeDecodeError as e:
                        log.warning("跳过无法解码的行 %s:%d: %s", path, line_no, e)
                        continue
                    record = parse_record(line)
                    if record is None:
                        if line.strip():
                            log.debug("跳过格式错误的行 %s:%d: %r", path, line_no, line)
                        continue
                    if self._append(record):
                        loaded += 1
        except FileNotFoundError:
            log.info("提醒文件 '%s' 不存在，从空列表开始。", path)
        except OSError as e:
            log.warning("读取提醒文件 '%s' 时出错: %s。保留已读取的 %d 条记录。", path, e, loaded)

        log.info("从 '%s' 加载了 %d 条提醒。", path, loaded)
        self.sig_changed.emit()
        return loaded

    def add(self, record: ReminderRecord) -> AddResult:
        """
        新增一条提醒。已存在相同记录时返回 DUPLICATE 且不做任何修改，
        否则追加到末尾、重写文件并通知观察者。
        """
        if not self._append(record):
            log.info("提醒已存在: %s", record.line)
            return AddResult.DUPLICATE

        self.persist()
        log.info("新增提醒: %s", record.line)
        self.sig_changed.emit()
        return AddResult.ADDED

    def persist(self) -> bool:
        """
        按当前顺序整体重写提醒文件。写入失败时记录错误并返回 False。
        """
        try:
            ensure_parent_dir(self.file_path)
            with open(self.file_path, 'w', encoding='UTF-8') as f:
                for record in self._records:
                    f.write(record.line + '\n')
        except OSError as e:
            log.error("无法将提醒保存到 '%s': %s", self.file_path, e)
            return False
        log.debug("已保存 %d 条提醒到 '%s'", len(self._records), self.file_path)
        return True

    def snapshot(self) -> Tuple[ReminderRecord, ...]:
        """返回当前记录的不可变副本，遍历期间不受后续新增影响。"""
        return tuple(self._records)

    def lines(self) -> List[str]:
        """按顺序返回所有记录的序列化文本。"""
        return [record.line for record in self._records]

    def _append(self, record: ReminderRecord) -> bool:
        line = record.line
        if line in self._lines:
            return False
        self._lines.add(line)
        self._records.append(record)
        return True

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ReminderRecord]:
        return iter(self.snapshot())

    def __contains__(self, record) -> bool:
        if isinstance(record, ReminderRecord):
            return record.line in self._lines
        return record in self._lines
