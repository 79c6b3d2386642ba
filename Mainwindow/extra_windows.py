# -*- coding: utf-8 -*-
"""
主窗口使用的各个页面和弹窗。

AddReminderPage: "Add Reminder" 页，输入提醒内容和时间并保存。
ReminderListModel: 跟随 ReminderStore 变化的列表模型 ("View Reminders" 页)。
LogsPage: "Logs" 页，只读的提醒日志。
ReminderAlert: 管理非阻塞的提醒弹窗。
"""

import logging
from typing import List, Optional

from PyQt5.QtCore import QObject, QStringListModel, Qt
from PyQt5.QtGui import QTextCursor
from PyQt5.QtWidgets import (
    QApplication,
    QGridLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from Remindme.actions import SubmitStatus, submit
from Remindme.store import ReminderStore

log = logging.getLogger(__name__)


class AddReminderPage(QWidget):
    """
    新增提醒的表单页。

    布局为两列网格：提醒内容、时间 (HH:mm)、保存按钮和状态文本。
    输入通过校验 (保存成功或提醒已存在) 后清空两个输入框；
    校验失败时保留输入，方便用户修改。
    """

    def __init__(self, store: ReminderStore, parent=None):
        super(AddReminderPage, self).__init__(parent)
        self.store = store
        self._init_ui()
        self._connect_signals()

    def _init_ui(self):
        """创建并布局页面中的 UI 元素。"""
        grid = QGridLayout()
        grid.setContentsMargins(10, 10, 10, 10)
        grid.setVerticalSpacing(10)
        grid.setHorizontalSpacing(10)

        self.label_msg = QLabel('Message:')
        self.msg_field = QLineEdit()
        self.label_time = QLabel('Time (HH:mm):')
        self.time_field = QLineEdit()
        self.time_field.setPlaceholderText('09:00')

        self.button_save = QPushButton('Save Reminder')
        self.status_label = QLabel()

        grid.addWidget(self.label_msg, 0, 0)
        grid.addWidget(self.msg_field, 0, 1)
        grid.addWidget(self.label_time, 1, 0)
        grid.addWidget(self.time_field, 1, 1)
        grid.addWidget(self.button_save, 2, 1, alignment=Qt.AlignLeft)
        grid.addWidget(self.status_label, 3, 1)
        grid.setRowStretch(4, 1)

        self.setLayout(grid)

    def _connect_signals(self):
        self.button_save.clicked.connect(self.save)
        # 在时间输入框按回车同样保存
        self.time_field.returnPressed.connect(self.save)

    def save(self) -> SubmitStatus:
        """读取输入框内容并提交，返回提交结果。"""
        status = submit(self.store, self.msg_field.text(), self.time_field.text())
        self.status_label.setText(status.text)
        if status.accepted:
            self.msg_field.clear()
            self.time_field.clear()
        return status


class ReminderListModel(QStringListModel):
    """
    提醒列表模型，内容始终与 ReminderStore 的记录顺序一致。
    """

    def __init__(self, store: ReminderStore, parent: Optional[QObject] = None):
        super(ReminderListModel, self).__init__(parent)
        self.store = store
        self.store.sig_changed.connect(self.refresh)
        self.refresh()

    def refresh(self):
        self.setStringList(self.store.lines())


class LogsPage(QWidget):
    """显示已触发提醒的只读日志页。"""

    def __init__(self, parent=None):
        super(LogsPage, self).__init__(parent)
        vbox = QVBoxLayout()
        vbox.setContentsMargins(10, 10, 10, 10)

        self.logs_area = QPlainTextEdit()
        self.logs_area.setReadOnly(True)
        self.logs_area.setPlaceholderText('Logs will appear here...')
        vbox.addWidget(self.logs_area)
        self.setLayout(vbox)

    def append(self, line: str):
        """在末尾追加文本 (line 自带换行符)。"""
        self.logs_area.moveCursor(QTextCursor.End)
        self.logs_area.insertPlainText(line)
        self.logs_area.ensureCursorVisible()

    def text(self) -> str:
        return self.logs_area.toPlainText()


class ReminderAlert(QObject):
    """
    显示提醒弹窗。

    弹窗使用 show() 而不是 exec_()，不会阻塞调度器的 tick。
    打开中的弹窗保存在 self.open_alerts 中，关闭后移除。
    """

    def __init__(self, parent_widget: Optional[QWidget] = None):
        super(ReminderAlert, self).__init__(parent_widget)
        self.parent_widget = parent_widget
        self.open_alerts: List[QMessageBox] = []

    def show(self, title: str, header: str, body: str) -> Optional[QMessageBox]:
        try:
            box = QMessageBox(self.parent_widget)
            box.setIcon(QMessageBox.Information)
            box.setWindowTitle(title)
            box.setText(header)
            box.setInformativeText(body)
            box.setStandardButtons(QMessageBox.Ok)
            box.setWindowModality(Qt.NonModal)
            box.setAttribute(Qt.WA_DeleteOnClose)
            box.finished.connect(lambda _result, b=box: self._forget(b))
            self.open_alerts.append(box)
            box.show()
            return box
        except Exception as e:
            # 弹窗失败不影响调度器，提醒依然视为已触发
            log.error("显示提醒弹窗 '%s' 失败: %s", body, e)
            return None

    def close_all(self):
        for box in list(self.open_alerts):
            box.close()
        self.open_alerts.clear()

    def _forget(self, box: QMessageBox):
        if box in self.open_alerts:
            self.open_alerts.remove(box)


def beep():
    """发出系统提示音。"""
    QApplication.beep()
