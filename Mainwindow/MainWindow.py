import logging
from typing import Optional

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QListView, QMainWindow, QTabWidget, QVBoxLayout, QWidget

from Mainwindow.extra_windows import AddReminderPage, LogsPage, ReminderAlert, ReminderListModel, beep
from Remindme.conf import AppConfig
from Remindme.modules import ReminderScheduler
from Remindme.store import ReminderStore

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):

	def __init__(self, app, store: ReminderStore, config: Optional[AppConfig] = None, scheduler: Optional[ReminderScheduler] = None):

		super().__init__()
		self.app = app
		self.config = config or AppConfig()
		self.store = store

		self.setWindowTitle(self.config.window_title)
		self.resize(self.config.window_width, self.config.window_height)

		# 调度器（由外部传入时直接使用）
		if scheduler is None:
			scheduler = ReminderScheduler(
				store,
				tick_seconds=self.config.tick_seconds,
				refire_daily=self.config.refire_daily,
				parent=self,
			)
		self.scheduler = scheduler
		self.alert = ReminderAlert(self)

		# 主窗口中心部件为标签页
		self.tabs = QTabWidget()
		self.setCentralWidget(self.tabs)

		# 设置各标签页的内容，注意初始化顺序
		self.setup_add_page()
		self.setup_view_page()
		self.setup_logs_page()

		self.connect_scheduler()

	def setup_add_page(self):
		self.add_page = AddReminderPage(self.store)
		self.tabs.addTab(self.add_page, "Add Reminder")

	def setup_view_page(self):
		view_widget = QWidget()
		layout = QVBoxLayout(view_widget)
		layout.setContentsMargins(10, 10, 10, 10)

		# 列表只读，跟随 store 自动刷新
		self.list_model = ReminderListModel(self.store, self)
		self.list_view = QListView()
		self.list_view.setModel(self.list_model)
		self.list_view.setEditTriggers(QListView.NoEditTriggers)
		layout.addWidget(self.list_view)

		self.tabs.addTab(view_widget, "View Reminders")

	def setup_logs_page(self):
		self.logs_page = LogsPage()
		self.tabs.addTab(self.logs_page, "Logs")

	def connect_scheduler(self):
		signals_to_connect = {
			'sig_beep_sche': beep,
			'sig_log_sche': self.logs_page.append,
			'sig_alert_sche': self.alert.show,
		}
		for signal_name, slot_func in signals_to_connect.items():
			getattr(self.scheduler, signal_name).connect(slot_func)

	def showEvent(self, event):
		super().showEvent(event)
		self.scheduler.start()

	def closeEvent(self, event):
		# 关闭窗口时停止调度器，并关闭所有未处理的提醒弹窗
		try:
			self.scheduler.stop()
			self.alert.close_all()
		except Exception as e:
			log.error("关闭主窗口时发生错误: %s", e)
		super().closeEvent(event)

	def bring_to_front(self):
		self.show()
		self.setWindowState(self.windowState() & ~Qt.WindowMinimized | Qt.WindowActive)
		self.raise_()
		self.activateWindow()
