from pathlib import Path

from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QListWidget,
	QStackedWidget, QListWidgetItem, QTableWidget, QTableWidgetItem, QSizePolicy, QComboBox,
	QDateEdit, QTimeEdit, QSpinBox, QDoubleSpinBox, QLineEdit, QPlainTextEdit, QFormLayout,
	QHeaderView, QGridLayout
)
from PySide6.QtCore import Qt, QDate, QTime, QPropertyAnimation, QEasingCurve
from PySide6.QtGui import QIcon, QPixmap, QPainter, QColor, QPen

from BackEnd.core import settings
from BackEnd.core.clock import fmt_minutes, local_today_str
from BackEnd.core.coerce import non_negative_int
from BackEnd.core.logs import setup_logger
from BackEnd.repos import course_repo, event_repo, study_log_repo, wellness_repo
from BackEnd.services import study_stats
from BackEnd.services.focus_timer import Phase, TimerMode
from BackEnd.services.timer_service import TimerService
from FrontEnd.components.footer_today import FooterToday
from FrontEnd.components.week_chart import WeekChart
from FrontEnd.styles.design_tokens import COLORS, PHASE_TITLES

STYLESHEET = Path(__file__).parent / "styles" / "planner.qss"
SIDEBAR_WIDTH = 220

logger = setup_logger(__name__)


def _card(title=None):
	"""Return (card widget, its vertical layout, meta label or None)."""
	card = QWidget()
	card.setObjectName("Card")
	layout = QVBoxLayout()
	layout.setContentsMargins(24, 20, 24, 20)
	layout.setSpacing(12)
	card.setLayout(layout)
	meta = None
	if title:
		title_lbl = QLabel(title)
		title_lbl.setObjectName("CardTitle")
		layout.addWidget(title_lbl)
		meta = QLabel("")
		meta.setObjectName("CardMeta")
		layout.addWidget(meta)
	return card, layout, meta


class MainWindow(QMainWindow):
	def __init__(self):
		super().__init__()
		self.setWindowTitle("Lock-In Planner")
		self.resize(1100, 720)

		try:
			with open(STYLESHEET, 'r', encoding='utf-8') as f:
				self.setStyleSheet(f.read())
		except OSError:
			logger.warning("Stylesheet %s not found; using default look", STYLESHEET)

		# --- Planner state ---
		self.selected_date = local_today_str()
		self.courses = course_repo.list_courses()
		self.ledger = study_log_repo.load_ledger()
		self.timer_service = TimerService(
			ledger=self.ledger,
			courses=self.courses,
			date_provider=lambda: self.selected_date,
			parent=self,
		)

		# --- Menu Button (Hamburger) ---
		self.menu_btn = QPushButton()
		self.menu_btn.setObjectName("MenuButton")
		self.menu_btn.setFixedSize(44, 44)
		self.menu_btn.setCursor(Qt.PointingHandCursor)
		self.menu_btn.setStyleSheet("margin: 0; padding: 0; border: none;")
		icon_pixmap = QPixmap(44, 44)
		icon_pixmap.fill(Qt.transparent)
		painter = QPainter(icon_pixmap)
		painter.setRenderHint(QPainter.Antialiasing)
		pen = QPen(QColor(COLORS['text_strong']))
		pen.setWidth(3)
		pen.setCapStyle(Qt.RoundCap)
		painter.setPen(pen)
		for y in [13, 22, 31]:
			painter.drawLine(9, y, 35, y)
		painter.end()
		self.menu_btn.setIcon(QIcon(icon_pixmap))
		self.menu_btn.setIconSize(icon_pixmap.size())

		# --- Sidebar ---
		self.sidebar = QListWidget()
		self.sidebar.setObjectName("Sidebar")
		self.sidebar.setSpacing(12)
		self.sidebar.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
		self.sidebar.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
		for name in ("Schedule", "Focus Timer", "Study Log", "Wellness & Courses"):
			self.sidebar.addItem(QListWidgetItem(name))
		self.sidebar.setCurrentRow(0)
		self.sidebar.setMaximumWidth(SIDEBAR_WIDTH)
		self._sidebar_open = True

		self.sidebar_anim = QPropertyAnimation(self.sidebar, b"maximumWidth")
		self.sidebar_anim.setDuration(220)
		self.sidebar_anim.setEasingCurve(QEasingCurve.InOutCubic)

		# --- Top bar: title + date picker ---
		topbar = QHBoxLayout()
		topbar.setContentsMargins(8, 8, 24, 8)
		topbar.addWidget(self.menu_btn)
		title = QLabel("Lock-In Planner")
		title.setObjectName("CardTitle")
		topbar.addWidget(title)
		topbar.addStretch()
		topbar.addWidget(QLabel("Date"))
		self.date_edit = QDateEdit(QDate.fromString(self.selected_date, "yyyy-MM-dd"))
		self.date_edit.setCalendarPopup(True)
		self.date_edit.setDisplayFormat("yyyy-MM-dd")
		topbar.addWidget(self.date_edit)
		topbar_frame = QWidget()
		topbar_frame.setLayout(topbar)

		# --- Pages ---
		self.stack = QStackedWidget()
		self.stack.addWidget(self._build_schedule_tab())
		self.stack.addWidget(self._build_timer_tab())
		self.stack.addWidget(self._build_study_tab())
		self.stack.addWidget(self._build_wellness_tab())

		self.footer_today = FooterToday()

		content_widget = QWidget()
		content_layout = QVBoxLayout()
		content_layout.setContentsMargins(0, 0, 0, 0)
		content_layout.setSpacing(0)
		content_layout.addWidget(topbar_frame)
		content_layout.addWidget(self.stack)
		content_layout.addWidget(self.footer_today)
		content_widget.setLayout(content_layout)

		main_layout = QHBoxLayout()
		main_layout.setContentsMargins(0, 0, 0, 0)
		main_layout.setSpacing(0)
		main_layout.addWidget(self.sidebar)
		main_layout.addWidget(content_widget)

		container = QWidget()
		container.setLayout(main_layout)
		self.setCentralWidget(container)

		self.sidebar.currentRowChanged.connect(self.stack.setCurrentIndex)
		self.menu_btn.clicked.connect(self._toggle_sidebar)
		self.date_edit.dateChanged.connect(self._on_date_changed)

		self.timer_service.tick.connect(self._on_tick)
		self.timer_service.phase_changed.connect(self._on_phase)
		self.timer_service.state_changed.connect(self._set_timer_buttons)
		self.timer_service.focus_completed.connect(self._on_focus_completed)

		self._refresh_all()

	def closeEvent(self, event):
		# Partial focus time is never credited, so just stop the clock and
		# make sure the last credit is on disk.
		try:
			self.timer_service.pause()
			study_log_repo.save_ledger(self.ledger)
		except Exception:
			logger.exception("Failed to save study log on close")
		super().closeEvent(event)

	# --- Sidebar -------------------------------------------------------

	def _toggle_sidebar(self):
		self.sidebar_anim.stop()
		self.sidebar_anim.setStartValue(self.sidebar.maximumWidth())
		self.sidebar_anim.setEndValue(0 if self._sidebar_open else SIDEBAR_WIDTH)
		self.sidebar_anim.start()
		self._sidebar_open = not self._sidebar_open

	# --- Schedule ------------------------------------------------------

	def _build_schedule_tab(self):
		w = QWidget()
		outer = QVBoxLayout()
		outer.setContentsMargins(32, 16, 32, 16)
		card, layout, self.schedule_meta = _card("Daily Schedule")

		form = QHBoxLayout()
		self.event_type_combo = QComboBox()
		self.event_type_combo.addItems(settings.EVENT_TYPES)
		self.event_title_input = QLineEdit()
		self.event_title_input.setPlaceholderText("Title (e.g., BIO lecture / Team practice)")
		form.addWidget(self.event_type_combo)
		form.addWidget(self.event_title_input, stretch=1)
		layout.addLayout(form)

		row = QHBoxLayout()
		row.addWidget(QLabel("Start"))
		self.event_time_edit = QTimeEdit(QTime.fromString(settings.DEFAULT_START_TIME, "HH:mm"))
		self.event_time_edit.setDisplayFormat("HH:mm")
		row.addWidget(self.event_time_edit)
		row.addWidget(QLabel("Duration (min)"))
		self.event_duration_spin = QSpinBox()
		self.event_duration_spin.setRange(0, 24 * 60)
		self.event_duration_spin.setValue(settings.DEFAULT_EVENT_MINUTES)
		row.addWidget(self.event_duration_spin)
		row.addStretch()
		add_btn = QPushButton("Add")
		add_btn.setObjectName("PrimaryBtn")
		row.addWidget(add_btn)
		layout.addLayout(row)

		self.event_notes_input = QLineEdit()
		self.event_notes_input.setPlaceholderText("Notes (travel, coach feedback, assignment due, etc.)")
		layout.addWidget(self.event_notes_input)

		# Quick-add presets
		chips = QHBoxLayout()
		chips.addWidget(QLabel("Quick add:"))
		for event_type in settings.EVENT_TYPES:
			chip = QPushButton(event_type)
			chip.setObjectName("ChipBtn")
			chip.clicked.connect(lambda _=False, t=event_type: self._apply_template(t))
			chips.addWidget(chip)
		chips.addStretch()
		layout.addLayout(chips)

		self.events_table = QTableWidget()
		self.events_table.setColumnCount(6)
		self.events_table.setHorizontalHeaderLabels(["Start", "Type", "Title", "Duration", "Notes", ""])
		self.events_table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
		self.events_table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
		self.events_table.horizontalHeader().setSectionResizeMode(2, QHeaderView.Stretch)
		self.events_table.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		layout.addWidget(self.events_table)

		outer.addWidget(card)
		w.setLayout(outer)

		add_btn.clicked.connect(self._add_event)
		self.event_title_input.returnPressed.connect(self._add_event)
		return w

	def _apply_template(self, event_type):
		title, minutes = event_repo.template(event_type)
		self.event_type_combo.setCurrentText(event_type)
		self.event_title_input.setText(title)
		self.event_duration_spin.setValue(minutes)

	def _add_event(self):
		try:
			event = event_repo.add_event(
				self.selected_date,
				type=self.event_type_combo.currentText(),
				title=self.event_title_input.text(),
				start_time=self.event_time_edit.time().toString("HH:mm"),
				duration_min=self.event_duration_spin.value(),
				notes=self.event_notes_input.text(),
			)
		except Exception:
			logger.exception("Failed to save event")
			return
		if event is None:
			return
		self.event_title_input.clear()
		self.event_notes_input.clear()
		self._refresh_schedule()

	def _delete_event(self, event_id):
		try:
			event_repo.delete_event(event_id)
		except Exception:
			logger.exception("Failed to delete event %s", event_id)
		self._refresh_schedule()

	def _refresh_schedule(self):
		events = event_repo.events_for_day(self.selected_date)
		total = event_repo.scheduled_minutes(self.selected_date)
		self.schedule_meta.setText(f"{len(events)} event(s) • {fmt_minutes(total)} scheduled")
		self.events_table.setRowCount(len(events))
		for row, evt in enumerate(events):
			self.events_table.setItem(row, 0, QTableWidgetItem(evt.get("startTime", "")))
			self.events_table.setItem(row, 1, QTableWidgetItem(evt.get("type", "")))
			self.events_table.setItem(row, 2, QTableWidgetItem(evt.get("title", "")))
			self.events_table.setItem(row, 3, QTableWidgetItem(fmt_minutes(non_negative_int(evt.get("durationMin")))))
			self.events_table.setItem(row, 4, QTableWidgetItem(evt.get("notes", "")))
			del_btn = QPushButton("Delete")
			del_btn.setObjectName("DangerBtn")
			del_btn.clicked.connect(lambda _=False, eid=evt["id"]: self._delete_event(eid))
			self.events_table.setCellWidget(row, 5, del_btn)

	# --- Focus timer ---------------------------------------------------

	def _build_timer_tab(self):
		w = QWidget()
		outer = QVBoxLayout()
		outer.setContentsMargins(32, 16, 32, 16)
		card, layout, meta = _card("Focus Timer")
		meta.setText("Logs focus time to your selected course")

		controls = QGridLayout()
		controls.addWidget(QLabel("Mode"), 0, 0)
		self.mode_combo = QComboBox()
		self.mode_combo.addItems([m.value for m in TimerMode])
		controls.addWidget(self.mode_combo, 0, 1)
		controls.addWidget(QLabel("Course"), 0, 2)
		self.course_combo = QComboBox()
		controls.addWidget(self.course_combo, 0, 3)

		state = self.timer_service.state
		self.focus_spin = self._minutes_spin(state.focus_minutes)
		self.break_spin = self._minutes_spin(state.break_minutes)
		self.custom_spin = self._minutes_spin(state.custom_minutes)
		self.focus_label = QLabel("Focus (min)")
		self.break_label = QLabel("Break (min)")
		self.custom_label = QLabel("Custom (min)")
		controls.addWidget(self.focus_label, 1, 0)
		controls.addWidget(self.focus_spin, 1, 1)
		controls.addWidget(self.break_label, 1, 2)
		controls.addWidget(self.break_spin, 1, 3)
		controls.addWidget(self.custom_label, 2, 0)
		controls.addWidget(self.custom_spin, 2, 1)
		layout.addLayout(controls)

		self.phase_label = QLabel(PHASE_TITLES['idle'])
		self.phase_label.setObjectName("PhaseLabel")
		self.phase_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		layout.addWidget(self.phase_label)

		self.timer_label = QLabel("00:00")
		self.timer_label.setObjectName("TimerLabel")
		self.timer_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		layout.addWidget(self.timer_label)

		btn_layout = QHBoxLayout()
		btn_layout.setSpacing(16)
		btn_layout.addStretch()
		self.start_btn = QPushButton("Start")
		self.start_btn.setObjectName("PrimaryBtn")
		self.pause_btn = QPushButton("Pause")
		self.pause_btn.setObjectName("GhostBtn")
		self.reset_btn = QPushButton("Reset")
		self.reset_btn.setObjectName("GhostBtn")
		for btn in (self.start_btn, self.pause_btn, self.reset_btn):
			btn.setMinimumHeight(44)
			btn_layout.addWidget(btn)
		btn_layout.addStretch()
		layout.addLayout(btn_layout)

		outer.addWidget(card)
		outer.addStretch()
		w.setLayout(outer)

		self.mode_combo.currentTextChanged.connect(self._on_mode_changed)
		self.course_combo.currentTextChanged.connect(self._on_course_selected)
		self.focus_spin.valueChanged.connect(self.timer_service.timer.set_focus_minutes)
		self.break_spin.valueChanged.connect(self.timer_service.timer.set_break_minutes)
		self.custom_spin.valueChanged.connect(self.timer_service.timer.set_custom_minutes)
		self.start_btn.clicked.connect(self.timer_service.start)
		self.pause_btn.clicked.connect(self.timer_service.pause)
		self.reset_btn.clicked.connect(self.timer_service.reset)

		self._show_mode_fields(TimerMode.POMODORO.value)
		self._set_timer_buttons('idle')
		return w

	def _minutes_spin(self, value):
		spin = QSpinBox()
		spin.setRange(1, 600)
		spin.setValue(value)
		return spin

	def _on_mode_changed(self, mode):
		# changing mode always drops the current countdown
		self.timer_service.set_mode(mode)
		self._show_mode_fields(mode)

	def _show_mode_fields(self, mode):
		custom = mode == TimerMode.CUSTOM.value
		for widget in (self.focus_label, self.focus_spin, self.break_label, self.break_spin):
			widget.setVisible(not custom)
		for widget in (self.custom_label, self.custom_spin):
			widget.setVisible(custom)

	def _on_course_selected(self, course):
		if course:
			self.timer_service.timer.set_active_course(course)

	def _on_tick(self, remaining):
		self.timer_label.setText(self.timer_service.timer.label())

	def _on_phase(self, phase):
		self.phase_label.setText(PHASE_TITLES.get(phase, phase))
		color = COLORS.get(f'phase_{phase}', COLORS['text_strong'])
		self.phase_label.setStyleSheet(f"color: {color};")

	def _set_timer_buttons(self, state):
		if state == "running":
			self.start_btn.setEnabled(False)
			self.start_btn.setText("Start")
			self.pause_btn.setEnabled(True)
			self.reset_btn.setEnabled(True)
		elif state == "paused":
			self.start_btn.setEnabled(True)
			self.start_btn.setText("Resume")
			self.pause_btn.setEnabled(False)
			self.reset_btn.setEnabled(True)
		else:
			self.start_btn.setEnabled(True)
			self.start_btn.setText("Start")
			self.pause_btn.setEnabled(False)
			self.reset_btn.setEnabled(self.timer_service.timer.phase != Phase.IDLE)

	def _on_focus_completed(self, course, day, minutes):
		self._refresh_study()

	def _refresh_course_combo(self):
		names = self.courses or [settings.FALLBACK_COURSE]
		self.timer_service.timer.sync_courses(self.courses)
		self.course_combo.blockSignals(True)
		self.course_combo.clear()
		self.course_combo.addItems(names)
		self.course_combo.setCurrentText(self.timer_service.state.active_course)
		self.course_combo.blockSignals(False)

	# --- Study log -----------------------------------------------------

	def _build_study_tab(self):
		w = QWidget()
		outer = QVBoxLayout()
		outer.setContentsMargins(32, 16, 32, 16)
		card, layout, self.study_meta = _card("Study Log")

		self.study_course_list = QListWidget()
		self.study_course_list.setMaximumHeight(180)
		layout.addWidget(self.study_course_list)

		self.week_chart = WeekChart()
		layout.addWidget(self.week_chart)

		outer.addWidget(card)
		w.setLayout(outer)
		return w

	def _refresh_study(self):
		day_total = study_stats.today_total(self.ledger, self.selected_date)
		week_total = study_stats.week_total(self.ledger, self.selected_date)
		self.study_meta.setText(
			f"Today: {fmt_minutes(day_total)} • This week: {fmt_minutes(week_total)} "
			f"({study_stats.week_label(self.selected_date)})"
		)
		self.study_course_list.clear()
		breakdown = study_stats.course_breakdown(self.ledger, self.selected_date)
		if not breakdown:
			self.study_course_list.addItem("No study logged yet. Start a focus session.")
		for course, minutes in breakdown:
			self.study_course_list.addItem(f"{course}  •  {fmt_minutes(minutes)}")
		try:
			self.week_chart.plot(study_stats.week_series(self.ledger, self.selected_date))
		except Exception:
			logger.exception("Failed to draw weekly chart")
		self.footer_today.set_totals(day_total, week_total)

	# --- Wellness & courses --------------------------------------------

	def _build_wellness_tab(self):
		w = QWidget()
		outer = QHBoxLayout()
		outer.setContentsMargins(32, 16, 32, 16)
		outer.setSpacing(24)

		card, layout, meta = _card("Wellness Check-In")
		meta.setText("Saved per date")
		form = QFormLayout()
		self.sleep_spin = QDoubleSpinBox()
		self.sleep_spin.setRange(0, 24)
		self.sleep_spin.setSingleStep(0.5)
		self.soreness_spin = QSpinBox()
		self.stress_spin = QSpinBox()
		self.energy_spin = QSpinBox()
		low, high = settings.WELLNESS_SCALE
		for spin in (self.soreness_spin, self.stress_spin, self.energy_spin):
			spin.setRange(low, high)
		self.wellness_notes = QPlainTextEdit()
		self.wellness_notes.setPlaceholderText("How do you feel? Any pain, fatigue, stress triggers?")
		form.addRow("Sleep (hrs)", self.sleep_spin)
		form.addRow("Soreness (1-10)", self.soreness_spin)
		form.addRow("Stress (1-10)", self.stress_spin)
		form.addRow("Energy (1-10)", self.energy_spin)
		form.addRow("Notes", self.wellness_notes)
		layout.addLayout(form)
		outer.addWidget(card, stretch=1)

		c_card, c_layout, self.courses_meta = _card("Courses")
		add_row = QHBoxLayout()
		self.course_input = QLineEdit()
		self.course_input.setPlaceholderText("Add course (e.g., COM 215)")
		add_course_btn = QPushButton("Add")
		add_course_btn.setObjectName("PrimaryBtn")
		add_row.addWidget(self.course_input, stretch=1)
		add_row.addWidget(add_course_btn)
		c_layout.addLayout(add_row)
		self.courses_list = QListWidget()
		c_layout.addWidget(self.courses_list)
		remove_btn = QPushButton("Remove selected")
		remove_btn.setObjectName("DangerBtn")
		c_layout.addWidget(remove_btn, alignment=Qt.AlignmentFlag.AlignRight)
		outer.addWidget(c_card, stretch=1)

		w.setLayout(outer)

		self._loading_wellness = False
		for spin in (self.sleep_spin, self.soreness_spin, self.stress_spin, self.energy_spin):
			spin.valueChanged.connect(self._save_wellness)
		self.wellness_notes.textChanged.connect(self._save_wellness)
		add_course_btn.clicked.connect(self._add_course)
		self.course_input.returnPressed.connect(self._add_course)
		remove_btn.clicked.connect(self._remove_selected_course)
		return w

	def _load_wellness(self):
		record = wellness_repo.get_wellness(self.selected_date)
		self._loading_wellness = True
		try:
			self.sleep_spin.setValue(float(record["sleepHours"]))
			self.soreness_spin.setValue(record["soreness"])
			self.stress_spin.setValue(record["stress"])
			self.energy_spin.setValue(record["energy"])
			self.wellness_notes.setPlainText(record["notes"])
		finally:
			self._loading_wellness = False

	def _save_wellness(self, *_):
		if self._loading_wellness:
			return
		record = {
			"sleepHours": self.sleep_spin.value(),
			"soreness": self.soreness_spin.value(),
			"stress": self.stress_spin.value(),
			"energy": self.energy_spin.value(),
			"notes": self.wellness_notes.toPlainText(),
		}
		try:
			wellness_repo.save_wellness(self.selected_date, record)
		except Exception:
			logger.exception("Failed to save wellness for %s", self.selected_date)

	def _add_course(self):
		try:
			self.courses = course_repo.add_course(self.course_input.text())
		except Exception:
			logger.exception("Failed to add course")
			return
		self.course_input.clear()
		self._refresh_courses()

	def _remove_selected_course(self):
		item = self.courses_list.currentItem()
		if item is None:
			return
		try:
			self.courses = course_repo.remove_course(item.text(), ledger=self.ledger)
		except Exception:
			logger.exception("Failed to remove course %s", item.text())
			return
		self._refresh_courses()
		self._refresh_study()

	def _refresh_courses(self):
		self.courses_list.clear()
		self.courses_list.addItems(self.courses)
		if self.courses:
			self.courses_meta.setText(f"{len(self.courses)} course(s)")
		else:
			self.courses_meta.setText("Add at least one course to track study sessions.")
		self._refresh_course_combo()

	# --- Date ----------------------------------------------------------

	def _on_date_changed(self, qdate):
		self.selected_date = qdate.toString("yyyy-MM-dd")
		self._refresh_schedule()
		self._refresh_study()
		self._load_wellness()

	def _refresh_all(self):
		self._refresh_schedule()
		self._refresh_courses()
		self._refresh_study()
		self._load_wellness()
