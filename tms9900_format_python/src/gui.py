import sys
from PySide6.QtCore import Qt, QObject, Signal, QThread, QMutex, QSettings
from PySide6.QtGui import QAction, QIcon, QFont, QTextCursor, QTextOption
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QTextEdit, QVBoxLayout, QSplitter,
    QGroupBox, QDockWidget, QFileDialog, QToolBar, QDialog, QFormLayout,
    QSpinBox, QCheckBox, QDialogButtonBox
)

import common
import state
import docformat

# Column spin boxes go up to this value
MAX_COLUMN = 200

class SettingsStore:
    """The format options as persistent QSettings, under the tms9900
    group. get() gives state.get_format_config the dict-like interface
    it reads from.
    """

    def __init__(self, qsettings=None):
        self.qs = qsettings if qsettings is not None else QSettings(common.APP_NAME, common.APP_NAME)

    def _key(self, key):
        return f"{common.SETTINGS_SECTION}/{key}"

    def get(self, key, default=None):
        return self.qs.value(self._key(key), default)

    def load_config(self):
        return state.get_format_config(self)

    def save_config(self, config):
        for key, value in state.config_to_settings(config).items():
            self.qs.setValue(self._key(key), value)
        self.qs.sync()

class FormatWorker(QObject):
    formatting_finished = Signal(object, bool) # edits, cancelled

    def __init__(self, lines, config, start=0, end=None):
        super().__init__()
        self.lines = lines
        self.config = config
        self.start = start
        self.end = end
        self._stop_requested = False
        self._mutex = QMutex()

    def is_cancelled(self):
        self._mutex.lock()
        try:
            return self._stop_requested
        finally:
            self._mutex.unlock()

    def run(self):
        common.mode.devlog(f"FormatWorker.run: lines {self.start}..{self.end}")
        edits = docformat.format_lines(self.lines, self.config, self.start, self.end, self.is_cancelled)
        self.formatting_finished.emit(edits, self.is_cancelled())

    def stop(self):
        self._mutex.lock()
        try:
            self._stop_requested = True
        finally:
            self._mutex.unlock()

class SettingsDialog(QDialog):
    def __init__(self, config, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Format Settings")
        layout = QFormLayout(self)

        self.label_column = self._column_box(config.label_column)
        self.instruction_column = self._column_box(config.instruction_column)
        self.operand_column = self._column_box(config.operand_column)
        self.comment_column = self._column_box(config.comment_column)
        layout.addRow("Label column", self.label_column)
        layout.addRow("Instruction column", self.instruction_column)
        layout.addRow("Operand column", self.operand_column)
        layout.addRow("Comment column", self.comment_column)

        self.uppercase_instructions = QCheckBox("Uppercase instructions")
        self.uppercase_instructions.setChecked(config.uppercase_instructions)
        self.uppercase_directives = QCheckBox("Uppercase directives")
        self.uppercase_directives.setChecked(config.uppercase_directives)
        self.space_after_comma = QCheckBox("Space after comma")
        self.space_after_comma.setChecked(config.space_after_comma)
        layout.addRow(self.uppercase_instructions)
        layout.addRow(self.uppercase_directives)
        layout.addRow(self.space_after_comma)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addRow(buttons)

    def _column_box(self, value):
        box = QSpinBox()
        box.setRange(0, MAX_COLUMN)
        box.setValue(value)
        return box

    def config(self):
        return state.FormatConfig(
            label_column=self.label_column.value(),
            instruction_column=self.instruction_column.value(),
            operand_column=self.operand_column.value(),
            comment_column=self.comment_column.value(),
            uppercase_instructions=self.uppercase_instructions.isChecked(),
            uppercase_directives=self.uppercase_directives.isChecked(),
            space_after_comma=self.space_after_comma.isChecked(),
        )

class MainWindow(QMainWindow):
    def __init__(self, settings=None):
        super().__init__()
        self.setWindowTitle("TMS9900 Formatter")
        self.setGeometry(100, 100, 1000, 800)

        self.settings = settings if settings is not None else SettingsStore()

        main_splitter = QSplitter(Qt.Orientation.Vertical)
        self.setCentralWidget(main_splitter)

        # Code Editor (top pane)
        self.code_editor = QTextEdit()
        self.code_editor.setAcceptRichText(False)
        self.code_editor.setWordWrapMode(QTextOption.NoWrap)
        self.code_editor.setFont(QFont("Courier New", 10))
        self.code_dock = QDockWidget("Code Editor", self)
        self.code_dock.setWidget(self.code_editor)
        main_splitter.addWidget(self.code_dock)

        # I/O Log (bottom pane)
        io_group = QGroupBox("I/O Log")
        io_layout = QVBoxLayout(io_group)
        self.io_log = QTextEdit()
        self.io_log.setReadOnly(True)
        io_layout.addWidget(self.io_log)
        main_splitter.addWidget(io_group)

        main_splitter.setStretchFactor(0, 4)
        main_splitter.setStretchFactor(1, 1)

        # Create Toolbar
        self.toolbar = QToolBar("Main Toolbar")
        self.addToolBar(self.toolbar)

        # File Menu Actions
        file_menu = self.menuBar().addMenu("&File")
        open_action = QAction(QIcon.fromTheme("document-open"), "Open...", self)
        open_action.triggered.connect(self.open_file)
        file_menu.addAction(open_action)

        save_action = QAction(QIcon.fromTheme("document-save"), "Save", self)
        save_action.triggered.connect(self.save_file)
        file_menu.addAction(save_action)

        save_as_action = QAction(QIcon.fromTheme("document-save-as"), "Save As...", self)
        save_as_action.triggered.connect(self.save_file_as)
        file_menu.addAction(save_as_action)

        # Format Menu Actions
        format_menu = self.menuBar().addMenu("F&ormat")
        self.format_document_action = QAction(QIcon.fromTheme("format-justify-left"), "Format Document", self)
        self.format_document_action.setShortcut("Shift+Alt+F")
        self.format_document_action.triggered.connect(self.format_document)
        format_menu.addAction(self.format_document_action)

        self.format_selection_action = QAction("Format Selection", self)
        self.format_selection_action.triggered.connect(self.format_selection)
        format_menu.addAction(self.format_selection_action)

        self.cancel_action = QAction(QIcon.fromTheme("process-stop"), "Cancel Formatting", self)
        self.cancel_action.triggered.connect(self.cancel_formatting)
        self.cancel_action.setEnabled(False) # Initially disabled
        format_menu.addAction(self.cancel_action)

        format_menu.addSeparator()
        settings_action = QAction(QIcon.fromTheme("preferences-system"), "Format Settings...", self)
        settings_action.triggered.connect(self.edit_settings)
        format_menu.addAction(settings_action)

        self.toolbar.addAction(open_action)
        self.toolbar.addAction(save_action)
        self.toolbar.addAction(self.format_document_action)
        self.toolbar.addAction(self.cancel_action)

        self.current_file = None # To keep track of the currently open file
        self.format_thread = None
        self.format_worker = None
        self.format_revision = None # Document revision the running pass started from

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format_document(self):
        self._start_formatting(0, None)

    def format_selection(self):
        cursor = self.code_editor.textCursor()
        doc = self.code_editor.document()
        first = doc.findBlock(cursor.selectionStart()).blockNumber()
        last = doc.findBlock(cursor.selectionEnd()).blockNumber()
        self._start_formatting(first, last)

    def _start_formatting(self, start, end):
        if self.format_thread is not None:
            self.io_log.append("Formatting already in progress.")
            return

        # One config snapshot for the whole pass
        config = self.settings.load_config()
        lines = docformat.split_lines(self.code_editor.toPlainText())
        self.format_revision = self.code_editor.document().revision()

        self.format_thread = QThread()
        self.format_worker = FormatWorker(lines, config, start, end)
        self.format_worker.moveToThread(self.format_thread)
        self.format_thread.started.connect(self.format_worker.run)
        self.format_worker.formatting_finished.connect(self.on_formatting_finished)
        self.format_thread.start()

        self.format_document_action.setEnabled(False)
        self.format_selection_action.setEnabled(False)
        self.cancel_action.setEnabled(True)

    def cancel_formatting(self):
        if self.format_worker:
            self.format_worker.stop()

    def on_formatting_finished(self, edits, cancelled):
        self.format_thread.quit()
        self.format_thread.wait()
        self.format_thread = None
        self.format_worker = None

        self.format_document_action.setEnabled(True)
        self.format_selection_action.setEnabled(True)
        self.cancel_action.setEnabled(False)

        if self.code_editor.document().revision() != self.format_revision:
            self.io_log.append("Document changed during formatting, edits discarded.")
            return

        self.apply_edits(edits)
        if cancelled:
            self.io_log.append(f"Formatting cancelled, {len(edits)} lines changed so far.")
        else:
            self.io_log.append(f"Formatting done, {len(edits)} lines changed.")

    def apply_edits(self, edits):
        doc = self.code_editor.document()
        cursor = QTextCursor(doc)
        # One undo step for the whole pass
        cursor.beginEditBlock()
        try:
            for e in edits:
                block = doc.findBlockByNumber(e.line)
                cursor.setPosition(block.position())
                cursor.movePosition(QTextCursor.MoveOperation.EndOfBlock, QTextCursor.MoveMode.KeepAnchor)
                cursor.insertText(e.text)
        finally:
            cursor.endEditBlock()

    def edit_settings(self):
        dialog = SettingsDialog(self.settings.load_config(), self)
        if dialog.exec() == QDialog.DialogCode.Accepted:
            self.settings.save_config(dialog.config())
            self.io_log.append("Format settings saved.")

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def load_file(self, file_name):
        try:
            with open(file_name, 'r') as f:
                self.code_editor.setPlainText(f.read())
            self.current_file = file_name
            self.setWindowTitle(f"TMS9900 Formatter - {file_name}")
            self.io_log.append(f"File loaded: {self.current_file}")
        except OSError as e:
            self.io_log.append(f"Error opening file: {e}")

    def open_file(self):
        file_name, _ = QFileDialog.getOpenFileName(self, "Open Assembly File", ".", "Assembly Files (*.a99 *.asm);;All Files (*)")
        if file_name:
            self.load_file(file_name)

    def save_file(self):
        if self.current_file:
            try:
                with open(self.current_file, 'w') as f:
                    f.write(self.code_editor.toPlainText())
                self.io_log.append(f"File saved: {self.current_file}")
            except OSError as e:
                self.io_log.append(f"Error saving file: {e}")
        else:
            self.save_file_as()

    def save_file_as(self):
        file_name, _ = QFileDialog.getSaveFileName(self, "Save Assembly File As", ".", "Assembly Files (*.a99 *.asm);;All Files (*)")
        if file_name:
            try:
                with open(file_name, 'w') as f:
                    f.write(self.code_editor.toPlainText())
                self.current_file = file_name
                self.setWindowTitle(f"TMS9900 Formatter - {file_name}")
                self.io_log.append(f"File saved as: {self.current_file}")
            except OSError as e:
                self.io_log.append(f"Error saving file: {e}")

    def closeEvent(self, event):
        if self.format_worker:
            self.format_worker.stop()
        if self.format_thread:
            self.format_thread.quit()
            self.format_thread.wait()
        super().closeEvent(event)

def start_gui(file_path=None):
    app = QApplication.instance() or QApplication(sys.argv)
    app.setStyleSheet("""
    QMainWindow {
        background-color: #1a1a1a;
        color: #e0e0e0;
    }
    QTextEdit {
        background-color: #2a2a2a;
        color: #00ff00; /* Green text for code */
        border: 1px solid #007acc;
        padding: 5px;
        font-family: "Consolas", "Monaco", "Courier New", monospace; /* Columns only line up in a monospaced font */
        font-size: 10pt;
    }
    QGroupBox {
        background-color: #1a1a1a;
        color: #e0e0e0;
        border: 1px solid #007acc;
        border-radius: 4px;
        margin-top: 10px;
    }
    QGroupBox::title {
        subcontrol-origin: margin;
        subcontrol-position: top left;
        padding: 0 3px;
        color: #00ff00;
        font-weight: bold;
    }
    QDockWidget::title {
        background-color: #2a2a2a;
        padding: 5px;
        text-align: center;
        color: #e0e0e0;
        font-weight: bold;
    }
    QMenuBar, QMenu, QToolBar {
        background-color: #2a2a2a;
        color: #e0e0e0;
    }
    QMenuBar::item:selected, QMenu::item:selected {
        background-color: #007acc;
    }
    """)
    window = MainWindow()
    if file_path:
        window.load_file(file_path)
    window.show()
    common.mode.devlog(f"{common.APP_NAME} editor started")
    return app.exec()
