# UI.py
""""PySide6 user interface for the calculator.

Structure
---------
- Calculator UI: main window with display and button grid
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, display, layout and buttons for the supported grammar
  (digits, '.', '+ - * /', parentheses)
- Handle button and keyboard input and maintain undo/redo
- Dispatch the expression to MathEngine in a worker thread
- Render results and show MathEngine errors as dialogs
- Clipboard integration (pyperclip) and optional auto-evaluate after paste


Responsibilities (Settings)
---------------------------

- Load Current Settings and Settings Descriptions via config_manager
- Validate user input (e.g. minimum decimal places)
- Save and apply theme changes immediately
"""""

import logging
import sys
import threading
from pathlib import Path

import pyperclip
from PySide6 import QtWidgets, QtGui
from PySide6.QtCore import Qt, QObject, Signal

from . import error as E
from . import config_manager as config_manager
from . import MathEngine as MathEngine

logger = logging.getLogger(__name__)

# Resolve project root depending on run mode (Script or .exe)
if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent.parent

ENTER = '⏎'
COPY_PASTE = '📋'
UNDO = '↶'
REDO = '↷'
SETTINGS = '⚙'

# Keys whose text is appended to the display as-is
INPUT_KEYS = set("0123456789.+-*/()")

DARK_MESSAGE_BOX_STYLE = """
    QMessageBox {background-color: #121212; color: white;}
    QLabel {color: white;}
    QPushButton {background-color: #2e2e2e; color: white; border: 1px solid #444444; padding: 5px 15px;}
    QPushButton:hover {background-color: #444444;}
"""


class Worker(QObject):
    """""

    Runs one calculation in a separate thread and emits job_finished back to the
    Calculator UI: (rendered result or MathError, raw value or None, equation,
    rounding flag).

    """""

    job_finished = Signal(object, object, str, bool)

    def __init__(self, problem, decimal_places):
        super().__init__()
        self.data = problem
        self.decimal_places = decimal_places

    def run_calc(self):
        try:
            value = MathEngine.calculate(self.data)
            result, rounding = MathEngine.cleanup(value, self.decimal_places)
            self.job_finished.emit(result, value, self.data, rounding)

        except E.MathError as e:
            # Known, handled error (e.g. "Division by zero")
            self.job_finished.emit(e, None, self.data, False)

        except Exception as e:
            # Bug in the engine, reported like any other error
            logger.exception("Unexpected crash while calculating %r", self.data)
            critical_error = E.MathError(
                message=f"Unexpected crash: {e}",
                code="9999",
                equation=self.data
            )
            self.job_finished.emit(critical_error, None, self.data, False)


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window. Booleans become checkboxes, integers become input fields;
    the descriptions come from ui_strings.json.

    """""

    settings_saved = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}

        # --- 1. Window Setup ---
        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(300, 200)

        main_layout = QtWidgets.QVBoxLayout(self)

        # --- 2. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        # --- 3. Build Widgets ---
        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            elif isinstance(value, int):
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                label = QtWidgets.QLabel(description + " (min. 2):")
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))  # Show current value as placeholder
                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

        # --- 4. OK / Cancel Buttons ---
        button_box = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(self.save_settings)
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self):
        new_settings = dict(self.setting_value_list)

        for key_value, widget in self.widgets.items():
            if isinstance(widget, QtWidgets.QCheckBox):
                new_settings[key_value] = widget.isChecked()

            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value_str = widget.text().strip()
                if new_value_str == "":
                    continue  # blank keeps the old value

                try:
                    new_value_int = int(new_value_str)
                    if key_value == "decimal_places" and new_value_int < 2:
                        raise ValueError(f"'{new_value_int}' is too small. Minimum is 2.")
                except ValueError as e:
                    QtWidgets.QMessageBox.critical(self, "Invalid Input:",
                                                   f"Error in input for '{key_value}':\n\n{e}\n\nPlease correct your input.")
                    return  # Stop saving!
                new_settings[key_value] = new_value_int

        saved_settings = config_manager.save_setting(new_settings)

        if saved_settings != {}:
            self.setting_value_list = saved_settings
            self.settings_saved.emit()
            self.update_darkmode()
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           f"Error 4501: {E.ERROR_MESSAGES['4501']}{config_manager.config_json}")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"]:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QLineEdit {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorWindow(QtWidgets.QWidget):
    MAX_FONT_SIZE = 46
    MIN_FONT_SIZE = 10

    def __init__(self):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")

        # --- 2. Instance State Variables ---
        self.display_text = "0"  # The expression being built
        self.calculator_result = "0"  # Last result as input text, for continuing
        self.shift_is_held = False
        self.thread_active = False
        self.showing_result = False  # Display holds a result, next input starts over
        # Snapshots: (shown text, display_text, calculator_result or None)
        self.undo = [("0", "0", None)]
        self.redo = []
        self.worker = None

        # --- 3. Window Setup ---
        icon_path = PROJECT_ROOT / "icons" / "icon.png"
        if icon_path.exists():
            self.setWindowIcon(QtGui.QIcon(str(icon_path)))
        self.button_objects = {}
        self.setWindowTitle("Calculator")
        self.setMinimumSize(360, 480)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        expanding_policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding
        )

        # --- 4. Display Setup ---
        self.display = QtWidgets.QLineEdit("0")
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.display.setReadOnly(True)
        font = self.display.font()
        font.setPointSize(self.MAX_FONT_SIZE)
        self.display.setFont(font)
        self.display.setSizePolicy(expanding_policy)
        main_v_layout.addWidget(self.display, 1)

        # --- 5. Button Grid Setup ---
        button_container = QtWidgets.QWidget()
        main_v_layout.addWidget(button_container, 3)
        button_grid = QtWidgets.QGridLayout(button_container)
        button_grid.setSpacing(0)
        button_grid.setContentsMargins(0, 0, 0, 0)

        # (text, row, column)
        self.buttons = [
            (SETTINGS, 0, 0), (COPY_PASTE, 0, 1), (UNDO, 0, 2), (REDO, 0, 3), ('<', 0, 4),
            ('(', 1, 0), ('7', 1, 1), ('8', 1, 2), ('9', 1, 3), ('/', 1, 4),
            (')', 2, 0), ('4', 2, 1), ('5', 2, 2), ('6', 2, 3), ('*', 2, 4),
            ('C', 3, 0), ('1', 3, 1), ('2', 3, 2), ('3', 3, 3), ('-', 3, 4),
            ('.', 4, 0), ('0', 4, 1), ('00', 4, 2), (ENTER, 4, 3), ('+', 4, 4),
        ]

        for text, row, col in self.buttons:
            button = QtWidgets.QPushButton(text)
            button.setSizePolicy(expanding_policy)
            if text == SETTINGS:
                button.clicked.connect(self.open_settings)
            else:
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))
            button_grid.addWidget(button, row, col)
            self.button_objects[text] = button

        self.update_darkmode()

    # --- Key Event Handlers ---
    def keyPressEvent(self, event):
        key = event.key()
        if key == Qt.Key.Key_Shift:
            self.shift_is_held = True
        elif key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self.handle_button_press(ENTER)
        elif key == Qt.Key.Key_Backspace:
            self.handle_button_press('<')
        elif key == Qt.Key.Key_Escape:
            self.handle_button_press('C')
        elif event.text() in INPUT_KEYS:
            self.handle_button_press(event.text())
        else:
            super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = False
        super().keyReleaseEvent(event)

    # --- Button Logic ---
    def handle_button_press(self, value):
        if value == ENTER:
            self.start_calculation()
            return

        if value == COPY_PASTE:
            if self.shift_is_held:
                pyperclip.copy(self.display.text())
                return
            self.paste()
            return

        if value == UNDO:
            if len(self.undo) > 1:
                self.redo.append(self.undo.pop())
                self.restore(self.undo[-1])
            return

        if value == REDO:
            if self.redo:
                self.undo.append(self.redo.pop())
                self.restore(self.undo[-1])
            return

        if value == 'C':
            self.display_text = "0"
        elif value == '<':
            self.display_text = self.display_text[:-1] or "0"
        else:
            if self.showing_result:
                # Continue from the last result unless a new number starts
                self.display_text = "0" if value[0] in "0123456789.(" else self.calculator_result
            if self.display_text == "0" and value != ".":
                self.display_text = ""
            self.display_text += value

        self.showing_result = False
        self.push_undo(self.display_text)
        self.set_display(self.display_text)

    def paste(self):
        clipboard_text = pyperclip.paste().strip()
        if not clipboard_text:
            return

        if self.display_text == "0" or self.showing_result:
            self.display_text = clipboard_text
        else:
            self.display_text += clipboard_text
        self.showing_result = False
        self.push_undo(self.display_text)
        self.set_display(self.display_text)

        if self.setting_value_list["after_paste_enter"]:
            self.start_calculation()

    def push_undo(self, shown, result=None):
        snapshot = (shown, self.display_text, result)
        if snapshot != self.undo[-1]:
            self.undo.append(snapshot)
            self.redo.clear()

    def restore(self, snapshot):
        shown, self.display_text, result = snapshot
        self.showing_result = result is not None
        if self.showing_result:
            self.calculator_result = result
        self.set_display(shown)

    # --- Calculation ---
    def start_calculation(self):
        if self.thread_active:
            logger.warning("Error 4002: %s", E.ERROR_MESSAGES["4002"])
            return

        self.thread_active = True
        self.update_return_button()
        self.display.setText("...")
        QtWidgets.QApplication.processEvents()  # Force UI update *before* starting thread

        self.worker = Worker(self.display_text, self.setting_value_list["decimal_places"])
        self.worker.job_finished.connect(self.calc_result)
        threading.Thread(target=self.worker.run_calc, daemon=True).start()

    def calc_result(self, result, value, equation, rounding):
        self.thread_active = False
        self.update_return_button()

        if isinstance(result, E.MathError):
            error_box = QtWidgets.QMessageBox(self)
            error_box.setIcon(QtWidgets.QMessageBox.Critical)
            error_box.setWindowTitle("Calculation error")
            error_box.setText(MathEngine.describe_error(result))
            error_box.setInformativeText(f"Details: {result.message}\nEquation: {result.equation}")
            error_box.setStandardButtons(QtWidgets.QMessageBox.Ok)
            error_box.setStyleSheet(DARK_MESSAGE_BOX_STYLE if self.setting_value_list["darkmode"] else "")
            error_box.exec()
            self.set_display(equation)
            return

        # inf and nan cannot be typed back in, so continuing starts from scratch
        self.calculator_result = MathEngine.result_literal(value) or "0"
        self.showing_result = True
        final_display_text = MathEngine.compose_display(
            equation, result, rounding, self.setting_value_list["show_equation"])
        self.push_undo(final_display_text, self.calculator_result)
        self.set_display(final_display_text)

    # --- Display Helpers ---
    def set_display(self, text):
        self.display.setText(text)
        self.update_font_size_display()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        for button in self.button_objects.values():
            font = button.font()
            font.setPointSize(max(12, button.height() // 4))
            button.setFont(font)
        self.update_font_size_display()

    def update_font_size_display(self):
        # Largest point size at which the whole text fits into the display
        text = self.display.text()
        font = self.display.font()
        available_width = self.display.width() - 10

        size = self.MAX_FONT_SIZE
        font.setPointSize(size)
        while size > self.MIN_FONT_SIZE and QtGui.QFontMetrics(font).horizontalAdvance(text) > available_width:
            size -= 1
            font.setPointSize(size)
        self.display.setFont(font)

    def update_return_button(self):
        return_button = self.button_objects.get(ENTER)
        if not return_button:
            return

        if self.thread_active:
            return_button.setStyleSheet("background-color: #FF0000; color: white; font-weight: bold;")
            return_button.setText("X")
        else:
            return_button.setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")
            return_button.setText(ENTER)

    def update_darkmode(self):
        if self.setting_value_list["darkmode"]:
            button_style = "background-color: #121212; color: white; font-weight: bold;"
            self.setStyleSheet("background-color: #121212;")
            self.display.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
        else:
            button_style = "font-weight: normal;"
            self.setStyleSheet("")
            self.display.setStyleSheet("font-weight: bold;")

        for text, button in self.button_objects.items():
            if text != ENTER:
                button.setStyleSheet(button_style)
        self.update_return_button()

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()

        # Reload so changes (darkmode, decimal places) apply right away
        self.setting_value_list = config_manager.load_setting_value("all")
        self.update_darkmode()


def main():
    app = QtWidgets.QApplication(sys.argv)
    window = CalculatorWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
