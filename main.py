# Main.py
""""" Entry point for the Shunting Yard Calculator.

   Responsibilities:
   - Detect run mode (script vs PyInstaller.exe)
   - Verify required files exist in development mode
   - Load configuration and set up logging
   - Evaluate expressions given on the command line, or start the Qt GUI

   Usage:
       python main.py                      # GUI
       python main.py "2 + 3 * 4" "5 / 0"  # print one result per expression
       python main.py -                    # read expressions from stdin
       python main.py -d 4 "1 / 3"         # round to 4 decimal places

"""""
import argparse
import logging
import sys
from pathlib import Path

from Calculator import config_manager as config_manager, MathEngine as MathEngine

logger = logging.getLogger(__name__)

# Resolve project root depending on run mode (Script or .exe)

if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent


def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.

      In production (.exe) the files are embedded by the bundler, so this check is skipped.
    """

    modules_dir = PROJECT_ROOT / "Calculator"

    REQUIRED = [
        modules_dir / "UI.py",
        modules_dir / "MathEngine.py",
        modules_dir / "Tokenizer.py",
        modules_dir / "PostfixConverter.py",
        modules_dir / "Evaluator.py",
        modules_dir / "config_manager.py",
        PROJECT_ROOT / "config.json",
        PROJECT_ROOT / "ui_strings.json",
    ]

    missing_files = [file_path.name for file_path in REQUIRED if not file_path.exists()]

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def configure_logging(settings):
    level = logging.DEBUG if settings.get("debug") else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser():
    ap = argparse.ArgumentParser(
        prog="shunting-calc",
        description="Evaluate arithmetic expressions, or start the calculator window without arguments.",
    )
    ap.add_argument("expressions", nargs="*",
                    help="expressions to evaluate; '-' reads one per line from stdin")
    ap.add_argument("-d", "--decimal-places", type=int, default=None,
                    help="override decimal_places from config.json")
    return ap


def main(argv=None):

    """
    Load configuration, then hand over to the command line runner or the GUI.
    - Keep this thin: no business logic here.
    """

    args = build_parser().parse_args(argv)

    all_settings = config_manager.load_setting_value("all")
    if args.decimal_places is not None:
        all_settings["decimal_places"] = args.decimal_places
    configure_logging(all_settings)
    logger.debug("Config loaded: %s", all_settings)

    if args.expressions == ["-"]:
        MathEngine.repl(all_settings)
        return 0

    if args.expressions:
        failures = MathEngine.run_batch(args.expressions, all_settings)
        return 1 if failures else 0

    # Delegate control to the UI layer; the UI owns the event loop.
    from Calculator import UI as UI
    UI.main()
    return 0


if __name__ == "__main__":
    # Two explicit modes aid debugging & packaging clarity.
    is_running_as_exe = getattr(sys, 'frozen', False)

    if not is_running_as_exe:
        check_files_exist()
    sys.exit(main())
