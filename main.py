# main.py – program entry
import argparse
import sys

from PySide6.QtWidgets import QApplication

from repositories.word_repository import WordRepository
from ui.font import normal_font
from ui.word_list import WordListWindow


def main() -> None:
    parser = argparse.ArgumentParser(description="GuardaPalabras: a persisted word list")
    parser.add_argument(
        "--db",
        default=None,
        help="SQLite file to use (default: data/guardapalabras.db next to the program)"
    )
    args, qt_args = parser.parse_known_args()

    app = QApplication([sys.argv[0], *qt_args])
    app.setFont(normal_font)
    win = WordListWindow(WordRepository(args.db))
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
