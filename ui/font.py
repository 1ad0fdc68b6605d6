#font.py
from PySide6.QtGui import QFont

normal_font = QFont("Helvetica Neue, Arial, sans-serif", 12)

title_font = QFont("Helvetica Neue, Arial, sans-serif", 17)
title_font.setBold(True)

list_word_font = QFont("Georgia, Times New Roman, serif", 14)
