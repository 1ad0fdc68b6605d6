#styles.py
# Theme colors
PRIMARY_COLOR = "#4CAF50"
PRIMARY_COLOR_LIGHT = "#81c784"

TEXT_COLOR = "#212121"
WHITE_COLOR = "#FFFFFF"

# "+" button in the header
ADD_BUTTON_STYLE = f"""
    QPushButton {{
        background-color: {PRIMARY_COLOR};
        color: {WHITE_COLOR};
        border: none;
        border-radius: 4px;
        padding: 4px 12px;
        font-size: 20px;
    }}
    QPushButton:hover {{
        background-color: {PRIMARY_COLOR_LIGHT};
    }}
    QPushButton:pressed {{
        background-color: {PRIMARY_COLOR};
    }}
"""

LINE_EDIT_STYLE = """
    QLineEdit {
        border: 1px solid #ddd;
        border-radius: 4px;
        background-color: #e5e5e5;
        padding: 4px;
        font-size: 18px;
    }
    QLineEdit:focus {
        border: 1px solid #444;
    }
"""

LIST_STYLE = f"""
    QListWidget {{
        border: none;
        color: {TEXT_COLOR};
    }}
    QListWidget::item {{
        border-bottom: 1px solid #e0e0e0;
        padding: 10px 6px;
    }}
"""
