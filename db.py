# db.py
import os
import sys
import sqlite3

TABLE_NAME = "Lista"
WORD_COLUMN = "palabra"


class StorageError(Exception):
    """Raised when the word store cannot be read or written."""


def get_db_path():
    """
    Get the default SQLite file path.

    Returns:
        str: <program dir>/data/guardapalabras.db
    """
    base_dir = os.path.dirname(os.path.abspath(sys.argv[0]))
    directory = os.path.join(base_dir, "data")
    os.makedirs(directory, exist_ok=True)
    return os.path.join(directory, "guardapalabras.db")


def init_db(db_path):
    """
    Create the word table if it does not exist yet.

    Args:
        db_path (str): database file path
    """
    conn = sqlite3.connect(db_path)
    try:
        conn.execute(f'''
        CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            {WORD_COLUMN} TEXT NOT NULL
        )
        ''')
        conn.commit()
    finally:
        conn.close()


def get_connection(db_path):
    """
    Open a connection, making sure the schema exists first.

    Args:
        db_path (str): database file path

    Returns:
        sqlite3.Connection
    """
    init_db(db_path)
    return sqlite3.connect(db_path)


def load_words(db_path):
    """
    Load every saved word in insertion order.

    Returns:
        list[tuple[int, str]]: (id, palabra) rows
    """
    try:
        conn = get_connection(db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(f"SELECT id, {WORD_COLUMN} FROM {TABLE_NAME} ORDER BY id")
            return cursor.fetchall()
        finally:
            conn.close()
    except (sqlite3.Error, OSError, UnicodeError) as e:
        raise StorageError(f"Error loading words from database: {e}") from e


def save_word(db_path, text):
    """
    Insert one word and commit.

    Args:
        db_path (str): database file path
        text (str): the word exactly as typed

    Returns:
        int: id assigned by the store
    """
    try:
        conn = get_connection(db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"INSERT INTO {TABLE_NAME} ({WORD_COLUMN}) VALUES (?)",
                (text,),
            )
            conn.commit()
            return cursor.lastrowid
        finally:
            conn.close()
    except (sqlite3.Error, OSError, UnicodeError) as e:
        raise StorageError(f"Error saving word to database: {e}") from e
