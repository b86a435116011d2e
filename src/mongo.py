# src/mongo.py
import logging
import os
import sys
from typing import List, Optional

from src.mongo_client import connect, get_db
from src.notes_db import add_note, format_note, list_notes, make_note

logger = logging.getLogger(__name__)

USAGE = (
    "Please provide the password as an argument: "
    "python -m src.mongo <password> (or: notes-mongo <password>)"
)
ADD_COMMAND = "add"


def setup_logging() -> int:
    level = logging.DEBUG if os.getenv("NOTES_MONGO_DEBUG") else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return level


def main(argv: Optional[List[str]] = None) -> int:
    """
    python -m src.mongo <password>                             -> list all notes
    python -m src.mongo <password> add <content> [important]   -> save one note
    Anything else after the password is ignored and the notes are listed.
    """
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 1:
        print(USAGE)
        return 1

    setup_logging()

    password = args[0]

    # Bad input is rejected before any network activity
    note = None
    if len(args) >= 3 and args[1] == ADD_COMMAND:
        important = args[3] if len(args) >= 4 else False
        note = make_note(args[2], important=important)

    # Connection / auth errors are left to propagate
    client = connect(password)
    print("connected")
    db = get_db(client)

    if note is not None:
        note_id = add_note(db, note["content"], important=note["important"], date=note["date"])
        logger.debug("Inserted note %s", note_id)
        print("note saved!")
        client.close()
        return 0

    for doc in list_notes(db):
        print(format_note(doc))

    client.close()
    logger.debug("Connection closed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
