import csv
import io

from tourney.core.database import Store

BOM = "\ufeff"
HEADER = "ID,Nom,Jeu,Email,Téléphone,Date,Statut\n"
COLUMNS = ("id", "name", "game", "email", "phone", "created_at", "status")


def participants_csv(store: Store) -> str:
    """
    Every participant, newest first, as spreadsheet-friendly CSV.

    The BOM makes Excel read the file as UTF-8. Data fields are always quoted
    with inner quotes doubled; the header line is written bare.
    """
    rows = store.execute(
        f"SELECT {', '.join(COLUMNS)} FROM participants ORDER BY created_at DESC, id DESC"
    )
    buffer = io.StringIO()
    buffer.write(BOM)
    buffer.write(HEADER)
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        writer.writerow(["" if row[column] is None else row[column] for column in COLUMNS])
    return buffer.getvalue()
