"""Bulk-load vocab entries from a CSV file.

Each row goes through the same service as the API, so every insert is
validated, checked for duplicates and audited.

Usage:

  python scripts/import_vocab_csv.py --csv words.csv --learning-code es --known-code en

Expected columns: learning_lang, first_lang and optionally alternatives, skill,
infinitive, pos, hint.
"""
from __future__ import annotations

import argparse
import csv
import sys
from pathlib import Path

from loguru import logger

sys.path.append(str(Path(__file__).resolve().parent.parent))

from verdure_admin.db.session import SessionLocal  # noqa: E402
from verdure_admin.repositories import SqlAuditRepository, SqlVocabRepository  # noqa: E402
from verdure_admin.schemas import VocabCreate  # noqa: E402
from verdure_admin.services.audit import AuditService  # noqa: E402
from verdure_admin.services.vocab import VocabService  # noqa: E402
from verdure_admin.utils.exceptions import AuditWriteError, ConflictError, ValidationError  # noqa: E402

OPTIONAL_COLUMNS = ("alternatives", "skill", "infinitive", "pos", "hint")


def row_to_payload(row: dict[str, str], *, learning_code: str, known_code: str) -> VocabCreate:
    """Map one CSV row onto a vocab creation payload."""

    learning_lang = (row.get("learning_lang") or "").strip()
    return VocabCreate(
        learning_lang=learning_lang,
        first_lang=(row.get("first_lang") or "").strip(),
        num_learning_words=max(len(learning_lang.split()), 1),
        known_lang_code=known_code,
        learning_lang_code=learning_code,
        **{column: (row.get(column) or "").strip() for column in OPTIONAL_COLUMNS},
    )


def load_vocab_from_csv(csv_path: Path, *, learning_code: str, known_code: str, actor: str) -> tuple[int, int]:
    """Create an entry per row; return the number loaded and skipped."""

    db = SessionLocal()
    service = VocabService(SqlVocabRepository(db), AuditService(SqlAuditRepository(db)))
    loaded = skipped = 0

    try:
        with open(csv_path, "r", encoding="utf-8") as file:
            for line_no, row in enumerate(csv.DictReader(file), start=2):
                payload = row_to_payload(row, learning_code=learning_code, known_code=known_code)
                try:
                    service.create_vocab(payload, comments="imported from csv", created_by=actor)
                except (ValidationError, ConflictError) as exc:
                    logger.warning("Skipping row", line=line_no, reason=exc.message)
                    skipped += 1
                    continue
                except AuditWriteError as exc:
                    logger.error("Row saved without audit", line=line_no, reason=exc.message)
                loaded += 1
                if loaded % 100 == 0:
                    logger.info(f"Loaded {loaded} entries...")
    finally:
        db.close()

    return loaded, skipped


def main() -> None:
    parser = argparse.ArgumentParser(description="Import vocab entries from CSV")
    parser.add_argument("--csv", required=True, help="Path to the CSV file")
    parser.add_argument("--learning-code", default="es", help="Learning language code")
    parser.add_argument("--known-code", default="en", help="Known language code")
    parser.add_argument("--actor", default="import", help="Name recorded on audit entries")
    args = parser.parse_args()

    csv_path = Path(args.csv)
    if not csv_path.exists():
        raise SystemExit(f"CSV file not found: {csv_path}")

    loaded, skipped = load_vocab_from_csv(
        csv_path, learning_code=args.learning_code, known_code=args.known_code, actor=args.actor
    )
    print(f"Loaded {loaded} entries, skipped {skipped}")


if __name__ == "__main__":  # pragma: no cover - CLI execution
    main()
