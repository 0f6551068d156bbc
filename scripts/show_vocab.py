"""Print one vocab entry and its audit history.

Usage:

  python scripts/show_vocab.py 29919
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from verdure_admin.db.session import SessionLocal  # noqa: E402
from verdure_admin.repositories import SqlAuditRepository, SqlVocabRepository  # noqa: E402
from verdure_admin.services.audit import AuditService  # noqa: E402
from verdure_admin.services.vocab import VocabService  # noqa: E402
from verdure_admin.utils.exceptions import NotFoundError  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Show a vocab entry with its audit trail")
    parser.add_argument("vocab_id", type=int, help="Vocab identifier")
    parser.add_argument("--history", type=int, default=20, help="Number of audit entries to show")
    args = parser.parse_args()

    db = SessionLocal()
    try:
        audit_service = AuditService(SqlAuditRepository(db))
        service = VocabService(SqlVocabRepository(db), audit_service)
        try:
            vocab = service.find_vocab_by_id(args.vocab_id)
        except NotFoundError as exc:
            raise SystemExit(exc.message) from exc

        print(vocab.to_json())
        for audit in audit_service.find_audits("vocab", None, args.history, object_id=vocab.id):
            print(f"[{audit.created}] {audit.created_by}: {audit.comments} {audit.diff}")
    finally:
        db.close()


if __name__ == "__main__":  # pragma: no cover - CLI execution
    main()
