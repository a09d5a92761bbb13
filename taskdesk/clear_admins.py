"""Delete every admin account so the next startup recreates the initial admin.

Usage:
    python -m taskdesk.clear_admins
"""
import sys

from taskdesk import store
from taskdesk.database import SessionLocal
from taskdesk.services.accounts import clear_admins


def main() -> None:
    db = SessionLocal()
    try:
        deleted = clear_admins(db)
    except store.StoreError as exc:
        print("Failed to delete admins:", exc, file=sys.stderr)
        sys.exit(1)
    finally:
        db.close()
    print(f"Deleted {deleted} admin(s). Restart the server to recreate the initial admin.")


if __name__ == "__main__":
    main()
