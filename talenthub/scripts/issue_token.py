"""
Mint a development bearer token for an existing profile.
Usage: python -m talenthub.scripts.issue_token user@example.com
"""
import sys

from talenthub.config import settings
from talenthub.core.security import create_access_token
from talenthub.database import SessionLocal, ensure_tables_exist
from talenthub.repos.profile_repo import get_by_email


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m talenthub.scripts.issue_token <email>")
        sys.exit(1)
    if (settings.app_env or "").lower() in {"production", "prod"}:
        print("Refusing to mint tokens in production; tokens come from the identity provider.")
        sys.exit(1)
    email = sys.argv[1].strip()
    ensure_tables_exist()
    db = SessionLocal()
    try:
        profile = get_by_email(db, email)
        if not profile:
            print(f"Profile not found: {email}")
            sys.exit(1)
        print(f"{profile.role} {profile.id}")
        print(create_access_token(profile.id))
    finally:
        db.close()


if __name__ == "__main__":
    main()
