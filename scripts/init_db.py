"""
Database initialization script.

Creates every table directly, without Alembic.  Handy for a local
SQLite database (``DATABASE_URI=sqlite:///pitchside.db``).

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from app.core.logging import setup_logging
from app.db.init_db import init_db

if __name__ == "__main__":
    setup_logging()
    try:
        init_db()
    except Exception as e:
        print(f"ERROR: Database initialization failed: {e}")
        sys.exit(1)
    print("SUCCESS: Database initialized!")
