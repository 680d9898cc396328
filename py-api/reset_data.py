#!/usr/bin/env python3
"""Reset job, candidate and job-config documents to their empty defaults."""

import copy
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from app.database import (
    CANDIDATES_DOCUMENT,
    DEFAULT_DOCUMENTS,
    JOB_CONFIG_DOCUMENT,
    JOBS_DOCUMENT,
    JsonDocumentStore,
)
from app.config import PROJECT_ROOT

DOCUMENTS_TO_RESET = [JOBS_DOCUMENT, CANDIDATES_DOCUMENT, JOB_CONFIG_DOCUMENT]


def reset_all_documents(data_dir: Path) -> None:
    """Overwrite each resettable document; users.json is left alone."""
    store = JsonDocumentStore(data_dir)

    print(f"Clearing documents in {data_dir}...")
    for name in DOCUMENTS_TO_RESET:
        store.save(name, copy.deepcopy(DEFAULT_DOCUMENTS[name]))
        print(f"   reset {name}")

    print("\nReset complete. Users were not touched.")


if __name__ == "__main__":
    data_dir = Path(os.getenv("DATA_DIR", str(PROJECT_ROOT / "data")))
    print("Resetting recruitment data...")
    print("   This will DELETE ALL jobs, candidates and the application form.")

    confirm = input("\nAre you sure? Type 'yes' to continue: ")
    if confirm.lower() == 'yes':
        reset_all_documents(data_dir)
    else:
        print("Reset cancelled.")
