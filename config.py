import os
from dataclasses import dataclass
from typing import List, Tuple

from dotenv import load_dotenv

load_dotenv()


def parse_seed_patrons(raw: str) -> List[Tuple[str, str]]:
    """Turn ``"1001:Mandeep,1002:Cameron"`` into ``[("1001", "Mandeep"), ...]``."""
    patrons: List[Tuple[str, str]] = []
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        if ":" not in entry:
            raise ValueError(f"Seed patron entry {entry!r} must look like '<id>:<name>'")
        user_id, name = entry.split(":", 1)
        patrons.append((user_id.strip(), name.strip()))
    return patrons


@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Library Management System")
    log_level: str = os.getenv("LIBRARY_LOG_LEVEL", "WARNING").upper()

    # Console output: plain | json | rich
    output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain").lower()

    # Collection settings
    array_capacity: int = int(os.getenv("LIBRARY_ARRAY_CAPACITY", "10"))
    seed_patrons: str = os.getenv("LIBRARY_SEED_PATRONS", "1001:Mandeep,1002:Cameron")

    def seed_patron_pairs(self) -> List[Tuple[str, str]]:
        return parse_seed_patrons(self.seed_patrons)


settings = Settings()
