import os
from dotenv import load_dotenv

from app.db.storage import Storage, MemStorage
from app.db.seed import seed_sample_data

load_dotenv()

SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "1") == "1"

def build_storage(seed: bool = SEED_SAMPLE_DATA) -> MemStorage:
    """Construye el store del proceso. El seed termina antes de devolverlo."""
    storage = MemStorage()
    if seed:
        seed_sample_data(storage)
    return storage

__all__ = ["Storage", "MemStorage", "build_storage", "seed_sample_data"]
