# Di dalam file: populate_db.py

import logging

import requests

from app.rules.loader import load_relative_catalog
from logging_utils import configure_logging

logger = logging.getLogger(__name__)

# URL endpoint API untuk membuat katalog kerabat
API_URL = "http://127.0.0.1:8000/relatives"


def populate_database(api_url: str = API_URL) -> int:
    """Kirim katalog kerabat ke API. Return jumlah baris yang berhasil ditambahkan."""
    logger.info("Seeding relative catalog into %s", api_url)
    added = 0
    for relative in load_relative_catalog():
        payload = relative.model_dump(mode="json")
        try:
            response = requests.post(api_url, json=payload, timeout=10)
        except requests.exceptions.ConnectionError as e:
            logger.error("Connection to the server failed, is uvicorn running? %s", e)
            break

        if response.status_code == 200:
            logger.info("Added: %s", payload["key"])
            added += 1
        elif response.status_code == 400:
            # 400 dipakai untuk data yang sudah ada
            logger.info("'%s' already present, skipped", payload["key"])
        else:
            logger.error("Failed to add %s. Status: %s, body: %s", payload["key"], response.status_code, response.text)
    logger.info("Done, %d row(s) added", added)
    return added


if __name__ == "__main__":
    configure_logging()
    populate_database()
