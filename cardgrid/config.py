import os
from dotenv import load_dotenv

load_dotenv()

# Card search service - loaded from .env
CARD_SEARCH_URL = os.getenv("CARD_SEARCH_URL", "https://api.scryfall.com/cards/search")
LOOKUP_TIMEOUT = float(os.getenv("LOOKUP_TIMEOUT", "10"))
LOOKUP_MAX_RETRIES = int(os.getenv("LOOKUP_MAX_RETRIES", "3"))
LOOKUP_WORKERS = int(os.getenv("LOOKUP_WORKERS", "16"))  # Worker threads running blocking lookups
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Image constants
FALLBACK_IMAGE_URL = os.getenv(
    "FALLBACK_IMAGE_URL",
    "https://c1.scryfall.com/file/scryfall-cards/normal/front/5/2/52558748-6893-4c72-a9e2-e87d31796b59.jpg?1559959349",
)
CARD_BACK_URL = os.getenv(
    "CARD_BACK_URL",
    "https://gamesbyjohnny.files.wordpress.com/2009/11/magic-the-gathering-card-back.jpg",
)

# Grid shape - slots per category is SLOT_ROWS * SLOT_COLUMNS
SLOT_ROWS = 5
SLOT_COLUMNS = 3
