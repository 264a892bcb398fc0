import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
DATA_DIR = BASE_DIR / os.getenv("DATA_DIR", "data")
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")

# --- Local Snapshot ---
# A key-value JSON file; the catalog lives under STORAGE_KEY.
LOCAL_STORAGE_FILE = DATA_DIR / os.getenv("LOCAL_STORAGE_FILE", "local_storage.json")
STORAGE_KEY = "kiranaStockItems"

# --- Remote Save ---
API_BASE_URL = os.getenv("API_BASE_URL")
SAVE_ENDPOINT = "/api/save-inventory"
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "15"))

# --- Filename Configuration ---
EXPORT_FILENAME = os.getenv("EXPORT_FILENAME", "inventory.csv")
ORDER_SHEET_FILENAME_BASE = os.getenv("ORDER_SHEET_FILENAME", "order_sheet")
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "false").lower() in ("1", "true", "yes")

# --- Shared Business Logic ---
VENDOR_CYCLES = ("Weekly", "Bi-Weekly")
ORDER_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")

# Column order of the exported CSV. Import looks columns up by name.
CSV_HEADERS = [
    "id",
    "itemName",
    "supplier",
    "vendorCycle",
    "nextOrderDay",
    "targetStock",
    "currentStock",
]

# Defaults used by the item entry form.
DEFAULT_VENDOR_CYCLE = "Weekly"
DEFAULT_ORDER_DAY = "Monday"
