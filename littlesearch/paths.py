# littlesearch/paths.py

import os

# --- Base data dir (override with LITTLESEARCH_DATA) ---
DATA_DIR = os.getenv("LITTLESEARCH_DATA", "data")

# --- Source files for make_index() ---
DOCS_PATH = os.path.join(DATA_DIR, "docs.txt")              # one document path per entry
NOISE_WORDS_PATH = os.path.join(DATA_DIR, "noisewords.txt")  # one noise word per entry

# --- Text encoding for every file we read ---
ENCODING = "utf-8"

# --- Result size for two-keyword queries ---
TOP_K = 5
