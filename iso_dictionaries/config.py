from pathlib import Path
import os

from dotenv import load_dotenv

# Environment overrides are read from a .env file in the working directory, if any
load_dotenv()

# Directory configuration
ROOT_DIR = Path(os.getenv('ISO_DATA_DIR', str(Path.home() / '.iso_dictionaries')))
DICT_DIR = ROOT_DIR / 'dictionaries'
LOG_DIR = ROOT_DIR / 'logs'

# Logging configuration
LOG_LEVEL = os.getenv('ISO_LOG_LEVEL', 'INFO').upper()
LOG_TO_FILE = os.getenv('ISO_LOG_TO_FILE', '').lower() in ('1', 'true', 'yes')

# Version of the bundled reference dataset (ISO 3166-1, ISO 4217, ISO 639-1)
DATASET_VERSION = '2024.1'

# Published catalogue sizes, checked when the registry is built
EXPECTED_COUNTS = {
    'country': 249,
    'currency': 179,
    'language': 183,
}

# Persisted dictionary file names
DICTIONARY_FILES = {
    'country': 'country_dict.parquet',
    'currency': 'currency_dict.parquet',
    'language': 'language_dict.parquet',
    'country_currency': 'country_currency_map.parquet',
    'country_language': 'country_language_map.parquet',
}
VERSION_FILE = 'dictionary_versions.json'
