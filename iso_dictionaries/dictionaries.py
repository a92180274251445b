"""
Dictionary Export
=================

Tabular views of the catalogues and the relationship index as polars
DataFrames, and persistence of those frames as parquet dictionaries with a
version manifest.
"""

import hashlib
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

import polars as pl

from . import config
from .data import Country, Currency, Language
from .relationships import relationship_index


def catalogue_frame(domain: str) -> pl.DataFrame:
    """
    Build the dictionary frame of one domain, one row per entity in catalogue order.

    Args:
        domain: Domain name ('country', 'currency', 'language')
    """
    if domain == 'country':
        return pl.DataFrame({
            'alpha2': [country.alpha2 for country in Country],
            'alpha3': [country.alpha3 for country in Country],
            'numeric': [country.numeric for country in Country],
            'name': [country.full_name for country in Country],
        }, schema={'alpha2': pl.Utf8, 'alpha3': pl.Utf8, 'numeric': pl.UInt16, 'name': pl.Utf8})
    if domain == 'currency':
        return pl.DataFrame({
            'alpha3': [currency.alpha3 for currency in Currency],
            'numeric': [currency.numeric for currency in Currency],
            'name': [currency.full_name for currency in Currency],
            'digits': [currency.digits for currency in Currency],
        }, schema={'alpha3': pl.Utf8, 'numeric': pl.UInt16, 'name': pl.Utf8, 'digits': pl.UInt8})
    if domain == 'language':
        return pl.DataFrame({
            'alpha2': [language.alpha2 for language in Language],
            'name': [language.full_name for language in Language],
        }, schema={'alpha2': pl.Utf8, 'name': pl.Utf8})
    raise ValueError(f"Unknown domain: {domain!r}")


def relationship_frame(kind: str) -> pl.DataFrame:
    """
    Build an edge list of the relationship index.

    Args:
        kind: 'country_currency' or 'country_language'
    """
    if kind == 'country_currency':
        links = relationship_index.currency_links()
        return pl.DataFrame({
            'country': [country.alpha2 for country, _ in links],
            'currency': [currency.alpha3 for _, currency in links],
        }, schema={'country': pl.Utf8, 'currency': pl.Utf8})
    if kind == 'country_language':
        links = relationship_index.language_links()
        return pl.DataFrame({
            'country': [country.alpha2 for country, _ in links],
            'language': [language.alpha2 for _, language in links],
        }, schema={'country': pl.Utf8, 'language': pl.Utf8})
    raise ValueError(f"Unknown relationship kind: {kind!r}")


def build_frame(name: str) -> pl.DataFrame:
    """Build any dictionary frame by its name in config.DICTIONARY_FILES."""
    if name in ('country', 'currency', 'language'):
        return catalogue_frame(name)
    return relationship_frame(name)


def calculate_content_hash(frame: pl.DataFrame) -> str:
    """
    Calculate a SHA-256 hash of a frame's content for version tracking.
    """
    return hashlib.sha256(frame.write_csv().encode('utf-8')).hexdigest()


def _resolve_dir(dict_dir: Union[str, Path, None]) -> Path:
    return Path(dict_dir) if dict_dir is not None else config.DICT_DIR


def dictionaries_exist(dict_dir: Union[str, Path, None] = None) -> bool:
    """
    Check whether every dictionary file and the version manifest are present.
    """
    dict_dir = _resolve_dir(dict_dir)
    paths = [dict_dir / file_name for file_name in config.DICTIONARY_FILES.values()]
    paths.append(dict_dir / config.VERSION_FILE)
    return all(path.exists() for path in paths)


def create_dictionaries(dict_dir: Union[str, Path, None] = None,
                        force_recreate: bool = False) -> Dict[str, Path]:
    """
    Write every dictionary frame as parquet, plus the version manifest.

    Args:
        dict_dir: Target directory (config.DICT_DIR by default)
        force_recreate: Rewrite the files even if they already exist

    Returns:
        Dictionary name to written file path
    """
    dict_dir = _resolve_dir(dict_dir)
    paths = {name: dict_dir / file_name for name, file_name in config.DICTIONARY_FILES.items()}

    if not force_recreate and dictionaries_exist(dict_dir):
        logging.info(f"Dictionaries already exist in {dict_dir}, skipping")
        return paths

    dict_dir.mkdir(parents=True, exist_ok=True)

    manifest: Dict[str, Any] = {
        'dataset_version': config.DATASET_VERSION,
        'created_at': datetime.now().isoformat(),
        'dictionaries': {},
    }
    for name, path in paths.items():
        frame = build_frame(name)
        frame.write_parquet(path)
        manifest['dictionaries'][name] = {
            'file': path.name,
            'rows': len(frame),
            'content_hash': calculate_content_hash(frame),
        }
        logging.info(f"Dictionary {name} written: {len(frame)} rows -> {path}")

    with open(dict_dir / config.VERSION_FILE, 'w', encoding='utf-8') as f:
        json.dump(manifest, f, ensure_ascii=False, indent=2)

    return paths


def load_dictionary(name: str, dict_dir: Union[str, Path, None] = None) -> Optional[pl.DataFrame]:
    """
    Read a persisted dictionary.

    Returns:
        The frame, or None if the file does not exist
    """
    if name not in config.DICTIONARY_FILES:
        raise ValueError(f"Unknown dictionary: {name!r}")

    path = _resolve_dir(dict_dir) / config.DICTIONARY_FILES[name]
    if not path.exists():
        logging.warning(f"Dictionary file not found: {path}")
        return None
    return pl.read_parquet(path)


def load_version_manifest(dict_dir: Union[str, Path, None] = None) -> Optional[Dict[str, Any]]:
    """
    Read the version manifest written by create_dictionaries().
    """
    path = _resolve_dir(dict_dir) / config.VERSION_FILE
    if not path.exists():
        return None
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)
