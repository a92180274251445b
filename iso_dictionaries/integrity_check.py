"""
Integrity Check
===============

Whole-dataset consistency checks over the catalogues, the code registry, the
relationship index and, when present, the persisted parquet dictionaries.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from . import config
from .codes import CODE_CLASSES, CodeForm
from .data import Country, Currency, Language
from .dictionaries import (
    build_frame,
    calculate_content_hash,
    dictionaries_exist,
    load_dictionary,
    load_version_manifest,
)
from .mapping_manager import registry


def _check_counts() -> List[str]:
    issues = []
    for domain, expected in config.EXPECTED_COUNTS.items():
        actual = len(registry.entity_class(domain))
        if actual != expected:
            issues.append(f"{domain}: {actual} entries, expected {expected}")
    return issues


def _check_bijection() -> List[str]:
    issues = []
    for domain, code_class in CODE_CLASSES.items():
        for entity in registry.entity_class(domain):
            for form in code_class.FORMS:
                code = entity.code(form)
                if code_class.parse(str(code), form).entity() is not entity:
                    issues.append(f"{domain} {form} code {code} does not resolve to {entity!r}")
    return issues


def _check_cross_form() -> List[str]:
    issues = []
    for country in Country:
        alpha3 = country.code(CodeForm.ALPHA3)
        if alpha3.to_alpha2().to_alpha3() != alpha3:
            issues.append(f"country {alpha3} does not round-trip through alpha-2")
        if alpha3.to_numeric().to_alpha3() != alpha3:
            issues.append(f"country {alpha3} does not round-trip through numeric")
    for currency in Currency:
        alpha3 = currency.code(CodeForm.ALPHA3)
        if alpha3.to_numeric().to_alpha3() != alpha3:
            issues.append(f"currency {alpha3} does not round-trip through numeric")
    return issues


def _check_symmetry() -> List[str]:
    issues = []
    for country in Country:
        for currency in Currency:
            if (currency in country.currencies()) != (country in currency.countries()):
                issues.append(f"country {country.alpha2} / currency {currency.alpha3} links disagree")
        for language in Language:
            if (language in country.languages()) != (country in language.countries()):
                issues.append(f"country {country.alpha2} / language {language.alpha2} links disagree")
    return issues


def _check_persisted(dict_dir: Path) -> List[str]:
    issues = []
    manifest = load_version_manifest(dict_dir) or {}
    if manifest.get('dataset_version') != config.DATASET_VERSION:
        issues.append(
            f"persisted dataset version {manifest.get('dataset_version')!r} "
            f"differs from bundled {config.DATASET_VERSION!r}"
        )
    for name in config.DICTIONARY_FILES:
        persisted = load_dictionary(name, dict_dir)
        if persisted is None or calculate_content_hash(persisted) != calculate_content_hash(build_frame(name)):
            issues.append(f"persisted dictionary {name} differs from bundled data")
    return issues


def check_integrity(dict_dir: Union[str, Path, None] = None) -> Dict[str, Any]:
    """
    Run every consistency check.

    Args:
        dict_dir: Directory of persisted dictionaries (config.DICT_DIR by default);
            the persisted check is skipped when no dictionaries exist there

    Returns:
        Dictionary with one issue list per check and an 'overall_valid' flag
    """
    dict_dir = Path(dict_dir) if dict_dir is not None else config.DICT_DIR

    checks = {
        'counts': _check_counts,
        'bijection': _check_bijection,
        'cross_form': _check_cross_form,
        'symmetry': _check_symmetry,
    }
    results: Dict[str, Any] = {'checks': {}, 'overall_valid': True}

    for name, check in checks.items():
        issues = check()
        results['checks'][name] = issues
        if issues:
            results['overall_valid'] = False
            logging.error(f"Integrity check {name} failed: {len(issues)} issues")
        else:
            logging.info(f"Integrity check {name} passed")

    if dictionaries_exist(dict_dir):
        issues = _check_persisted(dict_dir)
        results['checks']['persisted'] = issues
        if issues:
            results['overall_valid'] = False
            logging.error(f"Integrity check persisted failed: {len(issues)} issues")
        else:
            logging.info("Integrity check persisted passed")

    return results
