import logging
import sys
from logging.handlers import TimedRotatingFileHandler

from . import config
from .codes import CODE_CLASSES
from .dictionaries import create_dictionaries
from .dictionary_manager import dictionary_manager
from .exceptions import CodeError
from .integrity_check import check_integrity

USAGE = """Available modes: lookup, list, relations, export, check
Examples: python -m iso_dictionaries lookup GB
          python -m iso_dictionaries lookup 978 currency
          python -m iso_dictionaries list language
          python -m iso_dictionaries relations CH
          python -m iso_dictionaries relations EUR currency
          python -m iso_dictionaries export --force
          python -m iso_dictionaries check"""


def setup_logging():
    """Set up console logging, plus a daily rotating file when enabled."""
    logger = logging.getLogger()
    logger.setLevel(config.LOG_LEVEL)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.LOG_LEVEL)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.LOG_TO_FILE:
        config.LOG_DIR.mkdir(parents=True, exist_ok=True)
        # One log file per day, keeping a week
        file_handler = TimedRotatingFileHandler(
            config.LOG_DIR / 'iso_dictionaries.log',
            when='midnight',
            interval=1,
            backupCount=7
        )
        file_handler.setLevel(config.LOG_LEVEL)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def describe(entity) -> str:
    """One line with every code form and the name of an entity."""
    codes = ' '.join(str(entity.code(form)) for form in entity.code_class().FORMS)
    return f"{entity.domain():<8} {codes:<12} {entity.full_name}"


def run_lookup(raw: str, domain: str = None) -> int:
    domains = [domain] if domain else list(CODE_CLASSES)
    found = False
    errors = []
    for name in domains:
        try:
            entity = dictionary_manager.parse(name, raw)
        except CodeError as e:
            errors.append(str(e))
            continue
        print(describe(entity))
        found = True

    if not found:
        for error in errors:
            print(error)
        return 1
    return 0


def run_list(domain: str) -> int:
    for entity in dictionary_manager.get_all(domain):
        print(describe(entity))
    return 0


def run_relations(raw: str, domain: str = 'country') -> int:
    try:
        entity = dictionary_manager.parse(domain, raw)
    except CodeError as e:
        print(str(e))
        return 1

    print(describe(entity))
    if domain == 'country':
        for currency in dictionary_manager.currencies_of(entity):
            print(f"  uses     {describe(currency)}")
        for language in dictionary_manager.languages_of(entity):
            print(f"  speaks   {describe(language)}")
    else:
        for country in dictionary_manager.countries_using(entity):
            print(f"  used in  {describe(country)}")
    return 0


def run_export(force_recreate: bool = False) -> int:
    paths = create_dictionaries(force_recreate=force_recreate)
    for name, path in paths.items():
        print(f"{name:<18} {path}")
    return 0


def run_check() -> int:
    results = check_integrity()
    for name, issues in results['checks'].items():
        status = 'OK' if not issues else f"FAILED ({len(issues)} issues)"
        print(f"{name:<12} {status}")
        for issue in issues[:10]:
            print(f"    {issue}")
    return 0 if results['overall_valid'] else 1


def main(argv=None) -> int:
    """Command-line entry point."""
    args = sys.argv[1:] if argv is None else argv
    setup_logging()

    if not args:
        print(USAGE)
        return 1

    mode = args[0]
    if mode == 'lookup' and len(args) > 1:
        return run_lookup(args[1], args[2] if len(args) > 2 else None)
    elif mode == 'list' and len(args) > 1:
        return run_list(args[1])
    elif mode == 'relations' and len(args) > 1:
        return run_relations(args[1], args[2] if len(args) > 2 else 'country')
    elif mode == 'export':
        return run_export(force_recreate='--force' in args[1:])
    elif mode == 'check':
        return run_check()
    else:
        print(f"Unknown mode: {' '.join(args)}")
        print(USAGE)
        return 1


if __name__ == "__main__":
    sys.exit(main())
