#!/usr/bin/env python3
"""
Data File Seed Script
Reset the data file to the prefill document

Usage:
    python -m script.seed_data          # overwrite DATA_FILE with PREFILL_FILE
    python -m script.seed_data --check  # also load the seeded file and print the validation summary
"""

import shutil
import sys

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.app.command.load_catalog_use_case import LoadCatalogUseCase
from src.service.ticketer.domain.aggregate.cinema_catalog_aggregate import CinemaCatalogAggregate
from src.service.ticketer.driven_adapter.repo.json_cinema_store_impl import JsonCinemaStoreImpl


def reset_data_file() -> None:
    settings.DATA_FILE.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(settings.PREFILL_FILE, settings.DATA_FILE)
    Logger.base.info(f'🌱 Seeded {settings.DATA_FILE} from {settings.PREFILL_FILE}')


def check_data_file() -> None:
    catalog = CinemaCatalogAggregate()
    store = JsonCinemaStoreImpl(data_file=settings.DATA_FILE)
    report = LoadCatalogUseCase(cinema_store=store, cinema_catalog=catalog).execute()
    Logger.base.info(
        f'📊 {len(catalog.screenings)} screening(s), {len(catalog.tickets)} ticket(s), '
        f'{report.summary()}'
    )


def main() -> None:
    reset_data_file()
    if '--check' in sys.argv[1:]:
        check_data_file()


if __name__ == '__main__':
    main()
