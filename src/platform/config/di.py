"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import settings
from src.service.ticketer.domain.aggregate.booking_arrangement_aggregate import (
    BookingArrangementAggregate,
)
from src.service.ticketer.domain.aggregate.cinema_catalog_aggregate import CinemaCatalogAggregate
from src.service.ticketer.driven_adapter.repo.in_memory_cinema_store_impl import (
    InMemoryCinemaStoreImpl,
)
from src.service.ticketer.driven_adapter.repo.json_cinema_store_impl import JsonCinemaStoreImpl


def _selected_store() -> str:
    return settings.CINEMA_STORE


class Container(containers.DeclarativeContainer):
    # Storage collaborator (CINEMA_STORE=json | memory)
    cinema_store = providers.Selector(
        providers.Callable(_selected_store),
        json=providers.Singleton(
            JsonCinemaStoreImpl,
            data_file=settings.DATA_FILE,
            prefill_file=settings.PREFILL_FILE,
        ),
        memory=providers.Singleton(InMemoryCinemaStoreImpl),
    )

    # The single owned aggregate, filled by LoadCatalogUseCase at startup
    cinema_catalog = providers.Singleton(CinemaCatalogAggregate)

    # Single-user engine: one arrangement in progress at a time
    booking_arrangement = providers.Singleton(BookingArrangementAggregate)


container = Container()
