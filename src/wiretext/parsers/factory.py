from __future__ import annotations

from typing import Dict, Type

from ..logging import get_logger
from .base import BaseAccumulator
from .detector import Dialect
from .summary_export import SummaryExportAccumulator
from .verbose import GenericAccumulator, VerboseAccumulator

logger = get_logger(__name__)


class AccumulatorFactory:
    """Registry mapping each dialect to its accumulator class."""

    _registry: Dict[Dialect, Type[BaseAccumulator]] = {}

    @classmethod
    def register(cls, accumulator_cls: Type[BaseAccumulator]) -> None:
        """Register ``accumulator_cls`` for its declared dialect."""
        cls._registry[accumulator_cls.dialect] = accumulator_cls
        logger.debug(
            "Registered accumulator %s for %s",
            accumulator_cls.__name__,
            accumulator_cls.dialect.value,
        )

    @classmethod
    def create(cls, dialect: Dialect) -> BaseAccumulator:
        """Instantiate the accumulator for ``dialect``."""
        accumulator_cls = cls._registry.get(dialect)
        if accumulator_cls is None:
            logger.warning(
                "No accumulator registered for '%s', falling back to %s",
                dialect,
                Dialect.GENERIC.value,
            )
            accumulator_cls = cls._registry[Dialect.GENERIC]
        logger.info("Selected accumulator: %s", accumulator_cls.__name__)
        return accumulator_cls()


AccumulatorFactory.register(SummaryExportAccumulator)
AccumulatorFactory.register(VerboseAccumulator)
AccumulatorFactory.register(GenericAccumulator)
