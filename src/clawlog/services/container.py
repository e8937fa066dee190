"""Service container with DI wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from clawlog.data.search import SearchEngine
from clawlog.services.search_service import SearchService
from clawlog.services.session_service import SessionService

if TYPE_CHECKING:
    from clawlog.config import Config
    from clawlog.services.protocols import SearchServiceProtocol, SessionServiceProtocol


@dataclass
class ServiceContainer:
    """Holds all application services. Built once at startup, stateless per request."""

    session_service: SessionServiceProtocol
    search_service: SearchServiceProtocol

    @classmethod
    def create(cls, config: Config) -> ServiceContainer:
        """Factory that wires all dependencies."""
        return cls(
            session_service=SessionService(config),
            search_service=SearchService(SearchEngine(config)),
        )
