from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..core import MonthNavigator
from ..data import AvailabilityStore, SupabaseGateway
from ..data.repositories import AvailabilityRepository, PropertyRepository
from .toggle import ToggleCoordinator


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings, gateway, store and coordinator."""

    settings: AppSettings = field(default_factory=get_settings)
    gateway: SupabaseGateway = field(init=False)
    availability: AvailabilityRepository = field(init=False)
    properties: PropertyRepository = field(init=False)
    store: AvailabilityStore = field(init=False)
    coordinator: ToggleCoordinator = field(init=False)
    navigator: MonthNavigator = field(init=False)

    def __post_init__(self) -> None:
        self.gateway = SupabaseGateway(self.settings.supabase)
        self.availability = AvailabilityRepository(
            gateway=self.gateway,
            availability_rpc=self.settings.storage.availability_rpc,
            toggle_rpc=self.settings.storage.toggle_rpc,
            unblock_rpc=self.settings.storage.unblock_rpc,
        )
        self.properties = PropertyRepository(
            gateway=self.gateway,
            table_name=self.settings.storage.properties_table,
        )
        self.store = AvailabilityStore(source=self.availability)
        self.coordinator = ToggleCoordinator(
            store=self.store,
            remote=self.availability,
            default_reason=self.settings.calendar.default_reason,
            timezone=self.settings.calendar.timezone,
        )
        self.navigator = MonthNavigator(timezone=self.settings.calendar.timezone)
