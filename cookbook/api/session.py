"""Per-application session: the one storage and cookbook the API works on."""
import logging
from fastapi import Request

from cookbook.domain.IngredientStore import IngredientStore
from cookbook.domain.RecipeCatalog import RecipeCatalog
from cookbook.events.Event_Bus import EventBus, log_listener, COOKBOOK_RECIPE_ADDED, FEASIBILITY_SHORTFALL
from cookbook.events.web_observers import EventLog
from cookbook.infra.seed import load_storage, load_cookbook

logger = logging.getLogger(__name__)


class Session:
    def __init__(self, seed: bool = False):
        self.event_bus = EventBus()
        self.events = EventLog().attach(self.event_bus)
        self.event_bus.subscribe(COOKBOOK_RECIPE_ADDED, log_listener)
        self.event_bus.subscribe(FEASIBILITY_SHORTFALL, log_listener)
        self.store = IngredientStore().set_event_bus(self.event_bus)
        self.catalog = RecipeCatalog().set_event_bus(self.event_bus)
        if seed:
            load_storage(store=self.store)
            load_cookbook(catalog=self.catalog)
            logger.info("Session seeded with demo storage and cookbook")


def get_session(request: Request) -> Session:
    return request.app.state.session
