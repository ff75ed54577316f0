"""Request Context: hands the process-wide store and bus to every resolver.

Invariants:
    - Store and bus are created once in the lifespan and read from app.state
    - The same getter serves HTTP requests and websocket connections
"""

from starlette.requests import HTTPConnection
from strawberry.fastapi import BaseContext

from eventboard.core.boundary_protocols import NotificationBus
from eventboard.core.record_store import RecordStore


class GatewayContext(BaseContext):
    """Context object available as `info.context` in every resolver."""

    def __init__(self, store: RecordStore, bus: NotificationBus):
        super().__init__()
        self.store = store
        self.bus = bus


async def get_context(connection: HTTPConnection) -> GatewayContext:
    state = connection.app.state
    return GatewayContext(store=state.store, bus=state.bus)
