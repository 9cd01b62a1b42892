"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
``build_context()`` constructs repositories and handlers once and hands
them out in an ``AppContext``; adapters receive the context explicitly
(``ctx.obj`` for the CLI, ``app.state.context`` for HTTP) instead of
importing module-level singletons.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from orderhub.application.change_order_status import ChangeOrderStatusHandler
from orderhub.application.create_order import CreateOrderHandler
from orderhub.application.create_user import CreateUserHandler
from orderhub.application.show_order import ListUserOrdersHandler, ShowOrderHandler
from orderhub.application.show_user import ListUsersHandler, ShowUserHandler
from orderhub.application.update_user_email import UpdateUserEmailHandler
from orderhub.domain.repository.order_item_repository import OrderItemRepository
from orderhub.domain.repository.order_repository import OrderRepository
from orderhub.domain.repository.user_repository import UserRepository
from orderhub.infrastructure.config import Settings
from orderhub.infrastructure.logger import get_logger
from orderhub.infrastructure.persistence.json_order_item_repository import (
    JsonOrderItemRepository,
)
from orderhub.infrastructure.persistence.json_order_repository import JsonOrderRepository
from orderhub.infrastructure.persistence.json_user_repository import JsonUserRepository
from orderhub.infrastructure.persistence.sql_order_item_repository import (
    SqlOrderItemRepository,
)
from orderhub.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from orderhub.infrastructure.persistence.sql_schema import create_db_engine
from orderhub.infrastructure.persistence.sql_user_repository import SqlUserRepository

logger = get_logger(__name__)


@dataclass
class AppContext:
    user_repo: UserRepository
    order_repo: OrderRepository
    item_repo: OrderItemRepository

    create_user: CreateUserHandler = field(init=False)
    show_user: ShowUserHandler = field(init=False)
    list_users: ListUsersHandler = field(init=False)
    update_user_email: UpdateUserEmailHandler = field(init=False)
    create_order: CreateOrderHandler = field(init=False)
    show_order: ShowOrderHandler = field(init=False)
    list_user_orders: ListUserOrdersHandler = field(init=False)
    order_status: ChangeOrderStatusHandler = field(init=False)

    def __post_init__(self) -> None:
        self.create_user = CreateUserHandler(self.user_repo)
        self.show_user = ShowUserHandler(self.user_repo)
        self.list_users = ListUsersHandler(self.user_repo)
        self.update_user_email = UpdateUserEmailHandler(self.user_repo)
        self.create_order = CreateOrderHandler(self.order_repo, self.item_repo)
        self.show_order = ShowOrderHandler(self.order_repo, self.item_repo)
        self.list_user_orders = ListUserOrdersHandler(self.order_repo)
        self.order_status = ChangeOrderStatusHandler(self.order_repo)


def build_context(settings: Settings) -> AppContext:
    """Pick the storage backend named in *settings* and wire everything."""
    if settings.storage_backend == "sql":
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        engine = create_db_engine(
            settings.effective_database_url, echo=settings.database_echo
        )
        context = AppContext(
            user_repo=SqlUserRepository(engine),
            order_repo=SqlOrderRepository(engine),
            item_repo=SqlOrderItemRepository(engine),
        )
    else:
        users_file = settings.data_dir / "users.json"
        context = AppContext(
            user_repo=JsonUserRepository(users_file),
            order_repo=JsonOrderRepository(settings.data_dir / "orders.json", users_file),
            item_repo=JsonOrderItemRepository(settings.data_dir / "order_items.json"),
        )

    logger.debug("context.built", backend=settings.storage_backend)
    return context
