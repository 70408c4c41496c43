"""Integration tests for the command → event dispatch flow.

Tests cover:
- Projection (sync) finished when the command resolves
- Search indexing (async) may lag, and eventually completes
- Unsupported command resolves to success without invoking any handler
- Sync projection failure surfaces as the command outcome

Architecture:
- Real container wiring (configure_dispatch, get_command_bus)
- Real structlog console adapter
- Cart collaborators from tests/utils/cart_domain.py
"""

import asyncio

import pytest

from src.application.cqrs.metadata import HandlerRegistration
from src.core.container import (
    configure_dispatch,
    get_command_bus,
    reset_dispatch,
    shutdown_dispatch,
)
from src.core.errors import DispatchError
from src.core.result import Failure, Success
from src.domain.enums.handler_group import HandlerGroup
from tests.utils.cart_domain import (
    AddItemToCart,
    AddItemToCartHandler,
    FailingHandler,
    ProjectionHandler,
    RecordingHandler,
    RemoveItemFromCart,
    SearchIndexHandler,
)


@pytest.fixture
def wired():
    """Wire one sync projection and one async search index handler."""
    reset_dispatch()
    projection = ProjectionHandler()
    search = SearchIndexHandler()
    configure_dispatch(
        command_handlers=[AddItemToCartHandler()],
        registrations=[
            HandlerRegistration(handler=projection, group=HandlerGroup.SYNC),
            HandlerRegistration(handler=search, group=HandlerGroup.ASYNC),
        ],
    )
    yield projection, search
    reset_dispatch()


@pytest.mark.integration
class TestCartDispatchFlow:
    """Test the projection/search-index scenario end to end."""

    @pytest.mark.asyncio
    async def test_projection_done_when_command_resolves(self, wired):
        """Test sync projection is complete and async indexing may still lag."""
        # Arrange
        projection, search = wired
        bus = get_command_bus()

        # Act
        result = await asyncio.wait_for(
            bus.handle(AddItemToCart(cart_id="x", product_id="sku-1")),
            timeout=1.0,
        )

        # Assert - sync effect visible immediately
        assert result == Success(value=None)
        assert projection.projected["x"] is True
        assert search.indexed.get("x", False) is False

        # Assert - async effect eventually visible
        search.release.set()
        assert await shutdown_dispatch(timeout=1.0) is True
        assert search.indexed["x"] is True

    @pytest.mark.asyncio
    async def test_unsupported_command_invokes_nothing(self, wired):
        """Test unmatched command → success, no handler invoked."""
        # Arrange
        projection, search = wired

        # Act
        result = await get_command_bus().handle(
            RemoveItemFromCart(cart_id="x", product_id="sku-1")
        )
        await shutdown_dispatch(timeout=1.0)

        # Assert
        assert result == Success(value=None)
        assert projection.projected == {}
        assert search.indexed == {}

    @pytest.mark.asyncio
    async def test_concurrent_commands_are_independent(self, wired):
        """Test several commands in flight resolve independently."""
        # Arrange
        projection, search = wired
        bus = get_command_bus()
        search.release.set()

        # Act
        results = await asyncio.gather(
            *(
                bus.handle(AddItemToCart(cart_id=f"cart-{i}", product_id="sku-1"))
                for i in range(5)
            )
        )
        await shutdown_dispatch(timeout=1.0)

        # Assert
        assert all(result == Success(value=None) for result in results)
        assert set(projection.projected) == {f"cart-{i}" for i in range(5)}
        assert set(search.indexed) == {f"cart-{i}" for i in range(5)}


@pytest.mark.integration
class TestCartDispatchFailures:
    """Test failure outcomes end to end."""

    @pytest.mark.asyncio
    async def test_sync_failure_is_command_failure(self):
        """Test a failing sync handler fails the command; async still runs."""
        # Arrange
        reset_dispatch()
        index = RecordingHandler("index")
        configure_dispatch(
            command_handlers=[AddItemToCartHandler()],
            registrations=[
                HandlerRegistration(handler=FailingHandler(), group=HandlerGroup.SYNC),
                HandlerRegistration(handler=index, group=HandlerGroup.ASYNC),
            ],
        )

        try:
            # Act
            result = await get_command_bus().handle(
                AddItemToCart(cart_id="x", product_id="sku-1")
            )
            await shutdown_dispatch(timeout=1.0)

            # Assert
            assert isinstance(result, Failure)
            assert isinstance(result.error, DispatchError)
            assert result.error.handler_name == "FailingHandler"
            assert len(index.calls) == 1
        finally:
            reset_dispatch()

    @pytest.mark.asyncio
    async def test_async_failure_is_not_command_failure(self):
        """Test a failing async handler never fails the command."""
        # Arrange
        reset_dispatch()
        projection = ProjectionHandler()
        configure_dispatch(
            command_handlers=[AddItemToCartHandler()],
            registrations=[
                HandlerRegistration(handler=projection, group=HandlerGroup.SYNC),
                HandlerRegistration(handler=FailingHandler(), group=HandlerGroup.ASYNC),
            ],
        )

        try:
            # Act
            result = await get_command_bus().handle(
                AddItemToCart(cart_id="x", product_id="sku-1")
            )
            await shutdown_dispatch(timeout=1.0)

            # Assert
            assert result == Success(value=None)
            assert projection.projected["x"] is True
        finally:
            reset_dispatch()
