"""
Checkout coordinator — single-flow state machine over cart, gateway and widget.

    Idle → CollectingContact → CreatingOrder → AwaitingPayment → Verifying
         → Succeeded | Failed(reason) → (acknowledge) → Idle

No step retries automatically. The total is priced fresh from the cart on
every submission, and each submission gets a new receipt.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from combinators import flow, lift as L
from kungfu import Result, Ok, Error

from storefront._types import Fallible, Money
from storefront.cart import CartStore
from storefront.catalog import CatalogProvider
from storefront.gateway import (
    CreateOrderRequest,
    GatewayClient,
    GatewayError,
    OrderParams,
    PaymentPayload,
    VerifyResult,
)
from storefront.pricing import PricingRules, DEFAULT_RULES, price
from storefront.widget import (
    Completed,
    Dismissed,
    Prefill,
    WidgetLoader,
    WidgetOptions,
    open_widget,
)
from storefront.checkout._contact import new_receipt, validate_contact
from storefront.checkout._errors import (
    CheckoutError,
    CheckoutInProgressError,
    EmptyCartError,
    InvalidTransitionError,
    OrderCreationError,
    VerificationError,
    WidgetUnavailableError,
)
from storefront.checkout._types import (
    IN_FLIGHT,
    TERMINAL,
    AwaitingPayment,
    Cancelled,
    CheckoutOutcome,
    CheckoutState,
    CollectingContact,
    Contact,
    CreatingOrder,
    Failed,
    FailureReason,
    Idle,
    Paid,
    Succeeded,
    Verifying,
)

logger = logging.getLogger(__name__)


def _remote[T](call: Callable[[], Awaitable[Result[T, GatewayError]]]) -> Fallible[T, GatewayError]:
    """Gateway call where a raised exception counts as a gateway error."""
    return (
        flow(L.catching_async(call, on_error=lambda e: GatewayError(str(e), e)))
        .then(L.from_result)
        .compile()
    )


class CheckoutCoordinator:
    """
    Drives one checkout at a time for one cart.

    Commands are rejected, not queued, while a flow is running. All
    outcomes come back as Result values.

    Example:
        coordinator.begin()
        match await coordinator.submit_contact(Contact("Ann", "ann@x.io", "555")):
            case Ok(Paid(order)):
                print(f"Paid {order.order_id}")
            case Ok(Cancelled()):
                pass
            case Error(e):
                print(f"Payment failed: {e.message}")
        coordinator.acknowledge()
    """

    def __init__(
        self,
        cart: CartStore,
        catalog: CatalogProvider,
        gateway: GatewayClient,
        widget: WidgetLoader,
        *,
        rules: PricingRules = DEFAULT_RULES,
        merchant_name: str = "YourBrand",
        description: str = "Order payment",
        receipts: Callable[[], str] = new_receipt,
    ) -> None:
        self._cart = cart
        self._catalog = catalog
        self._gateway = gateway
        self._widget = widget
        self._rules = rules
        self._merchant_name = merchant_name
        self._description = description
        self._receipts = receipts
        self._state: CheckoutState = Idle()

    @property
    def state(self) -> CheckoutState:
        return self._state

    @property
    def busy(self) -> bool:
        """True while a remote step is outstanding."""
        return isinstance(self._state, IN_FLIGHT)

    # ═══════════════════════════════════════════════════════════════════════════
    # Commands
    # ═══════════════════════════════════════════════════════════════════════════

    def begin(self) -> Result[CollectingContact, CheckoutError]:
        """Idle → CollectingContact. An empty cart leaves the flow Idle."""
        match self._state:
            case Idle():
                if not self._cart.materialize(self._catalog):
                    return Error(EmptyCartError())
                state = CollectingContact()
                self._enter(state)
                return Ok(state)
            case CollectingContact() | CreatingOrder() | AwaitingPayment() | Verifying():
                return Error(CheckoutInProgressError())
            case other:
                return Error(InvalidTransitionError("begin checkout", _name(other)))

    def cancel(self) -> Result[Idle, CheckoutError]:
        """Abort contact entry."""
        match self._state:
            case CollectingContact():
                state = Idle()
                self._enter(state)
                return Ok(state)
            case other:
                return Error(InvalidTransitionError("cancel", _name(other)))

    def acknowledge(self) -> Result[Idle, CheckoutError]:
        """Dismiss a Succeeded/Failed result so a new attempt can start."""
        if isinstance(self._state, TERMINAL):
            state = Idle()
            self._enter(state)
            return Ok(state)
        return Error(InvalidTransitionError("acknowledge", _name(self._state)))

    async def submit_contact(self, contact: Contact) -> Result[CheckoutOutcome, CheckoutError]:
        """
        Validate contact and run the payment flow to a terminal state.

        Returns Ok(Paid) on verified payment, Ok(Cancelled) if the widget was
        dismissed, or the error that moved the flow to Failed. Validation
        errors keep the flow in CollectingContact.
        """
        match self._state:
            case CollectingContact():
                pass
            case CreatingOrder() | AwaitingPayment() | Verifying():
                return Error(CheckoutInProgressError())
            case other:
                return Error(InvalidTransitionError("submit contact", _name(other)))

        match validate_contact(contact):
            case Ok(valid):
                contact = valid
            case Error(e):
                logger.debug("Contact rejected, missing %s", e.missing)
                return Error(e)

        items = self._cart.materialize(self._catalog)
        if not items:
            self._enter(Idle())
            return Error(EmptyCartError())

        receipt = self._receipts()
        self._enter(CreatingOrder(receipt))
        try:
            return await self._pay(contact, price(items, self._rules).total, receipt)
        except asyncio.CancelledError:
            logger.info("Checkout %s cancelled mid-flight", receipt)
            self._enter(Idle())
            raise

    # ═══════════════════════════════════════════════════════════════════════════
    # Flow
    # ═══════════════════════════════════════════════════════════════════════════

    async def _pay(
        self, contact: Contact, amount: Money, receipt: str
    ) -> Result[CheckoutOutcome, CheckoutError]:
        request = CreateOrderRequest(
            amount=amount,
            receipt=receipt,
            customer_name=contact.name,
            customer_email=contact.email,
            customer_phone=contact.phone,
        )
        order_result = await _remote(lambda: self._gateway.create_order(request))
        match order_result:
            case Ok(order):
                self._enter(AwaitingPayment(order))
            case Error(e):
                return self._fail(
                    FailureReason.ORDER_CREATION_FAILED, OrderCreationError(e.message)
                )

        match await self._widget.load():
            case Ok(factory):
                pass
            case Error(e):
                return self._fail(
                    FailureReason.WIDGET_UNAVAILABLE, WidgetUnavailableError(e.message)
                )

        outcome = await L.catching_async(
            lambda: open_widget(factory, self._widget_options(order, contact)),
            on_error=lambda e: WidgetUnavailableError(f"Widget failed to open: {e}"),
        )
        match outcome:
            case Ok(Completed(payload)):
                return await self._verify(order, payload)
            case Ok(Dismissed()):
                logger.info("Payment widget dismissed for order %s", order.order_id)
                self._enter(Idle())
                return Ok(Cancelled())
            case Error(e):
                return self._fail(FailureReason.WIDGET_UNAVAILABLE, e)

    async def _verify(
        self, order: OrderParams, payload: PaymentPayload
    ) -> Result[CheckoutOutcome, CheckoutError]:
        self._enter(Verifying(order))
        match await _remote(lambda: self._gateway.verify(payload)):
            case Ok(VerifyResult(ok=True)):
                self._cart.clear()
                self._enter(Succeeded(order))
                return Ok(Paid(order))
            case Ok(_):
                return self._fail(FailureReason.VERIFICATION_FAILED, VerificationError())
            case Error(e):
                return self._fail(
                    FailureReason.VERIFICATION_FAILED,
                    VerificationError(f"Payment could not be confirmed: {e.message}"),
                )

    def _widget_options(self, order: OrderParams, contact: Contact) -> WidgetOptions:
        return WidgetOptions(
            key=order.key,
            amount=order.amount,
            currency=order.currency,
            order_id=order.order_id,
            name=self._merchant_name,
            description=self._description,
            prefill=Prefill(name=contact.name, email=contact.email),
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # State
    # ═══════════════════════════════════════════════════════════════════════════

    def _enter(self, state: CheckoutState) -> None:
        logger.debug("Checkout %s → %s", _name(self._state), _name(state))
        self._state = state

    def _fail(self, reason: FailureReason, error: CheckoutError) -> Result[CheckoutOutcome, CheckoutError]:
        logger.warning("Checkout failed (%s): %s", reason.value, error.message)
        self._enter(Failed(reason, error.message))
        return Error(error)


def _name(state: CheckoutState) -> str:
    return type(state).__name__


__all__ = ("CheckoutCoordinator",)
