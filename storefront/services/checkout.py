"""
Checkout Process

One instance per checkout attempt:

    IDLE -> VALIDATING -> SUBMITTING -> SUCCEEDED | FAILED

Validation runs entirely client-side; the backend is called at most once.
"""

import logging
from typing import Optional, Union

from pydantic import ValidationError

from ..core.errors import (
    BackendUnavailable,
    CheckoutRejected,
    EmptyCart,
    StorefrontError,
    ValidationFailed,
    field_errors,
)
from ..core.events import CART, ORDERS, InvalidationBus
from ..models import CheckoutForm, CheckoutState, EnrichedCartLine
from .backend_client import BackendClient

logger = logging.getLogger(__name__)


class CheckoutProcess:
    """
    A single attempt to turn the caller's cart into an order.

    A failed attempt leaves the cart untouched; retry with a new instance.
    Submitting twice may create two orders, since the backend contract has
    no idempotency key.
    """

    def __init__(self, client: BackendClient, bus: InvalidationBus):
        self._client = client
        self._bus = bus
        self.state = CheckoutState.IDLE
        self.order_id: Optional[str] = None
        self.error: Optional[StorefrontError] = None

    @property
    def field_errors(self) -> dict[str, str]:
        """Per-field messages from the last validation failure"""
        if isinstance(self.error, ValidationFailed):
            return self.error.errors
        return {}

    async def submit(
        self,
        form: Union[CheckoutForm, dict],
        cart_lines: list[EnrichedCartLine],
    ) -> str:
        """
        Validate and place the order.

        Args:
            form: Contact details (CheckoutForm or its field dict)
            cart_lines: The cart as currently displayed to the user

        Returns:
            The new order id

        Raises:
            EmptyCart: no lines in the displayed cart
            ValidationFailed: contact form violations, per field
            CheckoutRejected: the backend refused the checkout
            BackendUnavailable: the backend could not be reached
        """
        if self.state != CheckoutState.IDLE:
            raise RuntimeError(f"Checkout attempt already {self.state.value}")

        self.state = CheckoutState.VALIDATING
        valid_form = self._validate(form, cart_lines)

        self.state = CheckoutState.SUBMITTING
        try:
            order_id = await self._client.checkout(
                customer_name=valid_form.customer_name,
                customer_email=valid_form.customer_email,
                shipping_address=valid_form.shipping_address,
            )
        except BackendUnavailable as e:
            self._fail(e)
            raise
        except StorefrontError as e:
            rejected = CheckoutRejected(str(e), getattr(e, "status_code", None))
            self._fail(rejected)
            raise rejected from e

        self.state = CheckoutState.SUCCEEDED
        self.order_id = order_id
        logger.info(f"Checkout succeeded: order {order_id}")
        # The backend empties the cart on checkout; re-read rather than assume
        self._bus.publish(CART, ORDERS)
        return order_id

    def _validate(
        self,
        form: Union[CheckoutForm, dict],
        cart_lines: list[EnrichedCartLine],
    ) -> CheckoutForm:
        if not cart_lines:
            self._fail(EmptyCart("Your cart is empty"))
            raise self.error

        if isinstance(form, CheckoutForm):
            form = form.model_dump()
        try:
            return CheckoutForm.model_validate(form)
        except ValidationError as e:
            self._fail(ValidationFailed(field_errors(e)))
            raise self.error from None

    def _fail(self, error: StorefrontError) -> None:
        self.state = CheckoutState.FAILED
        self.error = error
        logger.warning(f"Checkout failed: {type(error).__name__}: {error}")
