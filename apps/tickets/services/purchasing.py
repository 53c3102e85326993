"""
Purchase service.

Records ticket purchases and marks them paid once a payment completes.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Mapping

from django.core.exceptions import NON_FIELD_ERRORS, ValidationError
from django.db import IntegrityError, transaction

from apps.accounts.models import User
from apps.conferences.models import Conference
from apps.tickets.exceptions import InvalidQuantityError
from apps.tickets.models import Ticket, TicketPurchase

logger = logging.getLogger(__name__)

ERROR_SEPARATOR = '. '


def full_messages(error: ValidationError) -> List[str]:
    """Flatten a ValidationError into messages prefixed with their field."""
    if not hasattr(error, 'error_dict'):
        return list(error.messages)

    messages = []
    for field_name, field_messages in error.message_dict.items():
        for message in field_messages:
            if field_name == NON_FIELD_ERRORS:
                messages.append(message)
            else:
                label = field_name.replace('_', ' ').capitalize()
                messages.append(f"{label}: {message}")
    return messages


@dataclass
class PurchaseOutcome:
    """Saved purchases and collected validation messages of one request."""

    purchases: List[TicketPurchase] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def error_message(self) -> str:
        return ERROR_SEPARATOR.join(self.errors)

    @property
    def succeeded(self) -> bool:
        return not self.errors


@dataclass
class PaidMarkResult:
    """Outcome of marking one purchase as paid."""

    purchase: TicketPurchase
    saved: bool
    errors: List[str] = field(default_factory=list)


def parse_requested_quantities(raw: Mapping) -> dict:
    """
    Validate a ticket-id to quantity mapping.

    Quantities may be ints or digit strings. Tickets missing from the
    mapping are treated as quantity 0 by the caller.

    Returns:
        Dict of stringified ticket id to non-negative int

    Raises:
        InvalidQuantityError: If a value is not a non-negative integer
    """
    quantities = {}

    for ticket_id, value in raw.items():
        if isinstance(value, bool):
            raise InvalidQuantityError(ticket_id, value)

        if isinstance(value, int):
            quantity = value
        elif isinstance(value, str) and value.strip().isdecimal():
            quantity = int(value.strip())
        else:
            raise InvalidQuantityError(ticket_id, value)

        if quantity < 0:
            raise InvalidQuantityError(ticket_id, value)

        quantities[str(ticket_id)] = quantity

    return quantities


def _locked_unpaid_purchase(lookup):
    return TicketPurchase.objects.select_for_update().filter(**lookup).first()


def _upsert_unpaid_purchase(
    *,
    ticket: Ticket,
    conference: Conference,
    user: User,
    quantity: int
):
    """
    Create or update the unpaid purchase of (ticket, user, conference).

    An existing unpaid purchase keeps its quantity when 0 is requested.
    No purchase is created for 0.

    Returns:
        The saved TicketPurchase, or None when nothing was written

    Raises:
        ValidationError: If the purchase fails model validation
    """
    lookup = dict(ticket=ticket, conference=conference, user=user, paid=False)
    purchase = _locked_unpaid_purchase(lookup)

    if purchase is None:
        if quantity <= 0:
            return None

        purchase = TicketPurchase(quantity=quantity, **lookup)
        try:
            with transaction.atomic():
                purchase.save()
            return purchase
        except (IntegrityError, ValidationError):
            # A concurrent request may have inserted the unpaid row first.
            # Model validation reports that as a constraint violation.
            purchase = _locked_unpaid_purchase(lookup)
            if purchase is None:
                raise

    if quantity > 0:
        purchase.quantity = quantity
        purchase.save(update_fields=['quantity', 'updated_at'])

    return purchase


def purchase_tickets(
    *,
    conference: Conference,
    user: User,
    requested_quantities: Mapping
) -> PurchaseOutcome:
    """
    Record the quantities a user requests for a conference's tickets.

    Every ticket of the conference is visited. Validation failures are
    collected and do not stop the loop, so purchases saved earlier in
    the same call are kept. Database errors propagate and roll back the
    whole batch.

    Args:
        conference: Conference whose tickets are purchased
        user: Buyer
        requested_quantities: Mapping of ticket id to requested quantity

    Returns:
        PurchaseOutcome with saved purchases and collected error messages

    Raises:
        InvalidQuantityError: If any requested quantity is malformed
    """
    quantities = parse_requested_quantities(requested_quantities)
    outcome = PurchaseOutcome()

    with transaction.atomic():
        for ticket in conference.tickets.order_by('created_at'):
            quantity = quantities.get(str(ticket.pk), 0)

            try:
                purchase = _upsert_unpaid_purchase(
                    ticket=ticket,
                    conference=conference,
                    user=user,
                    quantity=quantity,
                )
            except ValidationError as e:
                outcome.errors.extend(full_messages(e))
                continue

            if purchase is not None:
                outcome.purchases.append(purchase)

    if outcome.errors:
        logger.warning(
            "Purchase for user %s in conference %s had validation errors: %s",
            user.pk, conference.pk, outcome.error_message
        )
    logger.info(
        "User %s holds %d unpaid purchase(s) in conference %s",
        user.pk, len(outcome.purchases), conference.pk
    )
    return outcome


@transaction.atomic
def mark_purchases_paid(*, conference: Conference, user: User, payment) -> List[PaidMarkResult]:
    """
    Mark all unpaid purchases of a user in a conference as paid.

    Each purchase is attached to the payment and saved on its own.
    A purchase that fails validation stays unpaid, is logged and is
    reported in the results.

    Args:
        conference: Conference the payment belongs to
        user: Buyer who paid
        payment: Payment to attach to the purchases

    Returns:
        One PaidMarkResult per unpaid purchase found
    """
    unpaid = (
        TicketPurchase.objects
        .select_for_update()
        .filter(conference=conference, user=user, paid=False)
        .select_related('ticket')
    )

    results = []
    for purchase in unpaid:
        purchase.paid = True
        purchase.payment = payment
        try:
            with transaction.atomic():
                purchase.save(update_fields=['paid', 'payment', 'updated_at'])
        except ValidationError as e:
            purchase.paid = False
            purchase.payment = None
            errors = full_messages(e)
            logger.warning(
                "Could not mark purchase %s paid with payment %s: %s",
                purchase.pk, payment.pk, '; '.join(errors)
            )
            results.append(PaidMarkResult(purchase=purchase, saved=False, errors=errors))
            continue

        results.append(PaidMarkResult(purchase=purchase, saved=True))

    logger.info(
        "Marked %d of %d purchase(s) paid for user %s in conference %s",
        sum(1 for r in results if r.saved), len(results), user.pk, conference.pk
    )
    return results
