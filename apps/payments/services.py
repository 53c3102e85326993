"""
Payment completion service.

Example:
    Settling a user's unpaid tickets::

        from apps.payments.services import complete_payment

        completion = complete_payment(conference=conference, user=request.user)
        print(completion.payment.reference, completion.payment.amount)
        for result in completion.failed:
            print(f"Purchase {result.purchase.id} still unpaid: {result.errors}")
"""

import logging
from dataclasses import dataclass, field
from typing import List

from django.db import transaction

from apps.accounts.models import User
from apps.conferences.models import Conference
from apps.tickets.models import TicketPurchase
from apps.tickets.money import add_money, is_aggregation_failure, to_minor_units, zero_money
from apps.tickets.services import PaidMarkResult, mark_purchases_paid, total_price_across_tickets

from .exceptions import NothingToPayError, PaymentAmountUnavailableError
from .models import Payment, PaymentStatus

logger = logging.getLogger(__name__)


@dataclass
class PaymentCompletion:
    payment: Payment
    results: List[PaidMarkResult] = field(default_factory=list)

    @property
    def failed(self) -> List[PaidMarkResult]:
        return [result for result in self.results if not result.saved]


@transaction.atomic
def complete_payment(*, conference: Conference, user: User) -> PaymentCompletion:
    """
    Record a completed payment for the user's unpaid tickets.

    The user's unpaid purchases are locked before the total is computed,
    so concurrent purchase requests cannot change what is charged. Every
    unpaid purchase is then marked paid and tagged with the payment. The
    stored amount covers only the purchases that were saved as paid; when
    none were, the payment is recorded as failed.

    Args:
        conference: Conference being paid for
        user: Paying user

    Returns:
        PaymentCompletion with the payment and per-purchase results

    Raises:
        PaymentAmountUnavailableError: If the unpaid total cannot be computed
        NothingToPayError: If the unpaid total is zero
    """
    # Hold the unpaid rows until they are marked paid
    list(
        TicketPurchase.objects
        .select_for_update()
        .filter(conference=conference, user=user, paid=False)
    )

    total = total_price_across_tickets(conference=conference, user=user, paid=False)

    if is_aggregation_failure(total):
        raise PaymentAmountUnavailableError(
            "Unpaid total cannot be computed for tickets in different currencies"
        )
    if not total:
        raise NothingToPayError(f"No unpaid tickets in {conference.name}")

    payment = Payment.objects.create(
        user=user,
        conference=conference,
        amount_cents=to_minor_units(total),
        currency=total.currency.code,
        status=PaymentStatus.COMPLETED,
    )

    completion = PaymentCompletion(
        payment=payment,
        results=mark_purchases_paid(conference=conference, user=user, payment=payment),
    )

    if completion.failed:
        _charge_saved_purchases(completion)

    logger.info(
        "Payment %s of %s %s for user %s in conference %s",
        payment.reference, payment.amount, payment.status, user.pk, conference.pk
    )
    if completion.failed:
        logger.warning(
            "Payment %s left %d purchase(s) unpaid and charges %s",
            payment.reference, len(completion.failed), payment.amount
        )

    return completion


def _charge_saved_purchases(completion: PaymentCompletion):
    """Reduce the payment to the purchases actually marked paid."""
    payment = completion.payment
    charged = zero_money(payment.currency)
    for result in completion.results:
        if result.saved:
            purchase = result.purchase
            charged = add_money(charged, purchase.price * purchase.quantity)

    payment.amount_cents = to_minor_units(charged)
    if not charged:
        payment.status = PaymentStatus.FAILED
    payment.save(update_fields=['amount_cents', 'status', 'updated_at'])
