"""
Management command printing ticket sales of a conference.

Usage:
    python manage.py ticket_sales_report <conference_id>
    python manage.py ticket_sales_report <conference_id> --user buyer@example.com
"""

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from apps.accounts.models import User
from apps.conferences.models import Conference
from apps.tickets.money import is_aggregation_failure
from apps.tickets.services import total_price_across_tickets


class Command(BaseCommand):
    help = 'Print sold quantity and turnover per ticket of a conference'

    def add_arguments(self, parser):
        parser.add_argument('conference_id', help='Conference UUID')
        parser.add_argument(
            '--user',
            dest='email',
            help='Also print paid and unpaid totals of this user',
        )

    def handle(self, *args, **options):
        try:
            conference = Conference.objects.get(pk=options['conference_id'])
        except (Conference.DoesNotExist, ValidationError):
            raise CommandError(f"Conference {options['conference_id']} not found")

        tickets = list(conference.tickets.all())
        if not tickets:
            self.stdout.write(self.style.WARNING(f'{conference.name} has no tickets.'))
            return

        self.stdout.write(f'\nTicket sales for {conference.name}:\n')
        for ticket in tickets:
            self.stdout.write(
                f'  - {ticket.title} | {ticket.price} | '
                f'sold: {ticket.tickets_sold} | turnover: {ticket.tickets_turnover}'
            )

        email = options.get('email')
        if not email:
            return

        try:
            user = User.objects.get(email=email)
        except User.DoesNotExist:
            raise CommandError(f'User {email} not found')

        self.stdout.write(f'\nTotals for {user.email}:')
        for label, paid in (('paid', True), ('unpaid', False)):
            total = total_price_across_tickets(conference=conference, user=user, paid=paid)
            if is_aggregation_failure(total):
                self.stdout.write(self.style.ERROR(f'  {label}: unavailable (mixed currencies)'))
            else:
                self.stdout.write(f'  {label}: {total}')
