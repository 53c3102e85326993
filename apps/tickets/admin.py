# ==========================================
# apps/tickets/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Ticket, TicketPurchase


def paid_badge(paid):
    bg, fg, label = ('#2E7D32', 'white', 'Paid') if paid else ('#F9A825', '#212121', 'Unpaid')
    return format_html(
        '<span style="background: {}; color: {}; padding: 3px 8px; '
        'border-radius: 10px; font-size: 11px;">{}</span>',
        bg, fg, label
    )


class TicketPurchaseInline(admin.TabularInline):
    """Inline admin for purchases within a ticket."""
    model = TicketPurchase
    extra = 0
    fields = ['user', 'quantity', 'status_badge', 'payment', 'created_at']
    readonly_fields = ['user', 'status_badge', 'payment', 'created_at']

    def status_badge(self, obj):
        return paid_badge(obj.paid)
    status_badge.short_description = 'Status'

    def has_add_permission(self, request, obj=None):
        """Purchases are created by the purchase service."""
        return False


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    """
    Admin interface for Tickets.

    Shows price, sold quantity and turnover per ticket, with the
    ticket's purchases inline.
    """

    list_display = [
        'title',
        'conference',
        'get_price_display',
        'get_sold_display',
        'get_turnover_display',
        'created_at',
    ]
    list_filter = ['conference', 'price_currency']
    search_fields = ['title', 'description', 'conference__name']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [TicketPurchaseInline]

    fieldsets = (
        ('Ticket', {
            'fields': ('conference', 'title', 'description')
        }),
        ('Price', {
            'fields': ('price_cents', 'price_currency'),
            'description': 'Price in minor units of the currency (cents for USD). All tickets of a conference share one currency.',
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    def get_price_display(self, obj):
        return str(obj.price)
    get_price_display.short_description = 'Price'
    get_price_display.admin_order_field = 'price_cents'

    def get_sold_display(self, obj):
        return obj.tickets_sold
    get_sold_display.short_description = 'Sold'

    def get_turnover_display(self, obj):
        return str(obj.tickets_turnover)
    get_turnover_display.short_description = 'Turnover'


@admin.register(TicketPurchase)
class TicketPurchaseAdmin(admin.ModelAdmin):
    list_display = ['ticket', 'user', 'conference', 'quantity', 'status_badge', 'payment', 'updated_at']
    list_filter = ['paid', 'conference']
    search_fields = ['ticket__title', 'user__email', 'payment__reference']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['ticket', 'user', 'conference', 'payment']

    def status_badge(self, obj):
        return paid_badge(obj.paid)
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'paid'
