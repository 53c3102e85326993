# ==========================================
# apps/payments/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Payment, PaymentStatus


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = [
        'reference',
        'user',
        'conference',
        'get_amount_display',
        'status_badge',
        'purchase_count',
        'created_at',
    ]
    list_filter = ['status', 'conference', 'created_at']
    search_fields = ['reference', 'user__email', 'conference__name']
    readonly_fields = ['reference', 'created_at', 'updated_at']
    date_hierarchy = 'created_at'

    def get_amount_display(self, obj):
        return str(obj.amount)
    get_amount_display.short_description = 'Amount'
    get_amount_display.admin_order_field = 'amount_cents'

    def status_badge(self, obj):
        colors = {
            PaymentStatus.PENDING: ('#F9A825', '#212121'),
            PaymentStatus.COMPLETED: ('#2E7D32', 'white'),
            PaymentStatus.FAILED: ('#C62828', 'white'),
        }
        bg, fg = colors.get(obj.status, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_status_display()
        )
    status_badge.short_description = 'Status'

    def purchase_count(self, obj):
        return obj.ticket_purchases.count()
    purchase_count.short_description = 'Purchases'
