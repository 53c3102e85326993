from django.contrib import admin
from .models import Conference


@admin.register(Conference)
class ConferenceAdmin(admin.ModelAdmin):
    list_display = ['name', 'organizer', 'starts_on', 'ends_on', 'created_at']
    list_filter = ['starts_on']
    search_fields = ['name', 'organizer__email']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'created_at'
