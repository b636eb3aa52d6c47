from django.contrib import admin

from events.models import Category, Event


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "created_at"]
    search_fields = ["name"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "category", "organizer", "start_date_time", "created_at"]
    list_filter = ["category", "is_free"]
    search_fields = ["title", "location"]
    raw_id_fields = ["organizer"]
