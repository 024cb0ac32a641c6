from django.contrib import admin
from .models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ['login', 'is_premium', 'favorite_product', 'created_at']
    list_filter = ['is_premium', 'created_at']
    search_fields = ['login']
    raw_id_fields = ['favorite_product']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['login']
